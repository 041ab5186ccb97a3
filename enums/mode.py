from enum import StrEnum, auto


class Mode(StrEnum):
    PATIENT = auto()
    DOCTOR = auto()
