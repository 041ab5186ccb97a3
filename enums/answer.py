from enum import StrEnum, auto


class AnswerOutcome(StrEnum):
    GROUNDED_ANSWER = auto()
    REFUSAL_SENTINEL = auto()
