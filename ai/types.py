from dataclasses import dataclass

from enums import AnswerOutcome


@dataclass(frozen=True)
class ImagePayload:
    data: bytes
    media_type: str


@dataclass(frozen=True)
class GroundedAnswer:
    text: str
    errored: bool
    outcome: AnswerOutcome | None = None
