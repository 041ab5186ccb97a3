import base64
import binascii
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

from ai.types import ImagePayload
from enums import AnswerOutcome, Mode, Role


def split_data_url(value: str) -> dict[str, str]:
    """Split a `data:<media type>;base64,<data>` URL into its fields.

    Args:
        value: The data URL.

    Returns:
        The media type and base64 data.

    """
    header, separator, data = value.partition(",")
    if not separator or not header.startswith("data:") or ";base64" not in header:
        msg = "Image must be a base64 data URL"
        raise ValueError(msg)
    return {"data": data, "media_type": header.removeprefix("data:").split(";")[0]}


class ImageAttachment(BaseModel):
    data: str = Field(default=..., min_length=1, description="Base64 image data")
    media_type: str = Field(
        default=..., pattern=r"^image/[\w.+-]+$", description="Image media type"
    )

    @field_validator("data")
    @classmethod
    def validate_base64(cls, value: str) -> str:
        try:
            base64.b64decode(value, validate=True)
        except binascii.Error as error:
            msg = "Image data is not valid base64"
            raise ValueError(msg) from error
        return value

    def to_payload(self) -> ImagePayload:
        return ImagePayload(
            data=base64.b64decode(self.data), media_type=self.media_type
        )


class ChatTurn(BaseModel):
    role: Role = Field(default=..., description="The role of the turn")
    content: str = Field(default=..., description="The content of the turn")
    errored: bool = Field(default=False, description="Whether the turn failed")


class ChatRequest(BaseModel):
    message: str = Field(default="", description="The question")
    mode: Mode = Field(default=..., description="The conversation mode")
    image: ImageAttachment | None = Field(default=None, description="Attached image")
    history: list[ChatTurn] = Field(
        default_factory=list, description="Prior turns of the conversation"
    )

    @field_validator("image", mode="before")
    @classmethod
    def parse_data_url(cls, value: Any) -> Any:
        if isinstance(value, str):
            return split_data_url(value=value)
        return value


class SourceReference(BaseModel):
    id: int = Field(default=..., description="Document ID")
    title: str = Field(default=..., description="Document title")
    relevance: int = Field(default=..., ge=0, description="Relevance score")


class ChatResponse(BaseModel):
    role: Role = Field(default=Role.ASSISTANT, description="The role of the message")
    timestamp: datetime = Field(default=..., description="The timestamp of the message")
    content: str = Field(default=..., description="The answer text")
    errored: bool = Field(default=False, description="Whether the model call failed")
    outcome: AnswerOutcome | None = Field(
        default=None, description="Grounded answer or refusal sentinel"
    )
    mode: Mode = Field(default=..., description="The conversation mode")
    sources: list[SourceReference] = Field(
        default_factory=list, description="Documents supplied as context"
    )
    history: list[ChatTurn] = Field(
        default_factory=list, description="History including this turn"
    )
