from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from constants import DEFAULT_N_RESULTS


class DocumentCreateRequest(BaseModel):
    title: str = Field(default=..., description="Title")
    content: str = Field(default=..., description="Content")
    source: str | None = Field(default=None, description="Source")


class DocumentCreateResponse(BaseModel):
    id: int = Field(default=..., description="ID", gt=0)
    title: str = Field(default=..., description="Title")

    model_config = ConfigDict(from_attributes=True)


class DocumentResponse(BaseModel):
    id: int = Field(default=..., description="ID", gt=0)

    title: str = Field(default=..., description="Title")
    source: str = Field(default=..., description="Source")

    created_at: datetime = Field(default=..., description="Created at")

    model_config = ConfigDict(from_attributes=True)


class DocumentSearchRequest(BaseModel):
    query: str = Field(default=..., min_length=1, description="Search query")
    k: int = Field(
        default=DEFAULT_N_RESULTS, gt=0, le=50, description="Maximum results"
    )


class RetrievedDocumentResponse(DocumentResponse):
    content: str = Field(default=..., description="Content")
    relevance: int = Field(default=..., ge=0, description="Relevance score")
