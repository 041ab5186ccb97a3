from schemas.chat import (
    ChatRequest,
    ChatResponse,
    ChatTurn,
    ImageAttachment,
    SourceReference,
)
from schemas.document import (
    DocumentCreateRequest,
    DocumentCreateResponse,
    DocumentResponse,
    DocumentSearchRequest,
    RetrievedDocumentResponse,
)
from schemas.health import HealthResponse, LivenessResponse, ServiceHealthResponse

__all__ = [
    "HealthResponse",
    "LivenessResponse",
    "ServiceHealthResponse",
    "DocumentCreateRequest",
    "DocumentCreateResponse",
    "DocumentResponse",
    "DocumentSearchRequest",
    "RetrievedDocumentResponse",
    "ChatRequest",
    "ChatResponse",
    "ChatTurn",
    "ImageAttachment",
    "SourceReference",
]
