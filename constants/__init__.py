from constants.document import DEFAULT_SOURCE
from constants.grounding import (
    DISCLAIMER,
    DOCUMENT_LABEL,
    FAILURE_MESSAGE,
    IMAGE_DIRECTIVE,
    NO_DOCUMENTS_CONTEXT,
    NOT_FOUND_SENTINEL,
)
from constants.retrieve import (
    DEFAULT_N_RESULTS,
    MIN_TOKEN_LENGTH,
    RECENT_FALLBACK_LIMIT,
)

__all__ = [
    "DEFAULT_SOURCE",
    "DISCLAIMER",
    "DOCUMENT_LABEL",
    "FAILURE_MESSAGE",
    "IMAGE_DIRECTIVE",
    "NO_DOCUMENTS_CONTEXT",
    "NOT_FOUND_SENTINEL",
    "DEFAULT_N_RESULTS",
    "MIN_TOKEN_LENGTH",
    "RECENT_FALLBACK_LIMIT",
]
