from exceptions.base import BaseError
from exceptions.model import ModelInvocationError
from exceptions.validation import (
    DocumentValidationError,
    QueryValidationError,
    ValidationError,
)

__all__ = [
    "BaseError",
    "ValidationError",
    "DocumentValidationError",
    "QueryValidationError",
    "ModelInvocationError",
]
