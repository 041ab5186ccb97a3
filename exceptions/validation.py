from http import HTTPStatus

from exceptions.base import BaseError


class ValidationError(BaseError):
    def __init__(
        self,
        message: str = "Validation error",
        status_code: HTTPStatus = HTTPStatus.UNPROCESSABLE_ENTITY,
    ):
        super().__init__(message=message, status_code=status_code)


class DocumentValidationError(ValidationError):
    def __init__(self, message: str = "Title and content are required"):
        super().__init__(message=message)


class QueryValidationError(ValidationError):
    def __init__(self, message: str = "Query text or image is required"):
        super().__init__(message=message)
