from http import HTTPStatus

from exceptions.base import BaseError


class ModelInvocationError(BaseError):
    def __init__(
        self,
        message: str = "Model invocation failed",
        status_code: HTTPStatus = HTTPStatus.BAD_GATEWAY,
    ):
        super().__init__(message=message, status_code=status_code)
