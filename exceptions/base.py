from http import HTTPStatus


class BaseError(Exception):
    def __init__(self, message: str, status_code: HTTPStatus):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
