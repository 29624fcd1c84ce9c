from fastapi import status
from libs.result import Error

CLIENT_ERROR_STATUS = {
    "WORKSPACE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
}


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def to_http_error(error: Error) -> Exception:
    """Map a use case error to the exception the API handlers render"""
    status_code = CLIENT_ERROR_STATUS.get(error.code)
    if status_code is not None:
        return ClientError(error, status_code=status_code)
    return ServerError(error)
