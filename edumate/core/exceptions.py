# edumate/core/exceptions.py
from typing import Any

from fastapi import HTTPException, status


class APIError(HTTPException):
    """
    HTTP error rendered as {"message": ..., "error": ...}.

    `detail` carries the fixed, user-facing message; `error` carries the
    underlying cause (omitted from the body when None).
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        error: Any = None,
    ):
        super().__init__(status_code=status_code, detail=message)
        self.error = error


class NotFoundError(APIError):
    def __init__(self, message: str = "Not found", error: Any = None):
        super().__init__(message, status_code=status.HTTP_404_NOT_FOUND, error=error)


class ServerError(APIError):
    def __init__(self, message: str = "Internal server error", error: Any = None):
        super().__init__(
            message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, error=error
        )
