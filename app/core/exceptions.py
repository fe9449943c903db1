"""Application exceptions mapped to HTTP status codes by the error handlers."""

from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_403_FORBIDDEN,
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
    HTTP_500_INTERNAL_SERVER_ERROR,
)


class AppError(Exception):
    """Base class for errors with a known HTTP status."""

    status_code: int = HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "") -> None:
        self.message = message or self.__class__.__doc__ or "Error"
        super().__init__(self.message)


class BadRequestError(AppError):
    """Bad request"""

    status_code = HTTP_400_BAD_REQUEST


class ContentNotFoundError(AppError):
    """Content not found"""

    status_code = HTTP_404_NOT_FOUND


class UnknownContentTypeError(ContentNotFoundError):
    """Unknown content type"""


class AuthenticationError(AppError):
    """Authentication required"""

    status_code = HTTP_401_UNAUTHORIZED


class PermissionDeniedError(AppError):
    """Insufficient permissions"""

    status_code = HTTP_403_FORBIDDEN


class UploadRejectedError(BadRequestError):
    """File rejected"""


class ConflictError(AppError):
    """Conflicting content"""

    status_code = HTTP_409_CONFLICT

