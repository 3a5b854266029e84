# readify/core/errors.py
"""Domain errors raised by handlers and services.

Each error maps onto one HTTP status; `register_error_handlers` installs the
handler that renders them as `{"message": ...}` bodies.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ReadifyError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(ReadifyError):
    """A referenced post, user or subreddit is absent."""
    status_code = status.HTTP_404_NOT_FOUND


class Forbidden(ReadifyError):
    """The actor is not allowed to touch the record (not its author)."""
    status_code = status.HTTP_403_FORBIDDEN


class InvalidPostType(ReadifyError):
    """Unrecognized post type, or a submission that does not fit its type."""
    status_code = status.HTTP_400_BAD_REQUEST


class EmptySubmission(ReadifyError):
    """The submission matching the declared post type is missing or blank."""
    status_code = status.HTTP_400_BAD_REQUEST


class UpstreamUploadFailure(ReadifyError):
    """The media host rejected or failed an image upload."""
    status_code = status.HTTP_502_BAD_GATEWAY


async def readify_error_handler(request: Request, exc: ReadifyError) -> JSONResponse:
    logger.warning(
        "%s %s -> %s: %s",
        request.method,
        request.url.path,
        exc.status_code,
        exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ReadifyError, readify_error_handler)
