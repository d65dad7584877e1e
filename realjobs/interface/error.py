"""Interface layer errors and HTTP status mapping."""

import logfire
from fastapi import HTTPException, status

from realjobs.domain.error import (
    ConflictRetryableError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)


class InterfaceError(Exception):
    """Base interface error."""

    pass


def to_http_exception(error: Exception, action: str) -> HTTPException:
    """Map an error raised by a use case to an HTTP error.

    Args:
        error: Exception raised while handling the request
        action: Short description of the request, used in logs

    Returns:
        HTTPException with the matching status code
    """
    if isinstance(error, UnauthorizedError):
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=str(error)
        )
    if isinstance(error, NotAuthorizedError):
        logfire.warn(f"Forbidden: {action}", error=str(error))
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(error))
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, (ValidationError, ValueError)):
        logfire.info(f"Rejected: {action}", error=str(error))
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(error)
        )
    if isinstance(error, ConflictRetryableError):
        logfire.warn(f"Conflict: {action}", error=str(error))
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))
    if isinstance(error, DomainError):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(error)
        )

    logfire.error(
        f"Unexpected error: {action}",
        error=str(error),
        error_type=type(error).__name__,
    )
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action}",
    )
