"""커스텀 HTTP 예외 모듈.

Custom HTTP exception classes module.

Pre-configured HTTPException subclasses for the failure causes the API
reports: a missing entity and a rejected request. Anything else that
escapes a route is an internal error and is rendered by the error
middleware with a generic message.

Usage:
    from shifts_logger.utils.exceptions import NotFoundError, BadRequestError
    raise NotFoundError("Worker with ID 3 not found.")
    raise BadRequestError("End time must be after start time.")
"""

from fastapi import HTTPException, status

# Message returned for any unhandled error; details stay in the server log
INTERNAL_ERROR_MESSAGE: str = "An unexpected error occurred."


class NotFoundError(HTTPException):
    """404 Not Found exception.

    Raised when a worker, location, or shift looked up by id does not exist.

    Args:
        detail: Error message (default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class BadRequestError(HTTPException):
    """400 Bad Request exception.

    Raised when a business rule rejects the request: field validation,
    missing referenced entity, overlapping shift, or a guarded delete.

    Args:
        detail: Error message (default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
