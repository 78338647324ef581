"""공통 응답 스키마.

Common Pydantic response envelope definitions.

Every API operation answers with the same envelope: a failure flag, an
HTTP-like status code, a human-readable message and an optional payload.
List endpoints add a total count; paginated lists add page metadata.
"""

from datetime import date
from typing import Annotated, Generic, TypeVar

from pydantic import BaseModel, BeforeValidator

T = TypeVar("T")


def blank_to_none(value: object) -> object:
    """Treat an empty query-string value (`?worker_id=`) as not supplied."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


# Optional filter fields: a blank value means no constraint
OptionalInt = Annotated[int | None, BeforeValidator(blank_to_none)]
OptionalDate = Annotated[date | None, BeforeValidator(blank_to_none)]


class ApiResponse(BaseModel, Generic[T]):
    """Uniform response envelope.

    Attributes:
        request_failed: True when the operation did not succeed
        response_code: HTTP status code mirrored into the body
        message: Human-readable outcome
        data: Payload; None on failure
        total_count: Matching rows for lists, 1/0 for single entities
    """

    request_failed: bool = False
    response_code: int = 200
    message: str = ""
    data: T | None = None
    total_count: int = 0


class PaginatedApiResponse(ApiResponse[T], Generic[T]):
    """Envelope for paginated list endpoints.

    `T` is the item type: `data` holds the page's items (None only on a
    failed response).

    Attributes:
        data: Items on this page
        page_number: Current page, 1-based
        page_size: Items per page
        total_pages: ceil(total_count / page_size)
        has_next_page: Whether a following page exists
        has_previous_page: Whether a preceding page exists
    """

    data: list[T] | None = None
    page_number: int = 1
    page_size: int = 10
    total_pages: int = 0
    has_next_page: bool = False
    has_previous_page: bool = False


def error_envelope(status_code: int, message: str) -> dict:
    """Build the JSON body of a failed response."""
    return ApiResponse[None](
        request_failed=True,
        response_code=status_code,
        message=message,
    ).model_dump(mode="json")
