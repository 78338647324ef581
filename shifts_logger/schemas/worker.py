"""근무자 스키마.

Worker Pydantic request/response/filter schema definitions.
"""

from pydantic import BaseModel

from shifts_logger.schemas.common import OptionalInt


class WorkerRequest(BaseModel):
    """Worker create/update request schema (PUT replaces every field).

    Field rules (length, email and phone format, contact method) are business
    validation and produce specific messages, so nothing is constrained here.

    Attributes:
        name: Full name
        email: Email address, optional
        phone_number: Phone number, optional
    """

    name: str = ""
    email: str | None = None
    phone_number: str | None = None


class WorkerResponse(BaseModel):
    """Worker response schema.

    Attributes:
        worker_id: Worker identifier
        name: Full name
        email: Email address or null
        phone_number: Phone number or null
    """

    worker_id: int
    name: str
    email: str | None
    phone_number: str | None


class WorkerFilterOptions(BaseModel):
    """Query-string filter for the worker list endpoint.

    Unset fields do not constrain the result. Text fields are
    case-insensitive substring matches; `search` OR-matches across
    name, email, phone number and id.
    """

    worker_id: OptionalInt = None
    name: str | None = None
    email: str | None = None
    phone_number: str | None = None
    search: str | None = None
    sort_by: str | None = None  # unknown fields fall back to worker_id
    sort_order: str | None = None  # "asc" (default) or "desc"
    page_number: OptionalInt = None
    page_size: OptionalInt = None
