"""시프트 스키마.

Shift Pydantic request/response/filter schema definitions.

Request timestamps accept ``dd-MM-yyyy HH:mm``, ``dd/MM/yyyy HH:mm`` and
ISO 8601; responses always serialize ISO 8601.
"""

from datetime import datetime

from pydantic import BaseModel, field_validator

from shifts_logger.schemas.common import OptionalDate, OptionalInt
from shifts_logger.utils.datetimes import parse_datetime


class ShiftRequest(BaseModel):
    """Shift create/update request schema.

    Attributes:
        worker_id: Worker working the shift (> 0, must exist)
        location_id: Location of the shift (> 0, must exist)
        start_time: Shift start
        end_time: Shift end, strictly after start_time
    """

    worker_id: int = 0
    location_id: int = 0
    start_time: datetime
    end_time: datetime

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def _parse_timestamp(cls, value: object) -> object:
        if isinstance(value, (str, datetime)):
            return parse_datetime(value)
        return value


class ShiftResponse(BaseModel):
    """Shift response schema with resolved worker and location names.

    Attributes:
        shift_id: Shift identifier
        worker_id: Worker identifier
        worker_name: Worker name (resolved)
        location_id: Location identifier
        location_name: Location name (resolved)
        start_time: Shift start
        end_time: Shift end
        duration_minutes: Whole minutes between start and end
    """

    shift_id: int
    worker_id: int
    worker_name: str = ""
    location_id: int
    location_name: str = ""
    start_time: datetime
    end_time: datetime
    duration_minutes: int


class ShiftFilterOptions(BaseModel):
    """Query-string filter for the shift list endpoint.

    start_date keeps shifts starting on or after that day; end_date keeps
    shifts ending on or before that day. `search` OR-matches worker id,
    location id, worker name, location name, town and country.
    """

    shift_id: OptionalInt = None
    worker_id: OptionalInt = None
    location_id: OptionalInt = None
    location_name: str | None = None
    start_date: OptionalDate = None
    end_date: OptionalDate = None
    min_duration_minutes: OptionalInt = None
    max_duration_minutes: OptionalInt = None
    search: str | None = None
    sort_by: str | None = None
    sort_order: str | None = None
    page_number: OptionalInt = None
    page_size: OptionalInt = None
