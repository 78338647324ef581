"""근무지 스키마.

Location Pydantic request/response/filter schema definitions.
"""

from pydantic import BaseModel

from shifts_logger.schemas.common import OptionalInt


class LocationRequest(BaseModel):
    """Location create/update request schema.

    Attributes:
        name: Site name
        address: Street address
        town: Town or city
        county: County or region
        post_code: Postal code
        country: Country
    """

    name: str = ""
    address: str = ""
    town: str = ""
    county: str = ""
    post_code: str = ""
    country: str = ""


class LocationResponse(BaseModel):
    """Location response schema."""

    location_id: int
    name: str
    address: str
    town: str
    county: str
    post_code: str
    country: str


class LocationFilterOptions(BaseModel):
    """Query-string filter for the location list endpoint.

    `search` OR-matches across name, address, town, county, post code,
    country and id.
    """

    location_id: OptionalInt = None
    name: str | None = None
    address: str | None = None
    town: str | None = None
    county: str | None = None
    post_code: str | None = None
    country: str | None = None
    search: str | None = None
    sort_by: str | None = None
    sort_order: str | None = None
    page_number: OptionalInt = None
    page_size: OptionalInt = None
