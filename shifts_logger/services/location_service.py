"""근무지 서비스.

Location service: business logic for location CRUD and lookups.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from shifts_logger.models.location import Location
from shifts_logger.repositories.location_repository import location_repository
from shifts_logger.schemas.common import ApiResponse, PaginatedApiResponse
from shifts_logger.schemas.location import LocationFilterOptions, LocationRequest, LocationResponse
from shifts_logger.utils.exceptions import BadRequestError, NotFoundError
from shifts_logger.utils.logger import get_logger
from shifts_logger.utils.pagination import normalize_page, page_metadata
from shifts_logger.utils.validation import clean, validate_location

logger = get_logger(__name__)


class LocationService:
    """근무지 관련 비즈니스 로직을 처리하는 서비스.

    Service handling location business logic.
    """

    def _to_response(self, location: Location) -> LocationResponse:
        return LocationResponse(
            location_id=location.id,
            name=location.name,
            address=location.address,
            town=location.town,
            county=location.county,
            post_code=location.post_code,
            country=location.country,
        )

    def _list_response(self, locations: list[Location], message: str) -> ApiResponse[list[LocationResponse]]:
        return ApiResponse[list[LocationResponse]](
            message=message if locations else "No locations found.",
            data=[self._to_response(loc) for loc in locations],
            total_count=len(locations),
        )

    async def _get_or_404(self, db: AsyncSession, location_id: int) -> Location:
        location: Location | None = await location_repository.get_by_id(db, location_id)
        if location is None:
            raise NotFoundError(f"Location with ID {location_id} not found.")
        return location

    def _validated_values(self, data: LocationRequest) -> dict:
        error: str | None = validate_location(
            data.name, data.address, data.town, data.county, data.post_code, data.country
        )
        if error:
            logger.warning("Location validation failed: %s", error)
            raise BadRequestError(error)
        return {
            field: clean(getattr(data, field))
            for field in ("name", "address", "town", "county", "post_code", "country")
        }

    async def list_locations(
        self,
        db: AsyncSession,
        filters: LocationFilterOptions,
    ) -> PaginatedApiResponse[LocationResponse]:
        """List locations matching the filter, one page at a time.

        Args:
            db: Async database session
            filters: Field filters, search, sort and page parameters

        Returns:
            PaginatedApiResponse[LocationResponse]: Page of locations with page metadata
        """
        page, size = normalize_page(filters.page_number, filters.page_size)
        locations, total = await location_repository.get_paginated(
            db, location_repository.build_query(filters), page, size
        )
        return PaginatedApiResponse[LocationResponse](
            message=f"Retrieved {len(locations)} of {total} locations." if total else "No locations found.",
            data=[self._to_response(loc) for loc in locations],
            total_count=total,
            **page_metadata(total, page, size),
        )

    async def get_location(self, db: AsyncSession, location_id: int) -> ApiResponse[LocationResponse]:
        location: Location = await self._get_or_404(db, location_id)
        return ApiResponse[LocationResponse](
            message="Location retrieved successfully.",
            data=self._to_response(location),
            total_count=1,
        )

    async def create_location(self, db: AsyncSession, data: LocationRequest) -> ApiResponse[LocationResponse]:
        """Create a new location.

        Raises:
            BadRequestError: Field validation failed
        """
        values: dict = self._validated_values(data)
        location: Location = await location_repository.create(db, values)
        logger.info("Created location %s (%s)", location.id, location.name)
        return ApiResponse[LocationResponse](
            response_code=201,
            message="Location created successfully.",
            data=self._to_response(location),
            total_count=1,
        )

    async def update_location(
        self,
        db: AsyncSession,
        location_id: int,
        data: LocationRequest,
    ) -> ApiResponse[LocationResponse]:
        """Replace every field of an existing location.

        Raises:
            BadRequestError: Field validation failed
            NotFoundError: Location does not exist
        """
        values: dict = self._validated_values(data)
        location: Location = await self._get_or_404(db, location_id)
        location = await location_repository.update(db, location, values)
        logger.info("Updated location %s", location_id)
        return ApiResponse[LocationResponse](
            message="Location updated successfully.",
            data=self._to_response(location),
            total_count=1,
        )

    async def delete_location(self, db: AsyncSession, location_id: int) -> ApiResponse[None]:
        """Delete a location that has no shifts.

        Raises:
            NotFoundError: Location does not exist
            BadRequestError: Location still has shifts
        """
        location: Location = await self._get_or_404(db, location_id)
        if await location_repository.has_shifts(db, location_id):
            logger.warning("Refused to delete location %s: shifts reference it", location_id)
            raise BadRequestError(
                f"Cannot delete location '{location.name}' because it has associated shifts. "
                "Please reassign or delete the shifts first."
            )
        await location_repository.delete(db, location)
        logger.info("Deleted location %s", location_id)
        return ApiResponse[None](message=f"Location with ID {location_id} deleted successfully.")

    async def get_by_country(self, db: AsyncSession, country: str) -> ApiResponse[list[LocationResponse]]:
        country = (country or "").strip()
        if not country:
            raise BadRequestError("Country is required.")
        locations: list[Location] = await location_repository.get_by_country(db, country)
        return self._list_response(locations, f"Found {len(locations)} locations in country '{country}'.")

    async def get_by_county(self, db: AsyncSession, county: str) -> ApiResponse[list[LocationResponse]]:
        county = (county or "").strip()
        if not county:
            raise BadRequestError("County is required.")
        locations: list[Location] = await location_repository.get_by_county(db, county)
        return self._list_response(locations, f"Found {len(locations)} locations in county '{county}'.")

    async def get_countries(self, db: AsyncSession) -> ApiResponse[list[str]]:
        countries: list[str] = await location_repository.get_countries(db)
        return ApiResponse[list[str]](
            message=f"Found {len(countries)} countries." if countries else "No countries found.",
            data=countries,
            total_count=len(countries),
        )


# Singleton instance
location_service: LocationService = LocationService()
