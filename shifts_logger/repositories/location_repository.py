"""근무지 레포지토리.

Location repository: location queries and filter building.
"""

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from shifts_logger.models.location import Location
from shifts_logger.models.shift import Shift
from shifts_logger.repositories.base import BaseRepository, contains, search_any
from shifts_logger.schemas.location import LocationFilterOptions


class LocationRepository(BaseRepository[Location]):
    """Repository handling database queries for the locations table."""

    sort_columns = {
        "locationid": Location.id,
        "id": Location.id,
        "name": Location.name,
        "address": Location.address,
        "town": Location.town,
        "county": Location.county,
        "postcode": Location.post_code,
        "country": Location.country,
    }

    # Field filter name -> column, all case-insensitive substring matches
    _text_filters = {
        "name": Location.name,
        "address": Location.address,
        "town": Location.town,
        "county": Location.county,
        "post_code": Location.post_code,
        "country": Location.country,
    }

    def __init__(self) -> None:
        super().__init__(Location)

    def build_query(self, filters: LocationFilterOptions) -> Select:
        """Translate a filter object into a filtered, ordered SELECT.

        Args:
            filters: Location filter options (unset fields are ignored)

        Returns:
            Select: Query ready for pagination
        """
        query: Select = select(Location)

        if filters.location_id is not None:
            query = query.where(Location.id == filters.location_id)
        for field_name, column in self._text_filters.items():
            value: str | None = getattr(filters, field_name)
            if value:
                query = query.where(contains(column, value))
        if filters.search and filters.search.strip():
            query = query.where(
                search_any(
                    [
                        Location.name,
                        Location.address,
                        Location.town,
                        Location.county,
                        Location.post_code,
                        Location.country,
                        Location.id,
                    ],
                    filters.search,
                )
            )

        return self.apply_sort(query, filters.sort_by, filters.sort_order)

    async def get_by_country(self, db: AsyncSession, country: str) -> list[Location]:
        query: Select = select(Location).where(contains(Location.country, country)).order_by(Location.id)
        return await self.get_all(db, query)

    async def get_by_county(self, db: AsyncSession, county: str) -> list[Location]:
        query: Select = select(Location).where(contains(Location.county, county)).order_by(Location.id)
        return await self.get_all(db, query)

    async def get_countries(self, db: AsyncSession) -> list[str]:
        """Distinct country names, alphabetically."""
        query: Select = select(Location.country).distinct().order_by(Location.country)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def has_shifts(self, db: AsyncSession, location_id: int) -> bool:
        """Whether any shift references the location."""
        query: Select = select(func.count()).select_from(Shift).where(Shift.location_id == location_id)
        count: int = (await db.execute(query)).scalar() or 0
        return count > 0


# Singleton instance
location_repository: LocationRepository = LocationRepository()
