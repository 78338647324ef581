"""시프트 레포지토리.

Shift repository: shift queries, filter building and overlap lookup.

Extends BaseRepository with Shift-specific database operations.
"""

from datetime import date, datetime, time, timedelta

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from shifts_logger.models.location import Location
from shifts_logger.models.shift import Shift
from shifts_logger.models.worker import Worker
from shifts_logger.repositories.base import BaseRepository, contains, search_any
from shifts_logger.schemas.shift import ShiftFilterOptions


def day_start(day: date) -> datetime:
    return datetime.combine(day, time.min)


def next_day_start(day: date) -> datetime:
    """Exclusive upper bound covering the whole of `day`."""
    return datetime.combine(day + timedelta(days=1), time.min)


class ShiftRepository(BaseRepository[Shift]):
    """Repository handling database queries for the shifts table.

    List queries join workers and locations so search and sorting can
    reach worker and location names.
    """

    sort_columns = {
        "shiftid": Shift.id,
        "id": Shift.id,
        "workerid": Shift.worker_id,
        "locationid": Shift.location_id,
        "starttime": Shift.start_time,
        "endtime": Shift.end_time,
        "locationname": Location.name,
        "workername": Worker.name,
        "duration": Shift.duration_minutes,
        "durationminutes": Shift.duration_minutes,
    }

    def __init__(self) -> None:
        super().__init__(Shift)

    def _joined(self) -> Select:
        return (
            select(Shift)
            .join(Worker, Shift.worker_id == Worker.id)
            .join(Location, Shift.location_id == Location.id)
        )

    def build_query(self, filters: ShiftFilterOptions) -> Select:
        """Translate a filter object into a filtered, ordered SELECT.

        start_date keeps shifts starting on or after the start of that day;
        end_date keeps shifts ending no later than the end of that day.

        Args:
            filters: Shift filter options (unset fields are ignored)

        Returns:
            Select: Query ready for pagination
        """
        query: Select = self._joined()

        if filters.shift_id is not None:
            query = query.where(Shift.id == filters.shift_id)
        if filters.worker_id is not None:
            query = query.where(Shift.worker_id == filters.worker_id)
        if filters.location_id is not None:
            query = query.where(Shift.location_id == filters.location_id)
        if filters.location_name:
            query = query.where(contains(Location.name, filters.location_name))
        if filters.start_date is not None:
            query = query.where(Shift.start_time >= day_start(filters.start_date))
        if filters.end_date is not None:
            query = query.where(Shift.end_time < next_day_start(filters.end_date))
        if filters.min_duration_minutes is not None:
            query = query.where(Shift.duration_minutes >= filters.min_duration_minutes)
        if filters.max_duration_minutes is not None:
            query = query.where(Shift.duration_minutes <= filters.max_duration_minutes)
        if filters.search and filters.search.strip():
            query = query.where(
                search_any(
                    [
                        Shift.worker_id,
                        Shift.location_id,
                        Worker.name,
                        Location.name,
                        Location.town,
                        Location.country,
                    ],
                    filters.search,
                )
            )

        return self.apply_sort(query, filters.sort_by, filters.sort_order)

    async def find_overlapping(
        self,
        db: AsyncSession,
        worker_id: int,
        location_id: int,
        start_time: datetime,
        end_time: datetime,
        exclude_shift_id: int | None = None,
    ) -> Shift | None:
        """Find a shift for the same worker and location intersecting [start, end).

        Touching intervals do not intersect.

        Args:
            db: Async database session
            worker_id: Worker of the candidate shift
            location_id: Location of the candidate shift
            start_time: Candidate start
            end_time: Candidate end
            exclude_shift_id: Shift being updated, ignored in the comparison

        Returns:
            Shift | None: The earliest conflicting shift, or None
        """
        query: Select = select(Shift).where(
            Shift.worker_id == worker_id,
            Shift.location_id == location_id,
            Shift.start_time < end_time,
            Shift.end_time > start_time,
        )
        if exclude_shift_id is not None:
            query = query.where(Shift.id != exclude_shift_id)

        result = await db.execute(query.order_by(Shift.start_time).limit(1))
        return result.scalar_one_or_none()

    async def get_by_date_range(
        self,
        db: AsyncSession,
        start_date: date,
        end_date: date,
    ) -> list[Shift]:
        """Shifts starting on/after start_date and ending on/before end_date."""
        query: Select = (
            select(Shift)
            .where(
                Shift.start_time >= day_start(start_date),
                Shift.end_time < next_day_start(end_date),
            )
            .order_by(Shift.start_time, Shift.id)
        )
        return await self.get_all(db, query)

    async def get_by_worker(self, db: AsyncSession, worker_id: int) -> list[Shift]:
        query: Select = select(Shift).where(Shift.worker_id == worker_id).order_by(Shift.start_time, Shift.id)
        return await self.get_all(db, query)

    async def get_by_location(self, db: AsyncSession, location_id: int) -> list[Shift]:
        query: Select = select(Shift).where(Shift.location_id == location_id).order_by(Shift.start_time, Shift.id)
        return await self.get_all(db, query)


# Singleton instance
shift_repository: ShiftRepository = ShiftRepository()
