"""시프트 서비스.

Shift service: business logic for shift CRUD, overlap checks and lookups.

Every create or update runs, in order: field rules (ids and time order),
existence of the shift being updated, existence of the referenced worker
and location, then the overlap query against shifts of the same worker at
the same location. The check and the write share the request's transaction.
"""

from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from shifts_logger.models.location import Location
from shifts_logger.models.shift import Shift
from shifts_logger.models.worker import Worker
from shifts_logger.repositories.location_repository import location_repository
from shifts_logger.repositories.shift_repository import shift_repository
from shifts_logger.repositories.worker_repository import worker_repository
from shifts_logger.schemas.common import ApiResponse, PaginatedApiResponse
from shifts_logger.schemas.shift import ShiftFilterOptions, ShiftRequest, ShiftResponse
from shifts_logger.utils.datetimes import to_naive
from shifts_logger.utils.exceptions import BadRequestError, NotFoundError
from shifts_logger.utils.logger import get_logger
from shifts_logger.utils.pagination import normalize_page, page_metadata
from shifts_logger.utils.validation import duration_minutes, validate_shift_fields

logger = get_logger(__name__)


class ShiftService:
    """시프트 관련 비즈니스 로직을 처리하는 서비스.

    Service handling shift business logic.
    """

    def _to_response(
        self,
        shift: Shift,
        worker: Worker | None = None,
        location: Location | None = None,
    ) -> ShiftResponse:
        """Convert a Shift to its response schema.

        Args:
            shift: Shift model instance
            worker: Worker to name; defaults to the loaded relationship
            location: Location to name; defaults to the loaded relationship
        """
        worker = worker or shift.worker
        location = location or shift.location
        return ShiftResponse(
            shift_id=shift.id,
            worker_id=shift.worker_id,
            worker_name=worker.name if worker else "",
            location_id=shift.location_id,
            location_name=location.name if location else "",
            start_time=shift.start_time,
            end_time=shift.end_time,
            duration_minutes=shift.duration_minutes,
        )

    def _list_response(self, shifts: list[Shift], message: str) -> ApiResponse[list[ShiftResponse]]:
        return ApiResponse[list[ShiftResponse]](
            message=message if shifts else "No shifts found.",
            data=[self._to_response(s) for s in shifts],
            total_count=len(shifts),
        )

    async def _get_or_404(self, db: AsyncSession, shift_id: int) -> Shift:
        shift: Shift | None = await shift_repository.get_by_id(db, shift_id)
        if shift is None:
            raise NotFoundError(f"Shift with ID {shift_id} not found.")
        return shift

    def _reject(self, message: str) -> BadRequestError:
        logger.warning("Shift rejected: %s", message)
        return BadRequestError(message)

    async def _validated_values(
        self,
        db: AsyncSession,
        data: ShiftRequest,
        shift_id: int | None = None,
    ) -> tuple[dict, Worker, Location]:
        """Check references and overlap; return column values and referenced rows.

        Args:
            db: Async database session
            data: Requested shift fields (field rules already passed)
            shift_id: Shift being updated, excluded from the overlap check

        Raises:
            BadRequestError: Missing worker/location or an overlapping shift
        """
        start_time = to_naive(data.start_time)
        end_time = to_naive(data.end_time)

        worker: Worker | None = await worker_repository.get_by_id(db, data.worker_id)
        if worker is None:
            raise self._reject(f"Worker with ID {data.worker_id} does not exist.")
        location: Location | None = await location_repository.get_by_id(db, data.location_id)
        if location is None:
            raise self._reject(f"Location with ID {data.location_id} does not exist.")

        conflict: Shift | None = await shift_repository.find_overlapping(
            db, data.worker_id, data.location_id, start_time, end_time, exclude_shift_id=shift_id
        )
        if conflict is not None:
            raise self._reject(
                f"Shift overlaps an existing shift (ID {conflict.id}) for this worker at this location."
            )

        values: dict = {
            "worker_id": data.worker_id,
            "location_id": data.location_id,
            "start_time": start_time,
            "end_time": end_time,
            "duration_minutes": duration_minutes(start_time, end_time),
        }
        return values, worker, location

    def _check_fields(self, data: ShiftRequest) -> None:
        error: str | None = validate_shift_fields(
            data.worker_id,
            data.location_id,
            to_naive(data.start_time),
            to_naive(data.end_time),
        )
        if error:
            raise self._reject(error)

    async def list_shifts(
        self,
        db: AsyncSession,
        filters: ShiftFilterOptions,
    ) -> PaginatedApiResponse[ShiftResponse]:
        """List shifts matching the filter, one page at a time.

        Args:
            db: Async database session
            filters: Field filters, date/duration ranges, search, sort and page parameters

        Returns:
            PaginatedApiResponse[ShiftResponse]: Page of shifts with page metadata
        """
        page, size = normalize_page(filters.page_number, filters.page_size)
        shifts, total = await shift_repository.get_paginated(
            db, shift_repository.build_query(filters), page, size
        )
        return PaginatedApiResponse[ShiftResponse](
            message=f"Retrieved {len(shifts)} of {total} shifts." if total else "No shifts found.",
            data=[self._to_response(s) for s in shifts],
            total_count=total,
            **page_metadata(total, page, size),
        )

    async def get_shift(self, db: AsyncSession, shift_id: int) -> ApiResponse[ShiftResponse]:
        shift: Shift = await self._get_or_404(db, shift_id)
        return ApiResponse[ShiftResponse](
            message="Shift retrieved successfully.",
            data=self._to_response(shift),
            total_count=1,
        )

    async def create_shift(self, db: AsyncSession, data: ShiftRequest) -> ApiResponse[ShiftResponse]:
        """Create a shift after validation and the overlap check.

        Args:
            db: Async database session
            data: Worker, location, start and end

        Returns:
            ApiResponse[ShiftResponse]: Created shift (response_code 201)

        Raises:
            BadRequestError: Invalid fields, missing worker/location, or overlap
        """
        self._check_fields(data)
        values, worker, location = await self._validated_values(db, data)
        shift: Shift = await shift_repository.create(db, values)
        logger.info(
            "Created shift %s for worker %s at location %s (%s - %s)",
            shift.id, shift.worker_id, shift.location_id, shift.start_time, shift.end_time,
        )
        return ApiResponse[ShiftResponse](
            response_code=201,
            message="Shift created successfully.",
            data=self._to_response(shift, worker, location),
            total_count=1,
        )

    async def update_shift(
        self,
        db: AsyncSession,
        shift_id: int,
        data: ShiftRequest,
    ) -> ApiResponse[ShiftResponse]:
        """Replace every field of an existing shift.

        The shift's own current interval is ignored by the overlap check.

        Raises:
            BadRequestError: Invalid fields, missing worker/location, or overlap
            NotFoundError: Shift does not exist
        """
        self._check_fields(data)
        shift: Shift = await self._get_or_404(db, shift_id)
        values, worker, location = await self._validated_values(db, data, shift_id=shift_id)
        shift = await shift_repository.update(db, shift, values)
        logger.info("Updated shift %s", shift_id)
        return ApiResponse[ShiftResponse](
            message="Shift updated successfully.",
            data=self._to_response(shift, worker, location),
            total_count=1,
        )

    async def delete_shift(self, db: AsyncSession, shift_id: int) -> ApiResponse[None]:
        shift: Shift = await self._get_or_404(db, shift_id)
        await shift_repository.delete(db, shift)
        logger.info("Deleted shift %s", shift_id)
        return ApiResponse[None](message=f"Shift with ID {shift_id} deleted successfully.")

    async def get_by_date_range(
        self,
        db: AsyncSession,
        start_date: date,
        end_date: date,
    ) -> ApiResponse[list[ShiftResponse]]:
        """Shifts starting on/after start_date and ending on/before end_date.

        Raises:
            BadRequestError: end_date is before start_date
        """
        if end_date < start_date:
            raise BadRequestError("End date must be on or after start date.")
        shifts: list[Shift] = await shift_repository.get_by_date_range(db, start_date, end_date)
        return self._list_response(
            shifts, f"Found {len(shifts)} shifts between {start_date.isoformat()} and {end_date.isoformat()}."
        )

    async def get_by_worker(self, db: AsyncSession, worker_id: int) -> ApiResponse[list[ShiftResponse]]:
        """All shifts of a worker.

        Raises:
            NotFoundError: Worker does not exist
        """
        if not await worker_repository.exists(db, worker_id):
            raise NotFoundError(f"Worker with ID {worker_id} not found.")
        shifts: list[Shift] = await shift_repository.get_by_worker(db, worker_id)
        return self._list_response(shifts, f"Found {len(shifts)} shifts for worker {worker_id}.")

    async def get_by_location(self, db: AsyncSession, location_id: int) -> ApiResponse[list[ShiftResponse]]:
        """All shifts at a location.

        Raises:
            NotFoundError: Location does not exist
        """
        if not await location_repository.exists(db, location_id):
            raise NotFoundError(f"Location with ID {location_id} not found.")
        shifts: list[Shift] = await shift_repository.get_by_location(db, location_id)
        return self._list_response(shifts, f"Found {len(shifts)} shifts at location {location_id}.")


# Singleton instance
shift_service: ShiftService = ShiftService()
