"""근무자 서비스.

Worker service: business logic for worker CRUD and lookups.

Validates worker fields, normalizes input (trimmed strings, blank optional
fields stored as null) and guards deletion of workers that still have shifts.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from shifts_logger.models.worker import Worker
from shifts_logger.repositories.worker_repository import worker_repository
from shifts_logger.schemas.common import ApiResponse, PaginatedApiResponse
from shifts_logger.schemas.worker import WorkerFilterOptions, WorkerRequest, WorkerResponse
from shifts_logger.utils.exceptions import BadRequestError, NotFoundError
from shifts_logger.utils.logger import get_logger
from shifts_logger.utils.pagination import normalize_page, page_metadata
from shifts_logger.utils.validation import clean, validate_worker

logger = get_logger(__name__)


class WorkerService:
    """근무자 관련 비즈니스 로직을 처리하는 서비스.

    Service handling worker business logic.
    """

    def _to_response(self, worker: Worker) -> WorkerResponse:
        return WorkerResponse(
            worker_id=worker.id,
            name=worker.name,
            email=worker.email,
            phone_number=worker.phone_number,
        )

    def _list_response(self, workers: list[Worker], message: str) -> ApiResponse[list[WorkerResponse]]:
        return ApiResponse[list[WorkerResponse]](
            message=message if workers else "No workers found.",
            data=[self._to_response(w) for w in workers],
            total_count=len(workers),
        )

    async def _get_or_404(self, db: AsyncSession, worker_id: int) -> Worker:
        worker: Worker | None = await worker_repository.get_by_id(db, worker_id)
        if worker is None:
            raise NotFoundError(f"Worker with ID {worker_id} not found.")
        return worker

    def _validated_values(self, data: WorkerRequest) -> dict:
        """Run field rules and return the cleaned column values.

        Raises:
            BadRequestError: When a field rule fails
        """
        error: str | None = validate_worker(data.name, data.email, data.phone_number)
        if error:
            logger.warning("Worker validation failed: %s", error)
            raise BadRequestError(error)
        return {
            "name": clean(data.name),
            "email": clean(data.email),
            "phone_number": clean(data.phone_number),
        }

    async def list_workers(
        self,
        db: AsyncSession,
        filters: WorkerFilterOptions,
    ) -> PaginatedApiResponse[WorkerResponse]:
        """List workers matching the filter, one page at a time.

        Args:
            db: Async database session
            filters: Field filters, search, sort and page parameters

        Returns:
            PaginatedApiResponse[WorkerResponse]: Page of workers with page metadata
        """
        page, size = normalize_page(filters.page_number, filters.page_size)
        workers, total = await worker_repository.get_paginated(
            db, worker_repository.build_query(filters), page, size
        )
        return PaginatedApiResponse[WorkerResponse](
            message=f"Retrieved {len(workers)} of {total} workers." if total else "No workers found.",
            data=[self._to_response(w) for w in workers],
            total_count=total,
            **page_metadata(total, page, size),
        )

    async def get_worker(self, db: AsyncSession, worker_id: int) -> ApiResponse[WorkerResponse]:
        """Retrieve a worker by id.

        Raises:
            NotFoundError: Worker does not exist
        """
        worker: Worker = await self._get_or_404(db, worker_id)
        return ApiResponse[WorkerResponse](
            message="Worker retrieved successfully.",
            data=self._to_response(worker),
            total_count=1,
        )

    async def create_worker(self, db: AsyncSession, data: WorkerRequest) -> ApiResponse[WorkerResponse]:
        """Create a new worker.

        Args:
            db: Async database session
            data: Worker fields

        Returns:
            ApiResponse[WorkerResponse]: Created worker (response_code 201)

        Raises:
            BadRequestError: Field validation failed
        """
        values: dict = self._validated_values(data)
        worker: Worker = await worker_repository.create(db, values)
        logger.info("Created worker %s (%s)", worker.id, worker.name)
        return ApiResponse[WorkerResponse](
            response_code=201,
            message="Worker created successfully.",
            data=self._to_response(worker),
            total_count=1,
        )

    async def update_worker(
        self,
        db: AsyncSession,
        worker_id: int,
        data: WorkerRequest,
    ) -> ApiResponse[WorkerResponse]:
        """Replace every field of an existing worker.

        Raises:
            BadRequestError: Field validation failed
            NotFoundError: Worker does not exist
        """
        values: dict = self._validated_values(data)
        worker: Worker = await self._get_or_404(db, worker_id)
        worker = await worker_repository.update(db, worker, values)
        logger.info("Updated worker %s", worker_id)
        return ApiResponse[WorkerResponse](
            message="Worker updated successfully.",
            data=self._to_response(worker),
            total_count=1,
        )

    async def delete_worker(self, db: AsyncSession, worker_id: int) -> ApiResponse[None]:
        """Delete a worker that has no shifts.

        Raises:
            NotFoundError: Worker does not exist
            BadRequestError: Worker still has shifts
        """
        worker: Worker = await self._get_or_404(db, worker_id)
        if await worker_repository.has_shifts(db, worker_id):
            logger.warning("Refused to delete worker %s: shifts reference it", worker_id)
            raise BadRequestError(
                f"Cannot delete worker '{worker.name}' because they have associated shifts. "
                "Please reassign or delete the shifts first."
            )
        await worker_repository.delete(db, worker)
        logger.info("Deleted worker %s", worker_id)
        return ApiResponse[None](message=f"Worker with ID {worker_id} deleted successfully.")

    async def get_by_email_domain(self, db: AsyncSession, domain: str) -> ApiResponse[list[WorkerResponse]]:
        """Workers whose email belongs to a domain (leading ``@`` optional).

        Raises:
            BadRequestError: Domain is blank
        """
        domain = (domain or "").strip().lstrip("@")
        if not domain:
            raise BadRequestError("Email domain is required.")
        workers: list[Worker] = await worker_repository.get_by_email_domain(db, domain)
        return self._list_response(workers, f"Found {len(workers)} workers with email domain '{domain}'.")

    async def get_by_phone_area_code(self, db: AsyncSession, area_code: str) -> ApiResponse[list[WorkerResponse]]:
        """Workers whose phone number starts with an area code.

        Raises:
            BadRequestError: Area code is blank
        """
        area_code = (area_code or "").strip()
        if not area_code:
            raise BadRequestError("Phone area code is required.")
        workers: list[Worker] = await worker_repository.get_by_phone_prefix(db, area_code)
        return self._list_response(workers, f"Found {len(workers)} workers with area code '{area_code}'.")

    async def get_without_email(self, db: AsyncSession) -> ApiResponse[list[WorkerResponse]]:
        workers: list[Worker] = await worker_repository.get_without_email(db)
        return self._list_response(workers, f"Found {len(workers)} workers without an email address.")


# Singleton instance
worker_service: WorkerService = WorkerService()
