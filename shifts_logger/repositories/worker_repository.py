"""근무자 레포지토리.

Worker repository: worker queries and filter building.

Extends BaseRepository with the worker list filter, the convenience
lookups (email domain, phone area code, missing email) and the
shift-reference check used by the delete guard.
"""

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from shifts_logger.models.shift import Shift
from shifts_logger.models.worker import Worker
from shifts_logger.repositories.base import BaseRepository, contains, search_any
from shifts_logger.schemas.worker import WorkerFilterOptions


class WorkerRepository(BaseRepository[Worker]):
    """Repository handling database queries for the workers table."""

    sort_columns = {
        "workerid": Worker.id,
        "id": Worker.id,
        "name": Worker.name,
        "email": Worker.email,
        "phonenumber": Worker.phone_number,
        "phone": Worker.phone_number,
    }

    def __init__(self) -> None:
        super().__init__(Worker)

    def build_query(self, filters: WorkerFilterOptions) -> Select:
        """Translate a filter object into a filtered, ordered SELECT.

        Args:
            filters: Worker filter options (unset fields are ignored)

        Returns:
            Select: Query ready for pagination
        """
        query: Select = select(Worker)

        if filters.worker_id is not None:
            query = query.where(Worker.id == filters.worker_id)
        if filters.name:
            query = query.where(contains(Worker.name, filters.name))
        if filters.email:
            query = query.where(contains(Worker.email, filters.email))
        if filters.phone_number:
            query = query.where(contains(Worker.phone_number, filters.phone_number))
        if filters.search and filters.search.strip():
            query = query.where(
                search_any([Worker.name, Worker.email, Worker.phone_number, Worker.id], filters.search)
            )

        return self.apply_sort(query, filters.sort_by, filters.sort_order)

    async def get_by_email_domain(self, db: AsyncSession, domain: str) -> list[Worker]:
        """Workers whose email contains ``@domain``."""
        query: Select = (
            select(Worker)
            .where(contains(Worker.email, f"@{domain}"))
            .order_by(Worker.id)
        )
        return await self.get_all(db, query)

    async def get_by_phone_prefix(self, db: AsyncSession, area_code: str) -> list[Worker]:
        """Workers whose phone number starts with the given area code."""
        query: Select = (
            select(Worker)
            .where(Worker.phone_number.startswith(area_code, autoescape=True))
            .order_by(Worker.id)
        )
        return await self.get_all(db, query)

    async def get_without_email(self, db: AsyncSession) -> list[Worker]:
        query: Select = select(Worker).where(Worker.email.is_(None)).order_by(Worker.id)
        return await self.get_all(db, query)

    async def has_shifts(self, db: AsyncSession, worker_id: int) -> bool:
        """Whether any shift references the worker."""
        query: Select = select(func.count()).select_from(Shift).where(Shift.worker_id == worker_id)
        count: int = (await db.execute(query)).scalar() or 0
        return count > 0


# Singleton instance
worker_repository: WorkerRepository = WorkerRepository()
