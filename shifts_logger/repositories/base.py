"""기본 CRUD 레포지토리.

Base CRUD repository: parent class for all domain repositories.

Provides generic Create, Read, Update, Delete operations plus the shared
filter/sort/paginate plumbing used by every list endpoint.

Usage:
    class WorkerRepository(BaseRepository[Worker]):
        def __init__(self) -> None:
            super().__init__(Worker)
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import ColumnElement, Select, String, cast, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from shifts_logger.database import Base
from shifts_logger.utils.pagination import paginate

# 제네릭 타입 변수: SQLAlchemy 모델
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)


def normalize_sort_field(sort_by: str | None) -> str:
    """Lowercase a sort field name and drop underscores (WorkerId == worker_id)."""
    if not sort_by:
        return ""
    return sort_by.strip().lower().replace("_", "")


def is_descending(sort_order: str | None) -> bool:
    return bool(sort_order) and sort_order.strip().lower() == "desc"


def contains(column: Any, value: str) -> ColumnElement[bool]:
    """Case-insensitive substring match; `%` and `_` in the value match literally."""
    return column.icontains(value.strip(), autoescape=True)


def search_any(columns: Sequence[Any], term: str) -> ColumnElement[bool]:
    """OR a case-insensitive substring match across columns.

    Integer columns are compared through their text form.
    """
    term = term.strip()
    clauses = []
    for column in columns:
        if not isinstance(column.type, String):
            column = cast(column, String)
        clauses.append(column.icontains(term, autoescape=True))
    return or_(*clauses)


class BaseRepository(Generic[ModelType]):
    """Generic CRUD repository providing common database operations.

    Subclasses declare `sort_columns`, keyed by normalized field name; the
    primary key is always the fallback ordering.

    Attributes:
        model: The SQLAlchemy model class
    """

    sort_columns: dict[str, Any] = {}

    def __init__(self, model: type[ModelType]) -> None:
        self.model: type[ModelType] = model

    async def get_by_id(
        self,
        db: AsyncSession,
        record_id: int,
    ) -> ModelType | None:
        """Retrieve a single record by its id.

        Args:
            db: Async database session
            record_id: Id of the record to retrieve

        Returns:
            ModelType | None: Found record or None
        """
        query: Select = select(self.model).where(self.model.id == record_id)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def get_all(
        self,
        db: AsyncSession,
        query: Select | None = None,
    ) -> list[ModelType]:
        """Retrieve every record of a query, primary key order by default."""
        if query is None:
            query = select(self.model).order_by(self.model.id)
        result = await db.execute(query)
        return list(result.scalars().all())

    def apply_sort(
        self,
        query: Select,
        sort_by: str | None,
        sort_order: str | None,
    ) -> Select:
        """Order a query by a client-named field.

        Unknown or empty field names order by primary key ascending.
        The primary key is appended as a tiebreaker so pages are stable.
        """
        column = self.sort_columns.get(normalize_sort_field(sort_by))
        if column is None:
            return query.order_by(self.model.id.asc())
        if is_descending(sort_order):
            return query.order_by(column.desc(), self.model.id.desc())
        return query.order_by(column.asc(), self.model.id.asc())

    async def get_paginated(
        self,
        db: AsyncSession,
        query: Select,
        page: int = 1,
        per_page: int = 10,
    ) -> tuple[Sequence[ModelType], int]:
        """Retrieve a paginated list of records.

        Args:
            db: Async database session
            query: Filtered, ordered SELECT query
            page: Current page number, 1-based
            per_page: Number of records per page

        Returns:
            tuple[Sequence[ModelType], int]: (List of records, total count)
        """
        return await paginate(db, query, page, per_page)

    async def create(
        self,
        db: AsyncSession,
        obj_data: dict[str, Any],
    ) -> ModelType:
        """Create a new record in the database.

        Args:
            db: Async database session
            obj_data: Column values for the new record

        Returns:
            ModelType: The created record
        """
        db_obj: ModelType = self.model(**obj_data)
        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def update(
        self,
        db: AsyncSession,
        db_obj: ModelType,
        update_data: dict[str, Any],
    ) -> ModelType:
        """Apply new column values to an already loaded record.

        Args:
            db: Async database session
            db_obj: Record to update
            update_data: Fields and values to set (None clears a column)

        Returns:
            ModelType: The updated record
        """
        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def delete(
        self,
        db: AsyncSession,
        db_obj: ModelType,
    ) -> None:
        await db.delete(db_obj)
        await db.flush()

    async def exists(
        self,
        db: AsyncSession,
        record_id: int,
    ) -> bool:
        """Check whether a record with the given id exists."""
        query: Select = select(func.count()).select_from(self.model).where(self.model.id == record_id)
        count: int = (await db.execute(query)).scalar() or 0
        return count > 0
