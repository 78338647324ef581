"""페이지네이션 유틸리티 모듈.

Pagination utility module.

Generic paginate function for SQLAlchemy async queries plus the helpers
that normalize client-supplied page parameters and compute page metadata
for the paginated response envelope.
"""

import math
from typing import Any, Sequence

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from shifts_logger.config import settings


def normalize_page(page_number: int | None, page_size: int | None) -> tuple[int, int]:
    """Clamp requested page parameters into a usable range.

    Page numbers below 1 become 1. Missing or non-positive page sizes fall
    back to the configured default; oversized ones are capped.

    Args:
        page_number: Requested page, 1-based
        page_size: Requested items per page

    Returns:
        tuple[int, int]: (page_number, page_size)
    """
    page: int = page_number if page_number is not None and page_number >= 1 else 1
    size: int = page_size if page_size is not None and page_size >= 1 else settings.DEFAULT_PAGE_SIZE
    return page, min(size, settings.MAX_PAGE_SIZE)


def total_pages(total: int, page_size: int) -> int:
    """Number of pages needed to show `total` items (0 when nothing matches)."""
    if page_size <= 0:
        return 0
    return math.ceil(total / page_size)


async def paginate(
    db: AsyncSession,
    query: Select[Any],
    page: int = 1,
    per_page: int = 10,
) -> tuple[Sequence[Any], int]:
    """Execute a paginated SQLAlchemy query, returning items and total count.

    Runs two queries: one for the total count (via subquery) and one for
    the actual page of results with OFFSET/LIMIT.

    Args:
        db: Async database session
        query: Base query to paginate (already filtered and ordered)
        page: Page number, 1-indexed
        per_page: Items per page

    Returns:
        tuple[Sequence[Any], int]: Paginated items and total count
    """
    # Count over the unordered subquery
    count_query = select(func.count()).select_from(query.order_by(None).subquery())
    total: int = (await db.execute(count_query)).scalar() or 0

    offset: int = (page - 1) * per_page
    result = await db.execute(query.offset(offset).limit(per_page))
    items: Sequence[Any] = result.scalars().all()

    return items, total


def page_metadata(total: int, page: int, page_size: int) -> dict[str, Any]:
    """Page fields of the paginated response envelope."""
    pages: int = total_pages(total, page_size)
    return {
        "page_number": page,
        "page_size": page_size,
        "total_pages": pages,
        "has_next_page": page < pages,
        "has_previous_page": page > 1,
    }
