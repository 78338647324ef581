"""근무 시프트 라우터.

Shift router: CRUD, date-range and per-worker/per-location endpoints.
"""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from shifts_logger.database import get_db
from shifts_logger.schemas.common import ApiResponse, PaginatedApiResponse
from shifts_logger.schemas.shift import ShiftFilterOptions, ShiftRequest, ShiftResponse
from shifts_logger.services.shift_service import shift_service

router: APIRouter = APIRouter()


@router.get("", response_model=PaginatedApiResponse[ShiftResponse])
async def list_shifts(
    filters: Annotated[ShiftFilterOptions, Depends()],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> PaginatedApiResponse[ShiftResponse]:
    """List shifts with filtering, search, sorting and pagination."""
    return await shift_service.list_shifts(db, filters)


@router.get("/by-date-range", response_model=ApiResponse[list[ShiftResponse]])
async def get_shifts_by_date_range(
    start_date: Annotated[date, Query()],
    end_date: Annotated[date, Query()],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[list[ShiftResponse]]:
    """Shifts starting on/after start_date and ending on/before end_date."""
    return await shift_service.get_by_date_range(db, start_date, end_date)


@router.get("/worker/{worker_id}", response_model=ApiResponse[list[ShiftResponse]])
async def get_shifts_by_worker(
    worker_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[list[ShiftResponse]]:
    return await shift_service.get_by_worker(db, worker_id)


@router.get("/location/{location_id}", response_model=ApiResponse[list[ShiftResponse]])
async def get_shifts_by_location(
    location_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[list[ShiftResponse]]:
    return await shift_service.get_by_location(db, location_id)


@router.get("/{shift_id}", response_model=ApiResponse[ShiftResponse])
async def get_shift(
    shift_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[ShiftResponse]:
    return await shift_service.get_shift(db, shift_id)


@router.post("", response_model=ApiResponse[ShiftResponse], status_code=201)
async def create_shift(
    data: ShiftRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[ShiftResponse]:
    """Create a shift; rejected when it overlaps a shift of the same worker at the same location."""
    result: ApiResponse[ShiftResponse] = await shift_service.create_shift(db, data)
    await db.commit()
    return result


@router.put("/{shift_id}", response_model=ApiResponse[ShiftResponse])
async def update_shift(
    shift_id: int,
    data: ShiftRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[ShiftResponse]:
    result: ApiResponse[ShiftResponse] = await shift_service.update_shift(db, shift_id, data)
    await db.commit()
    return result


@router.delete("/{shift_id}", response_model=ApiResponse[None])
async def delete_shift(
    shift_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[None]:
    result: ApiResponse[None] = await shift_service.delete_shift(db, shift_id)
    await db.commit()
    return result
