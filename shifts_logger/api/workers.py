"""근무자 라우터.

Worker router: CRUD and lookup endpoints for workers.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from shifts_logger.database import get_db
from shifts_logger.schemas.common import ApiResponse, PaginatedApiResponse
from shifts_logger.schemas.worker import WorkerFilterOptions, WorkerRequest, WorkerResponse
from shifts_logger.services.worker_service import worker_service

router: APIRouter = APIRouter()


@router.get("", response_model=PaginatedApiResponse[WorkerResponse])
async def list_workers(
    filters: Annotated[WorkerFilterOptions, Depends()],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> PaginatedApiResponse[WorkerResponse]:
    """List workers with filtering, search, sorting and pagination."""
    return await worker_service.list_workers(db, filters)


@router.get("/by-email-domain", response_model=ApiResponse[list[WorkerResponse]])
async def get_workers_by_email_domain(
    db: Annotated[AsyncSession, Depends(get_db)],
    domain: Annotated[str, Query()] = "",
) -> ApiResponse[list[WorkerResponse]]:
    return await worker_service.get_by_email_domain(db, domain)


@router.get("/by-phone-area-code", response_model=ApiResponse[list[WorkerResponse]])
async def get_workers_by_phone_area_code(
    db: Annotated[AsyncSession, Depends(get_db)],
    area_code: Annotated[str, Query()] = "",
) -> ApiResponse[list[WorkerResponse]]:
    return await worker_service.get_by_phone_area_code(db, area_code)


@router.get("/without-email", response_model=ApiResponse[list[WorkerResponse]])
async def get_workers_without_email(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[list[WorkerResponse]]:
    return await worker_service.get_without_email(db)


@router.get("/{worker_id}", response_model=ApiResponse[WorkerResponse])
async def get_worker(
    worker_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[WorkerResponse]:
    return await worker_service.get_worker(db, worker_id)


@router.post("", response_model=ApiResponse[WorkerResponse], status_code=201)
async def create_worker(
    data: WorkerRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[WorkerResponse]:
    """Create a new worker."""
    result: ApiResponse[WorkerResponse] = await worker_service.create_worker(db, data)
    await db.commit()
    return result


@router.put("/{worker_id}", response_model=ApiResponse[WorkerResponse])
async def update_worker(
    worker_id: int,
    data: WorkerRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[WorkerResponse]:
    """Replace an existing worker."""
    result: ApiResponse[WorkerResponse] = await worker_service.update_worker(db, worker_id, data)
    await db.commit()
    return result


@router.delete("/{worker_id}", response_model=ApiResponse[None])
async def delete_worker(
    worker_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[None]:
    """Delete a worker that has no shifts."""
    result: ApiResponse[None] = await worker_service.delete_worker(db, worker_id)
    await db.commit()
    return result
