"""근무지 라우터.

Location router: CRUD and lookup endpoints for locations.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from shifts_logger.database import get_db
from shifts_logger.schemas.common import ApiResponse, PaginatedApiResponse
from shifts_logger.schemas.location import LocationFilterOptions, LocationRequest, LocationResponse
from shifts_logger.services.location_service import location_service

router: APIRouter = APIRouter()


@router.get("", response_model=PaginatedApiResponse[LocationResponse])
async def list_locations(
    filters: Annotated[LocationFilterOptions, Depends()],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> PaginatedApiResponse[LocationResponse]:
    """List locations with filtering, search, sorting and pagination."""
    return await location_service.list_locations(db, filters)


@router.get("/countries", response_model=ApiResponse[list[str]])
async def get_countries(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[list[str]]:
    return await location_service.get_countries(db)


@router.get("/by-country/{country}", response_model=ApiResponse[list[LocationResponse]])
async def get_locations_by_country(
    country: str,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[list[LocationResponse]]:
    return await location_service.get_by_country(db, country)


@router.get("/by-county/{county}", response_model=ApiResponse[list[LocationResponse]])
async def get_locations_by_county(
    county: str,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[list[LocationResponse]]:
    return await location_service.get_by_county(db, county)


@router.get("/{location_id}", response_model=ApiResponse[LocationResponse])
async def get_location(
    location_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[LocationResponse]:
    return await location_service.get_location(db, location_id)


@router.post("", response_model=ApiResponse[LocationResponse], status_code=201)
async def create_location(
    data: LocationRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[LocationResponse]:
    result: ApiResponse[LocationResponse] = await location_service.create_location(db, data)
    await db.commit()
    return result


@router.put("/{location_id}", response_model=ApiResponse[LocationResponse])
async def update_location(
    location_id: int,
    data: LocationRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[LocationResponse]:
    result: ApiResponse[LocationResponse] = await location_service.update_location(db, location_id, data)
    await db.commit()
    return result


@router.delete("/{location_id}", response_model=ApiResponse[None])
async def delete_location(
    location_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[None]:
    """Delete a location that has no shifts."""
    result: ApiResponse[None] = await location_service.delete_location(db, location_id)
    await db.commit()
    return result
