"""API 라우터 패키지.

API router package: aggregates every endpoint under a single router.

Included routers:
    - workers: Worker CRUD, email-domain / area-code / no-email lookups
    - locations: Location CRUD, country / county lookups, distinct countries
    - shifts: Shift CRUD, date range, per-worker and per-location lookups
"""

from fastapi import APIRouter

from shifts_logger.api.locations import router as locations_router
from shifts_logger.api.shifts import router as shifts_router
from shifts_logger.api.workers import router as workers_router

api_router: APIRouter = APIRouter()

api_router.include_router(workers_router, prefix="/workers", tags=["Workers"])
api_router.include_router(locations_router, prefix="/locations", tags=["Locations"])
api_router.include_router(shifts_router, prefix="/shifts", tags=["Shifts"])
