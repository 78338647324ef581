"""SQLAlchemy ORM 모델 패키지.

SQLAlchemy ORM models package: central import point for all domain models.

Importing from this package registers every model with the SQLAlchemy
metadata, which Alembic migrations, the seed script and the test schema
setup rely on.

Modules:
    worker: Workers
    location: Locations
    shift: Shifts linking a worker to a location for a time interval
"""

from shifts_logger.models.worker import Worker
from shifts_logger.models.location import Location
from shifts_logger.models.shift import Shift

__all__ = [
    "Worker",
    "Location",
    "Shift",
]
