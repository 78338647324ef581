"""근무 시프트 모델.

Shift SQLAlchemy ORM model definition.

Tables:
    - shifts: Time intervals worked by a worker at a location
"""

from datetime import datetime, timezone
from sqlalchemy import DateTime, ForeignKey, Index, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shifts_logger.database import Base


class Shift(Base):
    """Shift model: a half-open [start_time, end_time) interval.

    Start and end are naive wall-clock datetimes. duration_minutes is derived
    from them on every write so duration filters and sorting stay portable
    across database backends.

    Attributes:
        id: Generated integer identifier (exposed as shift_id)
        worker_id: Worker FK (RESTRICT: a worker with shifts cannot be deleted)
        location_id: Location FK (RESTRICT: a location with shifts cannot be deleted)
        start_time: Shift start
        end_time: Shift end, strictly after start_time
        duration_minutes: Whole minutes between start and end
        created_at: Creation timestamp (UTC)
        updated_at: Last update timestamp (UTC)

    Relationships:
        worker: Worker working the shift (selectin-loaded)
        location: Location of the shift (selectin-loaded)
    """

    __tablename__ = "shifts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    worker_id: Mapped[int] = mapped_column(Integer, ForeignKey("workers.id", ondelete="RESTRICT"), nullable=False)
    location_id: Mapped[int] = mapped_column(Integer, ForeignKey("locations.id", ondelete="RESTRICT"), nullable=False)
    start_time: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    end_time: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    duration_minutes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        # Serves the overlap lookup (same worker + location, ordered by start)
        Index("ix_shifts_worker_location_start", "worker_id", "location_id", "start_time"),
    )

    # Many-to-one only; the reverse side is queried explicitly
    worker = relationship("Worker", lazy="selectin")
    location = relationship("Location", lazy="selectin")
