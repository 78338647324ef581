"""근무자 모델.

Worker SQLAlchemy ORM model definition.

Tables:
    - workers: People who work shifts
"""

from datetime import datetime, timezone
from sqlalchemy import String, DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column

from shifts_logger.database import Base


class Worker(Base):
    """Worker model.

    A person who can be scheduled on shifts. At least one contact method
    (email or phone number) is always present; the business service enforces it.

    Attributes:
        id: Generated integer identifier (exposed as worker_id)
        name: Full name
        email: Email address, optional
        phone_number: Phone number as entered, optional
        created_at: Creation timestamp (UTC)
        updated_at: Last update timestamp (UTC)
    """

    __tablename__ = "workers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str | None] = mapped_column(String(254), nullable=True)
    phone_number: Mapped[str | None] = mapped_column(String(20), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
