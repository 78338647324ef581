"""근무지 모델.

Location SQLAlchemy ORM model definition.

Tables:
    - locations: Sites where shifts are worked
"""

from datetime import datetime, timezone
from sqlalchemy import String, DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column

from shifts_logger.database import Base


class Location(Base):
    """Location model: a physical site with a postal address.

    Attributes:
        id: Generated integer identifier (exposed as location_id)
        name: Site name
        address: Street address
        town: Town or city
        county: County or region
        post_code: Postal code
        country: Country
        created_at: Creation timestamp (UTC)
        updated_at: Last update timestamp (UTC)
    """

    __tablename__ = "locations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    address: Mapped[str] = mapped_column(String(200), nullable=False)
    town: Mapped[str] = mapped_column(String(100), nullable=False)
    county: Mapped[str] = mapped_column(String(100), nullable=False)
    post_code: Mapped[str] = mapped_column(String(20), nullable=False)
    # Indexed for the by-country lookup
    country: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
