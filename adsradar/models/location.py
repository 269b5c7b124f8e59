"""City catalog model."""

from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from adsradar.models.base import Base, TimestampMixin


class Location(Base, TimestampMixin):
    """A city the keyword provider can be queried for."""

    __tablename__ = "locations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    # DataForSEO location_code
    dataforseo_id: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<Location {self.name} ({self.dataforseo_id})>"
