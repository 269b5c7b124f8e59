"""SQLAlchemy database models."""
from adsradar.models.base import Base
from adsradar.models.location import Location

__all__ = [
    "Base",
    "Location",
]
