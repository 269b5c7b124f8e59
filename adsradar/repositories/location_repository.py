"""Repository for the city catalog (`locations` table)."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from adsradar.core.database import get_session_context
from adsradar.models.location import Location
from adsradar.services.search.types import CityRecord

logger = logging.getLogger(__name__)


class LocationRepository:
    """Reads and updates catalog cities via short-lived sessions."""

    def __init__(
        self,
        *,
        session_factory: async_sessionmaker[AsyncSession] | None = None,
    ) -> None:
        self.session_factory = session_factory

    async def list_all(self) -> list[CityRecord]:
        """Return every catalog city, ordered by name."""
        async with get_session_context(
            commit_on_exit=False,
            session_factory=self.session_factory,
        ) as session:
            result = await session.execute(
                select(Location.name, Location.dataforseo_id).order_by(Location.name)
            )
            return [
                CityRecord(name=name, external_location_id=location_id)
                for name, location_id in result.all()
            ]

    async def list_models(self) -> list[Location]:
        async with get_session_context(
            commit_on_exit=False,
            session_factory=self.session_factory,
        ) as session:
            result = await session.execute(select(Location).order_by(Location.name))
            return list(result.scalars())

    async def update_location_code(self, *, name: str, location_code: int) -> bool:
        """Set the provider code of a city; returns False when the city is unknown."""
        async with get_session_context(session_factory=self.session_factory) as session:
            result = await session.execute(select(Location).where(Location.name == name))
            location = result.scalar_one_or_none()
            if location is None:
                return False
            location.dataforseo_id = location_code
            return True

    async def add(self, *, name: str, location_code: int) -> CityRecord:
        async with get_session_context(session_factory=self.session_factory) as session:
            session.add(Location(name=name, dataforseo_id=location_code))
        logger.info("Location added", extra={"city": name, "location_code": location_code})
        return CityRecord(name=name, external_location_id=location_code)
