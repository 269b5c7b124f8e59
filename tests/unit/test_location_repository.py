"""Unit tests for the location catalog repository (SQLite-backed)."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from adsradar.models import Base
from adsradar.repositories.location_repository import LocationRepository
from adsradar.services.search.types import CityRecord


@pytest_asyncio.fixture
async def session_factory(tmp_path: Path) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield async_sessionmaker(engine, expire_on_commit=False)
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_list_all_returns_city_records_by_name(
    session_factory: async_sessionmaker[AsyncSession],
) -> None:
    repository = LocationRepository(session_factory=session_factory)
    await repository.add(name="Recife", location_code=1001643)
    await repository.add(name="Natal", location_code=1001662)

    cities = await repository.list_all()

    assert cities == [CityRecord("Natal", 1001662), CityRecord("Recife", 1001643)]


@pytest.mark.asyncio
async def test_empty_catalog_lists_nothing(
    session_factory: async_sessionmaker[AsyncSession],
) -> None:
    assert await LocationRepository(session_factory=session_factory).list_all() == []


@pytest.mark.asyncio
async def test_update_location_code(
    session_factory: async_sessionmaker[AsyncSession],
) -> None:
    repository = LocationRepository(session_factory=session_factory)
    await repository.add(name="Natal", location_code=1)

    assert await repository.update_location_code(name="Natal", location_code=1001662)
    assert not await repository.update_location_code(name="Wakanda", location_code=5)

    models = await repository.list_models()
    assert [(m.name, m.dataforseo_id) for m in models] == [("Natal", 1001662)]
