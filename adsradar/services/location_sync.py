"""Refresh catalog cities' DataForSEO location codes."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from adsradar.integrations.dataforseo import DataForSEOClient
from adsradar.repositories.location_repository import LocationRepository
from adsradar.services.search.catalogs import MANUAL_CITY_LOCATION_CODES
from adsradar.services.search.similarity import normalize_text

logger = logging.getLogger(__name__)

SOURCE_MANUAL = "manual_mapping"
SOURCE_API = "api_exact_match"


@dataclass(slots=True)
class LocationUpdate:
    city: str
    old_code: int | None
    new_code: int
    source: str


@dataclass(slots=True)
class LocationSyncResult:
    """Summary of one sync run."""

    provider_city_count: int
    catalog_city_count: int
    updates: list[LocationUpdate] = field(default_factory=list)
    already_correct: list[str] = field(default_factory=list)
    not_found: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    added: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_provider_cities": self.provider_city_count,
            "existing_cities_in_db": self.catalog_city_count,
            "updates_made": len(self.updates),
            "already_correct": len(self.already_correct),
            "updates": [
                {
                    "city": update.city,
                    "old_code": update.old_code,
                    "new_code": update.new_code,
                    "source": update.source,
                }
                for update in self.updates
            ],
            "not_found": self.not_found,
            "failed": self.failed,
            "added": self.added,
        }


def city_name_from_location(location_name: str) -> str:
    """'Recife,State of Pernambuco,Brazil' -> 'Recife'."""
    return location_name.split(",")[0].strip()


def provider_cities(locations: list[dict[str, Any]]) -> list[dict[str, Any]]:
    return [location for location in locations if location.get("location_type") == "City"]


def build_provider_city_index(locations: list[dict[str, Any]]) -> dict[str, dict[str, Any]]:
    """Index provider cities by normalized name.

    Duplicate names keep the entry with the shortest full `location_name`.
    """
    index: dict[str, dict[str, Any]] = {}
    for location in provider_cities(locations):
        full_name = str(location.get("location_name") or "")
        city_name = city_name_from_location(full_name)
        if not city_name or not isinstance(location.get("location_code"), int):
            continue

        key = normalize_text(city_name)
        current = index.get(key)
        if current is None or len(full_name) < len(str(current.get("location_name") or "")):
            index[key] = location
    return index


class LocationSyncService:
    """Match catalog cities to provider location codes and fix stale ones.

    The manual capital mapping wins; otherwise an exact accent-insensitive
    name match against the provider's city list is used.
    """

    def __init__(
        self,
        *,
        repository: LocationRepository | None = None,
        client_factory: Callable[[], Any] = DataForSEOClient,
        manual_codes: Mapping[str, int] = MANUAL_CITY_LOCATION_CODES,
        country: str = "br",
    ) -> None:
        self.repository = repository or LocationRepository()
        self.client_factory = client_factory
        self.manual_codes = manual_codes
        self.country = country

    async def seed_manual_cities(self) -> list[str]:
        """Insert manual-mapping cities missing from the catalog."""
        existing = {city.name for city in await self.repository.list_all()}
        added: list[str] = []
        for name, code in self.manual_codes.items():
            if name in existing:
                continue
            await self.repository.add(name=name, location_code=code)
            added.append(name)
        return added

    async def sync(self, *, dry_run: bool = False, seed: bool = False) -> LocationSyncResult:
        added = await self.seed_manual_cities() if seed and not dry_run else []

        async with self.client_factory() as client:
            locations = await client.get_locations(self.country)

        cities = provider_cities(locations)
        provider_index = build_provider_city_index(cities)
        catalog = await self.repository.list_all()
        logger.info(
            "Location sync starting",
            extra={
                "provider_locations": len(locations),
                "provider_cities": len(cities),
                "catalog_cities": len(catalog),
            },
        )

        result = LocationSyncResult(
            provider_city_count=len(cities),
            catalog_city_count=len(catalog),
            added=added,
        )

        for city in catalog:
            code = self.manual_codes.get(city.name)
            source = SOURCE_MANUAL
            if code is None:
                match = provider_index.get(normalize_text(city.name))
                if match is not None:
                    code = match["location_code"]
                    source = SOURCE_API

            if code is None:
                logger.warning("No location code found", extra={"city": city.name})
                result.not_found.append(city.name)
                continue

            if code == city.external_location_id:
                result.already_correct.append(city.name)
                continue

            logger.info(
                "Updating location code",
                extra={
                    "city": city.name,
                    "old_code": city.external_location_id,
                    "new_code": code,
                    "source": source,
                },
            )
            if not dry_run:
                updated = await self.repository.update_location_code(
                    name=city.name, location_code=code
                )
                if not updated:
                    logger.warning("Location code update failed", extra={"city": city.name})
                    result.failed.append(city.name)
                    continue
            result.updates.append(
                LocationUpdate(
                    city=city.name,
                    old_code=city.external_location_id,
                    new_code=code,
                    source=source,
                )
            )

        logger.info(
            "Location sync finished",
            extra={
                "updates": len(result.updates),
                "already_correct": len(result.already_correct),
                "not_found": len(result.not_found),
                "failed": len(result.failed),
                "dry_run": dry_run,
            },
        )
        return result
