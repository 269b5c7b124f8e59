"""Niche/city search: resolve input, query DataForSEO, grade the opportunity."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Protocol

from sqlalchemy.exc import SQLAlchemyError

from adsradar.config import settings
from adsradar.core.exceptions import (
    CatalogUnavailableError,
    CityNotFoundError,
    InsufficientDataError,
)
from adsradar.integrations.dataforseo import DataForSEOClient
from adsradar.repositories.location_repository import LocationRepository
from adsradar.services.search.grader import OpportunityGrader
from adsradar.services.search.keyword_metrics import normalize_keyword_rows, search_volume
from adsradar.services.search.location_resolver import LocationResolver
from adsradar.services.search.niche_resolver import NicheResolver
from adsradar.services.search.types import CityRecord, OpportunityReport, ResolvedQuery

logger = logging.getLogger(__name__)

FALLBACK_SUGGESTION_COUNT = 5


class CityCatalog(Protocol):
    async def list_all(self) -> list[CityRecord]: ...


class QueryOrchestrator:
    """Run one keyword-opportunity search end to end.

    Every call reads the catalog and hits the provider: there is no cache,
    retry or deduplication of identical searches.
    """

    def __init__(
        self,
        *,
        catalog: CityCatalog | None = None,
        client_factory: Callable[[], Any] = DataForSEOClient,
        niche_resolver: NicheResolver | None = None,
        location_resolver: LocationResolver | None = None,
        grader: OpportunityGrader | None = None,
        language_code: str | None = None,
        keyword_limit: int | None = None,
        usd_to_brl_rate: float | None = None,
    ) -> None:
        self.catalog = catalog or LocationRepository()
        self.client_factory = client_factory
        self.niche_resolver = niche_resolver or NicheResolver()
        self.location_resolver = location_resolver or LocationResolver()
        self.grader = grader or OpportunityGrader(display_limit=settings.display_keyword_limit)
        self.language_code = language_code or settings.dataforseo_language_code
        self.keyword_limit = keyword_limit or settings.keyword_suggestion_limit
        self.usd_to_brl_rate = usd_to_brl_rate or settings.usd_to_brl_rate

    async def load_catalog(self) -> list[CityRecord]:
        try:
            cities = await self.catalog.list_all()
        except SQLAlchemyError as e:
            logger.error("Error fetching cities", extra={"error": repr(e)})
            raise CatalogUnavailableError() from e

        if not cities:
            logger.error("City catalog is empty")
            raise CatalogUnavailableError()
        return cities

    async def resolve(self, niche_input: str, city_input: str) -> ResolvedQuery:
        """Resolve niche and city, raising `CityNotFoundError` with suggestions."""
        query, _ = await self._resolve(niche_input, city_input)
        return query

    async def _resolve(
        self, niche_input: str, city_input: str
    ) -> tuple[ResolvedQuery, CityRecord]:
        niche_match = self.niche_resolver.match(niche_input)
        logger.info(
            "Niche correction",
            extra={
                "original": niche_input,
                "corrected": niche_match.niche,
                "score": round(niche_match.score, 3),
            },
        )

        cities = await self.load_catalog()
        city_match = self.location_resolver.resolve(city_input, cities)
        logger.info(
            "City match result",
            extra={
                "searched": city_input,
                "found": city_match.city.name if city_match.city else None,
                "score": round(city_match.score, 3),
                "suggestions": city_match.suggestions,
            },
        )

        city = city_match.city
        if city is None:
            fallback = [record.name for record in cities[:FALLBACK_SUGGESTION_COUNT]]
            raise CityNotFoundError(city_input, city_match.suggestions, fallback=fallback)

        query = ResolvedQuery(
            original_niche_input=niche_input,
            resolved_niche=niche_match.niche,
            original_city_input=city_input,
            resolved_city=city,
            match_confidence=city_match.score,
        )
        return query, city

    async def execute(self, niche_input: str, city_input: str) -> OpportunityReport:
        query, city = await self._resolve(niche_input, city_input)
        seed = query.resolved_niche
        location_code = city.external_location_id

        async with self.client_factory() as client:
            related_rows = await client.get_keywords_for_keyword(
                seed,
                location_code=location_code,
                language_code=self.language_code,
                limit=self.keyword_limit,
            )
            primary_row = await client.get_search_volume(
                seed,
                location_code=location_code,
                language_code=self.language_code,
            )

        primary_volume = search_volume(primary_row) if primary_row else 0
        monthly = primary_row.get("monthly_searches") if primary_row else None
        keywords = normalize_keyword_rows(related_rows, rate=self.usd_to_brl_rate)

        if not keywords and primary_volume == 0:
            logger.info(
                "No keyword data for query",
                extra={"keyword": seed, "location": location_code},
            )
            raise InsufficientDataError(seed, location_code)

        report = self.grader.build_report(
            primary_volume=primary_volume,
            keywords=keywords,
            monthly_searches=monthly if isinstance(monthly, list) else None,
            query=query,
        )
        logger.info(
            "Opportunity report built",
            extra={
                "keyword": seed,
                "city": city.name,
                "grade": report.grade,
                "primary_volume": report.primary_keyword_volume,
                "total_volume": report.total_volume,
                "keyword_count": report.keyword_count,
            },
        )
        return report
