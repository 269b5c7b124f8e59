"""Fuzzy city resolution against the location catalog."""

from __future__ import annotations

from collections.abc import Sequence

from adsradar.core.exceptions import CatalogUnavailableError
from adsradar.services.search.similarity import similarity
from adsradar.services.search.types import CityMatch, CityRecord

CITY_ACCEPT_THRESHOLD = 0.6
CITY_SUGGEST_THRESHOLD = 0.3
MAX_CITY_SUGGESTIONS = 5


class LocationResolver:
    """Pick the catalog city closest to a free-text city name.

    A match is only auto-accepted at `accept_threshold`; a wrong city would
    silently return another city's keyword data. Suggestions use the lower
    `suggest_threshold` so the user gets hints for near misses.
    """

    def __init__(
        self,
        *,
        accept_threshold: float = CITY_ACCEPT_THRESHOLD,
        suggest_threshold: float = CITY_SUGGEST_THRESHOLD,
        max_suggestions: int = MAX_CITY_SUGGESTIONS,
    ) -> None:
        self.accept_threshold = accept_threshold
        self.suggest_threshold = suggest_threshold
        self.max_suggestions = max_suggestions

    def resolve(self, text: str, catalog: Sequence[CityRecord]) -> CityMatch:
        if not catalog:
            raise CatalogUnavailableError()

        best_city: CityRecord | None = None
        best_score = 0.0
        pool: list[tuple[float, str]] = []

        for record in catalog:
            score = similarity(text, record.name)
            if score > best_score:
                best_score = score
                best_city = record
            if score > self.suggest_threshold:
                pool.append((score, record.name))

        # sorted() is stable: equal scores keep catalog order
        pool = sorted(pool, key=lambda item: item[0], reverse=True)
        suggestions = [name for _, name in pool[: self.max_suggestions]]

        accepted = best_city if best_score >= self.accept_threshold else None
        return CityMatch(city=accepted, score=best_score, suggestions=suggestions)
