"""Split a single search-box query ("farmácia em Recife") into niche and city.

Recognised formats:
- "farmácia em recife"
- "salao de beleza recife"
- "chaveiro, natal"
- "pet shop - são paulo"

This is a convenience for the single-box entry mode; the city it returns is
still resolved against the location catalog afterwards.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Sequence

from adsradar.services.search.catalogs import CITY_GAZETTEER
from adsradar.services.search.similarity import normalize_text
from adsradar.services.search.types import ParseResult

SEPARATORS: tuple[str, ...] = (" em ", " - ", ", ", " na cidade de ", " na ", " no ")

EMPTY_QUERY_ERROR = "Por favor, digite seu segmento e cidade"
UNRECOGNIZED_QUERY_ERROR = "Não consegui identificar a cidade"
UNRECOGNIZED_QUERY_SUGGESTION = "Tente: farmácia em Recife, salão de beleza São Paulo..."

_TRAILING_CONNECTORS = re.compile(r"[\s,\-]+$")


class SearchQueryParser:
    """Best-effort niche/city splitter backed by a static city gazetteer."""

    def __init__(self, cities: Sequence[str] = CITY_GAZETTEER) -> None:
        self.cities = tuple(cities)
        self._by_normalized = {normalize_text(city.strip()): city for city in self.cities}
        # Longest first so "São José dos Campos" wins over a shorter suffix.
        self._by_length = sorted(self.cities, key=len, reverse=True)

    def validate_city(self, text: str) -> str | None:
        """Return the gazetteer spelling of `text`, ignoring case and accents."""
        return self._by_normalized.get(normalize_text(text.strip()))

    def parse(self, query: str) -> ParseResult:
        trimmed = unicodedata.normalize("NFC", query).strip()
        if not trimmed:
            return ParseResult(success=False, error=EMPTY_QUERY_ERROR)

        separated = self._split_on_separator(trimmed)
        if separated is not None:
            return separated

        suffixed = self._split_on_city_suffix(trimmed)
        if suffixed is not None:
            return suffixed

        return ParseResult(
            success=False,
            error=UNRECOGNIZED_QUERY_ERROR,
            suggestion=UNRECOGNIZED_QUERY_SUGGESTION,
        )

    def _split_on_separator(self, query: str) -> ParseResult | None:
        lowered = query.lower()
        for separator in SEPARATORS:
            index = lowered.find(separator)
            if index <= 0:
                continue

            niche = query[:index].strip()
            city_input = query[index + len(separator) :].strip()
            if not niche or not city_input:
                continue

            city = self.validate_city(city_input)
            if city is not None:
                return ParseResult(success=True, niche=niche, city=city)
            return ParseResult(
                success=False,
                error=f'Cidade "{city_input}" não encontrada',
                suggestion=f"Tente: {niche} em Recife, São Paulo, Salvador...",
            )
        return None

    def _split_on_city_suffix(self, query: str) -> ParseResult | None:
        normalized_query = normalize_text(query)
        for city in self._by_length:
            normalized_city = normalize_text(city)
            if not normalized_query.endswith(normalized_city):
                continue

            # NFC input keeps normalized and original offsets aligned
            niche = query[: len(query) - len(normalized_city)].strip()
            niche = _TRAILING_CONNECTORS.sub("", niche).strip()
            if niche:
                return ParseResult(success=True, niche=niche, city=city)
        return None
