"""Domain types for niche/city resolution and keyword opportunity reports."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

CompetitionLevel = Literal["Low", "Medium", "High"]
OpportunityGrade = Literal["A", "B", "C", "D"]


@dataclass(frozen=True, slots=True)
class CityRecord:
    """Catalog city with its provider location code."""

    name: str
    external_location_id: int


@dataclass(slots=True)
class NicheMatch:
    """Outcome of resolving a free-text niche."""

    input: str
    niche: str
    score: float

    @property
    def corrected(self) -> bool:
        return self.niche != self.input


@dataclass(slots=True)
class CityMatch:
    """Outcome of resolving a free-text city against the catalog."""

    city: CityRecord | None
    score: float
    suggestions: list[str] = field(default_factory=list)


@dataclass(slots=True)
class KeywordMetric:
    """One keyword row normalized from the provider response."""

    keyword: str
    search_volume: int
    cpc: float
    competition_level: CompetitionLevel


@dataclass(slots=True)
class ResolvedQuery:
    """Niche and city after fuzzy resolution."""

    original_niche_input: str
    resolved_niche: str
    original_city_input: str
    resolved_city: CityRecord | None
    match_confidence: float


@dataclass(slots=True)
class OpportunityReport:
    """Graded keyword opportunity for a niche in a city."""

    primary_keyword_volume: int
    total_volume: int
    keyword_count: int
    annual_volume: int
    grade: OpportunityGrade
    keywords: list[KeywordMetric] = field(default_factory=list)
    query: ResolvedQuery | None = None


@dataclass(slots=True)
class ParseResult:
    """Outcome of splitting a single search box query into niche and city."""

    success: bool
    niche: str | None = None
    city: str | None = None
    error: str | None = None
    suggestion: str | None = None
