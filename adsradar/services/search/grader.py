"""Opportunity grading and keyword aggregates."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import Any

from adsradar.services.search.types import (
    KeywordMetric,
    OpportunityGrade,
    OpportunityReport,
    ResolvedQuery,
)

# (minimum primary volume, grade), highest first
GRADE_THRESHOLDS: tuple[tuple[int, OpportunityGrade], ...] = (
    (10_000, "A"),
    (3_000, "B"),
    (500, "C"),
)
MONTHS_PER_YEAR = 12


def grade(primary_volume: int) -> OpportunityGrade:
    """Grade a market by the monthly search volume of its primary keyword."""
    for minimum, letter in GRADE_THRESHOLDS:
        if primary_volume >= minimum:
            return letter
    return "D"


def _month_key(entry: Mapping[str, Any]) -> tuple[int, int]:
    try:
        return int(entry.get("year") or 0), int(entry.get("month") or 0)
    except (TypeError, ValueError):
        return 0, 0


def annual_volume(
    primary_volume: int,
    monthly_searches: Sequence[Mapping[str, Any]] | None = None,
) -> int:
    """Estimate yearly searches for the primary keyword.

    Sums the 12 most recent monthly points. With fewer months available the
    monthly mean is extrapolated to a year; without any breakdown the
    average monthly volume is multiplied by 12.
    """
    points = [
        entry
        for entry in (monthly_searches or [])
        if isinstance(entry, Mapping)
        and isinstance(entry.get("search_volume"), int | float)
        and not isinstance(entry.get("search_volume"), bool)
        and math.isfinite(entry["search_volume"])
    ]
    if not points:
        return primary_volume * MONTHS_PER_YEAR

    recent = sorted(points, key=_month_key, reverse=True)[:MONTHS_PER_YEAR]
    volumes = [int(entry["search_volume"]) for entry in recent]
    if len(volumes) == MONTHS_PER_YEAR:
        return sum(volumes)
    return round(sum(volumes) / len(volumes) * MONTHS_PER_YEAR)


class OpportunityGrader:
    """Build an `OpportunityReport` from the full keyword set.

    `keywords` must be the uncapped list; only the report's display list is
    truncated to `display_limit`.
    """

    def __init__(self, *, display_limit: int = 20) -> None:
        self.display_limit = display_limit

    def build_report(
        self,
        *,
        primary_volume: int,
        keywords: Sequence[KeywordMetric],
        monthly_searches: Sequence[Mapping[str, Any]] | None = None,
        query: ResolvedQuery | None = None,
    ) -> OpportunityReport:
        positive = [kw for kw in keywords if kw.search_volume > 0]
        ranked = sorted(positive, key=lambda kw: kw.search_volume, reverse=True)

        return OpportunityReport(
            primary_keyword_volume=primary_volume,
            total_volume=sum(kw.search_volume for kw in ranked),
            keyword_count=len(ranked),
            annual_volume=annual_volume(primary_volume, monthly_searches),
            grade=grade(primary_volume),
            keywords=ranked[: self.display_limit],
            query=query,
        )
