"""Normalize raw provider keyword rows into `KeywordMetric`s."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from typing import Any

from adsradar.services.search.types import CompetitionLevel, KeywordMetric

logger = logging.getLogger(__name__)

HIGH_COMPETITION_INDEX = 67
MEDIUM_COMPETITION_INDEX = 33

_CATEGORICAL_COMPETITION: dict[str, CompetitionLevel] = {
    "HIGH": "High",
    "MEDIUM": "Medium",
    "LOW": "Low",
}


def as_number(value: Any) -> float | None:
    """Coerce a provider number, or None for anything not finite."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def competition_level(row: Mapping[str, Any]) -> CompetitionLevel:
    """Map the provider competition signal to Low/Medium/High.

    `competition_index` (0-100) wins over the categorical `competition`
    tag. A numeric `competition` is read as the same 0-100 index.
    """
    index = as_number(row.get("competition_index"))
    if index is None:
        raw = row.get("competition")
        if isinstance(raw, str):
            tagged = _CATEGORICAL_COMPETITION.get(raw.strip().upper())
            if tagged is not None:
                return tagged
        index = as_number(raw)

    if index is None:
        return "Low"
    if index >= HIGH_COMPETITION_INDEX:
        return "High"
    if index >= MEDIUM_COMPETITION_INDEX:
        return "Medium"
    return "Low"


def convert_cpc(row: Mapping[str, Any], rate: float) -> float:
    """Return the row's CPC in display currency.

    Falls back to the mean of the top-of-page bid range when `cpc` is absent.
    """
    cpc = as_number(row.get("cpc"))
    if cpc is None:
        bids = [
            bid
            for bid in (
                as_number(row.get("low_top_of_page_bid")),
                as_number(row.get("high_top_of_page_bid")),
            )
            if bid is not None
        ]
        cpc = sum(bids) / len(bids) if bids else 0.0
    return round(max(cpc, 0.0) * rate, 2)


def search_volume(row: Mapping[str, Any]) -> int:
    volume = as_number(row.get("search_volume"))
    if volume is None or volume < 0:
        return 0
    return int(volume)


def normalize_keyword_row(row: Mapping[str, Any], *, rate: float) -> KeywordMetric | None:
    """Build a `KeywordMetric`, or None for rows without a keyword."""
    keyword = row.get("keyword")
    if not isinstance(keyword, str) or not keyword.strip():
        return None

    return KeywordMetric(
        keyword=keyword.strip(),
        search_volume=search_volume(row),
        cpc=convert_cpc(row, rate),
        competition_level=competition_level(row),
    )


def normalize_keyword_rows(
    rows: Iterable[Any],
    *,
    rate: float,
) -> list[KeywordMetric]:
    """Normalize rows, drop zero-volume ones and sort by volume (stable)."""
    metrics: list[KeywordMetric] = []
    skipped = 0
    for row in rows:
        if not isinstance(row, Mapping):
            skipped += 1
            continue
        metric = normalize_keyword_row(row, rate=rate)
        if metric is None:
            skipped += 1
            continue
        if metric.search_volume > 0:
            metrics.append(metric)

    if skipped:
        logger.debug("Skipped malformed keyword rows", extra={"skipped": skipped})

    metrics.sort(key=lambda metric: metric.search_volume, reverse=True)
    return metrics
