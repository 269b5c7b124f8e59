"""Unit tests for provider keyword row normalization."""

import json

from adsradar.services.search.keyword_metrics import (
    competition_level,
    convert_cpc,
    normalize_keyword_row,
    normalize_keyword_rows,
)


def test_competition_index_takes_precedence_over_tag() -> None:
    assert competition_level({"competition": "LOW", "competition_index": 80}) == "High"
    assert competition_level({"competition": "HIGH", "competition_index": 33}) == "Medium"
    assert competition_level({"competition": "HIGH", "competition_index": 32}) == "Low"
    assert competition_level({"competition_index": 67}) == "High"


def test_competition_tag_used_without_index() -> None:
    assert competition_level({"competition": "HIGH"}) == "High"
    assert competition_level({"competition": "medium"}) == "Medium"
    assert competition_level({"competition": None}) == "Low"
    assert competition_level({}) == "Low"


def test_cpc_is_converted_and_rounded() -> None:
    assert convert_cpc({"cpc": 1.234}, 5.0) == 6.17
    assert convert_cpc({"cpc": None, "low_top_of_page_bid": 1.0, "high_top_of_page_bid": 3.0}, 5.0) == 10.0
    assert convert_cpc({}, 5.0) == 0.0


def test_row_without_keyword_is_dropped() -> None:
    assert normalize_keyword_row({"search_volume": 100}, rate=5.0) is None
    assert normalize_keyword_row({"keyword": "  ", "search_volume": 100}, rate=5.0) is None


def test_rows_are_filtered_and_sorted_stably() -> None:
    rows = [
        {"keyword": "farmacia 24h", "search_volume": 40, "cpc": 1.0, "competition": "LOW"},
        {"keyword": "farmacia", "search_volume": 900, "cpc": 2.0, "competition_index": 70},
        {"keyword": "farmacia barata", "search_volume": 0},
        {"keyword": "farmacia delivery", "search_volume": 40},
        {"keyword": "farmacia popular", "search_volume": None},
        "not a row",
    ]

    metrics = normalize_keyword_rows(rows, rate=5.0)

    assert [m.keyword for m in metrics] == ["farmacia", "farmacia 24h", "farmacia delivery"]
    assert metrics[0].cpc == 10.0
    assert metrics[0].competition_level == "High"


def test_non_finite_provider_numbers_are_ignored() -> None:
    rows = json.loads(
        '[{"keyword": "farmacia", "search_volume": NaN, "cpc": Infinity},'
        ' {"keyword": "farmacia 24h", "search_volume": "1e400", "cpc": "nan"},'
        ' {"keyword": "drogaria", "search_volume": 90, "cpc": "nan", "competition_index": NaN}]'
    )

    metrics = normalize_keyword_rows(rows, rate=5.0)

    assert [metric.keyword for metric in metrics] == ["drogaria"]
    assert metrics[0].cpc == 0.0
    assert metrics[0].competition_level == "Low"
    assert convert_cpc({"cpc": "-inf", "low_top_of_page_bid": 1.0}, 5.0) == 5.0
