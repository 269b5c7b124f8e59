"""Unit tests for the search API routes."""

from __future__ import annotations

from typing import Any

from fastapi.testclient import TestClient

from adsradar.api.v1.search.routes import get_query_orchestrator
from adsradar.core.exceptions import (
    CatalogUnavailableError,
    CityNotFoundError,
    InsufficientDataError,
    ProviderError,
)
from adsradar.main import create_app
from adsradar.services.search.types import (
    CityRecord,
    KeywordMetric,
    OpportunityReport,
    ResolvedQuery,
)


class _FakeOrchestrator:
    def __init__(self, *, report: OpportunityReport | None = None, error: Exception | None = None) -> None:
        self.report = report
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def execute(self, niche: str, city: str) -> OpportunityReport:
        self.calls.append((niche, city))
        if self.error is not None:
            raise self.error
        assert self.report is not None
        return self.report


def _client(orchestrator: _FakeOrchestrator) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_query_orchestrator] = lambda: orchestrator
    return TestClient(app)


def _report() -> OpportunityReport:
    return OpportunityReport(
        primary_keyword_volume=12100,
        total_volume=20000,
        keyword_count=3,
        annual_volume=145200,
        grade="A",
        keywords=[
            KeywordMetric("pizzaria", 12100, 4.5, "Medium"),
            KeywordMetric("pizzaria delivery", 7000, 3.0, "High"),
        ],
        query=ResolvedQuery(
            original_niche_input="pizaria",
            resolved_niche="pizzaria",
            original_city_input="sao paulo",
            resolved_city=CityRecord("São Paulo", 1001773),
            match_confidence=1.0,
        ),
    )


def test_search_returns_report() -> None:
    orchestrator = _FakeOrchestrator(report=_report())

    response = _client(orchestrator).post(
        "/api/v1/search", json={"niche": " pizaria ", "city": "sao paulo"}
    )

    assert response.status_code == 200
    payload = response.json()
    assert orchestrator.calls == [("pizaria", "sao paulo")]
    assert payload["grade"] == "A"
    assert payload["total_volume"] == 20000
    assert payload["keywords"][0] == {
        "keyword": "pizzaria",
        "search_volume": 12100,
        "cpc": 4.5,
        "competition_level": "Medium",
    }
    assert payload["query"]["resolved_city"] == {"name": "São Paulo", "external_location_id": 1001773}


def test_search_city_not_found_returns_suggestions() -> None:
    error = CityNotFoundError("Sao", ["São Paulo", "São Luís"])

    response = _client(_FakeOrchestrator(error=error)).post(
        "/api/v1/search", json={"niche": "dentista", "city": "Sao"}
    )

    assert response.status_code == 404
    detail: dict[str, Any] = response.json()["detail"]
    assert detail["suggestions"] == ["São Paulo", "São Luís"]
    assert "Sao" in detail["message"]


def test_search_error_status_mapping() -> None:
    cases = [
        (CatalogUnavailableError(), 503),
        (InsufficientDataError("nicho raro", 1001662), 422),
        (ProviderError("DataForSEO", "quota", provider_status=40202), 502),
    ]
    for error, expected_status in cases:
        response = _client(_FakeOrchestrator(error=error)).post(
            "/api/v1/search", json={"niche": "dentista", "city": "Natal"}
        )
        assert response.status_code == expected_status

    response = _client(_FakeOrchestrator(error=cases[2][0])).post(
        "/api/v1/search", json={"niche": "dentista", "city": "Natal"}
    )
    assert response.json()["detail"]["provider_status"] == 40202


def test_search_rejects_empty_fields() -> None:
    response = _client(_FakeOrchestrator(report=_report())).post(
        "/api/v1/search", json={"niche": "", "city": "Natal"}
    )

    assert response.status_code == 422


def test_parse_endpoint() -> None:
    client = _client(_FakeOrchestrator(report=_report()))

    ok = client.post("/api/v1/search/parse", json={"query": "farmácia em Natal"})
    assert ok.status_code == 200
    assert ok.json() == {
        "success": True,
        "niche": "farmácia",
        "city": "Natal",
        "error": None,
        "suggestion": None,
    }

    empty = client.post("/api/v1/search/parse", json={"query": "   "})
    assert empty.json()["success"] is False
    assert empty.json()["error"] == "Por favor, digite seu segmento e cidade"


def test_health() -> None:
    response = _client(_FakeOrchestrator()).get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_search_error_bodies_are_documented() -> None:
    schema = create_app().openapi()
    responses = schema["paths"]["/api/v1/search"]["post"]["responses"]

    not_found = responses["404"]["content"]["application/json"]["schema"]
    provider = responses["502"]["content"]["application/json"]["schema"]
    assert not_found["$ref"].endswith("/CityNotFoundResponse")
    assert provider["$ref"].endswith("/ProviderErrorResponse")
    assert set(schema["components"]["schemas"]["CityNotFoundResponse"]["properties"]) == {
        "message",
        "suggestions",
    }
