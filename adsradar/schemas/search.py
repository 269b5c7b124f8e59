"""Search request/response schemas."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from adsradar.services.search.types import OpportunityReport, ParseResult


class SearchRequest(BaseModel):
    """Niche and city typed into the separate-field search form."""

    niche: str = Field(min_length=1, max_length=200)
    city: str = Field(min_length=1, max_length=200)


class ParseRequest(BaseModel):
    """Single search box query."""

    query: str = Field(max_length=400)


class CityResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    external_location_id: int


class KeywordMetricResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    keyword: str
    search_volume: int
    cpc: float
    competition_level: Literal["Low", "Medium", "High"]


class ResolvedQueryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    original_niche_input: str
    resolved_niche: str
    original_city_input: str
    resolved_city: CityResponse | None
    match_confidence: float


class OpportunityReportResponse(BaseModel):
    """Graded opportunity with the top keywords for display."""

    model_config = ConfigDict(from_attributes=True)

    primary_keyword_volume: int
    total_volume: int
    keyword_count: int
    annual_volume: int
    grade: Literal["A", "B", "C", "D"]
    keywords: list[KeywordMetricResponse]
    query: ResolvedQueryResponse | None = None

    @classmethod
    def from_report(cls, report: OpportunityReport) -> "OpportunityReportResponse":
        return cls.model_validate(report)


class ParseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    success: bool
    niche: str | None = None
    city: str | None = None
    error: str | None = None
    suggestion: str | None = None

    @classmethod
    def from_result(cls, result: ParseResult) -> "ParseResponse":
        return cls.model_validate(result)


class CityNotFoundResponse(BaseModel):
    message: str
    suggestions: list[str]


class ProviderErrorResponse(BaseModel):
    message: str
    provider_status: int | str | None = None
