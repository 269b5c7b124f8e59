"""Search API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from adsradar.api.v1.search.constants import CATALOG_UNAVAILABLE_DETAIL, GENERIC_RETRY_DETAIL
from adsradar.core.exceptions import (
    CatalogUnavailableError,
    CityNotFoundError,
    InsufficientDataError,
    ProviderError,
)
from adsradar.schemas.search import (
    CityNotFoundResponse,
    OpportunityReportResponse,
    ParseRequest,
    ParseResponse,
    ProviderErrorResponse,
    SearchRequest,
)
from adsradar.services.search.orchestrator import QueryOrchestrator
from adsradar.services.search.query_parser import SearchQueryParser

logger = logging.getLogger(__name__)

router = APIRouter()


def get_query_orchestrator() -> QueryOrchestrator:
    return QueryOrchestrator()


def get_search_query_parser() -> SearchQueryParser:
    return SearchQueryParser()


@router.post(
    "",
    response_model=OpportunityReportResponse,
    summary="Search keyword opportunity",
    description=(
        "Correct the niche, match the city against the location catalog, fetch Google Ads "
        "keyword volumes for that city and grade the opportunity."
    ),
    responses={
        404: {"model": CityNotFoundResponse, "description": "City not found; detail carries suggestions"},
        422: {"description": "Provider returned no usable keyword data"},
        502: {"model": ProviderErrorResponse, "description": "Keyword-data provider error"},
        503: {"description": "City catalog unavailable"},
    },
)
async def search_opportunity(
    payload: SearchRequest,
    orchestrator: Annotated[QueryOrchestrator, Depends(get_query_orchestrator)],
) -> OpportunityReportResponse:
    """Run one niche/city search."""
    try:
        report = await orchestrator.execute(payload.niche.strip(), payload.city.strip())
    except CityNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=CityNotFoundResponse(
                message=e.message, suggestions=e.suggestions
            ).model_dump(),
        ) from e
    except CatalogUnavailableError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=CATALOG_UNAVAILABLE_DETAIL,
        ) from e
    except InsufficientDataError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=e.message,
        ) from e
    except ProviderError as e:
        logger.warning(
            "Keyword provider failed",
            extra={"error": e.message, "provider_status": e.provider_status},
        )
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=ProviderErrorResponse(
                message=GENERIC_RETRY_DETAIL, provider_status=e.provider_status
            ).model_dump(),
        ) from e

    return OpportunityReportResponse.from_report(report)


@router.post(
    "/parse",
    response_model=ParseResponse,
    summary="Split a search box query",
    description="Split a single free-text query such as 'farmácia em Recife' into niche and city.",
)
async def parse_query(
    payload: ParseRequest,
    parser: Annotated[SearchQueryParser, Depends(get_search_query_parser)],
) -> ParseResponse:
    """Parse a single search box query."""
    return ParseResponse.from_result(parser.parse(payload.query))
