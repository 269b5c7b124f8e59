"""DataForSEO API integration for Google Ads keyword volumes and locations."""

import base64
import logging
from typing import Any

import httpx

from adsradar.config import settings
from adsradar.core.exceptions import APIKeyMissingError, ProviderError, RateLimitExceededError

logger = logging.getLogger(__name__)

API_NAME = "DataForSEO"
STATUS_OK = 20000


class DataForSEOClient:
    """Client for the DataForSEO v3 API.

    Provides methods for:
    - Keyword expansion (keywords for a seed keyword, seed included)
    - Precise search volume for one keyword
    - Google Ads location catalog for a country
    """

    BASE_URL = "https://api.dataforseo.com/v3"

    def __init__(
        self,
        login: str | None = None,
        password: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self.login = login or settings.dataforseo_login
        self.password = password or settings.dataforseo_password
        self.timeout = timeout or settings.dataforseo_timeout_seconds
        self._client: httpx.AsyncClient | None = None

        if not self.login or not self.password:
            raise APIKeyMissingError(API_NAME)

    @property
    def _auth_header(self) -> str:
        """Generate Basic Auth header."""
        credentials = f"{self.login}:{self.password}"
        encoded = base64.b64encode(credentials.encode()).decode()
        return f"Basic {encoded}"

    async def __aenter__(self) -> "DataForSEOClient":
        self._client = httpx.AsyncClient(
            timeout=self.timeout,
            headers={
                "Authorization": self._auth_header,
                "Content-Type": "application/json",
            },
        )
        return self

    async def __aexit__(self, *args: Any) -> None:
        if self._client:
            await self._client.aclose()

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError("Client must be used as async context manager")
        return self._client

    async def _make_request(
        self,
        endpoint: str,
        data: list[dict[str, Any]] | None = None,
    ) -> list[Any]:
        """Call an endpoint (POST with payload, GET without) and flatten task results.

        A task that succeeded without data contributes nothing; a response
        without a `tasks` container is treated as a provider failure.
        """
        logger.info("DataForSEO API request", extra={"endpoint": endpoint})
        url = f"{self.BASE_URL}/{endpoint}"

        try:
            if data is None:
                response = await self.client.get(url)
            else:
                response = await self.client.post(url, json=data)

            if response.status_code == 429:
                logger.warning("DataForSEO rate limit hit", extra={"endpoint": endpoint})
                raise RateLimitExceededError(API_NAME)

            response.raise_for_status()
            result = response.json()
        except httpx.HTTPStatusError as e:
            logger.warning("DataForSEO HTTP error", extra={"endpoint": endpoint, "error": str(e)})
            raise ProviderError(API_NAME, str(e), provider_status=e.response.status_code) from e
        except httpx.HTTPError as e:
            logger.warning("DataForSEO HTTP error", extra={"endpoint": endpoint, "error": str(e)})
            raise ProviderError(API_NAME, str(e)) from e
        except ValueError as e:
            raise ProviderError(API_NAME, "Response is not valid JSON") from e

        if not isinstance(result, dict):
            raise ProviderError(API_NAME, "Unexpected response shape")

        status_code = result.get("status_code")
        if status_code != STATUS_OK:
            logger.warning(
                "DataForSEO API error",
                extra={"endpoint": endpoint, "status": result.get("status_message")},
            )
            raise ProviderError(
                API_NAME,
                result.get("status_message") or "Unknown error",
                provider_status=status_code,
            )

        tasks = result.get("tasks")
        if not isinstance(tasks, list):
            raise ProviderError(API_NAME, "Response has no tasks", provider_status=status_code)

        results: list[Any] = []
        for task in tasks:
            if not isinstance(task, dict):
                continue
            task_status = task.get("status_code")
            if task_status != STATUS_OK:
                logger.warning(
                    "DataForSEO task error",
                    extra={"endpoint": endpoint, "status": task.get("status_message")},
                )
                raise ProviderError(
                    API_NAME,
                    task.get("status_message") or "Task failed",
                    provider_status=task_status,
                )
            task_result = task.get("result")
            if isinstance(task_result, list):
                results.extend(task_result)

        return results

    async def get_keywords_for_keyword(
        self,
        seed: str,
        location_code: int,
        language_code: str | None = None,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        """Get related keyword phrases for a seed keyword, the seed included.

        Args:
            seed: Seed keyword (the resolved niche)
            location_code: DataForSEO location code of the city
            language_code: Language code (pt, en, ...)
            limit: Maximum keywords requested from the provider

        Returns:
            Raw keyword rows (keyword, search_volume, cpc, competition,
            competition_index, top-of-page bids, monthly_searches)
        """
        data = [
            {
                "keywords": [seed],
                "location_code": location_code,
                "language_code": language_code or settings.dataforseo_language_code,
                "include_seed_keyword": True,
                "sort_by": "search_volume",
                "limit": limit or settings.keyword_suggestion_limit,
            }
        ]
        logger.info("Fetching related keywords", extra={"seed": seed, "location": location_code})

        results = await self._make_request(
            "keywords_data/google_ads/keywords_for_keywords/live",
            data,
        )
        return [row for row in results if isinstance(row, dict)]

    async def get_search_volume(
        self,
        keyword: str,
        location_code: int,
        language_code: str | None = None,
    ) -> dict[str, Any] | None:
        """Get the precise volume row (with monthly series) for one keyword.

        Returns None when the provider has no data for the keyword.
        """
        data = [
            {
                "keywords": [keyword],
                "location_code": location_code,
                "language_code": language_code or settings.dataforseo_language_code,
            }
        ]
        logger.info("Fetching search volume", extra={"keyword": keyword, "location": location_code})

        results = await self._make_request(
            "keywords_data/google_ads/search_volume/live",
            data,
        )
        wanted = keyword.strip().lower()
        rows = [row for row in results if isinstance(row, dict)]
        for row in rows:
            if str(row.get("keyword") or "").strip().lower() == wanted:
                return row
        return rows[0] if rows else None

    async def get_locations(self, country: str = "br") -> list[dict[str, Any]]:
        """Get the Google Ads location catalog for a country (free endpoint)."""
        logger.info("Fetching locations", extra={"country": country})
        results = await self._make_request(f"keywords_data/google_ads/locations/{country}")
        return [row for row in results if isinstance(row, dict)]
