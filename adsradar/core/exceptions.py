"""Custom exception classes for the application."""

from typing import Any


class AdsRadarError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


# Catalog / resolution errors
class CatalogUnavailableError(AdsRadarError):
    """City catalog could not be read or is empty."""

    def __init__(self, message: str = "Erro ao buscar cidades disponíveis.") -> None:
        super().__init__(message)


class CityNotFoundError(AdsRadarError):
    """Free-text city did not resolve to a catalog entry with enough confidence."""

    def __init__(
        self,
        city: str,
        suggestions: list[str],
        fallback: list[str] | None = None,
    ) -> None:
        self.city = city
        self.suggestions = list(suggestions)
        hint = ", ".join(self.suggestions or fallback or [])
        message = f'Cidade "{city}" não encontrada.'
        if hint:
            message = f"{message} Tente: {hint}"
        super().__init__(message, {"suggestions": self.suggestions})


class InsufficientDataError(AdsRadarError):
    """Provider returned no usable keyword rows."""

    def __init__(self, keyword: str, location_code: int) -> None:
        self.keyword = keyword
        self.location_code = location_code
        super().__init__(
            f'Sem dados de busca para "{keyword}" nesta cidade.',
            {"keyword": keyword, "location_code": location_code},
        )


# External API errors
class ProviderError(AdsRadarError):
    """Error calling the external keyword-data provider."""

    def __init__(
        self,
        api_name: str,
        message: str,
        provider_status: int | str | None = None,
    ) -> None:
        self.api_name = api_name
        self.provider_status = provider_status
        super().__init__(
            f"{api_name} API error: {message}",
            {"provider_status": provider_status},
        )


class RateLimitExceededError(ProviderError):
    """Rate limit exceeded for external API."""

    def __init__(self, api_name: str) -> None:
        super().__init__(api_name, "Rate limit exceeded", provider_status=429)


class APIKeyMissingError(ProviderError):
    """API credentials not configured."""

    def __init__(self, api_name: str) -> None:
        super().__init__(api_name, "API key not configured")
