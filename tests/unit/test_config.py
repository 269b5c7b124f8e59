"""Unit tests for settings parsing."""

from adsradar.config import Settings


def test_database_url_is_normalized_to_async_drivers() -> None:
    assert Settings(database_url="postgres://u:p@db/adsradar").database_url == (
        "postgresql+asyncpg://u:p@db/adsradar"
    )
    assert Settings(database_url="sqlite:///./catalog.db").database_url == (
        "sqlite+aiosqlite:///./catalog.db"
    )
    assert Settings(database_url="sqlite+aiosqlite:///x.db").database_url == "sqlite+aiosqlite:///x.db"


def test_cors_origins_accept_json_and_comma_lists() -> None:
    assert Settings(cors_origins='["https://a.example", "https://b.example"]').cors_origins == [
        "https://a.example",
        "https://b.example",
    ]
    assert Settings(cors_origins="https://a.example, https://b.example").cors_origins == [
        "https://a.example",
        "https://b.example",
    ]


def test_dataforseo_configured_requires_both_credentials() -> None:
    assert not Settings(dataforseo_login="user", dataforseo_password=None).dataforseo_configured
    assert Settings(dataforseo_login="user", dataforseo_password="secret").dataforseo_configured
