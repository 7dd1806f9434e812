"""
Pytest configuration and shared fixtures.
"""

from collections.abc import AsyncGenerator, Generator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from src.api.main import create_app
from src.shared.config import AuthSettings

SETTINGS_ENV_VARS = (
    "AUTH_ENABLED",
    "AUTH_EXEMPT_PATHS",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "ENVIRONMENT",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Generator[pytest.MonkeyPatch, None, None]:
    """Remove service settings from the environment."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield monkeypatch


@pytest.fixture
def sample_api_key() -> str:
    """Sample API key for testing."""
    return "sk-test-1234567890"


@pytest.fixture
def auth_settings() -> AuthSettings:
    """Settings with authentication enabled and default exempt paths."""
    return AuthSettings(auth_enabled=True, log_format="console")


@pytest.fixture
def app(auth_settings: AuthSettings) -> FastAPI:
    """Application with authentication enabled."""
    return create_app(auth_settings)


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Async test client without credentials."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
