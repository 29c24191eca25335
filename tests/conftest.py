"""Shared fixtures for marketing-ai-readiness tests."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from marketing_ai_readiness.core.config import EngineConfig, get_default_config
from marketing_ai_readiness.core.engine import ReadinessEngine
from marketing_ai_readiness.core.services import ReadinessAssessmentService
from marketing_ai_readiness.main import app


@pytest.fixture()
def engine_config() -> EngineConfig:
    """The built-in engine configuration."""
    return get_default_config()


@pytest.fixture()
def engine(engine_config: EngineConfig) -> ReadinessEngine:
    """A ReadinessEngine over the built-in configuration."""
    return ReadinessEngine(engine_config)


@pytest.fixture()
def service(engine_config: EngineConfig) -> ReadinessAssessmentService:
    """A ReadinessAssessmentService over the built-in configuration."""
    return ReadinessAssessmentService(config_provider=lambda: engine_config)


@pytest_asyncio.fixture()
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Async test client for the FastAPI app."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://testserver",
    ) as test_client:
        yield test_client

    app.dependency_overrides.clear()
