"""Marketing AI readiness service entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from marketing_ai_readiness import __version__
from marketing_ai_readiness.api.router import get_engine_config, get_settings, router
from marketing_ai_readiness.core.errors import ConfigurationError
from marketing_ai_readiness.observability import configure_logging, get_logger

logger = get_logger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application startup and shutdown lifecycle.

    Configures logging and validates the engine configuration up front so
    that a broken catalog is reported at startup rather than on first use.

    Args:
        app: The FastAPI application instance.

    Yields:
        None
    """
    configure_logging(settings.log_level, settings.log_json)
    try:
        get_engine_config()
    except ConfigurationError as exc:
        logger.error("Invalid engine configuration; scoring will be degraded", error=str(exc))
    else:
        logger.info("Engine configuration ready", service=settings.service_name)
    yield


app: FastAPI = FastAPI(
    title="Marketing AI Readiness",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(router, prefix="/api/v1")


@app.get("/health", tags=["Health"])
async def health() -> dict[str, str]:
    """Liveness probe reporting whether the engine configuration is valid."""
    try:
        get_engine_config()
    except ConfigurationError:
        config_status = "invalid"
    else:
        config_status = "ok"
    return {"status": "ok", "service": settings.service_name, "configuration": config_status}
