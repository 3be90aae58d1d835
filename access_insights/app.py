"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from access_insights.api.routers import api_router
from access_insights.config.settings import Settings, get_settings
from access_insights.infrastructure.llm.factory import close_shared_client
from access_insights.infrastructure.logging.logger import setup_logging

settings = get_settings()

setup_logging(
    level=settings.log_level,
    json_output=not settings.debug,
    silence_noisy_loggers=True,
)

logger = logging.getLogger(__name__)


def _validate_startup_config(settings: Settings) -> None:
    """Warn about missing configuration at startup."""
    if not settings.anthropic_api_key:
        logger.warning("No anthropic_api_key configured, generation calls will fail")
    if not settings.db_connection_string:
        logger.warning("db_connection_string is empty, query execution will fail")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup and shutdown lifecycle."""
    logger.info(f"Starting {settings.app_name}")
    _validate_startup_config(settings)
    yield
    logger.info(f"Shutting down {settings.app_name}")
    try:
        await close_shared_client()
        logger.info("Shared Anthropic client closed")
    except Exception as e:
        logger.error("Error closing shared Anthropic client: %s", e, exc_info=True)


app = FastAPI(
    title=settings.app_name,
    description="Natural-language questions over building access events",
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials="*" not in settings.allowed_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api")


def main() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "access_insights.app:app",
        host=settings.host,
        port=settings.port,
        proxy_headers=True,
        forwarded_allow_ips="*",
        log_config=None,
    )
