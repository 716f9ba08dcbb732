"""FastAPI application exposing the voice note parser."""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from crm_voice_parser.logging import configure_logging

from .config import get_settings
from .routes.health import router as health_router
from .routes.voice_parse import router as voice_parse_router

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging at startup."""
    settings = get_settings()
    configure_logging(json_output=settings.LOG_JSON, log_level=settings.LOG_LEVEL)

    logger.info("lifespan.startup", log_json=settings.LOG_JSON)
    yield
    logger.info("lifespan.shutdown")


app = FastAPI(
    title="crm-voice-parser",
    description="Parses transcribed sales voice notes into structured CRM records",
    lifespan=lifespan,
)

app.include_router(health_router)
app.include_router(voice_parse_router)
