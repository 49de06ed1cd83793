import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from consent_portal.core.logging import setup_logging
from consent_portal.core.settings import settings
from consent_portal.integrations.core.client import ApiClient

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging(settings.log_level)
    logger.info(
        "Application startup initiated (approvals_uri=%s)", settings.approvals_uri
    )
    async with ApiClient(timeout=settings.store_timeout_seconds) as api_client:
        app.state.api_client = api_client
        yield
        logger.info("Application shutdown initiated")
