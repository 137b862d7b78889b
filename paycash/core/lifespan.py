import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from paycash.core.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger.info("🚀 PayCash gateway starting...")
    logger.info(f"PayDunya API: {settings.paydunya_base_url} (timeout {settings.paydunya_timeout}s)")
    logger.info(f"Public base URL: {settings.base_url}")
    if not settings.has_credentials:
        logger.warning("⚠️ PayDunya credentials are not fully configured; upstream calls will be rejected")

    app.state.http_client = httpx.AsyncClient(timeout=settings.paydunya_timeout)
    logger.info("✅ HTTP client ready")

    yield

    logger.info("🛑 PayCash gateway shutting down...")
    await app.state.http_client.aclose()
    logger.info("✅ HTTP client closed")
