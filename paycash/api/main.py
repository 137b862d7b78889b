"""
PayCash Gateway - FastAPI Application

Thin HTTP gateway in front of the PayDunya API: checkout invoices, invoice
status, IPN re-verification and mobile-money withdrawals. Nothing is stored.

Usage:
    uvicorn paycash.api.main:app --reload --host 0.0.0.0 --port 3000

Docs:
    http://localhost:3000/docs (Swagger UI)
    http://localhost:3000/redoc (ReDoc)
"""

from dotenv import load_dotenv

load_dotenv()  # load .env from current working directory (project root)

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from paycash import __version__
from paycash.core.config import get_settings
from paycash.core.exceptions import register_exception_handlers
from paycash.core.lifespan import lifespan
from paycash.core.logging import setup_logger
from paycash.core.middleware import request_logger

settings = get_settings()
setup_logger(settings.log_level)
logger = logging.getLogger(__name__)


app = FastAPI(
    title="PayCash Gateway",
    description="Pass-through gateway for PayDunya checkout invoices, IPN verification and disbursements.",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS - configurable via .env CORS_ORIGINS (comma-separated, "*" by default)
_allow_all_origins = settings.cors_origins == ["*"]
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=not _allow_all_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.middleware("http")(request_logger)

register_exception_handlers(app)


# Health endpoints
@app.get("/", tags=["Health"])
async def root():
    return {
        "name": "PayCash Gateway",
        "version": __version__,
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health", tags=["Health"])
async def health_check():
    current = get_settings()
    health = {"status": "healthy", "components": {"api": "ok"}}
    if current.has_credentials:
        health["components"]["paydunya"] = "configured"
    else:
        health["status"] = "degraded"
        health["components"]["paydunya"] = "missing credentials"
    return health


# Register routers
from paycash.api.routers import callback, invoices, webhooks, withdrawals

app.include_router(invoices.router, tags=["Invoices"])
app.include_router(webhooks.router, tags=["Webhooks"])
app.include_router(withdrawals.router, tags=["Withdrawals"])
app.include_router(callback.router, tags=["Callback"])

logger.info("Routers registered: invoices, webhooks, withdrawals, callback")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("paycash.api.main:app", host="0.0.0.0", port=settings.port, reload=True)
