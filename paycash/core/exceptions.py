"""
Gateway errors and their FastAPI handlers.

- GatewayError: client input problem, answered with 400 and a message.
- UpstreamError: PayDunya call failed (network, timeout, non-2xx, error code),
  answered with 500 carrying the upstream payload when there is one.
- InvalidWebhookError: malformed IPN body, answered with a plain-text code.
"""

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class GatewayError(Exception):
    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class UpstreamError(Exception):
    """PayDunya call failure. `payload` is the upstream body when one was received."""

    def __init__(self, message: str, status_code: Optional[int] = None, payload: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload

    @property
    def detail(self) -> Any:
        return self.payload if self.payload not in (None, "") else self.message


class InvalidWebhookError(Exception):
    def __init__(self, code: str):
        super().__init__(code)
        self.code = code


async def gateway_error_handler(request: Request, exc: GatewayError):
    logger.info(f"Rejected {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"status": "error", "message": exc.message},
    )


async def upstream_error_handler(request: Request, exc: UpstreamError):
    logger.error(
        "Upstream failure on %s %s: %s (upstream status=%s) %s",
        request.method,
        request.url.path,
        exc.message,
        exc.status_code,
        exc.payload,
    )
    return JSONResponse(
        status_code=500,
        content={"status": "error", "message": exc.message, "detail": exc.detail},
    )


async def invalid_webhook_handler(request: Request, exc: InvalidWebhookError):
    logger.warning(f"Malformed IPN payload: {exc.code}")
    return PlainTextResponse(exc.code, status_code=400)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        problems.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return JSONResponse(
        status_code=400,
        content={"status": "error", "message": "Invalid request: " + "; ".join(problems)},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        message = f"'{request.url.path}' not found"
    else:
        message = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"status": "error", "message": message},
        headers=getattr(exc, "headers", None),
    )


async def any_exception_handler(request: Request, exc: Exception):
    """Catch-all so unexpected failures still answer with the error envelope."""
    logger.exception("Unhandled exception: %s", exc)
    return JSONResponse(
        status_code=500,
        content={"status": "error", "message": "Internal Server Error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(GatewayError, gateway_error_handler)
    app.add_exception_handler(UpstreamError, upstream_error_handler)
    app.add_exception_handler(InvalidWebhookError, invalid_webhook_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, any_exception_handler)
