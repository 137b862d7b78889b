import logging
import time

from fastapi import Request

logger = logging.getLogger("paycash.requests")


async def request_logger(request: Request, call_next):
    """Log each request with its status and elapsed time; 5xx answers are logged as errors."""
    start = time.perf_counter()
    client = request.client.host if request.client else "-"
    logger.debug(f"→ {request.method} {request.url.path} from {client}")

    response = await call_next(request)

    elapsed = time.perf_counter() - start
    level = logging.ERROR if response.status_code >= 500 else logging.INFO
    logger.log(
        level,
        f"← {request.method} {request.url.path} [{response.status_code}] ({elapsed:.3f}s) {client}",
    )

    response.headers["X-Process-Time"] = f"{elapsed:.6f}"
    return response
