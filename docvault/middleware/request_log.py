import time
import uuid

import structlog
from fastapi import Request

logger = structlog.get_logger()

# Bodies are never logged: auth payloads carry plaintext passwords.
async def request_log_middleware(request: Request, call_next):
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        request_id=request.headers.get("X-Request-ID") or uuid.uuid4().hex,
        method=request.method,
        path=request.url.path,
    )

    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        logger.error("request_failed", duration_ms=round((time.perf_counter() - start) * 1000, 2))
        raise

    logger.info(
        "request_completed",
        status_code=response.status_code,
        duration_ms=round((time.perf_counter() - start) * 1000, 2),
    )
    return response
