"""Wire pagenav into a FastAPI host: logging, request ids, error envelopes."""

import time
import uuid

from fastapi import FastAPI, Request

from pagenav.core.config import Settings, get_settings
from pagenav.core.exceptions import register_exception_handlers
from pagenav.core.logging import bind_request_id, configure_logging, get_logger

log = get_logger(__name__)


async def request_id_middleware(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    request.state.request_id = request_id
    bind_request_id(request_id)
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    log.info(
        "request",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        duration_ms=round(duration_ms, 2),
    )
    response.headers["X-Request-ID"] = request_id
    return response


def init_app(app: FastAPI, settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)
    app.middleware("http")(request_id_middleware)
    register_exception_handlers(app)
    return app
