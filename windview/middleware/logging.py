"""JSON event logging for the pipeline and the HTTP surface.

Every event is a single JSON object on one line, for example
``{"level": "error", "event": "weather_pipeline_failed", "stage": "fetch"}``.
"""

import json
import logging
import time
import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from windview.config import SERVICE_NAME


def _service_logger() -> logging.Logger:
    log = logging.getLogger(SERVICE_NAME)
    if not log.hasHandlers():
        stream = logging.StreamHandler()
        stream.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
        log.addHandler(stream)
    log.setLevel(logging.INFO)
    return log


LOG = _service_logger()


def _emit(level: int, event: str, fields: dict) -> None:
    record = {"level": logging.getLevelName(level).lower(), "event": event, **fields}
    LOG.log(level, json.dumps(record, default=str))


def log_info(event: str, **kwargs: object) -> None:
    _emit(logging.INFO, event, kwargs)


def log_warning(event: str, **kwargs: object) -> None:
    _emit(logging.WARNING, event, kwargs)


def log_error(event: str, **kwargs: object) -> None:
    _emit(logging.ERROR, event, kwargs)


class RequestLogMiddleware(BaseHTTPMiddleware):
    """One ``http_request`` event per request.

    Server errors (such as a failed refresh answering 502) are logged as
    warnings.  The ``x-request-id`` header is reused when the client sends
    one and always echoed back.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
        started = time.perf_counter()
        response = await call_next(request)

        log = log_warning if response.status_code >= 500 else log_info
        log(
            "http_request",
            request_id=request_id,
            route=f"{request.method} {request.url.path}",
            status=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 1),
        )
        response.headers["x-request-id"] = request_id
        return response
