from __future__ import annotations

import logging
import time
from typing import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from calculator_web.core.context import get_request_id, reset_request_id, set_request_id

logger = logging.getLogger("calculator_web.request")

REQUEST_ID_HEADER = "X-Request-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        token = set_request_id(request.headers.get(REQUEST_ID_HEADER))
        request_id = get_request_id()

        start_time = time.perf_counter()
        extra = {"path": request.url.path, "method": request.method}
        logger.info("request.start", extra=extra)

        try:
            response = await call_next(request)
        finally:
            duration_ms = (time.perf_counter() - start_time) * 1000
            extra["duration_ms"] = round(duration_ms, 2)
            logger.info("request.end", extra=extra)
            reset_request_id(token)

        response.headers[REQUEST_ID_HEADER] = request_id or ""
        return response
