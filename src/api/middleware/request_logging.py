import logging
import time
import uuid
from typing import Iterable, Tuple

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("src.api.request")

IGNORED_PATH_PREFIXES: Tuple[str, ...] = ("/health", "/docs", "/redoc", "/openapi.json")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    One log line per request with status, duration and request id.

    The request id is taken from an incoming X-Request-ID header when the
    caller sends one and is echoed back on every response.
    """

    def __init__(self, app, ignored_prefixes: Iterable[str] = IGNORED_PATH_PREFIXES):
        super().__init__(app)
        self.ignored_prefixes = tuple(ignored_prefixes)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
        request.state.request_id = request_id
        path = request.url.path
        skip = request.method == "OPTIONS" or path.startswith(self.ignored_prefixes)

        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            if not skip:
                logger.exception(
                    "%s %s crashed after %dms request_id=%s",
                    request.method,
                    path,
                    (time.perf_counter() - start) * 1000,
                    request_id,
                )
            raise

        response.headers["X-Request-ID"] = request_id
        if skip:
            return response

        if response.status_code >= 500:
            level = logging.ERROR
        elif response.status_code >= 400:
            level = logging.WARNING
        else:
            level = logging.INFO

        logger.log(
            level,
            "%s %s -> %s in %dms request_id=%s",
            request.method,
            path,
            response.status_code,
            (time.perf_counter() - start) * 1000,
            request_id,
        )
        return response
