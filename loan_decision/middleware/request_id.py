"""Request ID Middleware.

Binds a request id (the caller's ``X-Request-ID`` or a generated one) to the
logging context and returns it, with the processing time, on every response.
An exception escaping the app becomes a 500 decision response.
"""

import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from ..core.constants import HttpHeaders
from ..core.logging import get_logger, set_request_id
from ..domain.transformers import unexpected_error_response

logger = get_logger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):

    async def dispatch(self, request: Request, call_next):
        request_id = set_request_id(request.headers.get(HttpHeaders.REQUEST_ID))
        started = time.perf_counter()

        logger.info(
            "Request started",
            extra={'method': request.method, 'path': request.url.path}
        )

        try:
            response = await call_next(request)
        except Exception:
            logger.exception("Unhandled error", extra={'path': request.url.path})
            response = unexpected_error_response()

        elapsed = time.perf_counter() - started
        response.headers[HttpHeaders.REQUEST_ID] = request_id
        response.headers[HttpHeaders.PROCESS_TIME] = f"{elapsed:.6f}"

        logger.info(
            "Request completed",
            extra={'status_code': response.status_code, 'process_time': elapsed}
        )

        return response
