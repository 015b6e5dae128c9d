"""Prometheus Middleware.

Records request count, latency and in-flight requests per method and
normalized path.
"""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from ..core.constants import HttpStatusCodes
from ..core.metrics import (
    http_request_duration_seconds,
    http_requests_in_progress,
    http_requests_total,
)
from ..utils import normalize_path


class PrometheusMiddleware(BaseHTTPMiddleware):

    async def dispatch(self, request: Request, call_next):
        labels = {
            'method': request.method,
            'endpoint': normalize_path(request.url.path),
        }
        # Reported when call_next raises
        status_code = HttpStatusCodes.INTERNAL_SERVER_ERROR

        with http_requests_in_progress.labels(**labels).track_inprogress(), \
                http_request_duration_seconds.labels(**labels).time():
            try:
                response = await call_next(request)
                status_code = response.status_code
            finally:
                http_requests_total.labels(**labels, status_code=status_code).inc()

        return response
