"""Middleware modules for the application."""

from .prometheus import PrometheusMiddleware
from .request_id import RequestIDMiddleware

__all__ = ["PrometheusMiddleware", "RequestIDMiddleware"]
