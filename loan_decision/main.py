"""Loan Decision Engine - Main Application.

Loan eligibility decisions for Estonian personal identification codes.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.v1.endpoints import metrics as metrics_endpoint
from .api.v1.router import api_router
from .core.config import settings
from .core.constants import ApiEndpoints, ErrorMessages
from .core.logging import get_logger, setup_logging
from .core.metrics import set_app_info
from .domain.transformers import error_response
from .middleware import PrometheusMiddleware, RequestIDMiddleware

# Setup logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    logger.info(
        "Application starting",
        extra={
            'environment': settings.ENVIRONMENT,
            'version': settings.APP_VERSION
        }
    )

    set_app_info(
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT
    )
    logger.debug("Prometheus metrics initialized")

    yield

    logger.info("Application shutting down")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Loan eligibility decisions based on personal code, amount and period",
    lifespan=lifespan,
    docs_url=ApiEndpoints.DOCS,
    redoc_url=ApiEndpoints.REDOC,
    openapi_url=ApiEndpoints.OPENAPI
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Return malformed request bodies as 400 in the decision response shape."""
    logger.warning(
        "Request validation failed",
        extra={
            'path': request.url.path,
            'errors': [error.get('msg') for error in exc.errors()]
        }
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_response(ErrorMessages.INVALID_REQUEST).model_dump(by_alias=True)
    )


# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=[
        "Content-Type",
        "Accept",
        "X-Request-ID",
    ],
)

# Prometheus metrics middleware
app.add_middleware(PrometheusMiddleware)

# Request ID middleware
app.add_middleware(RequestIDMiddleware)


# Include API routes
app.include_router(
    api_router,
    prefix=settings.API_V1_PREFIX
)

# Prometheus metrics endpoint
app.include_router(metrics_endpoint.router, tags=["Metrics"])


@app.get(ApiEndpoints.HEALTH, tags=["Health"])
async def health_check():
    """Health check endpoint for readiness/liveness probes."""
    return {
        "status": "healthy",
        "application": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT
    }


@app.get(ApiEndpoints.ROOT, tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "application": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": ApiEndpoints.DOCS,
        "health": ApiEndpoints.HEALTH,
        "api": settings.API_V1_PREFIX
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "loan_decision.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
