"""FastAPI application factory"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from talktotoyota_finance.api.middleware import RequestIDMiddleware, MetricsMiddleware
from talktotoyota_finance.api.v1 import finance, apr_estimate, financing_state
from talktotoyota_finance.infrastructure.observability.logging import setup_logging
from talktotoyota_finance.config import settings

# Setup structured logging
setup_logging(settings.log_level)

SERVICE_MESSAGE = "TalkToToyota Backend API"


def _error_message(exc: RequestValidationError) -> str:
    """Flatten pydantic errors into one line"""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(parts) or "Invalid request"


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="TalkToToyota Finance",
        description="Vehicle financing quotes, APR estimates and loan alternatives",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.cors_origin],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # Errors go out as {"error": message}, the shape the web client reads
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": _error_message(exc)})

    @app.get("/")
    def index():
        prefix = f"{settings.api_prefix}/finance"
        return {
            "message": SERVICE_MESSAGE,
            "status": "running",
            "endpoints": {
                "health": "/health",
                "metrics": "/metrics",
                "finance": {
                    "calculate": f"POST {prefix}/calculate",
                    "aprEstimate": f"GET {prefix}/apr-estimate/:creditScore",
                    "quoteFromState": f"POST {prefix}/quote-from-state",
                },
            },
        }

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "message": SERVICE_MESSAGE, "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    finance_prefix = f"{settings.api_prefix}/finance"
    app.include_router(finance.router, prefix=finance_prefix, tags=["finance"])
    app.include_router(apr_estimate.router, prefix=finance_prefix, tags=["finance"])
    app.include_router(financing_state.router, prefix=finance_prefix, tags=["conversation"])

    return app


app = create_app()
