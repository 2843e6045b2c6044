"""FastAPI application factory"""

from fastapi import Depends, FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from supera_advisor.api.dependencies import get_settings
from supera_advisor.api.middleware import RequestIDMiddleware, MetricsMiddleware
from supera_advisor.api.v1 import assessment, input_mask
from supera_advisor.infrastructure.observability.logging import setup_logging
from supera_advisor.config import Settings, settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        app_settings: overrides the environment-loaded settings (tests, embedding)
    """
    app_settings = app_settings or settings
    docs_enabled = app_settings.docs_enabled

    app = FastAPI(
        title="S.U.P.E.R.A. Debt Advisor",
        description="Debt-to-income risk score and restructuring plan service",
        version="0.1.0",
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )
    app.state.settings = app_settings

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check(current: Settings = Depends(get_settings)):
        return {"status": "ok", "service": current.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(assessment.router, prefix="/v1", tags=["assessments"])
    app.include_router(input_mask.router, prefix="/v1", tags=["forms"])

    return app


app = create_app()
