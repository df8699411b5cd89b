"""FastAPI application factory"""

from typing import Optional
from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from scoring_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from scoring_gateway.api.v1 import score, history, state, verification
from scoring_gateway.infrastructure.observability.logging import setup_logging
from scoring_gateway.config import settings
from scoring_gateway.state import StateStore

# Setup structured logging
setup_logging(settings.log_level)


def create_app(store: Optional[StateStore] = None) -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Scoring Gateway",
        description="Heuristic credit score service over open-banking transaction history",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # One state store per application instance
    app.state.store = store or StateStore()

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(score.router, prefix="/v1", tags=["scoring"])
    app.include_router(history.router, prefix="/v1", tags=["history"])
    app.include_router(state.router, prefix="/v1", tags=["state"])
    app.include_router(verification.router, prefix="/v1", tags=["verification"])

    return app


app = create_app()
