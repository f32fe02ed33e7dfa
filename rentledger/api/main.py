"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from rentledger.api.middleware import RequestIDMiddleware, MetricsMiddleware
from rentledger.api.v1 import payments, score, history, balance
from rentledger.infrastructure.observability.logging import setup_logging
from rentledger.config import settings

setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="RentLedger Rent Score",
        description="Payment status, streak and rent score service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Last added runs first
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(payments.router, prefix="/v1", tags=["payments"])
    app.include_router(score.router, prefix="/v1", tags=["score"])
    app.include_router(history.router, prefix="/v1", tags=["history"])
    app.include_router(balance.router, prefix="/v1", tags=["balance"])

    return app


app = create_app()
