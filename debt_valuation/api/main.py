"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from debt_valuation.api.middleware import RequestIDMiddleware, MetricsMiddleware
from debt_valuation.api.v1 import debts, rates, reports
from debt_valuation.domain.rates import RateTable
from debt_valuation.infrastructure.data.historical_rates import load_historical_rate_table
from debt_valuation.infrastructure.database.session import init_db
from debt_valuation.infrastructure.observability.logging import setup_logging
from debt_valuation.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app(rate_table: RateTable | None = None) -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Debt Valuation Service",
        description="Monthly debt amounts converted to USD, EUR and gram gold at historical rates",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Rate table is built once and shared read-only by every request
    app.state.rate_table = rate_table if rate_table is not None else load_historical_rate_table()
    init_db()

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(rates.router, prefix="/v1", tags=["rates"])
    app.include_router(reports.router, prefix="/v1", tags=["reports"])
    app.include_router(debts.router, prefix="/v1", tags=["debts"])

    return app


app = create_app()
