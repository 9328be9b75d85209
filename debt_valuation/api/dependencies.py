"""Dependency injection for FastAPI endpoints"""

from fastapi import Depends, Request
from debt_valuation.config import settings
from debt_valuation.domain.conversion import ConversionEngine
from debt_valuation.domain.rates import RateSource, RateTable, StaticRateSource
from debt_valuation.infrastructure.clients.rates import RemoteRateSource


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_rate_table(request: Request) -> RateTable:
    """Bundled rate table built once in create_app"""
    return request.app.state.rate_table


def get_rate_source(rate_table: RateTable = Depends(get_rate_table)) -> RateSource:
    """Provide the configured rate source"""
    if settings.rate_source == "remote":
        return RemoteRateSource()
    return StaticRateSource(rate_table)


def get_conversion_engine(rate_source: RateSource = Depends(get_rate_source)) -> ConversionEngine:
    """Provide a conversion engine bound to the rate source"""
    return ConversionEngine(
        rate_source,
        rounding=settings.rounding_mode,
        language=settings.month_label_language,
    )
