"""POST /v1/reports - Ad-hoc conversion report for an explicit period range"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from debt_valuation.api.v1.schemas import ReportRequest, ReportResponse
from debt_valuation.api.dependencies import get_conversion_engine, get_request_id
from debt_valuation.config import settings
from debt_valuation.domain.conversion import ConversionEngine
from debt_valuation.domain.exceptions import InvalidAmountError, RateSourceError
from debt_valuation.domain.models import SummaryReport
from debt_valuation.infrastructure.observability.metrics import record_report
from debt_valuation.infrastructure.observability.logging import log_report

router = APIRouter()


async def run_report(
    engine: ConversionEngine,
    request_id: str,
    start_year: int,
    start_month: int,
    end_year: int,
    end_month: int,
    monthly_amount,
    entry_id: str | None = None,
) -> SummaryReport:
    """Compute a report and map domain failures to HTTP errors"""
    start_time = time.time()

    try:
        report = await engine.compute_series(start_year, start_month, end_year, end_month, monthly_amount)

    except InvalidAmountError as e:
        logging.warning(f"Invalid amount: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except RateSourceError as e:
        logging.error(f"Rate source error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Rate service unavailable")

    duration_ms = (time.time() - start_time) * 1000
    record_report(report, settings.rate_source)
    log_report(request_id, entry_id, report, duration_ms)
    return report


@router.post("/reports", response_model=ReportResponse)
async def create_report(
    request_body: ReportRequest,
    request: Request,
    engine: ConversionEngine = Depends(get_conversion_engine),
):
    """
    Convert a fixed monthly amount for every month in [start, end].

    A reversed range returns an empty report rather than an error.
    """
    report = await run_report(
        engine,
        get_request_id(request),
        request_body.start_year,
        request_body.start_month,
        request_body.end_year,
        request_body.end_month,
        request_body.monthly_amount,
    )
    return ReportResponse.from_domain(report)
