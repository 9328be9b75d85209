"""GET /v1/rates/{year}/{month} - Rate lookup with last-known-rate fallback"""

from fastapi import APIRouter, Depends, Path

from debt_valuation.api.v1.schemas import RateResponse
from debt_valuation.api.dependencies import get_rate_table
from debt_valuation.domain.rates import RateTable

router = APIRouter()


@router.get("/rates/{year}/{month}", response_model=RateResponse)
def get_rate(
    year: int = Path(..., ge=1900, le=2100),
    month: int = Path(..., ge=1, le=12),
    rate_table: RateTable = Depends(get_rate_table),
):
    """
    Look up the rates used for a month.

    Months without their own observation return the nearest earlier one
    (or the earliest observation) flagged as estimated.
    """
    rate = rate_table.lookup(year, month)
    return RateResponse.from_domain(rate, estimated=not rate_table.contains(year, month))
