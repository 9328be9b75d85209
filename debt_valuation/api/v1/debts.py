"""/v1/debts - Session debt entries and their conversion reports"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Request, Response
from sqlalchemy.orm import Session

from debt_valuation.api.v1.schemas import DebtEntryRequest, DebtEntryResponse, DebtEntrySchema, DebtListResponse, ReportResponse
from debt_valuation.api.v1.reports import run_report
from debt_valuation.api.dependencies import get_conversion_engine, get_request_id
from debt_valuation.config import settings
from debt_valuation.domain.conversion import ConversionEngine
from debt_valuation.domain.exceptions import DebtEntryNotFoundError
from debt_valuation.domain.models import DebtEntry
from debt_valuation.infrastructure.database.session import get_db
from debt_valuation.infrastructure.database.repositories import DebtEntryRepository

router = APIRouter()


async def report_for_entry(engine: ConversionEngine, request_id: str, entry: DebtEntry) -> DebtEntryResponse:
    """Report from the entry's start month to the configured end period"""
    report = await run_report(
        engine,
        request_id,
        entry.start_year,
        entry.start_month,
        settings.report_end_year,
        settings.report_end_month,
        entry.monthly_amount,
        entry_id=entry.id,
    )
    return DebtEntryResponse(
        entry=DebtEntrySchema.from_domain(entry),
        report=ReportResponse.from_domain(report),
    )


@router.post("/debts", response_model=DebtEntryResponse, status_code=201)
async def create_debt(
    request_body: DebtEntryRequest,
    request: Request,
    db: Session = Depends(get_db),
    engine: ConversionEngine = Depends(get_conversion_engine),
):
    """
    Record a debt entry and return its report.

    Flow:
    1. Store the entry in the session store
    2. Compute the report up to the configured end period
    3. Commit only once the report succeeded
    """
    request_id = get_request_id(request)
    repo = DebtEntryRepository(db)

    try:
        entry = repo.create_entry(
            client_name=request_body.client_name,
            start_year=request_body.start_year,
            start_month=request_body.start_month,
            monthly_amount=request_body.monthly_amount,
        )
        response = await report_for_entry(engine, request_id, entry)
        db.commit()
        return response

    except HTTPException:
        db.rollback()
        raise

    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/debts", response_model=DebtListResponse)
def list_debts(db: Session = Depends(get_db)):
    """Session debt entries, newest first"""
    entries = DebtEntryRepository(db).list_entries()
    return DebtListResponse(entries=[DebtEntrySchema.from_domain(e) for e in entries])


@router.get("/debts/{entry_id}/report", response_model=DebtEntryResponse)
async def get_debt_report(
    entry_id: str,
    request: Request,
    db: Session = Depends(get_db),
    engine: ConversionEngine = Depends(get_conversion_engine),
):
    """Recompute the report for a stored entry"""
    entry = DebtEntryRepository(db).get_entry(entry_id)
    if entry is None:
        raise HTTPException(status_code=404, detail="Debt entry not found")

    return await report_for_entry(engine, get_request_id(request), entry)


@router.delete("/debts/{entry_id}", status_code=204)
def delete_debt(entry_id: str, db: Session = Depends(get_db)):
    """Remove a debt entry from the session"""
    try:
        DebtEntryRepository(db).delete_entry(entry_id)
    except DebtEntryNotFoundError:
        raise HTTPException(status_code=404, detail="Debt entry not found")

    db.commit()
    return Response(status_code=204)
