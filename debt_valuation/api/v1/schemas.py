"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field, model_validator
from datetime import datetime
from decimal import Decimal
from typing import List

from debt_valuation.domain.models import DebtEntry, MonthlyLineItem, RateObservation, SummaryReport


class ReportRequest(BaseModel):
    """Request body for POST /v1/reports"""

    start_year: int = Field(..., ge=1900, le=2100)
    start_month: int = Field(..., ge=1, le=12)
    end_year: int = Field(..., ge=1900, le=2100)
    end_month: int = Field(..., ge=1, le=12)
    monthly_amount: Decimal = Field(..., gt=0, decimal_places=2, description="Monthly amount in local currency, at most 2 decimals")


class DebtEntryRequest(BaseModel):
    """Request body for POST /v1/debts"""

    client_name: str = Field(..., min_length=1, description="Client or debt label")
    start_year: int = Field(..., ge=1900, le=2100)
    start_month: int = Field(..., ge=1, le=12)
    monthly_amount: Decimal = Field(..., gt=0, decimal_places=2, description="Monthly amount in local currency, at most 2 decimals")

    @model_validator(mode="after")
    def strip_name(self) -> "DebtEntryRequest":
        self.client_name = self.client_name.strip()
        if not self.client_name:
            raise ValueError("client_name must not be blank")
        return self


class RateResponse(BaseModel):
    """Response for GET /v1/rates/{year}/{month}"""

    year: int
    month: int
    usd: float
    eur: float
    gold: float
    estimated: bool

    @classmethod
    def from_domain(cls, rate: RateObservation, estimated: bool) -> "RateResponse":
        return cls(
            year=rate.year,
            month=rate.month,
            usd=float(rate.usd),
            eur=float(rate.eur),
            gold=float(rate.gold),
            estimated=estimated,
        )


class LineItemSchema(BaseModel):
    """Single month in a report"""

    month_label: str
    year: int
    month: int
    amount_local: float
    amount_usd: float
    amount_eur: float
    amount_gold: float
    usd_rate: float
    eur_rate: float
    gold_rate: float
    estimated: bool

    @classmethod
    def from_domain(cls, item: MonthlyLineItem) -> "LineItemSchema":
        return cls(
            month_label=item.month_label,
            year=item.year,
            month=item.month,
            amount_local=float(item.amount_local),
            amount_usd=float(item.amount_usd),
            amount_eur=float(item.amount_eur),
            amount_gold=float(item.amount_gold),
            usd_rate=float(item.usd_rate),
            eur_rate=float(item.eur_rate),
            gold_rate=float(item.gold_rate),
            estimated=item.estimated,
        )


class ReportResponse(BaseModel):
    """Totals plus the chronological line items"""

    total_months: int
    total_local: float
    total_usd: float
    total_eur: float
    total_gold: float
    line_items: List[LineItemSchema]

    @classmethod
    def from_domain(cls, report: SummaryReport) -> "ReportResponse":
        return cls(
            total_months=report.total_months,
            total_local=float(report.total_local),
            total_usd=float(report.total_usd),
            total_eur=float(report.total_eur),
            total_gold=float(report.total_gold),
            line_items=[LineItemSchema.from_domain(item) for item in report.line_items],
        )


class DebtEntrySchema(BaseModel):
    """Debt entry as stored in the session"""

    id: str
    client_name: str
    start_year: int
    start_month: int
    monthly_amount: float
    created_at: datetime

    @classmethod
    def from_domain(cls, entry: DebtEntry) -> "DebtEntrySchema":
        return cls(
            id=entry.id,
            client_name=entry.client_name,
            start_year=entry.start_year,
            start_month=entry.start_month,
            monthly_amount=float(entry.monthly_amount),
            created_at=entry.created_at,
        )


class DebtEntryResponse(BaseModel):
    """Response for POST /v1/debts and GET /v1/debts/{id}/report"""

    entry: DebtEntrySchema
    report: ReportResponse


class DebtListResponse(BaseModel):
    """Response for GET /v1/debts"""

    entries: List[DebtEntrySchema]
