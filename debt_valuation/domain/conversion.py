"""Conversion engine - monthly debt amounts into USD, EUR and gold equivalents"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

from debt_valuation.domain.exceptions import InvalidAmountError
from debt_valuation.domain.models import MonthlyLineItem, SummaryReport
from debt_valuation.domain.rates import RateSource, RateTable
from debt_valuation.utils.date_utils import generate_month_range, month_label

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")

Amount = Union[Decimal, int, float, str]


def to_decimal(value: Amount) -> Decimal:
    """Convert user input to Decimal without inheriting float noise"""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round2(value: Decimal, rounding: str = ROUND_HALF_UP) -> Decimal:
    """Round to exactly two fraction digits"""
    return value.quantize(CENTS, rounding=rounding)


def build_summary(
    table: RateTable,
    start_year: int,
    start_month: int,
    end_year: int,
    end_month: int,
    monthly_amount: Amount,
    rounding: str = ROUND_HALF_UP,
    language: str = "tr",
) -> SummaryReport:
    """
    Convert a fixed monthly amount for every month in [start, end].

    Requirements:
    - Each month's USD/EUR/gold value is rounded to 2 digits on its own
    - Totals are sums of the rounded monthly values, rounded once more at the end
    - A reversed range produces an empty report

    Raises:
        InvalidAmountError: If monthly_amount is not strictly positive
    """
    amount = to_decimal(monthly_amount)
    if amount <= 0:
        raise InvalidAmountError(f"Monthly amount must be positive, got {amount}")

    months = generate_month_range(start_year, start_month, end_year, end_month)
    if not months:
        logger.warning(
            "Reversed period range, returning empty report",
            extra={"start": f"{start_year}-{start_month:02d}", "end": f"{end_year}-{end_month:02d}"},
        )

    total_local = Decimal("0")
    total_usd = Decimal("0")
    total_eur = Decimal("0")
    total_gold = Decimal("0")
    line_items = []

    for year, month in months:
        rate = table.lookup(year, month)

        usd_value = round2(amount / rate.usd, rounding)
        eur_value = round2(amount / rate.eur, rounding)
        gold_value = round2(amount / rate.gold, rounding)

        total_local += amount
        total_usd += usd_value
        total_eur += eur_value
        total_gold += gold_value

        line_items.append(
            MonthlyLineItem(
                month_label=month_label(year, month, language),
                year=year,
                month=month,
                amount_local=amount,
                amount_usd=usd_value,
                amount_eur=eur_value,
                amount_gold=gold_value,
                usd_rate=rate.usd,
                eur_rate=rate.eur,
                gold_rate=rate.gold,
                estimated=not table.contains(year, month),
            )
        )

    return SummaryReport(
        total_months=len(line_items),
        total_local=total_local,
        total_usd=round2(total_usd, rounding),
        total_eur=round2(total_eur, rounding),
        total_gold=round2(total_gold, rounding),
        line_items=line_items,
    )


class ConversionEngine:
    """Runs conversions against whatever rate source it was given"""

    def __init__(self, rate_source: RateSource, rounding: str = ROUND_HALF_UP, language: str = "tr"):
        self.rate_source = rate_source
        self.rounding = rounding
        self.language = language

    async def compute_series(
        self,
        start_year: int,
        start_month: int,
        end_year: int,
        end_month: int,
        monthly_amount: Amount,
    ) -> SummaryReport:
        """
        Main entry point: load rates for the range and build the report.

        The amount is validated before the rate source is touched. Errors from
        the source (RateSourceError) propagate unchanged; no partial report
        is ever returned.
        """
        if to_decimal(monthly_amount) <= 0:
            raise InvalidAmountError(f"Monthly amount must be positive, got {monthly_amount}")

        table = await self.rate_source.load(start_year, start_month, end_year, end_month)

        return build_summary(
            table,
            start_year,
            start_month,
            end_year,
            end_month,
            monthly_amount,
            rounding=self.rounding,
            language=self.language,
        )
