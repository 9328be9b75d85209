"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List


@dataclass(frozen=True)
class RateObservation:
    """Local currency needed for one USD, one EUR and one gram of gold in a month"""

    year: int
    month: int
    usd: Decimal
    eur: Decimal
    gold: Decimal

    @property
    def period_key(self) -> int:
        return self.year * 12 + self.month


@dataclass
class DebtEntry:
    """Debt recorded by a user, paid in equal monthly amounts from a start month"""

    id: str
    client_name: str
    start_year: int
    start_month: int
    monthly_amount: Decimal
    created_at: datetime


@dataclass(frozen=True)
class MonthlyLineItem:
    """One month of a conversion series"""

    month_label: str
    year: int
    month: int
    amount_local: Decimal
    amount_usd: Decimal
    amount_eur: Decimal
    amount_gold: Decimal
    usd_rate: Decimal
    eur_rate: Decimal
    gold_rate: Decimal
    estimated: bool  # rate carried forward from an earlier observation


@dataclass
class SummaryReport:
    """Output of a conversion run, line items oldest first"""

    total_months: int
    total_local: Decimal
    total_usd: Decimal
    total_eur: Decimal
    total_gold: Decimal
    line_items: List[MonthlyLineItem] = field(default_factory=list)
