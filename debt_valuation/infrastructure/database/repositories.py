"""Data access layer for debt entries"""

from decimal import Decimal
from typing import List, Optional
from sqlalchemy.orm import Session
from debt_valuation.infrastructure.database.models import DebtEntryRecord
from debt_valuation.domain.models import DebtEntry
from debt_valuation.domain.exceptions import DebtEntryNotFoundError


def to_domain(record: DebtEntryRecord) -> DebtEntry:
    return DebtEntry(
        id=record.id,
        client_name=record.client_name,
        start_year=record.start_year,
        start_month=record.start_month,
        monthly_amount=Decimal(record.monthly_amount),
        created_at=record.created_at,
    )


class DebtEntryRepository:
    """Repository for debt entries"""

    def __init__(self, db: Session):
        self.db = db

    def create_entry(
        self,
        client_name: str,
        start_year: int,
        start_month: int,
        monthly_amount: Decimal,
    ) -> DebtEntry:
        """Add a debt entry to the session store"""
        record = DebtEntryRecord(
            client_name=client_name,
            start_year=start_year,
            start_month=start_month,
            monthly_amount=monthly_amount,
        )
        self.db.add(record)
        self.db.flush()  # Populate id and created_at defaults
        self.db.refresh(record)  # Report from the amount as stored, not as submitted
        return to_domain(record)

    def list_entries(self, limit: int = 100) -> List[DebtEntry]:
        """Entries, newest first"""
        records = (
            self.db.query(DebtEntryRecord)
            .order_by(DebtEntryRecord.created_at.desc())
            .limit(limit)
            .all()
        )
        return [to_domain(r) for r in records]

    def get_entry(self, entry_id: str) -> Optional[DebtEntry]:
        record = self.db.get(DebtEntryRecord, entry_id)
        return to_domain(record) if record else None

    def delete_entry(self, entry_id: str) -> None:
        """
        Remove an entry.

        Raises:
            DebtEntryNotFoundError: If no entry has this id
        """
        record = self.db.get(DebtEntryRecord, entry_id)
        if record is None:
            raise DebtEntryNotFoundError(f"Debt entry {entry_id} not found")
        self.db.delete(record)
