"""Unit tests for the debt entry repository"""

import pytest
from decimal import Decimal
from debt_valuation.domain.exceptions import DebtEntryNotFoundError
from debt_valuation.infrastructure.database.repositories import DebtEntryRepository


def test_created_entry_matches_stored_entry(db):
    """Test the entry returned on create equals the one read back from the database"""
    repo = DebtEntryRepository(db)

    created = repo.create_entry("Elif", 2025, 1, Decimal("1000.55"))
    db.commit()
    db.expunge_all()

    stored = repo.get_entry(created.id)
    assert stored.monthly_amount == created.monthly_amount == Decimal("1000.55")
    assert (stored.start_year, stored.start_month) == (2025, 1)


def test_delete_unknown_entry(db):
    with pytest.raises(DebtEntryNotFoundError):
        DebtEntryRepository(db).delete_entry("00000000-0000-0000-0000-000000000000")
