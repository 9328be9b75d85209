"""SQLAlchemy ORM models for session-scoped debt entries"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, Integer, Numeric, DateTime, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DebtEntryRecord(Base):
    """Debt recorded during the session"""

    __tablename__ = "debt_entry"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    client_name = Column(Text, nullable=False, index=True)
    start_year = Column(Integer, nullable=False)
    start_month = Column(Integer, nullable=False)
    monthly_amount = Column(Numeric(18, 2), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
