"""Database entity models for the tax filing assistant."""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Numeric

from .database import Base


class TaxReturn(Base):
    """
    A saved tax return.

    Holds the calculator inputs only; the liability is recalculated on
    demand so it always reflects the current rate tables.
    """
    __tablename__ = "tax_returns"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(64), nullable=False, index=True)  # Owner, from the auth layer

    income = Column(Numeric(18, 2), nullable=False)
    deductions = Column(Numeric(18, 2), nullable=False, default=0)
    tax_credits = Column(Numeric(18, 2), nullable=False, default=0)
    year = Column(Integer, nullable=False, index=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def is_owned_by(self, user_id: str) -> bool:
        return self.user_id == user_id
