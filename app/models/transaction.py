"""
Transaction database model.
Represents cash deposits into an account.
"""

from sqlalchemy import Column, String, Float, DateTime, Integer, ForeignKey
from datetime import datetime
from app.database import Base


class Transaction(Base):
    """
    Transaction log table - one immutable row per deposit.

    Exactly one of source_internal / source_external is set.
    """
    __tablename__ = "transaction_log"

    transaction_id = Column(Integer, primary_key=True, autoincrement=True)
    source_external = Column(String(320), nullable=True)
    source_internal = Column(
        Integer,
        ForeignKey("account.account_id", onupdate="CASCADE", name="internal_account_source"),
        nullable=True
    )
    destination = Column(
        Integer,
        ForeignKey("account.account_id", onupdate="CASCADE", name="internal_account_destination"),
        nullable=False,
        index=True
    )
    amount = Column(Float, nullable=False)
    transaction_time = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)

    def __repr__(self):
        source = self.source_internal or self.source_external
        return f"<Transaction(id={self.transaction_id}, from={source}, to={self.destination}, amount={self.amount})>"
