"""
Account database model.
Represents registered depositors in the system.
"""

from sqlalchemy import Column, String, DateTime, Integer
from datetime import datetime
from app.database import Base


class Account(Base):
    """
    Account table - stores registered account holders.

    The balance is not stored; it is summed from transaction_log at read time.
    """
    __tablename__ = "account"

    account_id = Column(Integer, primary_key=True, autoincrement=True)
    id_card_number = Column(String(20), unique=True, nullable=False)
    name = Column(String(100), nullable=False)
    email = Column(String(320), nullable=False)
    registration_time = Column(DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<Account(account_id={self.account_id}, id_card={self.id_card_number}, name={self.name})>"
