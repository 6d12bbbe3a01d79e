"""
Database models package.
"""

from app.models.account import Account
from app.models.transaction import Transaction

__all__ = ["Account", "Transaction"]
