"""
Pydantic schemas package.
"""

from app.schemas.account import AccountCreate, AccountResponse
from app.schemas.transaction import (
    DepositSource,
    ExternalSource,
    InternalSource,
    TransactionCreate,
    TransactionResponse,
)

__all__ = [
    "AccountCreate",
    "AccountResponse",
    "DepositSource",
    "ExternalSource",
    "InternalSource",
    "TransactionCreate",
    "TransactionResponse"
]
