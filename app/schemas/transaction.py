"""
Pydantic schemas for Transaction API requests and responses.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, Field, ConfigDict


@dataclass(frozen=True)
class InternalSource:
    """Deposit made by a registered account."""
    account_id: int


@dataclass(frozen=True)
class ExternalSource:
    """Deposit made by a non-member identified by e-mail."""
    email: str


DepositSource = Union[InternalSource, ExternalSource]

# Largest value of a signed 32-bit INTEGER key column
MAX_ACCOUNT_ID = 2147483647


class TransactionCreate(BaseModel):
    """
    Schema for recording a deposit.

    Numbers are strict: a quoted amount or account id is a malformed payload.
    An internal source of 0 means "not given". Amounts must be finite.
    """
    depositdest: int = Field(
        default=0, ge=0, le=MAX_ACCOUNT_ID, strict=True, description="Destination account ID"
    )
    amount: float = Field(
        default=0.0, ge=0, strict=True, allow_inf_nan=False, description="Deposit amount"
    )
    internalsource: Optional[int] = Field(
        default=None, ge=0, le=MAX_ACCOUNT_ID, strict=True, description="Depositing account ID"
    )
    externalsource: Optional[str] = Field(default=None, description="E-mail of a non-member depositor")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "depositdest": 1,
                "externalsource": "someone@example.com",
                "amount": 3879000
            }
        }
    )

    def source(self) -> Optional[DepositSource]:
        """Resolve the depositor; a registered account wins over an e-mail."""
        if self.internalsource:
            return InternalSource(self.internalsource)
        if self.externalsource:
            return ExternalSource(self.externalsource)
        return None


class TransactionResponse(BaseModel):
    """Schema for transaction response."""
    transid: int
    depositdest: int
    externalsource: str = ""
    internalsource: int = 0
    internalsourceemail: str = ""
    name: str = ""
    amount: float
    transtime: datetime

    @classmethod
    def from_row(cls, transaction, sender_name: str = "", sender_email: str = "") -> "TransactionResponse":
        return cls(
            transid=transaction.transaction_id,
            depositdest=transaction.destination,
            externalsource=transaction.source_external or "",
            internalsource=transaction.source_internal or 0,
            internalsourceemail=sender_email or "",
            name=sender_name or "",
            amount=transaction.amount,
            transtime=transaction.transaction_time,
        )
