"""
Pydantic schemas for Account API requests and responses.
"""

from pydantic import BaseModel, Field, ConfigDict


class AccountCreate(BaseModel):
    """
    Schema for registering a new account.

    Fields default to empty strings so that a missing field is reported
    by the field validators rather than as a malformed payload.
    """
    idcardno: str = Field(default="", description="16-digit national ID card number")
    name: str = Field(default="", description="Account holder name (letters and spaces)")
    email: str = Field(default="", description="Account holder e-mail address")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "idcardno": "1234567890123456",
                "name": "Michael",
                "email": "mike@example.com"
            }
        }
    )


class AccountResponse(BaseModel):
    """Schema for account response, including the computed balance."""
    accountid: int
    idcardno: str
    name: str
    email: str
    balance: float = 0.0

    @classmethod
    def from_row(cls, account, balance: float = 0.0) -> "AccountResponse":
        return cls(
            accountid=account.account_id,
            idcardno=account.id_card_number,
            name=account.name,
            email=account.email,
            balance=balance,
        )
