"""
Account API endpoints.
Handles account registration, retrieval, and deposit history.
"""

import re

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from app.core.errors import BadRequestError
from app.core.validators import is_valid_email, is_valid_id_card, is_valid_name
from app.database import get_db
from app.schemas.account import AccountCreate, AccountResponse
from app.schemas.transaction import MAX_ACCOUNT_ID, TransactionResponse
from app.services import account_service, transaction_service

router = APIRouter(prefix="/account", tags=["Accounts"])

_NUMERIC_ID = re.compile(r"[0-9]+")


def parse_account_id(raw: str) -> int:
    """Path ids must be plain decimal digits within the store's id range."""
    if _NUMERIC_ID.fullmatch(raw) is None:
        raise BadRequestError("Invalid account ID")
    account_id = int(raw)
    if account_id > MAX_ACCOUNT_ID:
        raise BadRequestError("Invalid account ID")
    return account_id


@router.get("", response_model=List[AccountResponse])
def list_accounts(db: Session = Depends(get_db)):
    """
    List all accounts with their balances, most recently credited first.
    """
    return account_service.list_accounts(db)


@router.get("/{account_id}", response_model=AccountResponse)
def get_account(
    account_id: str,
    db: Session = Depends(get_db)
):
    """
    Get account details and current balance.
    """
    return account_service.get_account(db, parse_account_id(account_id))


@router.post("", response_model=AccountResponse, status_code=status.HTTP_201_CREATED)
def create_account(
    account_data: AccountCreate,
    db: Session = Depends(get_db)
):
    """
    Register a new account.

    - **idcardno**: 16-digit ID card number, unique across accounts
    - **name**: 3-100 letters or spaces
    - **email**: Contact e-mail address
    """
    # Checked in this order; the first failure is reported
    if not is_valid_id_card(account_data.idcardno):
        raise BadRequestError("Invalid ID Card")

    if not is_valid_name(account_data.name):
        raise BadRequestError("Invalid Name")

    if not is_valid_email(account_data.email):
        raise BadRequestError("Invalid Email Address")

    return account_service.create_account(
        db,
        id_card_number=account_data.idcardno,
        name=account_data.name,
        email=account_data.email
    )


@router.get("/{account_id}/history", response_model=List[TransactionResponse])
def get_account_history(
    account_id: str,
    db: Session = Depends(get_db)
):
    """
    Get all deposits into an account, newest first.
    """
    return transaction_service.get_history(db, parse_account_id(account_id))
