"""
Account service - registration and balance lookups.

Balances are never stored. Every read sums the deposits whose destination
is the account (LEFT JOIN + COALESCE, so an account without deposits
reads as 0).
"""

from typing import List

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import AccountNotFoundError, DuplicateAccountError, InternalError
from app.core.logging import get_logger
from app.models.account import Account
from app.models.transaction import Transaction
from app.schemas.account import AccountResponse

logger = get_logger("accounts")


def _balance_query():
    balance = func.coalesce(func.sum(Transaction.amount), 0.0).label("balance")
    return (
        select(Account, balance)
        .outerjoin(Transaction, Transaction.destination == Account.account_id)
        .group_by(Account.account_id)
    )


def get_account(db: Session, account_id: int) -> AccountResponse:
    """
    Fetch one account with its balance.

    Raises:
        AccountNotFoundError: no account row has this id.
    """
    try:
        row = db.execute(
            _balance_query().where(Account.account_id == account_id)
        ).first()
    except SQLAlchemyError as exc:
        logger.exception("Failed to load account %s", account_id)
        raise InternalError("Database error") from exc

    if row is None:
        raise AccountNotFoundError(account_id)

    account, balance = row
    return AccountResponse.from_row(account, float(balance))


def list_accounts(db: Session) -> List[AccountResponse]:
    """
    All accounts with balances, most recently credited first.

    Accounts that never received a deposit come last, in registration order.
    """
    last_deposit = func.max(Transaction.transaction_time)
    try:
        rows = db.execute(
            _balance_query().order_by(last_deposit.desc().nulls_last(), Account.account_id)
        ).all()
    except SQLAlchemyError as exc:
        logger.exception("Failed to list accounts")
        raise InternalError("Database error") from exc

    return [AccountResponse.from_row(account, float(balance)) for account, balance in rows]


def create_account(db: Session, id_card_number: str, name: str, email: str) -> AccountResponse:
    """
    Persist a new account. Fields must already be validated.

    Raises:
        DuplicateAccountError: the id-card number is already registered.
    """
    account = Account(
        id_card_number=id_card_number,
        name=name,
        email=email
    )
    db.add(account)

    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.info("Rejected duplicate id card registration")
        raise DuplicateAccountError() from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to create account")
        raise InternalError("Database error") from exc

    db.refresh(account)
    logger.info("Created account %s", account.account_id)

    return AccountResponse.from_row(account)
