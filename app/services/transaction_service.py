"""
Transaction service - recording deposits and reading deposit history.

A deposit comes either from a registered account (InternalSource) or from
an outside sender known only by e-mail (ExternalSource). Account references
are checked by the database's foreign keys; a rejected insert leaves no row.
"""

from typing import List

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import AccountNotFoundError, InternalError, InvalidAccountReferenceError
from app.core.logging import get_logger
from app.models.account import Account
from app.models.transaction import Transaction
from app.schemas.transaction import DepositSource, InternalSource, TransactionResponse

logger = get_logger("transactions")


def _history_query():
    return (
        select(Transaction, Account.name, Account.email)
        .outerjoin(Account, Account.account_id == Transaction.source_internal)
        .order_by(Transaction.transaction_time.desc(), Transaction.transaction_id.desc())
    )


def _to_responses(rows) -> List[TransactionResponse]:
    return [
        TransactionResponse.from_row(transaction, sender_name, sender_email)
        for transaction, sender_name, sender_email in rows
    ]


def create_transaction(
    db: Session,
    destination: int,
    amount: float,
    source: DepositSource
) -> TransactionResponse:
    """
    Record a deposit into `destination`.

    For an internal source the sender's name and e-mail are looked up after
    the insert so the caller can notify them; a failed lookup leaves them blank.

    Raises:
        InvalidAccountReferenceError: destination or sending account does not exist.
    """
    transaction = Transaction(destination=destination, amount=amount)
    if isinstance(source, InternalSource):
        transaction.source_internal = source.account_id
    else:
        transaction.source_external = source.email

    db.add(transaction)

    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.info("Rejected deposit into %s: unknown account reference", destination)
        raise InvalidAccountReferenceError() from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to record deposit into %s", destination)
        raise InternalError("Database error") from exc

    db.refresh(transaction)
    logger.info("Recorded deposit %s into account %s", transaction.transaction_id, destination)

    sender_name = sender_email = ""
    if isinstance(source, InternalSource):
        try:
            sender = db.get(Account, source.account_id)
        except SQLAlchemyError:
            logger.warning("Could not look up sending account %s", source.account_id, exc_info=True)
            sender = None
        if sender is not None:
            sender_name, sender_email = sender.name, sender.email

    return TransactionResponse.from_row(transaction, sender_name, sender_email)


def get_history(db: Session, account_id: int) -> List[TransactionResponse]:
    """
    Deposits into one account, newest first.

    Raises:
        AccountNotFoundError: the account does not exist.
    """
    try:
        if db.get(Account, account_id) is None:
            raise AccountNotFoundError(account_id)
        rows = db.execute(
            _history_query().where(Transaction.destination == account_id)
        ).all()
    except SQLAlchemyError as exc:
        logger.exception("Failed to load history for account %s", account_id)
        raise InternalError("Database error") from exc

    return _to_responses(rows)


def list_transactions(db: Session) -> List[TransactionResponse]:
    """Every deposit, newest first."""
    try:
        rows = db.execute(_history_query()).all()
    except SQLAlchemyError as exc:
        logger.exception("Failed to list transactions")
        raise InternalError("Database error") from exc

    return _to_responses(rows)
