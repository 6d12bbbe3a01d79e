"""
Transaction API endpoints.
Handles recording cash deposits and listing them.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from app.core.config import settings
from app.core.errors import INVALID_PAYLOAD, BadRequestError, NotificationError
from app.core.logging import get_logger
from app.core.validators import is_valid_email
from app.database import get_db
from app.schemas.transaction import TransactionCreate, TransactionResponse
from app.services import transaction_service
from app.services.notifications import EmailNotifier, get_notifier

router = APIRouter(prefix="/transaction", tags=["Transactions"])

logger = get_logger("api.transactions")


@router.post("", response_model=TransactionResponse, status_code=status.HTTP_201_CREATED)
def create_transaction(
    transaction_data: TransactionCreate,
    db: Session = Depends(get_db),
    notifier: EmailNotifier = Depends(get_notifier)
):
    """
    Record a cash deposit and e-mail a confirmation to the depositor.

    - **depositdest**: Account receiving the deposit
    - **amount**: Deposit amount (non-negative)
    - **internalsource**: Depositing account, if the sender is registered
    - **externalsource**: Depositor e-mail, if the sender is not registered
    """
    if transaction_data.externalsource and not is_valid_email(transaction_data.externalsource):
        raise BadRequestError("Invalid Email Address")

    source = transaction_data.source()
    if source is None:
        raise BadRequestError(INVALID_PAYLOAD)

    transaction = transaction_service.create_transaction(
        db,
        destination=transaction_data.depositdest,
        amount=transaction_data.amount,
        source=source
    )

    try:
        notifier.notify_deposit(transaction)
    except NotificationError:
        # The deposit is already committed at this point
        if settings.NOTIFICATION_FAILURE_IS_ERROR:
            raise
        logger.warning("Deposit %s stored but notification failed", transaction.transid)

    return transaction


@router.get("", response_model=List[TransactionResponse])
def list_transactions(db: Session = Depends(get_db)):
    """
    List all deposits, newest first.
    """
    return transaction_service.list_transactions(db)
