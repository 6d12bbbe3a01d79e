"""
Deposit notification e-mails.

Delivery is synchronous over SMTP. The recipient is the depositing
account's e-mail when the sender is registered, otherwise the external
sender's address.
"""

import smtplib
from email.message import EmailMessage
from typing import Optional

from app.core.config import Settings, settings
from app.core.errors import NotificationError
from app.core.logging import get_logger
from app.schemas.transaction import TransactionResponse

logger = get_logger("notifications")

SUBJECT = "Cash Deposit Notification"


def deposit_recipient(transaction: TransactionResponse) -> str:
    return transaction.internalsourceemail or transaction.externalsource


def build_deposit_message(sender: str, recipient: str, transaction: TransactionResponse) -> EmailMessage:
    """Plaintext deposit confirmation with the amount to two decimals."""
    message = EmailMessage()
    message["From"] = sender
    message["To"] = recipient
    message["Subject"] = SUBJECT
    message.set_content(
        f"You have successfully deposited {transaction.amount:.2f} "
        f"to account number {transaction.depositdest}. "
        f"Ref No. #{transaction.transid}"
    )
    return message


class EmailNotifier:
    """Sends deposit confirmations through an SMTP relay."""

    def __init__(
        self,
        host: str,
        port: int,
        user: str = "",
        password: str = "",
        timeout: Optional[float] = None
    ):
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.timeout = timeout

    @classmethod
    def from_settings(cls, config: Settings) -> "EmailNotifier":
        return cls(
            host=config.SMTP_SERVER,
            port=config.SMTP_PORT,
            user=config.SMTP_USER,
            password=config.SMTP_PASS,
            timeout=config.SMTP_TIMEOUT,
        )

    @property
    def enabled(self) -> bool:
        return bool(self.host)

    def notify_deposit(self, transaction: TransactionResponse) -> bool:
        """
        Send the confirmation for a stored deposit.

        Returns False when delivery was skipped (no relay or no recipient).

        Raises:
            NotificationError: the relay refused or could not be reached.
        """
        if not self.enabled:
            logger.info("SMTP relay not configured, skipping notice for deposit %s", transaction.transid)
            return False

        recipient = deposit_recipient(transaction)
        if not recipient:
            logger.info("No recipient for deposit %s, skipping notice", transaction.transid)
            return False

        message = build_deposit_message(self.user, recipient, transaction)
        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as smtp:
                smtp.ehlo()
                if smtp.has_extn("starttls"):
                    smtp.starttls()
                    smtp.ehlo()
                if self.user:
                    smtp.login(self.user, self.password)
                smtp.send_message(message)
        except (smtplib.SMTPException, OSError) as exc:
            logger.error("Deposit notice for %s failed: %s", transaction.transid, exc)
            raise NotificationError(f"Failed to send deposit notification: {exc}") from exc

        logger.info("Sent deposit notice for %s", transaction.transid)
        return True


def get_notifier() -> EmailNotifier:
    """FastAPI dependency providing the configured notifier."""
    return EmailNotifier.from_settings(settings)
