"""
Field validators for account and deposit payloads.
Pure pattern checks, no I/O.
"""

import re

_ID_CARD = re.compile(r"[0-9]{16}")
_NAME = re.compile(r"[a-zA-Z\t\n\f\r ]{3,100}")
_EMAIL_LABEL = r"[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
_EMAIL = re.compile(
    r"[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    rf"@{_EMAIL_LABEL}(?:\.{_EMAIL_LABEL})*"
)


def is_valid_id_card(value: str) -> bool:
    """Exactly 16 ASCII digits."""
    return _ID_CARD.fullmatch(value) is not None


def is_valid_name(value: str) -> bool:
    """3 to 100 ASCII letters or whitespace."""
    return _NAME.fullmatch(value) is not None


def is_valid_email(value: str) -> bool:
    """Mailbox-style address with dot-separated host labels of 1-63 characters."""
    return _EMAIL.fullmatch(value) is not None
