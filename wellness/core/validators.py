"""
Input Validators - Contact detail validation.

Validation is intentionally strict and naive:
- No trimming, case-folding or normalization
- No international phone formats
- Email is always checked before phone
"""
import re
from typing import Any

from wellness.core.exceptions import InvalidEmail, InvalidPhone
from wellness.core.logging_config import get_logger

logger = get_logger(__name__)

EMAIL_PATTERN = r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}"
PHONE_PATTERN = r"[0-9]{10}"

# Compiled patterns for efficiency
_EMAIL_REGEX = re.compile(EMAIL_PATTERN)
_PHONE_REGEX = re.compile(PHONE_PATTERN)


def is_valid_email(value: Any) -> bool:
    """
    Check that a value looks like local@domain.tld.

    Args:
        value: Raw email value from the request

    Returns:
        True if the whole string matches the email pattern
    """
    return isinstance(value, str) and _EMAIL_REGEX.fullmatch(value) is not None


def is_valid_phone(value: Any) -> bool:
    """
    Check that a value is exactly 10 ASCII digits.

    Args:
        value: Raw phone value from the request

    Returns:
        True if the whole string is 10 digits
    """
    return isinstance(value, str) and _PHONE_REGEX.fullmatch(value) is not None


def validate_contact_details(email: Any, phone: Any) -> None:
    """
    Validate email and phone, stopping at the first failure.

    Args:
        email: Submitted email address
        phone: Submitted phone number

    Raises:
        InvalidEmail: If the email is malformed (checked first)
        InvalidPhone: If the phone is not exactly 10 digits
    """
    if not is_valid_email(email):
        logger.info("Rejected submission: invalid email format")
        raise InvalidEmail()

    if not is_valid_phone(phone):
        logger.info("Rejected submission: invalid phone format")
        raise InvalidPhone()
