# users/services/phone.py

from __future__ import annotations

import re

MIN_PHONE_DIGITS = 10
MAX_PHONE_DIGITS = 15  # E.164
PIN_LENGTH = 4
VERIFICATION_CODE_LENGTH = 6

_NON_DIGITS = re.compile(r"\D")


def digits_only(value) -> str:
    return _NON_DIGITS.sub("", str(value or ""))


def is_valid_phone(value) -> bool:
    """A phone is valid when it carries 10 to 15 digits once formatting is stripped."""
    return MIN_PHONE_DIGITS <= len(digits_only(value)) <= MAX_PHONE_DIGITS


def is_valid_pin(value) -> bool:
    value = str(value or "")
    return len(value) == PIN_LENGTH and value.isdigit()


def is_valid_verification_code(value) -> bool:
    value = str(value or "")
    return len(value) == VERIFICATION_CODE_LENGTH and value.isdigit()
