# users/services/verification.py

"""
SELLER REGISTRATION (PHONE VERIFICATION)

Two steps:
1) request_registration(phone, pin)
   - replaces any pending verification for the phone
   - stores the PIN + a fresh 6-digit code (both hashed)
   - sends the code by SMS
2) verify_registration(phone, code)
   - code must match an unexpired pending verification (max 5 attempts)
   - creates the seller account with the pending PIN

Input shape (10-15 digit phone, 4-digit PIN, matching confirmation, 6-digit
code) is validated by the serializers before these functions run; the
phone shape is checked again here for non-HTTP callers.
"""

from __future__ import annotations

import logging
import secrets
from datetime import timedelta

from django.conf import settings
from django.contrib.auth.hashers import make_password
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction
from django.utils import timezone

from permissions.roles import ROLE_SELLER
from users.models import PhoneVerification, User
from users.services.phone import VERIFICATION_CODE_LENGTH, digits_only, is_valid_phone
from users.services.sms import send_verification_code

logger = logging.getLogger(__name__)

MAX_VERIFICATION_ATTEMPTS = 5

ACCOUNT_EXISTS_MESSAGE = "An account with this phone number already exists"
INVALID_PHONE_MESSAGE = "Please enter a valid phone number"


class RegistrationError(Exception):
    """Base registration failure."""


class AccountExistsError(RegistrationError):
    pass


class VerificationError(RegistrationError):
    pass


def _generate_code() -> str:
    return f"{secrets.randbelow(10 ** VERIFICATION_CODE_LENGTH):0{VERIFICATION_CODE_LENGTH}d}"


def _ttl() -> timedelta:
    return timedelta(minutes=int(getattr(settings, "PHONE_VERIFICATION_TTL_MINUTES", 10)))


def account_exists(phone: str) -> bool:
    return User.objects.filter(phone=digits_only(phone)).exists()


def request_registration(*, phone: str, pin: str) -> PhoneVerification:
    phone = digits_only(phone)

    if not is_valid_phone(phone):
        raise VerificationError(INVALID_PHONE_MESSAGE)

    if account_exists(phone):
        raise AccountExistsError(ACCOUNT_EXISTS_MESSAGE)

    code = _generate_code()

    with transaction.atomic():
        PhoneVerification.objects.filter(phone=phone, consumed_at__isnull=True).delete()
        verification = PhoneVerification.objects.create(
            phone=phone,
            pin_hash=make_password(pin),
            code_hash=make_password(code),
            expires_at=timezone.now() + _ttl(),
        )

    send_verification_code(phone, code)
    logger.info("Verification code issued", extra={"phone": phone})
    return verification


def _is_taken_phone(exc: ValidationError) -> bool:
    """full_clean() reports a duplicate phone as a "unique" error on the phone field."""
    errors = getattr(exc, "error_dict", {}).get("phone", [])
    return any(error.code == "unique" for error in errors)


def _pending_for(phone: str):
    return (
        PhoneVerification.objects.filter(phone=phone, consumed_at__isnull=True)
        .order_by("-created_at")
        .first()
    )


def verify_registration(*, phone: str, code: str) -> User:
    phone = digits_only(phone)

    pending = _pending_for(phone)
    if pending is None:
        raise VerificationError("No pending verification for this phone number")

    if pending.is_expired():
        raise VerificationError("Verification code has expired. Please request a new one.")

    if pending.attempts >= MAX_VERIFICATION_ATTEMPTS:
        raise VerificationError("Too many attempts. Please request a new code.")

    if not pending.matches(code):
        # Counted outside any transaction so the attempt survives the error.
        PhoneVerification.objects.filter(pk=pending.pk).update(attempts=pending.attempts + 1)
        logger.warning("Invalid verification code", extra={"phone": phone})
        raise VerificationError("Invalid verification code")

    if account_exists(phone):
        raise AccountExistsError(ACCOUNT_EXISTS_MESSAGE)

    try:
        with transaction.atomic():
            user = User.objects.create_user(phone=phone, role=ROLE_SELLER)
            user.password = pending.pin_hash
            user.save(update_fields=["password"])

            pending.consumed_at = timezone.now()
            pending.save(update_fields=["consumed_at"])
    except IntegrityError as exc:
        raise AccountExistsError(ACCOUNT_EXISTS_MESSAGE) from exc
    except ValidationError as exc:
        if _is_taken_phone(exc):
            raise AccountExistsError(ACCOUNT_EXISTS_MESSAGE) from exc
        logger.warning("Seller account rejected", extra={"phone": phone, "error": str(exc)})
        raise VerificationError(INVALID_PHONE_MESSAGE) from exc

    logger.info("Seller account created", extra={"user_id": str(user.id)})
    return user
