# users/services/sms.py

"""
SMS SENDER

Delivery of registration codes is delegated to an external SMS provider.
Only the console sender ships here: it writes the code to the log so local
development and demos can complete the verification step.

Production refuses SMS_BACKEND=console (see backend/settings/prod.py).
"""

from __future__ import annotations

import logging

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)


def _console_send(phone: str, message: str) -> None:
    logger.info("SMS to %s: %s", phone, message)


SENDERS = {
    "console": _console_send,
}


def send_sms(phone: str, message: str) -> None:
    backend = getattr(settings, "SMS_BACKEND", "console")
    sender = SENDERS.get(backend)
    if sender is None:
        raise ImproperlyConfigured(f"Unknown SMS_BACKEND: {backend!r}")
    sender(phone, message)


def send_verification_code(phone: str, code: str) -> None:
    send_sms(phone, f"Your verification code is {code}")
