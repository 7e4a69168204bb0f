# users/models/phone_verification.py

from __future__ import annotations

from django.contrib.auth.hashers import check_password
from django.db import models
from django.utils import timezone


class PhoneVerification(models.Model):
    """
    Pending seller registration awaiting its SMS code.

    - code_hash / pin_hash use Django's password hashers
    - one live row per phone: a new request replaces older pending rows
    - consumed rows are kept for audit
    """

    phone = models.CharField(max_length=20, db_index=True)
    pin_hash = models.CharField(max_length=128)
    code_hash = models.CharField(max_length=128)

    attempts = models.PositiveSmallIntegerField(default=0)
    expires_at = models.DateTimeField()
    consumed_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        state = "consumed" if self.consumed_at else "pending"
        return f"{self.phone} ({state})"

    def is_expired(self, now=None) -> bool:
        return (now or timezone.now()) >= self.expires_at

    def matches(self, code: str) -> bool:
        return check_password(code, self.code_hash)
