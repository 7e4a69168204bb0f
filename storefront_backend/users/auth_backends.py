"""
PATH: users/auth_backends.py

AUTH BACKEND: Phone + PIN

Rules:
- Identifier is the phone number; formatting is ignored ("+1 (555) 123-4567"
  and "15551234567" are the same account).
- The secret is the 4-digit PIN, checked with Django's password hashers.
- Inactive accounts never authenticate.

Used by Django auth (admin login passes username=...) and by the login API
(which passes phone=...).
"""

from __future__ import annotations

from django.contrib.auth import get_user_model
from django.contrib.auth.backends import BaseBackend

from users.services.phone import digits_only

User = get_user_model()


class PhonePinBackend(BaseBackend):
    def authenticate(self, request, username=None, password=None, **kwargs):
        phone = digits_only(kwargs.get("phone") or username)
        if not phone or password is None:
            return None

        try:
            user = User.objects.get(phone=phone)
        except User.DoesNotExist:
            # Run the hasher anyway to keep timing similar for unknown phones.
            User().set_password(password)
            return None

        if not user.is_active:
            return None

        if user.check_password(password):
            return user

        return None

    def get_user(self, user_id):
        try:
            return User.objects.get(pk=user_id)
        except User.DoesNotExist:
            return None
