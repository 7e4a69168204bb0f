# users/management/commands/ensure_admin.py

"""
PATH: users/management/commands/ensure_admin.py

Production-safe platform admin bootstrap.

- Reads AUTO_ADMIN_PHONE + AUTO_ADMIN_PIN from env.
- Idempotent: creates the admin if missing; promotes + resets the PIN if the phone exists.
- Logs minimal info; does NOT print the PIN.
"""

from __future__ import annotations

import os

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from permissions.roles import ROLE_ADMIN
from users.services.phone import digits_only, is_valid_phone, is_valid_pin


class Command(BaseCommand):
    help = "Create/update the platform admin from env vars (idempotent)."

    def handle(self, *args, **options):
        phone = digits_only(os.environ.get("AUTO_ADMIN_PHONE") or "")
        pin = (os.environ.get("AUTO_ADMIN_PIN") or "").strip()

        if not phone or not pin:
            self.stdout.write(self.style.WARNING("AUTO_ADMIN_* env vars not set. Skipping."))
            return

        if not is_valid_phone(phone):
            raise CommandError("AUTO_ADMIN_PHONE is not a valid phone number")
        if not is_valid_pin(pin):
            raise CommandError("AUTO_ADMIN_PIN must be exactly 4 digits")

        User = get_user_model()

        with transaction.atomic():
            user = User.objects.filter(phone=phone).first()

            if user:
                user.role = ROLE_ADMIN
                user.is_active = True
                user.is_staff = True
                user.is_superuser = True
                user.set_password(pin)
                user.save()
                self.stdout.write(self.style.SUCCESS(f"Admin ensured: {phone} (updated)"))
                return

            User.objects.create_superuser(phone=phone, password=pin)

        self.stdout.write(self.style.SUCCESS(f"Admin ensured: {phone} (created)"))
