"""
PATH: users/models/user.py

CUSTOM USER MODEL (PHONE + PIN)

Sellers sign up with a phone number and a 4-digit PIN:
- phone is the login identifier, stored as digits only (formatting stripped)
- the PIN is stored through Django's password hashers (never in clear)
- role is "seller" for everyone who registers; admins are promoted explicitly
"""

from __future__ import annotations

import uuid

from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.core.exceptions import ValidationError
from django.db import models

from permissions.roles import ROLE_ADMIN, ROLE_CHOICES, ROLE_SELLER
from users.services.phone import digits_only, is_valid_phone


# ---------------- USER MANAGER ----------------
class UserManager(BaseUserManager):
    def create_user(self, phone=None, password=None, **extra_fields):
        """
        create_user(phone="+1 (555) 123-4567", password="1234")

        Rules:
        - phone is required and normalised to digits
        - password is the seller PIN (hashed); omit it for an unusable password
        """
        phone = digits_only(phone)
        if not phone:
            raise ValueError("A phone number is required")

        extra_fields.setdefault("is_active", True)
        extra_fields.setdefault("role", ROLE_SELLER)

        user = self.model(phone=phone, **extra_fields)

        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()

        user.full_clean()
        user.save(using=self._db)
        return user

    def create_superuser(self, phone, password=None, **extra_fields):
        if not password:
            raise ValueError("Superuser must have a password")

        extra_fields.setdefault("role", ROLE_ADMIN)
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("is_active", True)

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True")

        return self.create_user(phone=phone, password=password, **extra_fields)

    def get_by_natural_key(self, username):
        return self.get(**{self.model.USERNAME_FIELD: digits_only(username)})


# ---------------- USER MODEL ----------------
class User(AbstractBaseUser, PermissionsMixin):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # Canonical identity (digits only)
    phone = models.CharField(max_length=20, unique=True)

    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default=ROLE_SELLER)

    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = UserManager()

    USERNAME_FIELD = "phone"
    REQUIRED_FIELDS = []

    class Meta:
        ordering = ["-created_at"]

    def clean(self):
        self.phone = digits_only(self.phone)
        if not is_valid_phone(self.phone):
            raise ValidationError({"phone": "Please enter a valid phone number"})

    def __str__(self):
        return f"{self.phone} ({self.role})"
