# users/tests/test_auth.py

import os
from io import StringIO
from unittest import mock

from django.core.management import call_command
from django.test import TestCase
from rest_framework.test import APIClient

from users.models import User


class LoginLogoutTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.seller = User.objects.create_user(phone="5551234567", password="1234")

    def _login(self, phone="5551234567", pin="1234"):
        return self.client.post(
            "/api/auth/login/",
            {"phone": phone, "pin": pin},
            format="json",
        )

    def test_login_ignores_phone_formatting(self):
        response = self._login(phone="(555) 123-4567")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["next"], "/seller/dashboard")
        self.assertEqual(response.data["user"]["phone"], "5551234567")

    def test_wrong_pin_rejected(self):
        response = self._login(pin="9999")

        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.data["detail"], "Invalid credentials")

    def test_inactive_account_rejected(self):
        self.seller.is_active = False
        self.seller.save()

        self.assertEqual(self._login().status_code, 401)

    def test_me_with_access_token(self):
        access = self._login().data["access"]
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {access}")

        response = self.client.get("/api/auth/me/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["role"], "seller")
        self.assertFalse(response.data["has_store"])

    def test_me_requires_session(self):
        response = self.client.get("/api/auth/me/")

        self.assertEqual(response.status_code, 401)

    def test_logout_blacklists_refresh_token(self):
        tokens = self._login().data
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {tokens['access']}")

        response = self.client.post(
            "/api/auth/logout/", {"refresh": tokens["refresh"]}, format="json"
        )
        self.assertEqual(response.status_code, 205)
        self.assertEqual(response.data["redirect"], "/")

        response = self.client.post(
            "/api/auth/jwt/refresh/", {"refresh": tokens["refresh"]}, format="json"
        )
        self.assertEqual(response.status_code, 401)

    def test_logout_with_garbage_token(self):
        self.client.force_authenticate(user=self.seller)

        response = self.client.post(
            "/api/auth/logout/", {"refresh": "not-a-token"}, format="json"
        )

        self.assertEqual(response.status_code, 400)


class EnsureAdminCommandTests(TestCase):
    def test_creates_platform_admin(self):
        env = {"AUTO_ADMIN_PHONE": "+1 555 000 1111", "AUTO_ADMIN_PIN": "4321"}
        with mock.patch.dict(os.environ, env):
            call_command("ensure_admin", stdout=StringIO())

        admin = User.objects.get(phone="15550001111")
        self.assertEqual(admin.role, "admin")
        self.assertTrue(admin.is_superuser)
        self.assertTrue(admin.check_password("4321"))

    def test_promotes_existing_seller(self):
        User.objects.create_user(phone="15550001111", password="1234")

        env = {"AUTO_ADMIN_PHONE": "15550001111", "AUTO_ADMIN_PIN": "4321"}
        with mock.patch.dict(os.environ, env):
            call_command("ensure_admin", stdout=StringIO())

        admin = User.objects.get(phone="15550001111")
        self.assertEqual(admin.role, "admin")
        self.assertTrue(admin.check_password("4321"))

    def test_skips_without_env(self):
        with mock.patch.dict(os.environ, {"AUTO_ADMIN_PHONE": "", "AUTO_ADMIN_PIN": ""}):
            call_command("ensure_admin", stdout=StringIO())

        self.assertFalse(User.objects.exists())
