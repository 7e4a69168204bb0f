# users/tests/test_registration.py

from datetime import timedelta
from unittest import mock

from django.contrib.auth.hashers import make_password
from django.test import TestCase
from django.utils import timezone
from rest_framework.test import APIClient

from users.models import PhoneVerification, User
from users.services.verification import (
    MAX_VERIFICATION_ATTEMPTS,
    AccountExistsError,
    VerificationError,
    request_registration,
    verify_registration,
)

SEND_CODE = "users.services.verification.send_verification_code"


class RegistrationServiceTests(TestCase):
    """
    Phone + PIN registration.

    GUARANTEES:
    - Codes and PINs are never stored in clear
    - An account exists only after the code is confirmed
    - A phone can hold at most one account
    """

    def _request(self, phone="+1 (555) 123-4567", pin="1234"):
        with mock.patch(SEND_CODE) as send:
            request_registration(phone=phone, pin=pin)
        return send.call_args[0][1]

    def test_request_stores_hashed_code_and_pin(self):
        code = self._request()

        pending = PhoneVerification.objects.get(phone="15551234567")
        self.assertNotEqual(pending.code_hash, code)
        self.assertNotEqual(pending.pin_hash, "1234")
        self.assertTrue(pending.matches(code))
        self.assertFalse(User.objects.filter(phone="15551234567").exists())

    def test_new_request_replaces_pending_code(self):
        self._request()
        code = self._request()

        self.assertEqual(PhoneVerification.objects.filter(phone="15551234567").count(), 1)
        self.assertTrue(PhoneVerification.objects.get(phone="15551234567").matches(code))

    def test_verify_creates_seller_with_pin(self):
        code = self._request()

        user = verify_registration(phone="15551234567", code=code)

        self.assertEqual(user.phone, "15551234567")
        self.assertEqual(user.role, "seller")
        self.assertTrue(user.check_password("1234"))
        self.assertIsNotNone(PhoneVerification.objects.get(phone="15551234567").consumed_at)

    def test_wrong_code_counts_attempts(self):
        self._request()

        with self.assertRaises(VerificationError):
            verify_registration(phone="15551234567", code="000000")

        pending = PhoneVerification.objects.get(phone="15551234567")
        self.assertEqual(pending.attempts, 1)

    def test_too_many_attempts_blocks_correct_code(self):
        code = self._request()
        PhoneVerification.objects.filter(phone="15551234567").update(
            attempts=MAX_VERIFICATION_ATTEMPTS
        )

        with self.assertRaises(VerificationError):
            verify_registration(phone="15551234567", code=code)

        self.assertFalse(User.objects.filter(phone="15551234567").exists())

    def test_expired_code_rejected(self):
        code = self._request()
        PhoneVerification.objects.filter(phone="15551234567").update(
            expires_at=timezone.now() - timedelta(minutes=1)
        )

        with self.assertRaises(VerificationError):
            verify_registration(phone="15551234567", code=code)

    def test_existing_phone_cannot_register_again(self):
        User.objects.create_user(phone="15551234567", password="1234")

        with mock.patch(SEND_CODE) as send:
            with self.assertRaises(AccountExistsError):
                request_registration(phone="15551234567", pin="9999")

        send.assert_not_called()

    def test_overlong_phone_rejected_before_sms(self):
        with mock.patch(SEND_CODE) as send:
            with self.assertRaises(VerificationError):
                request_registration(phone="1" * 16, pin="1234")

        send.assert_not_called()
        self.assertFalse(PhoneVerification.objects.exists())

    def test_invalid_pending_phone_is_not_reported_as_taken(self):
        PhoneVerification.objects.create(
            phone="1" * 16,
            pin_hash=make_password("1234"),
            code_hash=make_password("123456"),
            expires_at=timezone.now() + timedelta(minutes=5),
        )

        with self.assertRaises(VerificationError) as ctx:
            verify_registration(phone="1" * 16, code="123456")

        self.assertNotIsInstance(ctx.exception, AccountExistsError)
        self.assertEqual(str(ctx.exception), "Please enter a valid phone number")
        self.assertFalse(User.objects.exists())


class RegistrationApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()

    def test_register_then_verify_opens_session(self):
        with mock.patch(SEND_CODE) as send:
            response = self.client.post(
                "/api/auth/register/",
                {"phone": "+1 (555) 123-4567", "pin": "1234", "confirm_pin": "1234"},
                format="json",
            )

        self.assertEqual(response.status_code, 202)
        self.assertEqual(response.data["step"], "verify")
        code = send.call_args[0][1]

        response = self.client.post(
            "/api/auth/register/verify/",
            {"phone": "15551234567", "code": code},
            format="json",
        )

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data["next"], "/seller/onboarding")
        self.assertEqual(response.data["user"]["role"], "seller")
        self.assertFalse(response.data["user"]["has_store"])
        self.assertIn("access", response.data)

    def test_short_phone_rejected(self):
        response = self.client.post(
            "/api/auth/register/",
            {"phone": "555-1234", "pin": "1234", "confirm_pin": "1234"},
            format="json",
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["phone"][0], "Please enter a valid phone number")

    def test_overlong_phone_rejected(self):
        with mock.patch(SEND_CODE) as send:
            response = self.client.post(
                "/api/auth/register/",
                {"phone": "1" * 25, "pin": "1234", "confirm_pin": "1234"},
                format="json",
            )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["phone"][0], "Please enter a valid phone number")
        send.assert_not_called()

    def test_pin_must_be_four_digits(self):
        response = self.client.post(
            "/api/auth/register/",
            {"phone": "5551234567", "pin": "12a4", "confirm_pin": "12a4"},
            format="json",
        )

        self.assertEqual(response.status_code, 400)
        self.assertIn("pin", response.data)

    def test_pin_confirmation_must_match(self):
        response = self.client.post(
            "/api/auth/register/",
            {"phone": "5551234567", "pin": "1234", "confirm_pin": "4321"},
            format="json",
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            response.data["confirm_pin"][0],
            "Please make sure both PINs are the same",
        )

    def test_registered_phone_conflicts(self):
        User.objects.create_user(phone="5551234567", password="1234")

        response = self.client.post(
            "/api/auth/register/",
            {"phone": "5551234567", "pin": "1234", "confirm_pin": "1234"},
            format="json",
        )

        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.data["redirect"], "/auth/login")

    def test_malformed_code_rejected(self):
        response = self.client.post(
            "/api/auth/register/verify/",
            {"phone": "5551234567", "code": "12"},
            format="json",
        )

        self.assertEqual(response.status_code, 400)
        self.assertIn("code", response.data)
