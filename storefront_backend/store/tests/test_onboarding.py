# store/tests/test_onboarding.py

from django.test import TestCase, override_settings
from rest_framework.test import APIClient

from store.models import Store
from users.models import User


@override_settings(FRONTEND_BASE_URL="https://shops.example.com")
class OnboardingApiTests(TestCase):
    """
    GUARANTEES:
    - One store per seller
    - An existing store always answers with the dashboard redirect
    - Invalid input writes nothing
    """

    def setUp(self):
        self.client = APIClient()
        self.seller = User.objects.create_user(phone="5551234567", password="1234")
        self.client.force_authenticate(self.seller)

    def _onboard(self, **overrides):
        data = {
            "store_name": "My Shop",
            "contact_phone": "(555) 123-4567",
            "terms_accepted": True,
        }
        data.update(overrides)
        return self.client.post("/api/store/onboarding/", data, format="json")

    def test_onboarding_then_dashboard(self):
        response = self._onboard()

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data["slug"], "my-shop")
        self.assertEqual(response.data["contact_phone"], "5551234567")
        self.assertEqual(response.data["redirect"], "/seller/dashboard")
        self.assertEqual(response.data["store_url"], "https://shops.example.com/store/my-shop")

        dashboard = self.client.get("/api/store/dashboard/").data
        self.assertEqual(dashboard["store"]["store_name"], "My Shop")
        self.assertEqual(dashboard["product_count"], 0)
        self.assertEqual(dashboard["max_products"], 12)
        self.assertEqual(dashboard["summary"], "0 of 12 products")
        self.assertEqual(dashboard["visits"], {"last_7_days": 0, "last_30_days": 0})
        self.assertIsNone(dashboard["redirect"])

    def test_second_onboarding_redirects_to_dashboard(self):
        self._onboard()

        response = self._onboard(store_name="Another Shop")

        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.data["redirect"], "/seller/dashboard")
        self.assertEqual(Store.objects.filter(seller=self.seller).count(), 1)

    def test_existing_store_wins_over_bad_input(self):
        self._onboard()

        response = self.client.post("/api/store/onboarding/", {}, format="json")

        self.assertEqual(response.status_code, 409)

    def test_onboarding_status(self):
        before = self.client.get("/api/store/onboarding/").data
        self.assertEqual(before, {"has_store": False, "redirect": None})

        self._onboard()

        after = self.client.get("/api/store/onboarding/").data
        self.assertEqual(after, {"has_store": True, "redirect": "/seller/dashboard"})

    def test_invalid_details_write_nothing(self):
        response = self._onboard(store_name=" ab ", contact_phone="555", terms_accepted=False)

        self.assertEqual(response.status_code, 400)
        self.assertIn("store_name", response.data)
        self.assertIn("contact_phone", response.data)
        self.assertIn("terms_accepted", response.data)
        self.assertFalse(Store.objects.exists())

    def test_reserved_characters_rejected(self):
        response = self._onboard(store_name="Shoes/Bags")

        self.assertEqual(response.status_code, 400)
        self.assertIn("store_name", response.data)

    def test_name_without_letters_or_numbers_rejected(self):
        for name in ["---", "- -", "   -   "]:
            response = self._onboard(store_name=name)

            self.assertEqual(response.status_code, 400, name)
            self.assertIn("store_name", response.data)

        self.assertFalse(Store.objects.exists())

    def test_overlong_contact_phone_rejected(self):
        response = self._onboard(contact_phone="1" * 16)

        self.assertEqual(response.status_code, 400)
        self.assertIn("contact_phone", response.data)
        self.assertFalse(Store.objects.exists())

    def test_taken_name_is_a_validation_error(self):
        other = User.objects.create_user(phone="5559876543", password="1234")
        Store.objects.create(seller=other, store_name="My Shop", contact_phone="5559876543")

        response = self._onboard(store_name="my   SHOP")

        self.assertEqual(response.status_code, 400)
        self.assertIn("store_name", response.data)
        self.assertFalse(Store.objects.filter(seller=self.seller).exists())

    def test_dashboard_without_store(self):
        response = self.client.get("/api/store/dashboard/")

        self.assertEqual(response.status_code, 200)
        self.assertIsNone(response.data["store"])
        self.assertEqual(response.data["redirect"], "/seller/onboarding")

    def test_share_url(self):
        self.assertEqual(self.client.get("/api/store/share-url/").status_code, 404)

        self._onboard()

        response = self.client.get("/api/store/share-url/")
        self.assertEqual(response.data["store_url"], "https://shops.example.com/store/my-shop")

    def test_onboarding_requires_session(self):
        self.client.force_authenticate(None)

        self.assertEqual(self._onboard().status_code, 401)
