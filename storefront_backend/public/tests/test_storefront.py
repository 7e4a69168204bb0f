# public/tests/test_storefront.py

from decimal import Decimal
from unittest import mock

from django.test import SimpleTestCase, TestCase
from rest_framework.test import APIClient

from products.models import Product
from public.services.storefront import whatsapp_link
from store.models import Store, VisitorEvent
from store.services.onboarding import create_store
from users.models import User


class StorefrontTests(TestCase):
    """
    Public /store/<slug>.

    GUARANTEES:
    - Only active stores resolve
    - Unknown and deactivated stores are indistinguishable
    - A visit is recorded per storefront view, and never breaks the page
    """

    def setUp(self):
        self.client = APIClient()
        seller = User.objects.create_user(phone="5551234567", password="1234")
        self.store = create_store(
            user=seller,
            store_name="Home Goods",
            contact_phone="+1 (555) 123-4567",
            terms_accepted=True,
        )
        self.older = Product.objects.create(
            store=self.store,
            name="Mug",
            description="Stoneware",
            price=Decimal("8.00"),
            images=["/media/products/a/mug.png"],
        )
        self.newer = Product.objects.create(
            store=self.store,
            name="Lamp",
            description="Brass",
            price=Decimal("40.00"),
            images=["/media/products/a/lamp.png"],
        )

    def _get(self, slug):
        return self.client.get(f"/api/public/stores/{slug}/")

    def test_storefront_payload(self):
        response = self._get("home-goods")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["store"]["store_name"], "Home Goods")
        self.assertEqual(response.data["whatsapp_url"], "https://wa.me/15551234567")
        self.assertEqual(response.data["product_count"], 2)
        self.assertEqual(
            [p["name"] for p in response.data["products"]],
            ["Lamp", "Mug"],
        )
        self.assertNotIn("is_active", response.data["store"])

    def test_slug_variants_resolve(self):
        self.assertEqual(self._get("Home-Goods").status_code, 200)
        self.assertEqual(self._get("home%20goods").status_code, 200)

    def test_view_records_visit(self):
        self._get("home-goods")
        self._get("home-goods")

        self.assertEqual(VisitorEvent.objects.filter(store=self.store).count(), 2)

    def test_unknown_and_deactivated_are_identical(self):
        unknown = self._get("no-such-shop")

        Store.objects.filter(pk=self.store.pk).update(is_active=False)
        deactivated = self._get("home-goods")

        self.assertEqual(unknown.status_code, 404)
        self.assertEqual(deactivated.status_code, unknown.status_code)
        self.assertEqual(deactivated.data, unknown.data)
        self.assertEqual(deactivated.data, {"detail": "Store not found"})
        self.assertFalse(VisitorEvent.objects.exists())

    def test_visit_failure_does_not_break_page(self):
        with mock.patch(
            "store.services.visits.record_visit",
            side_effect=RuntimeError("events table unavailable"),
        ):
            response = self._get("home-goods")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["product_count"], 2)
        self.assertFalse(VisitorEvent.objects.exists())

    def test_product_detail(self):
        response = self.client.get(f"/api/public/stores/home-goods/products/{self.older.id}/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["product"]["name"], "Mug")
        self.assertEqual(response.data["product"]["price"], "8.00")
        self.assertFalse(VisitorEvent.objects.exists())

    def test_product_of_other_store_not_found(self):
        other_seller = User.objects.create_user(phone="5559876543", password="1234")
        other = Store.objects.create(seller=other_seller, store_name="Book Nook", contact_phone="5559876543")

        response = self.client.get(f"/api/public/stores/{other.slug}/products/{self.older.id}/")

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data["detail"], "Product not found")

    def test_product_detail_of_deactivated_store(self):
        Store.objects.filter(pk=self.store.pk).update(is_active=False)

        response = self.client.get(f"/api/public/stores/home-goods/products/{self.older.id}/")

        self.assertEqual(response.data, {"detail": "Store not found"})


class WhatsappLinkTests(SimpleTestCase):
    def test_digits_only(self):
        self.assertEqual(whatsapp_link("+1 (555) 123-4567"), "https://wa.me/15551234567")
