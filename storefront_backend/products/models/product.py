# products/models/product.py

import uuid
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models

MAX_PRODUCTS_PER_STORE = 12
MAX_IMAGES_PER_PRODUCT = 3


class Product(models.Model):
    """
    A product listed on a seller's storefront.

    CATALOG RULES:
    - A store holds at most MAX_PRODUCTS_PER_STORE products
    - images is an ordered list of public URLs (at most MAX_IMAGES_PER_PRODUCT)
    - price is non-negative
    - newest products first
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    store = models.ForeignKey(
        "store.Store",
        on_delete=models.CASCADE,
        related_name="products",
    )

    name = models.CharField(max_length=255)
    description = models.TextField()

    price = models.DecimalField(max_digits=10, decimal_places=2)

    images = models.JSONField(default=list, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["store", "-created_at"], name="product_store_created_idx"),
        ]

    def clean(self):
        if self.price is not None and self.price < Decimal("0"):
            raise ValidationError({"price": "Price must be non-negative"})
        if len(self.images or []) > MAX_IMAGES_PER_PRODUCT:
            raise ValidationError({"images": "A product can have at most 3 images"})

    def __str__(self):
        return f"{self.name} ({self.price})"
