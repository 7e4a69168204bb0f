# store/models/store.py

import uuid

from django.conf import settings
from django.db import models

from store.services.slugs import slugify_store_name


class Store(models.Model):
    """
    A seller's storefront.

    Guarantees:
    - one store per seller (seller is one-to-one)
    - slug is always derived from store_name and is unique
    - is_active=False hides the storefront from the public resolver
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    seller = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="store",
    )

    store_name = models.CharField(max_length=120)
    slug = models.CharField(max_length=140, unique=True, editable=False)
    contact_phone = models.CharField(max_length=20)

    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def save(self, *args, **kwargs):
        self.store_name = (self.store_name or "").strip()
        self.slug = slugify_store_name(self.store_name)
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.store_name} ({self.slug})"
