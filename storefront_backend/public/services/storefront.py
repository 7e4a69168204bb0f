# public/services/storefront.py

"""
PUBLIC STOREFRONT RESOLVER

resolve_storefront(slug)
- normalizes the slug ("Home Goods", "home-goods", "HOME--goods" -> "home-goods")
- matches ACTIVE stores only
- unknown and deactivated stores raise the SAME StoreNotFoundError
- emits storefront_viewed after the payload is built (never affects the result)
"""

from __future__ import annotations

import logging

from products.models import Product
from store.models import Store
from store.services.exceptions import ProductNotFoundError, StoreNotFoundError
from store.services.slugs import normalize_slug
from store.services.visits import emit_storefront_viewed
from users.services.phone import digits_only

logger = logging.getLogger(__name__)

WHATSAPP_BASE_URL = "https://wa.me/"


def whatsapp_link(phone: str) -> str:
    return f"{WHATSAPP_BASE_URL}{digits_only(phone)}"


def get_active_store(slug: str) -> Store:
    normalized = normalize_slug(slug)
    store = Store.objects.filter(slug=normalized, is_active=True).first() if normalized else None

    if store is None:
        logger.info("Storefront not found", extra={"slug": slug})
        raise StoreNotFoundError("Store not found")

    return store


def resolve_storefront(slug: str) -> dict:
    store = get_active_store(slug)
    products = list(store.products.all())

    payload = {
        "store": store,
        "whatsapp_url": whatsapp_link(store.contact_phone),
        "products": products,
        "product_count": len(products),
    }

    emit_storefront_viewed(store)
    return payload


def resolve_storefront_product(slug: str, product_id) -> dict:
    store = get_active_store(slug)

    product = Product.objects.filter(pk=product_id, store=store).first()
    if product is None:
        raise ProductNotFoundError("Product not found")

    return {
        "store": store,
        "whatsapp_url": whatsapp_link(store.contact_phone),
        "product": product,
    }
