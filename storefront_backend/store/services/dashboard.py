# store/services/dashboard.py

from __future__ import annotations

from django.conf import settings

from permissions.guards import ROUTE_ONBOARDING, storefront_path
from products.models import MAX_PRODUCTS_PER_STORE
from store.models import Store
from store.services.onboarding import seller_store
from store.services.visits import visit_counts


def store_url(store: Store) -> str:
    """Public link a seller shares: FRONTEND_BASE_URL + /store/<slug>."""
    base = (getattr(settings, "FRONTEND_BASE_URL", "") or "").rstrip("/")
    return f"{base}{storefront_path(store.slug)}"


def product_summary(count: int) -> str:
    return f"{count} of {MAX_PRODUCTS_PER_STORE} products"


def load_dashboard(*, user) -> dict:
    """
    Seller dashboard payload.

    No store yet -> {"store": None, "redirect": "/seller/onboarding"}
    """
    store = seller_store(user)

    if store is None:
        return {"store": None, "redirect": ROUTE_ONBOARDING}

    products = list(store.products.all())

    return {
        "store": store,
        "products": products,
        "product_count": len(products),
        "max_products": MAX_PRODUCTS_PER_STORE,
        "summary": product_summary(len(products)),
        "store_url": store_url(store),
        "visits": visit_counts(store),
        "redirect": None,
    }
