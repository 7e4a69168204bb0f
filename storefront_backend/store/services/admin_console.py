# store/services/admin_console.py

"""
PLATFORM ADMIN CONSOLE

load_admin_console(user, query)
- every store with seller phone, product count, visits (7 / 30 days), joined date
- metrics are computed over ALL stores; the optional query only narrows the rows

toggle_store_activation(user, store_id, current_active)
- writes NOT current_active (the caller's view of the flag)
- on failure nothing changes; on success the console is reloaded
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from django.db import DatabaseError
from django.db.models import Count, Q
from django.utils import timezone

from permissions.roles import is_platform_admin
from store.models import Store
from store.services.exceptions import (
    AuthorizationError,
    BackendWriteError,
    StoreNotFoundError,
)
from store.services.visits import MONTH, WEEK
from users.services.phone import digits_only

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoreRow:
    store_id: object
    store_name: str
    slug: str
    seller_phone: str
    contact_phone: str
    is_active: bool
    product_count: int
    visits_last_7_days: int
    visits_last_30_days: int
    joined_at: datetime


@dataclass(frozen=True)
class AdminMetrics:
    total_sellers: int
    active_sellers: int
    total_products: int
    average_products_per_store: Decimal
    total_monthly_visits: int
    average_monthly_visits: Decimal


def _assert_admin(user) -> None:
    if not is_platform_admin(user):
        raise AuthorizationError("Admin access required")


def _average(total: int, count: int) -> Decimal:
    if not count:
        return Decimal("0.0")
    return (Decimal(total) / Decimal(count)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)


def load_store_rows(*, now=None) -> list[StoreRow]:
    now = now or timezone.now()

    stores = (
        Store.objects.select_related("seller")
        .annotate(
            product_count=Count("products", distinct=True),
            visits_week=Count(
                "visits",
                filter=Q(visits__created_at__gte=now - WEEK),
                distinct=True,
            ),
            visits_month=Count(
                "visits",
                filter=Q(visits__created_at__gte=now - MONTH),
                distinct=True,
            ),
        )
        .order_by("-created_at")
    )

    return [
        StoreRow(
            store_id=store.id,
            store_name=store.store_name,
            slug=store.slug,
            seller_phone=store.seller.phone,
            contact_phone=store.contact_phone,
            is_active=store.is_active,
            product_count=store.product_count,
            visits_last_7_days=store.visits_week,
            visits_last_30_days=store.visits_month,
            joined_at=store.created_at,
        )
        for store in stores
    ]


def compute_metrics(rows: list[StoreRow]) -> AdminMetrics:
    total_sellers = len(rows)
    total_products = sum(row.product_count for row in rows)
    total_monthly_visits = sum(row.visits_last_30_days for row in rows)

    return AdminMetrics(
        total_sellers=total_sellers,
        active_sellers=sum(1 for row in rows if row.is_active),
        total_products=total_products,
        average_products_per_store=_average(total_products, total_sellers),
        total_monthly_visits=total_monthly_visits,
        average_monthly_visits=_average(total_monthly_visits, total_sellers),
    )


def filter_rows(rows: list[StoreRow], query: Optional[str]) -> list[StoreRow]:
    """
    Case-insensitive substring match on store name or phone.
    Phones are stored as digits, so the query is matched digits-only there:
    "(555) 222-2" finds 5552222222.
    """
    needle = (query or "").strip().lower()
    if not needle:
        return list(rows)

    digits = digits_only(needle)

    return [
        row
        for row in rows
        if needle in row.store_name.lower()
        or (digits and (digits in row.seller_phone or digits in row.contact_phone))
    ]


def load_admin_console(*, user, query: Optional[str] = None) -> dict:
    _assert_admin(user)

    rows = load_store_rows()

    return {
        "metrics": compute_metrics(rows),
        "stores": filter_rows(rows, query),
        "query": (query or "").strip(),
    }


def toggle_store_activation(*, user, store_id, current_active: bool, query: Optional[str] = None) -> dict:
    _assert_admin(user)

    new_active = not current_active

    try:
        updated = Store.objects.filter(pk=store_id).update(
            is_active=new_active,
            updated_at=timezone.now(),
        )
    except DatabaseError as exc:
        logger.error(
            "Store activation toggle failed",
            extra={"store_id": str(store_id), "error": str(exc)},
        )
        raise BackendWriteError(str(exc)) from exc

    if not updated:
        raise StoreNotFoundError("Store not found")

    logger.info(
        "Store activation toggled",
        extra={"store_id": str(store_id), "is_active": new_active, "admin_id": str(user.id)},
    )

    return load_admin_console(user=user, query=query)
