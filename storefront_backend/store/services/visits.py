# store/services/visits.py

"""
VISITOR EVENTS

- record_visit(store): append one VisitorEvent
- emit_storefront_viewed(store): fire-and-forget signal for a rendered storefront
- visit_counts(store): views in the last 7 / 30 days
"""

from __future__ import annotations

import logging
from datetime import timedelta

from django.utils import timezone

from store.models import Store, VisitorEvent
from store.signals import storefront_viewed

logger = logging.getLogger(__name__)

WEEK = timedelta(days=7)
MONTH = timedelta(days=30)


def record_visit(store: Store) -> VisitorEvent:
    return VisitorEvent.objects.create(store=store)


def emit_storefront_viewed(store: Store) -> None:
    responses = storefront_viewed.send_robust(sender=Store, store=store)

    for receiver, response in responses:
        if isinstance(response, Exception):
            logger.warning(
                "Storefront view receiver failed",
                extra={
                    "store_id": str(store.id),
                    "receiver": getattr(receiver, "__name__", repr(receiver)),
                    "error": str(response),
                },
            )


def visit_counts(store: Store, *, now=None) -> dict:
    now = now or timezone.now()
    visits = VisitorEvent.objects.filter(store=store)
    return {
        "last_7_days": visits.filter(created_at__gte=now - WEEK).count(),
        "last_30_days": visits.filter(created_at__gte=now - MONTH).count(),
    }
