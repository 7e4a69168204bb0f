# store/models/visitor_event.py

from django.db import models
from django.utils import timezone


class VisitorEvent(models.Model):
    """
    One public storefront view (append-only).
    """

    store = models.ForeignKey(
        "store.Store",
        on_delete=models.CASCADE,
        related_name="visits",
    )
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["store", "created_at"], name="store_visit_store_created_idx"),
        ]

    def __str__(self):
        return f"Visit {self.store_id} @ {self.created_at:%Y-%m-%d %H:%M}"
