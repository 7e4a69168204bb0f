# store/apps.py

"""
STORE APP CONFIG

Seller storefronts:
- Onboarding (one store per seller)
- Seller dashboard + share URL
- Visitor events
- Platform admin console (list + activation toggle)
"""

from django.apps import AppConfig


class StoreConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "store"
    verbose_name = "Seller Stores"

    def ready(self):
        from store import signals  # noqa: F401
