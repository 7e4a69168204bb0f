# public/apps.py

"""
PUBLIC APP CONFIG

Public storefronts (AllowAny):
- /store/<slug> resolver (active stores only)
- Product detail
- Contact-seller (WhatsApp) links
"""

from django.apps import AppConfig


class PublicConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "public"
    verbose_name = "Public Storefronts"
