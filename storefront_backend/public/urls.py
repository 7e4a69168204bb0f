# public/urls.py
"""
PUBLIC API URLS (STOREFRONTS)

Base path (mounted in backend/urls.py):
    /api/public/
"""

from __future__ import annotations

from django.urls import path

from public.views.storefront import StorefrontProductView, StorefrontView

app_name = "public"

urlpatterns = [
    path("stores/<str:slug>/", StorefrontView.as_view(), name="storefront"),
    path(
        "stores/<str:slug>/products/<uuid:product_id>/",
        StorefrontProductView.as_view(),
        name="storefront-product",
    ),
]
