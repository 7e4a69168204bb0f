# store/urls.py

from django.urls import path

from store.views import (
    AdminStoreListView,
    AdminStoreToggleView,
    DashboardView,
    OnboardingView,
    ShareUrlView,
)

app_name = "store"

urlpatterns = [
    # ---------------- SELLER CONSOLE ----------------
    path("onboarding/", OnboardingView.as_view(), name="onboarding"),
    path("dashboard/", DashboardView.as_view(), name="dashboard"),
    path("share-url/", ShareUrlView.as_view(), name="share-url"),
    # ---------------- ADMIN CONSOLE ----------------
    path("admin/stores/", AdminStoreListView.as_view(), name="admin-stores"),
    path(
        "admin/stores/<uuid:store_id>/toggle/",
        AdminStoreToggleView.as_view(),
        name="admin-store-toggle",
    ),
]
