from .admin_console import AdminStoreListView, AdminStoreToggleView
from .seller import DashboardView, OnboardingView, ShareUrlView

__all__ = [
    "OnboardingView",
    "DashboardView",
    "ShareUrlView",
    "AdminStoreListView",
    "AdminStoreToggleView",
]
