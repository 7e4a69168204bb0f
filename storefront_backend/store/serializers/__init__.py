from .admin_console import (
    AdminConsoleSerializer,
    AdminMetricsSerializer,
    StoreRowSerializer,
    ToggleStoreSerializer,
)
from .onboarding import OnboardingSerializer, OnboardingStatusSerializer
from .store import DashboardSerializer, ShareUrlSerializer, StoreSerializer, VisitCountsSerializer

__all__ = [
    "AdminConsoleSerializer",
    "AdminMetricsSerializer",
    "StoreRowSerializer",
    "ToggleStoreSerializer",
    "OnboardingSerializer",
    "OnboardingStatusSerializer",
    "DashboardSerializer",
    "ShareUrlSerializer",
    "StoreSerializer",
    "VisitCountsSerializer",
]
