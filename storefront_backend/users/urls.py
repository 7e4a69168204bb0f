# users/urls.py

from django.urls import path

from .views import (
    LoginView,
    LogoutView,
    MeView,
    RegisterView,
    RouteGateView,
    VerifyRegistrationView,
)

app_name = "users"

urlpatterns = [
    # ---------------- PUBLIC AUTH ----------------
    path("register/", RegisterView.as_view(), name="register"),
    path("register/verify/", VerifyRegistrationView.as_view(), name="register-verify"),
    path("login/", LoginView.as_view(), name="login"),
    path("gate/", RouteGateView.as_view(), name="gate"),
    # ---------------- AUTHENTICATED ----------------
    path("logout/", LogoutView.as_view(), name="logout"),
    path("me/", MeView.as_view(), name="me"),
]
