from .auth import LoginView, LogoutView, RegisterView, VerifyRegistrationView
from .gate import RouteGateView
from .me import MeView

__all__ = [
    "RegisterView",
    "VerifyRegistrationView",
    "LoginView",
    "LogoutView",
    "MeView",
    "RouteGateView",
]
