# permissions/guards.py

"""
ACCESS GUARDS (SINGLE AUTHORIZATION SERVICE)

Every gate (seller pages, admin page, DRF views) asks the same question:

    authorize(principal, required_role) -> Allowed | Redirect(target)

Rules:
- No principal                      -> Redirect(/auth/login)
- Principal lacks the required role -> Redirect(/seller/dashboard)
  (non-admins hitting admin routes are downgraded, not shown an error)
- Otherwise                         -> Allowed

Route gates also have a "checking" state: while the session is still
resolving, the gate renders a neutral loading state and NEVER redirects.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Union

from rest_framework.permissions import BasePermission

from permissions.roles import ROLE_ADMIN, has_role


# =========================================================
# ROUTES (frontend paths the gates redirect between)
# =========================================================
ROUTE_HOME = "/"
ROUTE_REGISTER = "/auth/register"
ROUTE_LOGIN = "/auth/login"
ROUTE_ONBOARDING = "/seller/onboarding"
ROUTE_DASHBOARD = "/seller/dashboard"
ROUTE_ADMIN = "/admin"
STOREFRONT_PREFIX = "/store/"

# path -> required role (None = any signed-in principal)
GATED_ROUTES: dict[str, Optional[str]] = {
    ROUTE_ONBOARDING: None,
    ROUTE_DASHBOARD: None,
    ROUTE_ADMIN: ROLE_ADMIN,
}


def storefront_path(slug: str) -> str:
    return f"{STOREFRONT_PREFIX}{slug}"


def normalize_route(path: str) -> str:
    path = (path or "").strip() or ROUTE_HOME
    if not path.startswith("/"):
        path = f"/{path}"
    if len(path) > 1:
        path = path.rstrip("/")
    return path


def route_requirement(path: str) -> tuple[bool, Optional[str]]:
    """
    Returns (gated, required_role) for a frontend path.
    Public routes (landing, auth pages, storefronts, not-found) are ungated.
    """
    path = normalize_route(path)
    if path in GATED_ROUTES:
        return True, GATED_ROUTES[path]
    return False, None


# =========================================================
# DECISIONS
# =========================================================
@dataclass(frozen=True)
class Allowed:
    pass


@dataclass(frozen=True)
class Redirect:
    target: str


Decision = Union[Allowed, Redirect]
RoleLookup = Callable[[object, str], bool]


def authorize(
    principal,
    required_role: Optional[str] = None,
    *,
    has_role: RoleLookup = has_role,
) -> Decision:
    if principal is None or not getattr(principal, "is_authenticated", False):
        return Redirect(ROUTE_LOGIN)

    if required_role and not has_role(principal, required_role):
        return Redirect(ROUTE_DASHBOARD)

    return Allowed()


# =========================================================
# ROUTE GATE STATE MACHINE
# =========================================================
class GuardState(str, Enum):
    CHECKING = "checking"
    AUTHENTICATED = "authenticated"
    UNAUTHENTICATED = "unauthenticated"
    AUTHORIZED = "authorized"
    UNAUTHORIZED = "unauthorized"


@dataclass(frozen=True)
class GateDecision:
    state: GuardState
    redirect: Optional[str] = None

    @property
    def renders_content(self) -> bool:
        return self.state in (GuardState.AUTHENTICATED, GuardState.AUTHORIZED)


def evaluate_gate(
    session,
    required_role: Optional[str] = None,
    *,
    has_role: RoleLookup = has_role,
) -> GateDecision:
    """
    Gate a protected view using a session context (see users.services.session).
    """
    if session.loading:
        return GateDecision(GuardState.CHECKING)

    principal = session.principal
    decision = authorize(principal, required_role, has_role=has_role)

    if isinstance(decision, Redirect):
        if principal is None:
            return GateDecision(GuardState.UNAUTHENTICATED, decision.target)
        return GateDecision(GuardState.UNAUTHORIZED, decision.target)

    if required_role:
        return GateDecision(GuardState.AUTHORIZED)
    return GateDecision(GuardState.AUTHENTICATED)


# =========================================================
# DRF PERMISSIONS (same decision, API flavour)
# =========================================================
class GatePermission(BasePermission):
    """
    Base permission delegating to authorize().

    Denials carry the redirect target so clients can follow the same
    fallback a route gate would.
    """

    required_role: Optional[str] = None

    def has_permission(self, request, view):
        user = getattr(request, "user", None)
        decision = authorize(user, self.required_role)

        if isinstance(decision, Redirect):
            self.message = {
                "detail": "You do not have access to this area.",
                "redirect": decision.target,
            }
            return False

        return True


class IsSignedIn(GatePermission):
    required_role = None


class IsPlatformAdmin(GatePermission):
    required_role = ROLE_ADMIN
