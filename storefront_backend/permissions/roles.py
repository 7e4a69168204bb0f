# permissions/roles.py

from __future__ import annotations

from typing import Optional


# =========================================================
# ROLE CONSTANTS (PLATFORM ROLES)
# =========================================================
# Every registered account is a seller.
# Admins are promoted explicitly (ensure_admin / Django admin).
ROLE_ADMIN = "admin"
ROLE_SELLER = "seller"

ROLE_CHOICES = [
    (ROLE_ADMIN, "Admin"),
    (ROLE_SELLER, "Seller"),
]

ALL_ROLES = {ROLE_ADMIN, ROLE_SELLER}


# =========================================================
# Helpers
# =========================================================
def get_user_role(user) -> Optional[str]:
    return getattr(user, "role", None)


def has_role(user, role: str) -> bool:
    """
    Role lookup for a principal.

    Anonymous / missing principals never hold a role.
    """
    if user is None or not getattr(user, "is_authenticated", False):
        return False
    return get_user_role(user) == role


def is_platform_admin(user) -> bool:
    return has_role(user, ROLE_ADMIN)
