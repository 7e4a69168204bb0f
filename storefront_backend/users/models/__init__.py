"""
PATH: users/models/__init__.py

Users models export surface.
"""

from .phone_verification import PhoneVerification
from .user import User, UserManager

__all__ = [
    "PhoneVerification",
    "User",
    "UserManager",
]
