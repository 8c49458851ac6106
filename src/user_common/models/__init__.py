"""Common models package."""

from user_common.models.user import User, UserPatch

__all__ = [
    "User",
    "UserPatch",
]
