"""Common services package."""

from user_common.services.user_directory import InMemoryUserDirectory, UserDirectory, normalize_user_id

__all__ = [
    "InMemoryUserDirectory",
    "UserDirectory",
    "normalize_user_id",
]
