"""Service initialization and dependency injection."""

import logging

from fastapi import Depends

from user_api.config import Settings, get_settings
from user_common.seed import load_seed_users
from user_common.services.user_directory import InMemoryUserDirectory, UserDirectory

logger = logging.getLogger(__name__)

# Service instances cache
_services_cache = {}


def get_user_directory(settings: Settings = Depends(get_settings)) -> UserDirectory:
    """Get the process-wide user directory.

    The directory is built from the seed data on first use and shared by
    every request afterwards.

    Args:
        settings: Application settings

    Returns:
        UserDirectory instance
    """
    if "user_directory" not in _services_cache:
        seed_users = load_seed_users(settings.seed_file)
        _services_cache["user_directory"] = InMemoryUserDirectory(seed_users)
        logger.info("Initialized InMemoryUserDirectory with %d seed users", len(seed_users))

    return _services_cache["user_directory"]
