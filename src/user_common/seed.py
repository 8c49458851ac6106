"""Seed data for the in-memory user directory."""

import json
import logging
from pathlib import Path
from typing import Any

from user_common.models.user import User

logger = logging.getLogger(__name__)

DEFAULT_USERS: list[dict[str, Any]] = [
    {
        "id": 1,
        "email": "ana.garcia@example.com",
        "name": "Ana Garcia",
        "phone": ["555-0101", "555-0102"],
    },
    {
        "id": 2,
        "email": "bruno.diaz@example.com",
        "name": "Bruno Diaz",
        "phone": ["555-0201"],
    },
    {
        "id": 3,
        "email": "carla.mendez@example.com",
        "name": "Carla Mendez",
        "phone": ["555-0301"],
    },
]


def load_seed_users(seed_file: str | None = None) -> list[User]:
    """Load the users the directory starts with.

    Args:
        seed_file: Optional path to a JSON file holding an array of user objects.
            When omitted the built-in ``DEFAULT_USERS`` are used.

    Returns:
        List of validated User objects, in file order

    Raises:
        ValueError: If the file does not contain a JSON array
    """
    if not seed_file:
        return [User.model_validate(item) for item in DEFAULT_USERS]

    path = Path(seed_file)
    raw = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(raw, list):
        raise ValueError(f"Seed file {path} must contain a JSON array of users")

    logger.info("Loaded %d seed users from %s", len(raw), path)
    return [User.model_validate(item) for item in raw]
