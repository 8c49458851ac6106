"""User directory with an in-memory implementation."""

import logging
import re
import threading
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from user_common.exceptions import ConflictError, NotFoundError, ValidationError
from user_common.models.user import User, UserPatch

logger = logging.getLogger(__name__)

_USER_ID_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)


def normalize_user_id(value: int | str) -> int:
    """Convert a path parameter or stored id into the canonical integer id.

    Args:
        value: Id as received from the caller, usually the raw path segment

    Returns:
        The id as an int

    Raises:
        ValidationError: If the value is not an integer or an integral string
    """
    if isinstance(value, bool):
        raise ValidationError(f"Invalid user id: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _USER_ID_PATTERN.fullmatch(value.strip()):
        return int(value.strip())
    raise ValidationError(f"Invalid user id: {value!r}")


def sort_key(value: Any) -> tuple:
    """Build a key that totally orders attribute values of any JSON type.

    Missing or null values come first, then numbers, strings, lists and
    objects, in that order. Values within a group compare naturally; lists
    and objects compare element by element using the same rules.
    """
    if value is None:
        return (0,)
    if isinstance(value, (int, float)):
        # NaN is not ordered against anything, so it goes after every number
        if value != value:
            return (1, 0, 1, 0)
        return (1, 0, 0, value)
    if isinstance(value, str):
        return (1, 1, value)
    if isinstance(value, (list, tuple)):
        return (1, 2, tuple(sort_key(item) for item in value))
    if isinstance(value, dict):
        return (1, 3, tuple(sorted((str(k), sort_key(v)) for k, v in value.items())))
    return (1, 4, type(value).__name__, repr(value))


class UserDirectory(ABC):
    """Abstract interface for the user directory."""

    @abstractmethod
    def list_users(self, sorted_by: str | None = None) -> list[User]:
        """List all users, optionally sorted ascending by one attribute."""

    @abstractmethod
    def get_user(self, user_id: int | str) -> User:
        """Get the first user with the given id."""

    @abstractmethod
    def create_user(self, user: User) -> User:
        """Append a user whose phone numbers are not held by anyone else."""

    @abstractmethod
    def update_user(self, user_id: int | str, patch: UserPatch) -> User:
        """Merge a partial update onto the first user with the given id."""

    @abstractmethod
    def delete_user(self, user_id: int | str) -> User:
        """Remove and return the first user with the given id."""

    @abstractmethod
    def count(self) -> int:
        """Number of users currently stored."""


class InMemoryUserDirectory(UserDirectory):
    """In-memory implementation of UserDirectory.

    Users are kept in insertion order. Every operation runs under a single
    lock so each one is applied as a whole.
    """

    def __init__(self, users: Iterable[User] | None = None) -> None:
        """Initialize the directory.

        Args:
            users: Seed users, added one by one through ``create_user`` so the
                phone uniqueness rule applies to them as well
        """
        self._users: list[User] = []
        self._lock = threading.RLock()
        for user in users or []:
            self.create_user(user)

    def list_users(self, sorted_by: str | None = None) -> list[User]:
        """List users in directory order, or sorted by an attribute.

        Args:
            sorted_by: Attribute name to sort on. Not checked against the User
                schema; users lacking the attribute sort first. See
                ``sort_key`` for the order between value types.

        Returns:
            A new list; the directory itself is never reordered
        """
        with self._lock:
            users = list(self._users)

        if not sorted_by:
            return users

        # sorted() is stable, so equal keys keep directory order
        return sorted(users, key=lambda user: sort_key(user.model_dump().get(sorted_by)))

    def get_user(self, user_id: int | str) -> User:
        with self._lock:
            return self._users[self._index_of(user_id)]

    def create_user(self, user: User) -> User:
        """Add a user to the end of the directory.

        Args:
            user: Candidate user; ``id`` is stored as given and may repeat

        Returns:
            The stored user

        Raises:
            ConflictError: If any of the candidate's phone numbers is held by
                an existing user
        """
        with self._lock:
            taken = self._phones_in_use()
            clashes = taken.intersection(user.phone)
            if clashes:
                logger.warning("Rejected user %s: phone numbers already in use %s", user.id, sorted(clashes))
                raise ConflictError(phones=list(clashes))

            self._users.append(user)
            logger.info("Created user %s (%d users)", user.id, len(self._users))
            return user

    def update_user(self, user_id: int | str, patch: UserPatch) -> User:
        """Overlay the fields set on ``patch`` onto the matching user.

        Fields absent from the patch are preserved. The merged record keeps
        its position in the directory.

        Raises:
            NotFoundError: If no user has the given id
            ValidationError: If the id or the merged record is malformed
            ConflictError: If the patch gives the user a phone number held by
                another user
        """
        with self._lock:
            index = self._index_of(user_id)
            current = self._users[index]

            try:
                merged = User.model_validate({**current.model_dump(), **patch.changes()})
            except PydanticValidationError as e:
                raise ValidationError(f"Invalid update for user {current.id}: {e.errors()}") from e

            taken = self._phones_in_use(skip=index)
            clashes = taken.intersection(merged.phone)
            if clashes:
                logger.warning("Rejected update of user %s: phone numbers already in use %s", current.id, sorted(clashes))
                raise ConflictError(phones=list(clashes))

            self._users[index] = merged
            logger.info("Updated user %s", merged.id)
            return merged

    def delete_user(self, user_id: int | str) -> User:
        with self._lock:
            index = self._index_of(user_id)
            deleted = self._users.pop(index)
            logger.info("Deleted user %s (%d users)", deleted.id, len(self._users))
            return deleted

    def count(self) -> int:
        with self._lock:
            return len(self._users)

    def _index_of(self, user_id: int | str) -> int:
        target = normalize_user_id(user_id)
        for index, user in enumerate(self._users):
            if user.id == target:
                return index
        raise NotFoundError(user_id=target)

    def _phones_in_use(self, skip: int | None = None) -> set[str]:
        phones: set[str] = set()
        for index, user in enumerate(self._users):
            if index != skip:
                phones.update(user.phone)
        return phones
