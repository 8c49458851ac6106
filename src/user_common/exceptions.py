"""Errors raised by the user directory."""


class UserDirectoryError(Exception):
    """Base class for user directory errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConflictError(UserDirectoryError):
    """A phone number is already held by another user."""

    def __init__(self, message: str = "Phone numbers must be unique.", phones: list[str] | None = None) -> None:
        super().__init__(message)
        self.phones = sorted(phones or [])


class NotFoundError(UserDirectoryError):
    """No user matches the requested id."""

    def __init__(self, message: str = "User not found.", user_id: int | str | None = None) -> None:
        super().__init__(message)
        self.user_id = user_id


class ValidationError(UserDirectoryError):
    """An id or a merged user record is malformed."""
