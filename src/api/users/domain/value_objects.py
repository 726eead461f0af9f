"""Value objects for the users bounded context."""

from __future__ import annotations

import re
from enum import StrEnum

MAX_EMAIL_LENGTH = 254

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class InvalidEmailError(ValueError):
    """Raised when an email address is malformed."""

    pass


class UserRole(StrEnum):
    """Role of a user account."""

    SUPER_ADMIN = "super_admin"
    MANAGER_ADMIN = "manager_admin"
    ADMIN = "admin"
    USER = "user"


def normalize_email(value: str | None) -> str:
    """Strip and lowercase an email address.

    Emails identify accounts and double as usernames, so they are compared
    in normalized form.

    Raises:
        InvalidEmailError: If the address is empty, too long or malformed
    """
    email = (value or "").strip().lower()
    if len(email) > MAX_EMAIL_LENGTH or not _EMAIL_PATTERN.match(email):
        raise InvalidEmailError(f"Invalid email address: {value!r}")
    return email
