"""Users domain module.

Contains the User aggregate and its value objects.
"""

from users.domain.aggregates import User
from users.domain.value_objects import (
    MAX_EMAIL_LENGTH,
    InvalidEmailError,
    UserRole,
    normalize_email,
)

__all__ = [
    "InvalidEmailError",
    "MAX_EMAIL_LENGTH",
    "User",
    "UserRole",
    "normalize_email",
]
