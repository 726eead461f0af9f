"""Users ports (interfaces) module."""

from users.ports.exceptions import DuplicateUserEmailError, LastSuperAdminError
from users.ports.repositories import IUserRepository

__all__ = [
    "DuplicateUserEmailError",
    "IUserRepository",
    "LastSuperAdminError",
]
