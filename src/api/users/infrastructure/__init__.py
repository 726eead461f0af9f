"""Users infrastructure module."""

from users.infrastructure.models import UserModel
from users.infrastructure.observability import (
    DefaultUserRepositoryProbe,
    UserRepositoryProbe,
)
from users.infrastructure.user_repository import UserRepository

__all__ = [
    "DefaultUserRepositoryProbe",
    "UserModel",
    "UserRepository",
    "UserRepositoryProbe",
]
