"""Users application layer."""

from users.application.observability import (
    DefaultUserServiceProbe,
    UserServiceProbe,
)
from users.application.services import UserService

__all__ = [
    "DefaultUserServiceProbe",
    "UserService",
    "UserServiceProbe",
]
