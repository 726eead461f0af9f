"""User aggregate for the users context."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from users.domain.value_objects import UserRole, normalize_email


@dataclass
class User:
    """User aggregate representing one account of the lab platform.

    Business rules:
    - The email identifies the account and is also its username
    - New accounts start active
    - Only the password hash is ever held; hashing happens in the
      application layer
    """

    email: str
    name: str
    role: UserRole
    password_hash: str = field(repr=False)
    is_active: bool = True
    last_login: datetime | None = None
    date_joined: datetime | None = None
    id: int | None = None

    @classmethod
    def register(
        cls, email: str, name: str, role: UserRole | str, password_hash: str
    ) -> User:
        """Factory method for creating a new account.

        Raises:
            InvalidEmailError: If the email is malformed
            ValueError: If the role is unknown
        """
        return cls(
            email=normalize_email(email),
            name=name,
            role=UserRole(role),
            password_hash=password_hash,
            is_active=True,
            date_joined=datetime.now(timezone.utc),
        )

    @property
    def username(self) -> str:
        return self.email

    @property
    def is_super_admin(self) -> bool:
        return self.role == UserRole.SUPER_ADMIN

    def set_active(self, is_active: bool) -> None:
        self.is_active = bool(is_active)

    def update(
        self,
        name: str | None = None,
        role: UserRole | str | None = None,
        password_hash: str | None = None,
    ) -> list[str]:
        """Apply a partial update; ``None`` leaves a value as is.

        Returns:
            Names of the fields that were set
        """
        changed = []
        if name is not None:
            self.name = name
            changed.append("name")
        if role is not None:
            self.role = UserRole(role)
            changed.append("role")
        if password_hash is not None:
            self.password_hash = password_hash
            changed.append("password")
        return changed
