"""Lab prefix value object shared by the labs and content contexts.

A lab prefix is the tenant key: it identifies a lab in the registry and
determines the name of the lab's storage namespace. Because it ends up in
identifier positions of SQL statements, it is validated against an
allow-list before use.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

MAX_LAB_PREFIX_LENGTH = 50

_LAB_PREFIX_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_-]*$")


class InvalidLabPrefixError(ValueError):
    """Raised when a lab prefix is empty or contains disallowed characters."""

    pass


@dataclass(frozen=True)
class LabPrefix:
    """Validated lab prefix.

    ``value`` keeps the caller's casing; ``normalized`` is the lowercase key
    used for case-insensitive comparison and namespace naming.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise InvalidLabPrefixError("Lab prefix must not be empty")
        if len(self.value) > MAX_LAB_PREFIX_LENGTH:
            raise InvalidLabPrefixError(
                f"Lab prefix must be at most {MAX_LAB_PREFIX_LENGTH} characters"
            )
        if not _LAB_PREFIX_PATTERN.match(self.value):
            raise InvalidLabPrefixError(
                f"Invalid lab prefix {self.value!r}: use letters, digits, '_' or '-'"
            )

    def __str__(self) -> str:
        return self.value

    @property
    def normalized(self) -> str:
        return self.value.lower()

    @classmethod
    def from_string(cls, value: str | None) -> LabPrefix:
        """Create a LabPrefix from raw caller input.

        Surrounding whitespace is stripped before validation.

        Raises:
            InvalidLabPrefixError: If the prefix is empty or not allow-listed
        """
        return cls(value=(value or "").strip())
