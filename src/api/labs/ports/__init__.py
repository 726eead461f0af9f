"""Labs ports (interfaces) module."""

from labs.ports.exceptions import DuplicateLabPrefixError, LabNotFoundError
from labs.ports.repositories import ILabRepository, INamespaceProvisioner

__all__ = [
    "DuplicateLabPrefixError",
    "ILabRepository",
    "INamespaceProvisioner",
    "LabNotFoundError",
]
