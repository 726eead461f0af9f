"""Tenant namespace resolution.

Every lab owns one PostgreSQL schema holding its document content. The
schema name is a pure function of the lab prefix, so the mapping never
changes for the lifetime of a lab and needs no lookup table.
"""

from __future__ import annotations

from dataclasses import dataclass

from shared_kernel.lab_prefix import LabPrefix

NAMESPACE_PREFIX = "tenant_"
CONTENT_TABLE = "doccontent"


@dataclass(frozen=True)
class TenantNamespace:
    """Physical storage namespace of one lab."""

    name: str

    def __str__(self) -> str:
        return self.name

    @property
    def content_table(self) -> str:
        return CONTENT_TABLE

    @classmethod
    def for_lab(cls, lab_prefix: LabPrefix | str) -> TenantNamespace:
        """Resolve the namespace for a lab prefix.

        Prefixes differing only by case resolve to the same namespace.

        Raises:
            InvalidLabPrefixError: If a raw string prefix fails validation
        """
        if not isinstance(lab_prefix, LabPrefix):
            lab_prefix = LabPrefix.from_string(lab_prefix)
        return cls(name=f"{NAMESPACE_PREFIX}{lab_prefix.normalized}")


def resolve_namespace(lab_prefix: LabPrefix | str) -> str:
    """Return the namespace name for ``lab_prefix``."""
    return TenantNamespace.for_lab(lab_prefix).name
