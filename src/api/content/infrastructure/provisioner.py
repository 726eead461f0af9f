"""Idempotent creation of lab namespaces and their content tables."""

from __future__ import annotations

from typing import TYPE_CHECKING

from psycopg2 import errorcodes

from content.domain.namespace import TenantNamespace
from content.infrastructure.observability import (
    DefaultNamespaceProvisionerProbe,
    NamespaceProvisionerProbe,
)
from content.infrastructure.queries import DocContentQueries
from content.ports.exceptions import ProvisioningError
from infrastructure.database.exceptions import DatabaseError

if TYPE_CHECKING:
    from content.ports.protocols import BackingStore, Statement
    from shared_kernel.lab_prefix import LabPrefix

# ``IF NOT EXISTS`` is not atomic against concurrent sessions: the loser of a
# race on the catalog sees one of these instead of a silent no-op.
_CONCURRENT_DDL_CODES = frozenset(
    {
        errorcodes.UNIQUE_VIOLATION,
        errorcodes.DUPLICATE_SCHEMA,
        errorcodes.DUPLICATE_TABLE,
        errorcodes.DUPLICATE_OBJECT,
    }
)

_MAX_ATTEMPTS = 2


class NamespaceProvisioner:
    """Ensures a lab's namespace and content table exist.

    Safe to call any number of times and from concurrent callers: once it
    returns, both objects exist. Existing objects and data are never
    altered.
    """

    def __init__(
        self,
        store: BackingStore,
        probe: NamespaceProvisionerProbe | None = None,
    ):
        self._store = store
        self._probe = probe or DefaultNamespaceProvisionerProbe()

    def ensure(self, lab_prefix: LabPrefix | str) -> TenantNamespace:
        """Create the namespace for ``lab_prefix`` if it is missing.

        Returns:
            The resolved namespace

        Raises:
            InvalidLabPrefixError: If the prefix fails validation
            ProvisioningError: If the namespace or table cannot be created
        """
        namespace = TenantNamespace.for_lab(lab_prefix)
        self._run(DocContentQueries.create_schema(namespace.name), namespace)
        self._run(DocContentQueries.create_content_table(namespace.name), namespace)
        self._probe.namespace_ensured(namespace.name)
        return namespace

    def _run(self, statement: Statement, namespace: TenantNamespace) -> None:
        for attempt in range(1, _MAX_ATTEMPTS + 1):
            try:
                self._store.execute(statement)
                return
            except DatabaseError as e:
                pgcode = getattr(e, "pgcode", None)
                if pgcode in _CONCURRENT_DDL_CODES and attempt < _MAX_ATTEMPTS:
                    self._probe.concurrent_provisioning_detected(namespace.name)
                    continue
                self._probe.provisioning_failed(namespace.name, e)
                raise ProvisioningError(
                    f"Failed to provision namespace {namespace.name}: {e}",
                    namespace=namespace.name,
                ) from e
