"""Content domain module.

Contains namespace resolution and value objects for per-lab document content.
"""

from content.domain.namespace import (
    CONTENT_TABLE,
    NAMESPACE_PREFIX,
    TenantNamespace,
    resolve_namespace,
)
from content.domain.value_objects import (
    MAX_DOCUMENT_ID_LENGTH,
    DocContentRecord,
    JSONValue,
)

__all__ = [
    "CONTENT_TABLE",
    "DocContentRecord",
    "JSONValue",
    "MAX_DOCUMENT_ID_LENGTH",
    "NAMESPACE_PREFIX",
    "TenantNamespace",
    "resolve_namespace",
]
