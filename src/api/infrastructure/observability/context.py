"""Observation context for domain-oriented observability.

Observation contexts collect and manage contextual metadata for instrumentation,
following the Domain Oriented Observability pattern.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ObservationContext:
    """Immutable context containing metadata for observability.

    Captures request-scoped and domain-relevant metadata that should be
    included with all instrumentation events.

    Attributes:
        request_id: Unique identifier for the current request/operation.
        lab_prefix: Lab (tenant) prefix as supplied by the caller.
        namespace: Resolved tenant namespace (if applicable).
        extra: Additional contextual metadata.

    Example:
        context = ObservationContext(lab_prefix="ACME", namespace="tenant_acme")
        probe = DefaultDocContentStoreProbe().with_context(context)
    """

    request_id: str | None = None
    lab_prefix: str | None = None
    namespace: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        """Convert context to a dictionary for logging.

        Only includes non-None values to keep logs clean.
        """
        result: dict[str, Any] = {}
        if self.request_id is not None:
            result["request_id"] = self.request_id
        if self.lab_prefix is not None:
            result["lab_prefix"] = self.lab_prefix
        if self.namespace is not None:
            result["namespace"] = self.namespace
        result.update(self.extra)
        return result

    def with_namespace(self, namespace: str) -> ObservationContext:
        """Create a new context with the namespace set."""
        return ObservationContext(
            request_id=self.request_id,
            lab_prefix=self.lab_prefix,
            namespace=namespace,
            extra=self.extra,
        )

    def with_extra(self, **kwargs: Any) -> ObservationContext:
        """Create a new context with additional metadata."""
        return ObservationContext(
            request_id=self.request_id,
            lab_prefix=self.lab_prefix,
            namespace=self.namespace,
            extra={**self.extra, **kwargs},
        )
