"""Content application layer."""

from content.application.observability import (
    DefaultDocContentServiceProbe,
    DocContentServiceProbe,
)
from content.application.services import DocContentService

__all__ = [
    "DefaultDocContentServiceProbe",
    "DocContentService",
    "DocContentServiceProbe",
]
