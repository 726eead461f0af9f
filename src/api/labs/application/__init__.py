"""Labs application layer."""

from labs.application.observability import DefaultLabServiceProbe, LabServiceProbe
from labs.application.services import LabService

__all__ = [
    "DefaultLabServiceProbe",
    "LabService",
    "LabServiceProbe",
]
