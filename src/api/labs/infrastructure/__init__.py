"""Labs infrastructure module."""

from labs.infrastructure.lab_repository import LabRepository
from labs.infrastructure.models import LabModel
from labs.infrastructure.observability import (
    DefaultLabRepositoryProbe,
    LabRepositoryProbe,
)

__all__ = [
    "DefaultLabRepositoryProbe",
    "LabModel",
    "LabRepository",
    "LabRepositoryProbe",
]
