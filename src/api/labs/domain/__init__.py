"""Labs domain module.

Contains the Lab aggregate and its value objects.
"""

from labs.domain.aggregates import PROFILE_FIELDS, Lab
from labs.domain.value_objects import (
    DEFAULT_ISSUE_NO,
    DocumentSettings,
    LabStatus,
    LabType,
)

__all__ = [
    "DEFAULT_ISSUE_NO",
    "DocumentSettings",
    "Lab",
    "LabStatus",
    "LabType",
    "PROFILE_FIELDS",
]
