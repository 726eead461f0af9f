"""Value objects for the labs bounded context."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import StrEnum


class LabStatus(StrEnum):
    """Operational status of a lab."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class LabType(StrEnum):
    """Accreditation type of a lab."""

    ACCREDITED = "accredited"
    NON_ACCREDITED = "non-accredited"


DEFAULT_ISSUE_NO = "01"


@dataclass(frozen=True)
class DocumentSettings:
    """Issue settings printed on a lab's controlled documents."""

    issue_no: str
    issue_date: date | None = None
