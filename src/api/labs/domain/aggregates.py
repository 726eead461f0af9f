"""Lab aggregate for the labs context."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

from labs.domain.value_objects import (
    DEFAULT_ISSUE_NO,
    DocumentSettings,
    LabStatus,
    LabType,
)
from shared_kernel.lab_prefix import LabPrefix

# Fields editable through a profile update. The prefix, status and document
# settings have dedicated operations.
PROFILE_FIELDS = frozenset(
    {
        "name",
        "address",
        "city",
        "state",
        "country",
        "postal_code",
        "type",
        "lab_category",
        "operating_hours",
        "website_url",
        "director_name",
        "quality_manager_name",
        "selected_departments",
    }
)


@dataclass
class Lab:
    """Lab aggregate representing one onboarded laboratory (a tenant).

    Business rules:
    - The prefix is the tenant key; it is unique across labs regardless of
      case and never changes after onboarding
    - New labs start active with issue number "01"
    """

    prefix: LabPrefix
    name: str
    address: str
    city: str
    state: str
    country: str
    postal_code: str
    type: LabType
    lab_category: str | None = None
    operating_hours: str | None = None
    website_url: str | None = None
    director_name: str | None = None
    quality_manager_name: str | None = None
    selected_departments: list[str] = field(default_factory=list)
    issue_no: str = DEFAULT_ISSUE_NO
    issue_date: date | None = None
    lab_status: LabStatus = LabStatus.ACTIVE
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def onboard(cls, prefix: str, **profile: Any) -> Lab:
        """Factory method for onboarding a new lab.

        Args:
            prefix: Raw lab prefix supplied by the caller
            **profile: Profile fields, plus optional ``issue_no``/``issue_date``

        Returns:
            A new active Lab

        Raises:
            InvalidLabPrefixError: If the prefix fails validation
        """
        issue_no = profile.pop("issue_no", None) or DEFAULT_ISSUE_NO
        issue_date = profile.pop("issue_date", None)
        profile = _normalize_profile(profile)
        return cls(
            prefix=LabPrefix.from_string(prefix),
            issue_no=issue_no,
            issue_date=issue_date,
            lab_status=LabStatus.ACTIVE,
            **profile,
        )

    @property
    def document_id_prefix(self) -> str:
        return self.prefix.value

    @property
    def document_settings(self) -> DocumentSettings:
        return DocumentSettings(issue_no=self.issue_no, issue_date=self.issue_date)

    @property
    def is_active(self) -> bool:
        return self.lab_status == LabStatus.ACTIVE

    def update_profile(self, **changes: Any) -> None:
        """Apply a partial profile update.

        Raises:
            ValueError: If a change names a field that is not editable
        """
        for name, value in _normalize_profile(changes).items():
            setattr(self, name, value)

    def set_status(self, status: LabStatus) -> None:
        self.lab_status = LabStatus(status)

    def update_document_settings(
        self, issue_no: str | None = None, issue_date: date | None = None
    ) -> None:
        """Update the document issue settings; ``None`` leaves a value as is."""
        if issue_no is not None:
            self.issue_no = issue_no
        if issue_date is not None:
            self.issue_date = issue_date


def _normalize_profile(values: dict[str, Any]) -> dict[str, Any]:
    unknown = set(values) - PROFILE_FIELDS
    if unknown:
        raise ValueError(f"Unknown lab profile fields: {', '.join(sorted(unknown))}")
    normalized = dict(values)
    if "type" in normalized:
        normalized["type"] = LabType(normalized["type"])
    if normalized.get("selected_departments") is None:
        normalized.pop("selected_departments", None)
    return normalized
