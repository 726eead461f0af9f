"""Pydantic models for lab API requests and responses."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, Field

from labs.domain.aggregates import Lab
from labs.domain.value_objects import DocumentSettings, LabStatus, LabType
from shared_kernel.lab_prefix import MAX_LAB_PREFIX_LENGTH


_CLEARABLE_FIELDS = frozenset(
    {
        "lab_category",
        "operating_hours",
        "website_url",
        "director_name",
        "quality_manager_name",
    }
)


class _LabProfileFields(BaseModel):
    """Optional profile fields shared by onboarding and updates."""

    lab_category: str | None = Field(None, max_length=100)
    operating_hours: str | None = Field(None, max_length=255)
    website_url: str | None = Field(None, max_length=500)
    director_name: str | None = Field(None, max_length=255)
    quality_manager_name: str | None = Field(None, max_length=255)


class OnboardLabRequest(_LabProfileFields):
    """Request model for onboarding a lab."""

    document_id_prefix: str = Field(
        ...,
        description="Lab prefix (tenant key), unique regardless of case",
        min_length=1,
        max_length=MAX_LAB_PREFIX_LENGTH,
    )
    name: str = Field(..., min_length=1, max_length=255)
    address: str = Field(..., min_length=1, max_length=500)
    city: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=1, max_length=100)
    country: str = Field(..., min_length=1, max_length=100)
    postal_code: str = Field(..., min_length=1, max_length=20)
    type: LabType = Field(..., description="accredited or non-accredited")
    selected_departments: list[str] = Field(default_factory=list)
    issue_no: str | None = Field(None, max_length=20)
    issue_date: date | None = None

    def profile(self) -> dict[str, Any]:
        """Return the onboarding fields other than the prefix."""
        return self.model_dump(exclude={"document_id_prefix"})


class UpdateLabRequest(_LabProfileFields):
    """Request model for a partial lab profile update.

    Only fields present in the request body are changed.
    """

    name: str | None = Field(None, min_length=1, max_length=255)
    address: str | None = Field(None, min_length=1, max_length=500)
    city: str | None = Field(None, min_length=1, max_length=100)
    state: str | None = Field(None, min_length=1, max_length=100)
    country: str | None = Field(None, min_length=1, max_length=100)
    postal_code: str | None = Field(None, min_length=1, max_length=20)
    type: LabType | None = None
    selected_departments: list[str] | None = None

    def changes(self) -> dict[str, Any]:
        """Return only the fields the client set.

        An explicit null clears an optional field but is ignored for a
        required one.
        """
        changes = self.model_dump(exclude_unset=True)
        return {
            name: value
            for name, value in changes.items()
            if value is not None or name in _CLEARABLE_FIELDS
        }


class UpdateLabStatusRequest(BaseModel):
    """Request model for changing a lab's status."""

    lab_status: LabStatus = Field(..., description="active or inactive")


class DocumentSettingsRequest(BaseModel):
    """Request model for updating document settings."""

    issue_no: str | None = Field(None, min_length=1, max_length=20)
    issue_date: date | None = None


class DocumentSettingsResponse(BaseModel):
    """Response model for a lab's document settings."""

    issue_no: str
    issue_date: date | None = None

    @classmethod
    def from_domain(cls, settings: DocumentSettings) -> DocumentSettingsResponse:
        """Convert DocumentSettings to an API response."""
        return cls(issue_no=settings.issue_no, issue_date=settings.issue_date)


class CheckPrefixRequest(BaseModel):
    """Request model for checking prefix availability."""

    prefix: str = Field(..., min_length=1, max_length=MAX_LAB_PREFIX_LENGTH)


class CheckPrefixResponse(BaseModel):
    """Response model for a prefix check."""

    exists: bool


class LabResponse(BaseModel):
    """Response model for a lab."""

    document_id_prefix: str
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
    selected_departments: list[str] = Field(default_factory=list)
    issue_no: str
    issue_date: date | None = None
    lab_status: LabStatus
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_domain(cls, lab: Lab) -> LabResponse:
        """Convert domain Lab aggregate to API response.

        Args:
            lab: Lab domain aggregate

        Returns:
            LabResponse
        """
        return cls(
            document_id_prefix=lab.document_id_prefix,
            name=lab.name,
            address=lab.address,
            city=lab.city,
            state=lab.state,
            country=lab.country,
            postal_code=lab.postal_code,
            type=lab.type,
            lab_category=lab.lab_category,
            operating_hours=lab.operating_hours,
            website_url=lab.website_url,
            director_name=lab.director_name,
            quality_manager_name=lab.quality_manager_name,
            selected_departments=list(lab.selected_departments),
            issue_no=lab.issue_no,
            issue_date=lab.issue_date,
            lab_status=lab.lab_status,
            created_at=lab.created_at,
            updated_at=lab.updated_at,
        )
