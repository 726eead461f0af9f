"""Unit tests for the Lab aggregate."""

from datetime import date

import pytest

from labs.domain.aggregates import Lab
from labs.domain.value_objects import DocumentSettings, LabStatus, LabType
from shared_kernel.lab_prefix import InvalidLabPrefixError, LabPrefix

PROFILE = {
    "name": "Acme Testing Laboratory",
    "address": "1 Main Street",
    "city": "Springfield",
    "state": "IL",
    "country": "US",
    "postal_code": "62701",
    "type": "accredited",
}


class TestOnboard:
    """Tests for Lab.onboard."""

    def test_creates_active_lab_with_defaults(self):
        lab = Lab.onboard("ACME", **PROFILE)

        assert lab.prefix == LabPrefix("ACME")
        assert lab.document_id_prefix == "ACME"
        assert lab.name == "Acme Testing Laboratory"
        assert lab.type is LabType.ACCREDITED
        assert lab.lab_status is LabStatus.ACTIVE
        assert lab.is_active
        assert lab.issue_no == "01"
        assert lab.issue_date is None
        assert lab.selected_departments == []

    def test_strips_prefix(self):
        assert Lab.onboard("  ACME ", **PROFILE).document_id_prefix == "ACME"

    def test_invalid_prefix_is_rejected(self):
        with pytest.raises(InvalidLabPrefixError):
            Lab.onboard("ac me", **PROFILE)

    def test_accepts_document_settings(self):
        lab = Lab.onboard(
            "ACME", **PROFILE, issue_no="03", issue_date=date(2026, 2, 1)
        )

        assert lab.document_settings == DocumentSettings(
            issue_no="03", issue_date=date(2026, 2, 1)
        )

    def test_empty_issue_no_falls_back_to_default(self):
        assert Lab.onboard("ACME", **PROFILE, issue_no="").issue_no == "01"

    def test_none_departments_become_empty_list(self):
        lab = Lab.onboard("ACME", **PROFILE, selected_departments=None)

        assert lab.selected_departments == []

    def test_keeps_optional_fields(self):
        lab = Lab.onboard(
            "ACME",
            **PROFILE,
            director_name="Dr. Rivera",
            selected_departments=["chemistry", "microbiology"],
        )

        assert lab.director_name == "Dr. Rivera"
        assert lab.selected_departments == ["chemistry", "microbiology"]

    def test_unknown_field_is_rejected(self):
        with pytest.raises(ValueError, match="Unknown lab profile fields"):
            Lab.onboard("ACME", **PROFILE, favourite_colour="blue")

    def test_invalid_type_is_rejected(self):
        with pytest.raises(ValueError):
            Lab.onboard("ACME", **{**PROFILE, "type": "self-declared"})


class TestUpdateProfile:
    """Tests for Lab.update_profile."""

    def test_changes_only_given_fields(self):
        lab = Lab.onboard("ACME", **PROFILE)

        lab.update_profile(city="Shelbyville", type="non-accredited")

        assert lab.city == "Shelbyville"
        assert lab.type is LabType.NON_ACCREDITED
        assert lab.name == "Acme Testing Laboratory"

    def test_prefix_cannot_be_changed(self):
        lab = Lab.onboard("ACME", **PROFILE)

        with pytest.raises(ValueError):
            lab.update_profile(prefix="OTHER")

        assert lab.document_id_prefix == "ACME"

    def test_status_is_not_a_profile_field(self):
        lab = Lab.onboard("ACME", **PROFILE)

        with pytest.raises(ValueError):
            lab.update_profile(lab_status="inactive")


class TestStatusAndSettings:
    """Tests for status and document settings changes."""

    def test_set_status(self):
        lab = Lab.onboard("ACME", **PROFILE)

        lab.set_status("inactive")

        assert lab.lab_status is LabStatus.INACTIVE
        assert not lab.is_active

    def test_set_invalid_status(self):
        lab = Lab.onboard("ACME", **PROFILE)

        with pytest.raises(ValueError):
            lab.set_status("archived")

    def test_update_document_settings_partial(self):
        lab = Lab.onboard("ACME", **PROFILE)

        lab.update_document_settings(issue_date=date(2026, 5, 1))

        assert lab.issue_no == "01"
        assert lab.issue_date == date(2026, 5, 1)

        lab.update_document_settings(issue_no="02")

        assert lab.document_settings == DocumentSettings("02", date(2026, 5, 1))
