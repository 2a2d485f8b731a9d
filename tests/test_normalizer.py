"""
Unit tests for the record normalizer.
"""

import json

import pytest

from seniors.services.normalizer import (
    RecordShape,
    composite_full_name,
    detect_shape,
    normalize_identity,
    split_full_name,
    trim_strings,
)


class TestNormalizeIdentity:
    """Field precedence across record shapes."""

    def test_snake_case_wins_over_camel_case(self):
        """Test a storage column beats the UI field for the same value."""
        result = normalize_identity({"last_name": "Cruz", "lastName": "cruz2"})

        assert result["lastName"] == "Cruz"
        assert result["formData"]["lastName"] == "Cruz"
        assert result["formData"]["last_name"] == "Cruz"

    def test_camel_case_wins_over_nested_payload(self):
        record = {"firstName": "Juan", "formData": {"firstName": "Pedro"}}

        assert normalize_identity(record)["firstName"] == "Juan"

    def test_nested_payload_wins_over_legacy_alias(self):
        record = {"firstname": "legacy", "formData": {"firstName": "Form"}}

        assert normalize_identity(record)["firstName"] == "Form"

    def test_legacy_aliases(self):
        record = {"firstname": "Ana", "lastname": "Lopez", "dob": "1951-02-03", "extension": "Jr."}

        result = normalize_identity(record)

        assert result["firstName"] == "Ana"
        assert result["lastName"] == "Lopez"
        assert result["birthDate"] == "1951-02-03"
        assert result["suffix"] == "Jr."
        assert result["shape"] == RecordShape.LEGACY_ROW.value

    def test_missing_fields_default_to_empty_string(self):
        result = normalize_identity({})

        assert result["firstName"] == ""
        assert result["middleName"] == ""
        assert result["seniorIdNumber"] == ""
        assert result["status"] == "Pending"

    def test_full_name_synthesized_when_absent(self):
        result = normalize_identity({"first_name": "Juan", "last_name": "Dela Cruz"})

        assert result["fullName"] == "Juan Dela Cruz"

    def test_explicit_full_name_preferred(self):
        result = normalize_identity(
            {"first_name": "Juan", "last_name": "Dela Cruz", "fullName": "DELA CRUZ, JUAN"}
        )

        assert result["fullName"] == "DELA CRUZ, JUAN"

    def test_form_data_is_dual_keyed(self):
        """Test both camelCase and snake_case keys are present for display code."""
        record = {
            "first_name": "Juan",
            "last_name": "Dela Cruz",
            "birthdate": "1950-01-01",
            "id_status": "Approved",
            "scid_number": "SCID-000004",
        }

        form_data = normalize_identity(record)["formData"]

        assert form_data["firstName"] == form_data["first_name"] == "Juan"
        assert form_data["lastName"] == form_data["last_name"] == "Dela Cruz"
        assert form_data["birthDate"] == form_data["birthdate"] == "1950-01-01"
        assert form_data["status"] == "Approved"
        assert form_data["scid_number"] == "SCID-000004"

    def test_form_data_json_string_is_decoded(self):
        record = {
            "id": "app_1",
            "formData": json.dumps({"firstName": "Rosa", "birthPlace": "Pasig", "sex": "Female"}),
        }

        result = normalize_identity(record)

        assert result["firstName"] == "Rosa"
        assert result["formData"]["birthPlace"] == "Pasig"
        assert result["formData"]["sex"] == "Female"

    def test_snake_case_form_payload_is_read(self):
        record = {"form_data": {"firstName": "Lito", "contactNumber": "0917"}}

        result = normalize_identity(record)

        assert result["firstName"] == "Lito"
        assert result["formData"]["contactNumber"] == "0917"

    def test_citizenship_defaults_to_filipino(self):
        assert normalize_identity({})["formData"]["citizenship"] == "Filipino"

    def test_senior_id_number_aliases(self):
        assert normalize_identity({"SCID_Number": "SCID-000009"})["seniorIdNumber"] == "SCID-000009"
        assert normalize_identity({"senior_id": "OLD-1"})["seniorIdNumber"] == "OLD-1"


class TestDetectShape:

    def test_db_row(self):
        assert detect_shape({"first_name": "Juan"}) == RecordShape.DB_ROW

    def test_legacy_row(self):
        assert detect_shape({"birthday": "1950-01-01"}) == RecordShape.LEGACY_ROW

    def test_form_submission(self):
        assert detect_shape({"firstName": "Juan"}) == RecordShape.FORM_SUBMISSION


class TestSplitFullName:
    """Best-effort name splitting for registry rows with a single name string."""

    @pytest.mark.parametrize(
        "full_name, expected",
        [
            ("DELA CRUZ, JUAN PEDRO SANTOS", ("JUAN PEDRO", "SANTOS", "DELA CRUZ")),
            ("Santos, Maria Reyes", ("MARIA", "REYES", "SANTOS")),
            ("SANTOS, MARIA", ("MARIA", "", "SANTOS")),
            ("SANTOS,", ("", "", "SANTOS")),
            ("JUAN PEDRO SANTOS DELA CRUZ", ("JUAN PEDRO", "SANTOS", "DELA CRUZ")),
            ("Maria Reyes Santos", ("MARIA", "REYES", "SANTOS")),
            ("MARIA SANTOS", ("MARIA", "", "SANTOS")),
            ("MARIA", ("MARIA", "", "")),
            ("", ("", "", "")),
        ],
    )
    def test_split(self, full_name, expected):
        assert split_full_name(full_name) == expected


class TestTrimStrings:

    def test_trims_every_nesting_level(self):
        payload = {
            "userName": "  JUAN ",
            "documents": [" a.pdf", {"name": " b.pdf "}],
            "formData": {"address": {"street": "  Main St.  "}, "age": 70, "flag": True},
        }

        result = trim_strings(payload)

        assert result == {
            "userName": "JUAN",
            "documents": ["a.pdf", {"name": "b.pdf"}],
            "formData": {"address": {"street": "Main St."}, "age": 70, "flag": True},
        }

    def test_idempotent(self):
        payload = {"a": [" x ", {"b": "\ty\n"}], "c": None, "d": " z"}

        once = trim_strings(payload)

        assert trim_strings(once) == once

    def test_does_not_mutate_input(self):
        payload = {"name": " Juan "}

        trim_strings(payload)

        assert payload == {"name": " Juan "}


class TestCompositeFullName:

    def test_uppercased_last_first_middle(self):
        form_data = {"firstName": "Juan", "middleName": "Santos", "lastName": "Dela Cruz"}

        assert composite_full_name(form_data) == "DELA CRUZ, JUAN SANTOS"

    def test_missing_middle_name_is_trimmed(self):
        assert composite_full_name({"firstName": "Juan", "lastName": "Cruz"}) == "CRUZ, JUAN"
