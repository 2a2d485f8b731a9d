"""
Unit tests for MasterlistService - matching, merge and field casing.
"""

import pytest
from django.forms.models import model_to_dict
from django.utils import timezone

from seniors.models import MasterlistRecord


@pytest.mark.django_db
class TestFindMatch:

    def test_id_match_first(self, masterlist_service, citizen_record):
        form_data = {"firstName": "Somebody", "lastName": "Else", "birthDate": "1960-01-01"}

        assert masterlist_service.find_match(citizen_record.id, form_data) == citizen_record

    def test_falls_back_to_name_and_birth_date(self, masterlist_service, citizen_record):
        form_data = {
            "firstName": "antonio",
            "middleName": "luna",
            "lastName": "reyes",
            "birthDate": "1948-05-10",
        }

        assert masterlist_service.find_match("u_unknown", form_data) == citizen_record

    def test_no_fuzzy_match(self, masterlist_service, citizen_record):
        form_data = {"firstName": "Antonio", "lastName": "Reyes", "birthDate": "1948-05-10"}

        assert masterlist_service.find_match("", form_data) is None

    def test_nameless_payload_never_matches_by_name(self, masterlist_service):
        MasterlistRecord.objects.create(id="u_blank", full_name=",")

        assert masterlist_service.find_match("", {"street": "Ortigas Ave."}) is None

    def test_next_scid_reads_whole_masterlist(self, masterlist_service, citizen_record):
        MasterlistRecord.objects.create(id="u_2", full_name="X", scid_number="SCID-000041")
        MasterlistRecord.objects.create(id="u_3", full_name="Y")

        assert masterlist_service.next_scid() == "SCID-000042"


@pytest.mark.django_db
class TestMerge:
    """Test cases for projecting transitions onto the masterlist."""

    def test_approval_creates_record_with_display_casing(self, masterlist_service, sample_form_data):
        record = masterlist_service.merge("u_1001", "Approved", sample_form_data, "SCID-000001")

        assert record.full_name == "DELA CRUZ, JUAN SANTOS"
        assert record.first_name == "JUAN"
        assert record.middle_name == "SANTOS"
        assert record.birth_place == "SAN JUAN"
        assert record.address == (
            "12 PINAGLABANAN ST., BRGY. CORAZON DE JESUS, SAN JUAN CITY, METRO MANILA"
        )
        assert record.city_municipality == "SAN JUAN CITY"
        assert record.sex == "MALE"
        assert record.civil_status == "MARRIED"
        assert record.email == "juan.delacruz@example.com"
        assert record.contact_number == "09171234567"
        assert record.username.startswith("jdelacruz")
        assert record.id_status == "New"

    def test_default_city_and_province(self, masterlist_service):
        form_data = {"firstName": "Rosa", "lastName": "Lim", "barangay": "Greenhills"}

        record = masterlist_service.merge("u_9", "Approved", form_data, "SCID-000001")

        assert record.city_municipality == "SAN JUAN CITY"
        assert record.province == "METRO MANILA"
        assert record.address.endswith("BRGY. GREENHILLS, SAN JUAN CITY, METRO MANILA")
        assert record.sex is None

    def test_approval_from_id_issuance_lands_as_approved(self, masterlist_service, sample_form_data):
        record = masterlist_service.merge(
            "u_1001", "Approved", sample_form_data, "SCID-000001", from_id_issuance=True
        )

        assert record.id_status == "Approved"

    def test_merge_is_idempotent(self, masterlist_service, sample_form_data):
        masterlist_service.merge("u_1001", "Approved", sample_form_data, "SCID-000001")
        first = model_to_dict(MasterlistRecord.objects.get(id="u_1001"))

        masterlist_service.merge("u_1001", "Approved", sample_form_data, "SCID-000001")
        second = model_to_dict(MasterlistRecord.objects.get(id="u_1001"))

        assert first == second

    def test_merge_keeps_existing_scid_and_credentials(self, masterlist_service, citizen_record):
        form_data = {"firstName": "Antonio", "lastName": "Reyes", "birthDate": "1948-05-10"}

        record = masterlist_service.merge(citizen_record.id, "Approved", form_data, "SCID-000099")

        assert record.id == citizen_record.id
        assert record.scid_number == "SCID-000001"
        assert record.senior_id_number == "SCID-000001"
        assert (record.username, record.password) == ("areyes1001", "senior01")

    def test_merge_fills_missing_credentials(self, masterlist_service):
        MasterlistRecord.objects.create(id="u_5", full_name="CRUZ, ANA", scid_number="SCID-000005")

        record = masterlist_service.merge(
            "u_5", "Approved", {"firstName": "Ana", "lastName": "Cruz"}, "SCID-000005"
        )

        assert record.username.startswith("acruz")
        assert len(record.password) == 8

    def test_rejection_without_match_is_no_op(self, masterlist_service, sample_form_data):
        assert masterlist_service.merge("u_1001", "Rejected", sample_form_data, "") is None
        assert MasterlistRecord.objects.count() == 0

    def test_release_sets_released_date(self, masterlist_service, citizen_record):
        record = masterlist_service.merge(citizen_record.id, "Released", {}, "")

        assert record.id_status == "Released"
        assert record.released_date is not None

    def test_pending_is_not_projected(self, masterlist_service, citizen_record):
        assert masterlist_service.merge(citizen_record.id, "Pending", {}, "") is None

        citizen_record.refresh_from_db()
        assert citizen_record.id_status == "Released"


@pytest.mark.django_db
class TestEditAndRelease:

    def test_sync_edit_never_creates(self, masterlist_service, sample_form_data):
        assert masterlist_service.sync_edit("u_1001", sample_form_data) is None
        assert MasterlistRecord.objects.count() == 0

    def test_sync_edit_keeps_credentials(self, masterlist_service, citizen_record):
        form_data = {"firstName": "Antonio", "lastName": "Reyes", "street": "Ortigas Ave."}

        record = masterlist_service.sync_edit(citizen_record.id, form_data, "Approved")

        assert record.street == "ORTIGAS AVE."
        assert record.id_status == "Approved"
        assert record.scid_number == "SCID-000001"
        assert record.username == "areyes1001"

    def test_sync_edit_keeps_existing_scid(self, masterlist_service, citizen_record):
        form_data = {"firstName": "Antonio", "lastName": "Reyes", "scid_number": "SCID-999999"}

        record = masterlist_service.sync_edit(citizen_record.id, form_data)

        assert record.scid_number == "SCID-000001"
        assert record.senior_id_number == "SCID-000001"

    def test_mark_released_uses_given_timestamp(self, masterlist_service, citizen_record):
        released_at = timezone.now()

        record = masterlist_service.mark_released(citizen_record.id, {}, released_at)

        assert record.released_date == released_at

    def test_mark_pending(self, masterlist_service, citizen_record):
        record = masterlist_service.mark_pending(citizen_record.id, {})

        assert record.id_status == "Pending"
