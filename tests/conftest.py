"""
Pytest configuration and shared fixtures for the test suite.
"""

import random

import pytest
from unittest.mock import MagicMock

from seniors.models import MasterlistRecord, PortalUser, RegistryRecord, Role
from seniors.services.application_service import ApplicationService
from seniors.services.identifiers import IdentifierGenerator
from seniors.services.masterlist_service import MasterlistService


@pytest.fixture(autouse=True)
def mock_notifications(mocker):
    """Keep notification side effects out of the lifecycle tests."""
    return {
        "status_update": mocker.patch(
            "seniors.services.application_service.notify_status_update"
        ),
        "registration": mocker.patch("seniors.signals.notify_registration_success"),
    }


@pytest.fixture
def generator():
    """Deterministic generator: seeded randomness, real clock."""
    return IdentifierGenerator(rng=random.Random(42))


@pytest.fixture
def masterlist_service(generator):
    return MasterlistService(generator)


@pytest.fixture
def application_service(generator, masterlist_service):
    return ApplicationService(generator=generator, masterlist=masterlist_service)


@pytest.fixture
def sample_form_data():
    """Registration form payload as the citizen screen submits it."""
    return {
        "firstName": "Juan",
        "middleName": "Santos",
        "lastName": "Dela Cruz",
        "birthDate": "1950-01-01",
        "birthPlace": "San Juan",
        "sex": "Male",
        "civilStatus": "Married",
        "houseNo": "12",
        "street": "Pinaglabanan St.",
        "barangay": "Corazon de Jesus",
        "city": "San Juan City",
        "province": "Metro Manila",
        "email": "Juan.DelaCruz@Example.com",
        "contactNumber": " 09171234567 ",
    }


@pytest.fixture
def sample_registration(sample_form_data):
    return {
        "userId": "u_1001",
        "userName": "JUAN DELA CRUZ",
        "type": "Registration",
        "description": "Online registration",
        "documents": ["birth_certificate.pdf"],
        "formData": sample_form_data,
    }


@pytest.fixture
def create_application(db, application_service, sample_registration):
    """Factory fixture: submit an application and return the stored row."""

    def _create_application(issuance=False, **overrides):
        payload = {**sample_registration, **overrides}
        if issuance:
            payload["type"] = overrides.get("type", "New ID")
            result = application_service.submit_id_issuance(payload)
        else:
            result = application_service.submit_application(payload)
        assert result["ok"] is True
        return application_service.find_application(result["id"])

    return _create_application


@pytest.fixture
def admin_user(db):
    return PortalUser.objects.create(
        id="u_admin",
        name="OSCA Administrator",
        role=Role.ADMIN,
        username="admin",
        password="admin123",
        email="admin@osca.gov",
    )


@pytest.fixture
def citizen_record(db):
    """Masterlist record of a citizen who already holds a released ID."""
    return MasterlistRecord.objects.create(
        id="u_citizen_1",
        full_name="REYES, ANTONIO LUNA",
        first_name="ANTONIO",
        last_name="REYES",
        middle_name="LUNA",
        birth_date="1948-05-10",
        scid_number="SCID-000001",
        senior_id_number="SCID-000001",
        id_status="Released",
        username="areyes1001",
        password="senior01",
    )


@pytest.fixture
def registry_records(db):
    return [
        RegistryRecord.objects.create(
            id="LCR-1955-0001",
            type=RegistryRecord.TYPE_LCR,
            first_name="Maria",
            middle_name="Reyes",
            last_name="Santos",
            birth_date="1955-03-15",
            birth_place="San Juan",
            sex="Female",
            barangay="Corazon de Jesus",
        ),
        RegistryRecord.objects.create(
            id="LCR-1950-0002",
            type=RegistryRecord.TYPE_LCR,
            full_name="DELA CRUZ, JUAN PEDRO SANTOS",
            birth_date="01/20/1950",
            birth_place="Manila",
        ),
        RegistryRecord.objects.create(
            id="LCR-2001-0003",
            type=RegistryRecord.TYPE_LCR,
            first_name="Young",
            last_name="Santos",
            birth_date="2001-06-01",
        ),
        RegistryRecord.objects.create(
            id="LCR-1949-0004",
            type=RegistryRecord.TYPE_LCR,
            first_name="Already",
            last_name="Santos",
            birth_date="1949-06-01",
            is_registered=True,
        ),
        RegistryRecord.objects.create(
            id="PWD-0005",
            type=RegistryRecord.TYPE_PWD,
            first_name="Elena",
            last_name="Bautista",
            birth_date="1958-07-30",
            status="Active",
        ),
    ]


@pytest.fixture
def mock_pika_connection(mocker):
    """Mock pika RabbitMQ connection."""
    mock_connection = MagicMock()
    mock_channel = MagicMock()
    mock_connection.channel.return_value = mock_channel

    mocker.patch("pika.BlockingConnection", return_value=mock_connection)
    return mock_connection, mock_channel
