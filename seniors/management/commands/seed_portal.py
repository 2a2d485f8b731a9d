"""
Django management command to load the demo collections.

Seeds the back office users, civil registry / PWD records and a small
masterlist so the portal can be exercised without an upstream system.

Usage:
    python manage.py seed_portal
    python manage.py seed_portal --reset
"""

from django.core.management.base import BaseCommand
from django.db import transaction

from seniors.models import (
    Application,
    Complaint,
    IdIssuance,
    IdStatus,
    MasterlistRecord,
    PortalUser,
    RegistryRecord,
    Role,
)

ADMIN_USERS = [
    # id, name, role, username, password, email
    ("u_admin", "OSCA Administrator", Role.ADMIN, "admin", "admin123", "admin@osca.gov"),
    ("u_super", "OSCA Head", Role.SUPER_ADMIN, "superadmin", "super123", "head@osca.gov"),
    ("u_encoder", "Front Desk Encoder", Role.ENCODER, "encoder", "encoder123", "encoder@osca.gov"),
    ("u_approver", "Records Approver", Role.APPROVER, "approver", "approver123", "approver@osca.gov"),
]

REGISTRY_RECORDS = [
    {
        "id": "LCR-1955-0001",
        "type": RegistryRecord.TYPE_LCR,
        "first_name": "Maria",
        "middle_name": "Reyes",
        "last_name": "Santos",
        "birth_date": "1955-03-15",
        "birth_place": "San Juan",
        "sex": "Female",
        "civil_status": "Widowed",
        "barangay": "Corazon de Jesus",
        "street": "Pinaglabanan St.",
        "house_no": "12",
    },
    {
        "id": "LCR-1950-0002",
        "type": RegistryRecord.TYPE_LCR,
        "full_name": "DELA CRUZ, JUAN PEDRO SANTOS",
        "birth_date": "01/20/1950",
        "birth_place": "Manila",
        "sex": "Male",
        "civil_status": "Married",
        "barangay": "Little Baguio",
    },
    {
        "id": "LCR-1961-0003",
        "type": RegistryRecord.TYPE_LCR,
        "first_name": "Roberto",
        "last_name": "Garcia",
        "birth_date": "1961-11-02",
        "sex": "Male",
        "barangay": "Greenhills",
    },
    {
        "id": "PWD-0004",
        "type": RegistryRecord.TYPE_PWD,
        "first_name": "Elena",
        "last_name": "Bautista",
        "birth_date": "1958-07-30",
        "sex": "Female",
        "barangay": "Ermitano",
        "status": "Active",
    },
]

MASTERLIST_RECORDS = [
    {
        "id": "u_citizen_1",
        "full_name": "REYES, ANTONIO LUNA",
        "first_name": "ANTONIO",
        "last_name": "REYES",
        "middle_name": "LUNA",
        "birth_date": "1948-05-10",
        "birth_place": "SAN JUAN",
        "scid_number": "SCID-000001",
        "senior_id_number": "SCID-000001",
        "id_status": IdStatus.RELEASED,
        "address": "5 N. DOMINGO ST., BRGY. BALONG-BATO, SAN JUAN CITY, METRO MANILA",
        "house_no": "5",
        "street": "N. DOMINGO ST.",
        "barangay": "BALONG-BATO",
        "city_municipality": "SAN JUAN CITY",
        "province": "METRO MANILA",
        "email": "antonio.reyes@example.com",
        "contact_number": "09171234567",
        "sex": "MALE",
        "civil_status": "MARRIED",
        "username": "areyes1001",
        "password": "senior01",
    },
]


class Command(BaseCommand):
    help = "Load demo users, registry records and masterlist into the portal collections"

    def add_arguments(self, parser):
        parser.add_argument(
            "--reset",
            action="store_true",
            help="Delete applications, complaints and masterlist records before seeding",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options["reset"]:
            for model in (Application, IdIssuance, Complaint, MasterlistRecord):
                model.objects.all().delete()
            self.stdout.write(self.style.WARNING("Cleared portal collections"))

        for user_id, name, role, username, password, email in ADMIN_USERS:
            PortalUser.objects.update_or_create(
                id=user_id,
                defaults={
                    "name": name,
                    "role": role,
                    "username": username,
                    "password": password,
                    "email": email,
                },
            )
        for data in REGISTRY_RECORDS:
            RegistryRecord.objects.update_or_create(id=data["id"], defaults=data)
        for data in MASTERLIST_RECORDS:
            MasterlistRecord.objects.update_or_create(id=data["id"], defaults=data)

        self.stdout.write(
            self.style.SUCCESS(
                f"Seeded {len(ADMIN_USERS)} users, {len(REGISTRY_RECORDS)} registry records, "
                f"{len(MASTERLIST_RECORDS)} masterlist records"
            )
        )
