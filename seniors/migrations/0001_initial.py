import django.utils.timezone
from django.db import migrations, models


APPLICATION_TYPES = [
    ("Registration", "Registration"),
    ("New ID", "New ID"),
    ("ID Renewal", "ID Renewal"),
    ("ID Replacement", "ID Replacement"),
    ("Cash Gift", "Cash Gift"),
    ("Medical Assistance", "Medical Assistance"),
    ("PhilHealth", "PhilHealth"),
]

APPLICATION_STATUSES = [
    ("Pending", "Pending"),
    ("Approved", "Approved"),
    ("Rejected", "Rejected"),
    ("Released", "Released"),
]


def application_fields():
    return [
        ("id", models.CharField(max_length=64, primary_key=True, serialize=False)),
        (
            "user_id",
            models.CharField(
                blank=True, db_index=True, default="", help_text="Owner reference (weak)", max_length=64
            ),
        ),
        ("user_name", models.CharField(blank=True, default="", max_length=255)),
        ("type", models.CharField(choices=APPLICATION_TYPES, max_length=32)),
        ("date", models.DateField(default=django.utils.timezone.localdate)),
        (
            "status",
            models.CharField(
                choices=APPLICATION_STATUSES, db_index=True, default="Pending", max_length=16
            ),
        ),
        ("description", models.TextField(blank=True, default="")),
        ("documents", models.JSONField(blank=True, default=list)),
        ("rejection_reason", models.TextField(blank=True, default="")),
        ("released_date", models.DateTimeField(blank=True, null=True)),
        ("form_data", models.JSONField(blank=True, default=dict)),
        ("created_at", models.DateTimeField(auto_now_add=True)),
        ("updated_at", models.DateTimeField(auto_now=True)),
    ]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Application",
            fields=application_fields(),
            options={"db_table": "applications", "ordering": ["-created_at", "-id"], "abstract": False},
        ),
        migrations.CreateModel(
            name="IdIssuance",
            fields=application_fields(),
            options={"db_table": "id_issuances", "ordering": ["-created_at", "-id"], "abstract": False},
        ),
        migrations.CreateModel(
            name="Complaint",
            fields=[
                ("id", models.CharField(max_length=64, primary_key=True, serialize=False)),
                ("user_id", models.CharField(blank=True, default="", max_length=64)),
                ("user_name", models.CharField(blank=True, default="", max_length=255)),
                ("date", models.DateField(default=django.utils.timezone.localdate)),
                ("subject", models.CharField(max_length=255)),
                ("details", models.TextField()),
                (
                    "status",
                    models.CharField(
                        choices=[("Open", "Open"), ("Resolved", "Resolved")],
                        default="Open",
                        max_length=16,
                    ),
                ),
                ("ai_summary", models.TextField(blank=True, default="")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={"db_table": "complaints", "ordering": ["-created_at", "-id"]},
        ),
        migrations.CreateModel(
            name="MasterlistRecord",
            fields=[
                ("id", models.CharField(max_length=64, primary_key=True, serialize=False)),
                (
                    "full_name",
                    models.CharField(db_index=True, help_text="LAST, FIRST MIDDLE", max_length=255),
                ),
                ("first_name", models.CharField(blank=True, default="", max_length=100)),
                ("last_name", models.CharField(blank=True, default="", max_length=100)),
                ("middle_name", models.CharField(blank=True, default="", max_length=100)),
                ("birth_date", models.CharField(blank=True, db_index=True, default="", max_length=32)),
                ("birth_place", models.CharField(blank=True, default="", max_length=255)),
                ("scid_number", models.CharField(blank=True, db_index=True, default="", max_length=32)),
                ("senior_id_number", models.CharField(blank=True, default="", max_length=32)),
                (
                    "id_status",
                    models.CharField(
                        choices=[
                            ("New", "New"),
                            ("Pending", "Pending"),
                            ("Approved", "Approved"),
                            ("Released", "Released"),
                            ("Rejected", "Rejected"),
                        ],
                        default="New",
                        max_length=16,
                    ),
                ),
                ("address", models.CharField(blank=True, default="", max_length=500)),
                ("house_no", models.CharField(blank=True, default="", max_length=50)),
                ("street", models.CharField(blank=True, default="", max_length=255)),
                ("barangay", models.CharField(blank=True, default="", max_length=255)),
                ("city_municipality", models.CharField(blank=True, default="", max_length=255)),
                ("province", models.CharField(blank=True, default="", max_length=255)),
                ("district", models.CharField(blank=True, default="", max_length=100)),
                ("email", models.CharField(blank=True, default="", max_length=255)),
                ("contact_number", models.CharField(blank=True, default="", max_length=50)),
                ("sex", models.CharField(blank=True, max_length=20, null=True)),
                ("civil_status", models.CharField(blank=True, max_length=50, null=True)),
                ("username", models.CharField(blank=True, db_index=True, default="", max_length=100)),
                ("password", models.CharField(blank=True, default="", max_length=100)),
                ("released_date", models.DateTimeField(blank=True, null=True)),
                ("form_data", models.JSONField(blank=True, default=dict)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "masterlist_records",
                "ordering": ["created_at", "id"],
                "indexes": [
                    models.Index(
                        fields=["full_name", "birth_date"], name="masterlist_name_birth_idx"
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="PortalUser",
            fields=[
                ("id", models.CharField(max_length=64, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("first_name", models.CharField(blank=True, default="", max_length=100)),
                ("middle_name", models.CharField(blank=True, default="", max_length=100)),
                ("last_name", models.CharField(blank=True, default="", max_length=100)),
                ("suffix", models.CharField(blank=True, default="", max_length=20)),
                (
                    "role",
                    models.CharField(
                        choices=[
                            ("CITIZEN", "Citizen"),
                            ("ADMIN", "Admin"),
                            ("SUPER_ADMIN", "Super Admin"),
                            ("ENCODER", "Encoder"),
                            ("APPROVER", "Approver"),
                        ],
                        default="ADMIN",
                        max_length=16,
                    ),
                ),
                ("email", models.CharField(blank=True, default="", max_length=255)),
                ("username", models.CharField(max_length=100, unique=True)),
                ("password", models.CharField(max_length=100)),
                ("avatar_url", models.CharField(blank=True, default="", max_length=500)),
                ("birth_date", models.CharField(blank=True, default="", max_length=32)),
                ("address", models.CharField(blank=True, default="", max_length=500)),
                ("contact_number", models.CharField(blank=True, default="", max_length=50)),
                ("senior_id_number", models.CharField(blank=True, default="", max_length=32)),
                (
                    "profile",
                    models.JSONField(
                        blank=True,
                        default=dict,
                        help_text="Extended profile fields (sex, civil status, ...)",
                    ),
                ),
            ],
            options={"db_table": "portal_users", "ordering": ["id"]},
        ),
        migrations.CreateModel(
            name="RegistryRecord",
            fields=[
                ("id", models.CharField(max_length=64, primary_key=True, serialize=False)),
                (
                    "type",
                    models.CharField(
                        choices=[("LCR", "Local Civil Registry"), ("PWD", "Persons with Disability")],
                        db_index=True,
                        max_length=8,
                    ),
                ),
                ("first_name", models.CharField(blank=True, default="", max_length=100)),
                ("middle_name", models.CharField(blank=True, default="", max_length=100)),
                ("last_name", models.CharField(blank=True, default="", max_length=100)),
                (
                    "full_name",
                    models.CharField(
                        blank=True,
                        default="",
                        help_text="Raw combined name when parts are absent",
                        max_length=255,
                    ),
                ),
                ("suffix", models.CharField(blank=True, default="", max_length=20)),
                ("citizenship", models.CharField(blank=True, default="", max_length=50)),
                ("birth_date", models.CharField(blank=True, default="", max_length=32)),
                ("birth_place", models.CharField(blank=True, default="", max_length=255)),
                ("sex", models.CharField(blank=True, default="", max_length=20)),
                ("civil_status", models.CharField(blank=True, default="", max_length=50)),
                ("province", models.CharField(blank=True, default="", max_length=255)),
                ("city", models.CharField(blank=True, default="", max_length=255)),
                ("district", models.CharField(blank=True, default="", max_length=100)),
                ("barangay", models.CharField(blank=True, default="", max_length=255)),
                ("street", models.CharField(blank=True, default="", max_length=255)),
                ("house_no", models.CharField(blank=True, default="", max_length=50)),
                ("address", models.CharField(blank=True, default="", max_length=500)),
                ("is_registered", models.BooleanField(default=False)),
                ("status", models.CharField(blank=True, default="", max_length=50)),
            ],
            options={"db_table": "registry_records", "ordering": ["last_name", "first_name", "id"]},
        ),
    ]
