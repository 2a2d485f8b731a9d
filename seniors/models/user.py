from django.db import models


class Role(models.TextChoices):
    CITIZEN = "CITIZEN", "Citizen"
    ADMIN = "ADMIN", "Admin"
    SUPER_ADMIN = "SUPER_ADMIN", "Super Admin"
    ENCODER = "ENCODER", "Encoder"
    APPROVER = "APPROVER", "Approver"


class PortalUser(models.Model):
    """
    Pre-seeded back office actor.

    Citizens are not stored here: their login view is derived from the
    masterlist at login time. Credentials are matched as plain text.
    """

    id = models.CharField(max_length=64, primary_key=True)
    name = models.CharField(max_length=255)
    first_name = models.CharField(max_length=100, blank=True, default="")
    middle_name = models.CharField(max_length=100, blank=True, default="")
    last_name = models.CharField(max_length=100, blank=True, default="")
    suffix = models.CharField(max_length=20, blank=True, default="")
    role = models.CharField(max_length=16, choices=Role.choices, default=Role.ADMIN)
    email = models.CharField(max_length=255, blank=True, default="")
    username = models.CharField(max_length=100, unique=True)
    password = models.CharField(max_length=100)
    avatar_url = models.CharField(max_length=500, blank=True, default="")
    birth_date = models.CharField(max_length=32, blank=True, default="")
    address = models.CharField(max_length=500, blank=True, default="")
    contact_number = models.CharField(max_length=50, blank=True, default="")
    senior_id_number = models.CharField(max_length=32, blank=True, default="")
    profile = models.JSONField(
        default=dict, blank=True, help_text="Extended profile fields (sex, civil status, ...)"
    )

    class Meta:
        db_table = "portal_users"
        ordering = ["id"]

    def __str__(self):
        return f"{self.name} ({self.role})"
