from django.db import models


class IdStatus(models.TextChoices):
    NEW = "New", "New"
    PENDING = "Pending", "Pending"
    APPROVED = "Approved", "Approved"
    RELEASED = "Released", "Released"
    REJECTED = "Rejected", "Rejected"


class MasterlistRecord(models.Model):
    """
    Canonical, de-duplicated citizen record, created on the first approval.

    ``id_status`` is where the citizen sits in the ID lifecycle and takes
    precedence over any single application's own status.
    """

    id = models.CharField(max_length=64, primary_key=True)
    full_name = models.CharField(max_length=255, db_index=True, help_text="LAST, FIRST MIDDLE")
    first_name = models.CharField(max_length=100, blank=True, default="")
    last_name = models.CharField(max_length=100, blank=True, default="")
    middle_name = models.CharField(max_length=100, blank=True, default="")
    birth_date = models.CharField(max_length=32, blank=True, default="", db_index=True)
    birth_place = models.CharField(max_length=255, blank=True, default="")

    # Same value under both names, read interchangeably by the ID screens
    scid_number = models.CharField(max_length=32, blank=True, default="", db_index=True)
    senior_id_number = models.CharField(max_length=32, blank=True, default="")
    id_status = models.CharField(max_length=16, choices=IdStatus.choices, default=IdStatus.NEW)

    address = models.CharField(max_length=500, blank=True, default="")
    house_no = models.CharField(max_length=50, blank=True, default="")
    street = models.CharField(max_length=255, blank=True, default="")
    barangay = models.CharField(max_length=255, blank=True, default="")
    city_municipality = models.CharField(max_length=255, blank=True, default="")
    province = models.CharField(max_length=255, blank=True, default="")
    district = models.CharField(max_length=100, blank=True, default="")

    email = models.CharField(max_length=255, blank=True, default="")
    contact_number = models.CharField(max_length=50, blank=True, default="")
    sex = models.CharField(max_length=20, blank=True, null=True)
    civil_status = models.CharField(max_length=50, blank=True, null=True)

    username = models.CharField(max_length=100, blank=True, default="", db_index=True)
    password = models.CharField(max_length=100, blank=True, default="")

    released_date = models.DateTimeField(blank=True, null=True)
    form_data = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "masterlist_records"
        ordering = ["created_at", "id"]
        indexes = [
            models.Index(fields=["full_name", "birth_date"], name="masterlist_name_birth_idx"),
        ]

    def __str__(self):
        return f"{self.full_name} ({self.scid_number or 'no SCID'})"
