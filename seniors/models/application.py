from django.db import models
from django.utils import timezone


class ApplicationStatus(models.TextChoices):
    PENDING = "Pending", "Pending"
    APPROVED = "Approved", "Approved"
    REJECTED = "Rejected", "Rejected"
    ISSUED = "Released", "Released"


class ApplicationType(models.TextChoices):
    REGISTRATION = "Registration", "Registration"
    ID_NEW = "New ID", "New ID"
    ID_RENEWAL = "ID Renewal", "ID Renewal"
    ID_REPLACEMENT = "ID Replacement", "ID Replacement"
    BENEFIT_CASH = "Cash Gift", "Cash Gift"
    BENEFIT_MED = "Medical Assistance", "Medical Assistance"
    PHILHEALTH = "PhilHealth", "PhilHealth"


class BaseApplication(models.Model):
    """
    A submitted request (registration, ID action, benefit claim, PhilHealth).

    The applicant's data lives in ``form_data``, a loosely typed JSON bag that
    keeps whatever keys the submitting screen sent (camelCase form fields plus
    the snake_case ``scid_number`` once an approval froze one in).
    """

    id = models.CharField(max_length=64, primary_key=True)
    user_id = models.CharField(
        max_length=64, blank=True, default="", db_index=True, help_text="Owner reference (weak)"
    )
    user_name = models.CharField(max_length=255, blank=True, default="")
    type = models.CharField(max_length=32, choices=ApplicationType.choices)
    date = models.DateField(default=timezone.localdate)
    status = models.CharField(
        max_length=16,
        choices=ApplicationStatus.choices,
        default=ApplicationStatus.PENDING,
        db_index=True,
    )
    description = models.TextField(blank=True, default="")
    documents = models.JSONField(default=list, blank=True)
    rejection_reason = models.TextField(blank=True, default="")
    released_date = models.DateTimeField(blank=True, null=True)
    form_data = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    # Prefix of generated ids; also tells which collection a record belongs to
    ID_PREFIX = "app"

    class Meta:
        abstract = True
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"{self.id} {self.type} ({self.status})"

    @property
    def is_id_issuance(self) -> bool:
        return self.ID_PREFIX == IdIssuance.ID_PREFIX


class Application(BaseApplication):
    """General applications: registration, benefits, PhilHealth."""

    ID_PREFIX = "app"

    class Meta(BaseApplication.Meta):
        db_table = "applications"


class IdIssuance(BaseApplication):
    """ID issuance requests (new, renewal, replacement)."""

    ID_PREFIX = "iss"

    class Meta(BaseApplication.Meta):
        db_table = "id_issuances"
