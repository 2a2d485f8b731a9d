from django.db import models
from django.utils import timezone


class Complaint(models.Model):
    """Citizen complaint or concern filed through the portal."""

    STATUS_OPEN = "Open"
    STATUS_RESOLVED = "Resolved"

    STATUS_CHOICES = [
        (STATUS_OPEN, "Open"),
        (STATUS_RESOLVED, "Resolved"),
    ]

    id = models.CharField(max_length=64, primary_key=True)
    user_id = models.CharField(max_length=64, blank=True, default="")
    user_name = models.CharField(max_length=255, blank=True, default="")
    date = models.DateField(default=timezone.localdate)
    subject = models.CharField(max_length=255)
    details = models.TextField()
    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default=STATUS_OPEN)
    ai_summary = models.TextField(blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "complaints"
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"{self.subject} ({self.status})"
