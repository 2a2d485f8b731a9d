import logging
from typing import Optional

from django.utils import timezone

from seniors.models import (
    Application,
    ApplicationStatus,
    Complaint,
    IdIssuance,
    IdStatus,
    MasterlistRecord,
)
from seniors.services.identifiers import IdentifierGenerator, get_generator
from seniors.services.normalizer import trim_strings

logger = logging.getLogger(__name__)


class ComplaintService:
    """Service class for citizen complaints."""

    def __init__(self, generator: Optional[IdentifierGenerator] = None):
        self.generator = generator or get_generator()

    def add_complaint(self, complaint_data: dict) -> dict:
        """
        File a complaint as Open, dated today.

        Args:
            complaint_data: userId, userName, subject, details

        Returns:
            dict: ``{"ok": True, "id": ...}`` or ``{"ok": False, "error": ...}``
        """
        data = trim_strings(dict(complaint_data))
        if not data.get("subject") or not data.get("details"):
            return {"ok": False, "error": "Subject and details are required"}

        complaint_id = self.generator.record_id(
            "comp", is_taken=lambda candidate: Complaint.objects.filter(id=candidate).exists()
        )
        complaint = Complaint.objects.create(
            id=complaint_id,
            user_id=data.get("userId") or "",
            user_name=data.get("userName") or "",
            subject=data["subject"],
            details=data["details"],
            status=Complaint.STATUS_OPEN,
            date=timezone.localdate(),
        )
        logger.info(f"Complaint {complaint.id} filed by {complaint.user_name}")
        return {"ok": True, "id": complaint.id}

    def resolve_complaint(self, complaint_id: str) -> dict:
        updated = Complaint.objects.filter(id=complaint_id).update(status=Complaint.STATUS_RESOLVED)
        if not updated:
            return {"ok": False, "error": f"Complaint {complaint_id} not found"}
        return {"ok": True}


def portal_statistics() -> dict:
    """Headline counts for the back office dashboard."""
    return {
        "pendingApplications": Application.objects.filter(status=ApplicationStatus.PENDING).count(),
        "pendingIdIssuances": IdIssuance.objects.filter(status=ApplicationStatus.PENDING).count(),
        "registeredSeniors": MasterlistRecord.objects.count(),
        "releasedIds": MasterlistRecord.objects.filter(id_status=IdStatus.RELEASED).count(),
        "openComplaints": Complaint.objects.filter(status=Complaint.STATUS_OPEN).count(),
    }
