import logging
from typing import Optional

from django.db import transaction
from django.utils import timezone

from seniors.models import (
    Application,
    ApplicationStatus,
    ApplicationType,
    BaseApplication,
    IdIssuance,
    IdStatus,
)
from seniors.notifications import notify_status_update
from seniors.services.identifiers import IdentifierGenerator, get_generator
from seniors.services.masterlist_service import MasterlistService
from seniors.services.normalizer import expand_form_update, normalize_form_data, trim_strings

logger = logging.getLogger(__name__)

# Application types whose approval issues (or reuses) an SCID and is
# projected onto the masterlist. Benefit and PhilHealth requests are not.
IDENTITY_TYPES = (
    ApplicationType.REGISTRATION,
    ApplicationType.ID_NEW,
    ApplicationType.ID_RENEWAL,
    ApplicationType.ID_REPLACEMENT,
)

# Request payload key -> model field
PAYLOAD_FIELDS = {
    "userId": "user_id",
    "userName": "user_name",
    "type": "type",
    "status": "status",
    "description": "description",
    "documents": "documents",
    "rejectionReason": "rejection_reason",
}

INVALID_ID_STATUS = "Invalid ID Status"


class ApplicationService:
    """
    Service class for the application and ID issuance collections.

    Every write runs in one transaction: the application row is written
    first, the masterlist projection second, and both are done before the
    call returns. Write operations report ``{"ok": bool, "error": str}``
    instead of raising.
    """

    COLLECTIONS = (Application, IdIssuance)

    def __init__(
        self,
        generator: Optional[IdentifierGenerator] = None,
        masterlist: Optional[MasterlistService] = None,
    ):
        self.generator = generator or get_generator()
        self.masterlist = masterlist or MasterlistService(self.generator)
        self.action_error = None

    def set_action_error(self, message: Optional[str]):
        """Set or clear the shared error slot shown by the back office."""
        self.action_error = message

    def find_application(self, app_id: str) -> Optional[BaseApplication]:
        """Look an id up in both collections; ids are not collection scoped."""
        for model in self.COLLECTIONS:
            application = model.objects.filter(pk=app_id).first()
            if application:
                return application
        return None

    def submit_application(self, payload: dict) -> dict:
        """
        Store a new general application.

        Args:
            payload: camelCase request payload (userId, userName, type,
                description, documents, formData, optional status for
                automated flows)

        Returns:
            dict: ``{"ok": True, "id": ...}`` or ``{"ok": False, "error": ...}``
        """
        status = trim_strings(payload.get("status") or "") or ApplicationStatus.PENDING
        return self._create(Application, payload, status)

    def submit_id_issuance(self, payload: dict) -> dict:
        """
        Store a new ID issuance request, always Pending.

        A masterlist record matching the requester moves to ID status Pending.
        """
        result = self._create(IdIssuance, payload, ApplicationStatus.PENDING)
        if result["ok"]:
            issuance = IdIssuance.objects.get(pk=result["id"])
            if issuance.form_data:
                self.masterlist.mark_pending(issuance.user_id, issuance.form_data)
        return result

    def _create(self, model, payload: dict, status: str) -> dict:
        data = trim_strings(dict(payload))

        if data.get("type") not in ApplicationType.values:
            return {"ok": False, "error": f"Invalid application type: {data.get('type')}"}
        if status not in ApplicationStatus.values:
            return {"ok": False, "error": f"Invalid application status: {status}"}

        fields = {
            field: data[key]
            for key, field in PAYLOAD_FIELDS.items()
            if key in data and data[key] is not None
        }
        fields["status"] = status
        fields["form_data"] = normalize_form_data(data.get("formData") or {})

        with transaction.atomic():
            app_id = self.generator.record_id(
                model.ID_PREFIX, is_taken=lambda candidate: self.find_application(candidate) is not None
            )
            application = model.objects.create(id=app_id, date=timezone.localdate(), **fields)

        logger.info(f"Submitted {application.type} {application.id} for {application.user_name}")
        return {"ok": True, "id": application.id}

    def transition_status(self, app_id: str, status: str, reason: Optional[str] = None) -> None:
        """
        Move an application to a new status and project it onto the masterlist.

        An approval of a registration or ID request freezes an SCID into the
        form data when it has none: the matched citizen's existing SCID if
        there is one, otherwise the next number in sequence. The rejection
        reason is always written, as "" when none is given.

        Unknown ids are ignored (logged) rather than raised.
        """
        if status not in ApplicationStatus.values:
            raise ValueError(f"Unknown application status: {status}")

        application = self.find_application(app_id)
        if application is None:
            logger.warning(f"Status change to {status} ignored: application {app_id} not found")
            return

        previous_form_data = dict(application.form_data or {})
        projects = application.type in IDENTITY_TYPES

        with transaction.atomic():
            scid = previous_form_data.get("scid_number") or ""
            # Without form data there is no identity to project, so no SCID either
            approves_identity = (
                status == ApplicationStatus.APPROVED and projects and bool(previous_form_data)
            )
            if approves_identity and not scid:
                scid = self._allocate_scid(application.user_id, previous_form_data)

            form_data = dict(previous_form_data)
            if scid:
                form_data["scid_number"] = scid

            application.status = status
            application.rejection_reason = reason or ""
            application.form_data = form_data
            self._trim(application)
            application.save()

            if projects and previous_form_data:
                self.masterlist.merge(
                    application.user_id,
                    status,
                    previous_form_data,
                    scid,
                    from_id_issuance=application.is_id_issuance,
                )

        logger.info(f"Application {app_id} moved to {status}")

        if status in (ApplicationStatus.APPROVED, ApplicationStatus.REJECTED):
            notify_status_update(
                application.user_name,
                form_data.get("contactNumber") or "",
                form_data.get("email") or "",
                application.type,
                status,
                reason,
            )

    def _allocate_scid(self, user_id: str, form_data: dict) -> str:
        existing = self.masterlist.find_match(user_id, form_data)
        if existing and existing.scid_number:
            return existing.scid_number
        return self.masterlist.next_scid()

    def edit_application_fields(self, app_id: str, updates: dict) -> dict:
        """
        Apply a partial update to an application.

        Top-level fields are merged shallowly and ``formData`` becomes
        ``{**old, **new}``. The update is applied in both collections. An
        approved application re-syncs its masterlist record, optionally with a
        new ``id_status``.

        Args:
            app_id: Application or ID issuance id
            updates: camelCase fields, ``formData`` and optional ``id_status``

        Returns:
            dict: ``{"ok": True}`` or ``{"ok": False, "error": ...}``
        """
        updates = trim_strings(dict(updates))
        id_status = updates.get("id_status")
        if id_status and id_status not in IdStatus.values:
            self.set_action_error(INVALID_ID_STATUS)
            logger.warning(f"Rejected edit of {app_id}: invalid id_status {id_status!r}")
            return {"ok": False, "error": INVALID_ID_STATUS}

        if "status" in updates and updates["status"] not in ApplicationStatus.values:
            return {"ok": False, "error": f"Invalid application status: {updates['status']}"}
        if "type" in updates and updates["type"] not in ApplicationType.values:
            return {"ok": False, "error": f"Invalid application type: {updates['type']}"}

        found = False
        with transaction.atomic():
            for model in self.COLLECTIONS:
                application = model.objects.filter(pk=app_id).first()
                if application is None:
                    continue
                found = True
                self._apply_updates(application, updates)
                application.save()

                if (
                    application.status == ApplicationStatus.APPROVED
                    and application.type in IDENTITY_TYPES
                    and application.form_data
                ):
                    self.masterlist.sync_edit(application.user_id, application.form_data, id_status)

        if not found:
            return {"ok": False, "error": f"Application {app_id} not found"}

        logger.info(f"Updated application {app_id}")
        return {"ok": True}

    def _apply_updates(self, application: BaseApplication, updates: dict):
        for key, field in PAYLOAD_FIELDS.items():
            if key in updates:
                setattr(application, field, updates[key])

        if "formData" in updates:
            old_form = dict(application.form_data or {})
            new_form = normalize_form_data(
                {**old_form, **expand_form_update(updates["formData"] or {})}
            )
            # A frozen SCID is never overwritten
            if old_form.get("scid_number"):
                new_form["scid_number"] = old_form["scid_number"]
            application.form_data = new_form

        self._trim(application)

    def _trim(self, application: BaseApplication):
        application.form_data = trim_strings(application.form_data or {})
        application.documents = trim_strings(application.documents or [])
        for field in ("user_id", "user_name", "description", "rejection_reason"):
            setattr(application, field, trim_strings(getattr(application, field) or ""))

    def mark_issued(self, app_id: str) -> None:
        """
        Release the ID card for an application.

        The same timestamp goes to the application and its masterlist record.
        """
        application = self.find_application(app_id)
        if application is None:
            logger.warning(f"Release ignored: application {app_id} not found")
            return

        released_at = timezone.now()
        with transaction.atomic():
            application.status = ApplicationStatus.ISSUED
            application.released_date = released_at
            application.save(update_fields=["status", "released_date", "updated_at"])

            if application.form_data:
                self.masterlist.mark_released(
                    application.user_id, application.form_data, released_at
                )

        logger.info(f"Application {app_id} released at {released_at.isoformat()}")

    # Placeholders for a networked backend. Local collections are authoritative.

    def sync_applications(self) -> None:
        logger.debug("sync_applications: local collections are authoritative")

    def sync_id_issuances(self) -> None:
        logger.debug("sync_id_issuances: local collections are authoritative")

    def fetch_masterlist(self) -> None:
        logger.debug("fetch_masterlist: local collections are authoritative")
