import logging
from typing import Optional

from django.conf import settings
from django.utils import timezone

from seniors.models import ApplicationStatus, IdStatus, MasterlistRecord
from seniors.services.identifiers import IdentifierGenerator, get_generator
from seniors.services.normalizer import composite_full_name

logger = logging.getLogger(__name__)


def _upper(value) -> str:
    return str(value or "").upper().strip()


def _upper_or_none(value) -> Optional[str]:
    return str(value).upper().strip() if value else None


class MasterlistService:
    """Service class keeping the masterlist in step with application transitions."""

    def __init__(self, generator: Optional[IdentifierGenerator] = None):
        self.generator = generator or get_generator()

    def find_match(self, user_id: str, form_data: dict) -> Optional[MasterlistRecord]:
        """
        Two-stage lookup: exact id first, then exact (fullName, birthDate).

        There is no fuzzy fallback, and a payload without any name part never
        reaches the second stage.
        """
        if user_id:
            record = MasterlistRecord.objects.filter(id=user_id).first()
            if record:
                return record

        if not any(form_data.get(key) for key in ("lastName", "firstName", "middleName")):
            return None

        full_name = composite_full_name(form_data)
        return MasterlistRecord.objects.filter(
            full_name=full_name, birth_date=form_data.get("birthDate") or ""
        ).first()

    def next_scid(self) -> str:
        """Next SCID number, computed from the whole masterlist."""
        scids = MasterlistRecord.objects.exclude(scid_number="").values_list(
            "scid_number", flat=True
        )
        return self.generator.next_scid(scids)

    def denormalized_fields(self, form_data: dict) -> dict:
        """
        Masterlist columns derived from a form payload.

        Everything is uppercased and trimmed for printing on official
        documents, except email (lowercased), contact number (trimmed only)
        and the credentials (never touched here).
        """
        city = form_data.get("city") or settings.OSCA_DEFAULT_CITY
        province = form_data.get("province") or settings.OSCA_DEFAULT_PROVINCE
        address = (
            f"{form_data.get('houseNo') or ''} {form_data.get('street') or ''}, "
            f"BRGY. {form_data.get('barangay') or ''}, {city}, {province}"
        )
        return {
            "full_name": composite_full_name(form_data),
            "first_name": _upper(form_data.get("firstName")),
            "last_name": _upper(form_data.get("lastName")),
            "middle_name": _upper(form_data.get("middleName")),
            "birth_date": form_data.get("birthDate") or "",
            "birth_place": _upper(form_data.get("birthPlace")),
            "address": _upper(address),
            "house_no": _upper(form_data.get("houseNo")),
            "street": _upper(form_data.get("street")),
            "barangay": _upper(form_data.get("barangay")),
            "city_municipality": _upper(city),
            "province": _upper(province),
            "district": _upper(form_data.get("district")),
            "email": str(form_data.get("email") or "").lower().strip(),
            "contact_number": str(form_data.get("contactNumber") or "").strip(),
            "sex": _upper_or_none(form_data.get("sex")),
            "civil_status": _upper_or_none(form_data.get("civilStatus")),
        }

    def merge(
        self,
        user_id: str,
        status: str,
        form_data: dict,
        scid: str,
        from_id_issuance: bool = False,
    ) -> Optional[MasterlistRecord]:
        """
        Project one application transition onto the masterlist.

        Args:
            user_id: Owner reference of the application (first-stage match key)
            status: The status the application moved to
            form_data: The application's form payload before the transition
            scid: SCID number computed for the transition ("" if none)
            from_id_issuance: True when the application came from the ID
                issuance collection; approvals then land as Approved instead of New

        Returns:
            MasterlistRecord or None: The written record, None when nothing was written
        """
        record = self.find_match(user_id, form_data)

        if status == ApplicationStatus.APPROVED:
            return self._apply_approval(record, user_id, form_data, scid, from_id_issuance)

        if record is None:
            logger.info(f"No masterlist record for {user_id or 'unknown user'}, {status} not projected")
            return None

        if status == ApplicationStatus.REJECTED:
            record.id_status = IdStatus.REJECTED
            record.save(update_fields=["id_status", "updated_at"])
            logger.info(f"Masterlist record {record.id} marked Rejected")
            return record

        if status == ApplicationStatus.ISSUED:
            return self._set_released(record, timezone.now())

        return None

    def _apply_approval(self, record, user_id, form_data, scid, from_id_issuance):
        id_status = IdStatus.APPROVED if from_id_issuance else IdStatus.NEW
        fields = self.denormalized_fields(form_data)

        if record is None:
            username, password = self.generator.generate_credentials(
                form_data.get("firstName") or "", form_data.get("lastName") or ""
            )
            record_id = user_id or self.generator.record_id(
                "m", is_taken=lambda candidate: MasterlistRecord.objects.filter(id=candidate).exists()
            )
            record = MasterlistRecord.objects.create(
                id=record_id,
                scid_number=scid,
                senior_id_number=scid,
                id_status=id_status,
                username=username,
                password=password,
                form_data=form_data,
                **fields,
            )
            logger.info(f"Created masterlist record {record.id} ({record.scid_number})")
            return record

        for name, value in fields.items():
            setattr(record, name, value)
        if not record.scid_number:
            record.scid_number = scid
        record.senior_id_number = record.scid_number
        record.id_status = id_status
        record.form_data = form_data
        if not record.username or not record.password:
            username, password = self.generator.generate_credentials(
                form_data.get("firstName") or "", form_data.get("lastName") or ""
            )
            record.username = record.username or username
            record.password = record.password or password
        record.save()
        logger.info(f"Merged approval into masterlist record {record.id} as {id_status}")
        return record

    def sync_edit(self, user_id: str, form_data: dict, id_status: Optional[str] = None):
        """
        Re-project an edited, already approved application.

        Only an existing record is updated; the edit path never creates one
        and never touches credentials.
        """
        record = self.find_match(user_id, form_data)
        if record is None:
            return None

        for name, value in self.denormalized_fields(form_data).items():
            setattr(record, name, value)
        record.scid_number = record.scid_number or form_data.get("scid_number") or ""
        record.senior_id_number = record.scid_number
        record.id_status = id_status or record.id_status
        record.form_data = form_data
        record.save()
        logger.info(f"Synced edited application data into masterlist record {record.id}")
        return record

    def mark_pending(self, user_id: str, form_data: dict) -> Optional[MasterlistRecord]:
        """An ID request was filed for this identity; its card is pending again."""
        record = self.find_match(user_id, form_data)
        if record is None:
            return None
        record.id_status = IdStatus.PENDING
        record.save(update_fields=["id_status", "updated_at"])
        return record

    def mark_released(self, user_id: str, form_data: dict, released_at) -> Optional[MasterlistRecord]:
        record = self.find_match(user_id, form_data)
        if record is None:
            return None
        return self._set_released(record, released_at)

    def _set_released(self, record: MasterlistRecord, released_at) -> MasterlistRecord:
        record.id_status = IdStatus.RELEASED
        record.released_date = released_at
        record.save(update_fields=["id_status", "released_date", "updated_at"])
        logger.info(f"Masterlist record {record.id} released at {released_at.isoformat()}")
        return record
