import logging
from typing import Optional

from django.conf import settings
from django.db.models import Q

from seniors.models import ApplicationType, RegistryRecord
from seniors.services.application_service import ApplicationService
from seniors.services.normalizer import split_full_name
from seniors.utils.dates import calculate_age, parse_loose_date

logger = logging.getLogger(__name__)


class RegistryService:
    """Service class for external registry lookups and walk-in enrollment."""

    def __init__(self, applications: Optional[ApplicationService] = None):
        self.applications = applications or ApplicationService()

    def verify_identity(self, record_id: str) -> Optional[RegistryRecord]:
        return RegistryRecord.objects.filter(id=record_id).first()

    def search_registry(self, registry_type: str = RegistryRecord.TYPE_LCR, search: str = ""):
        records = RegistryRecord.objects.filter(type=registry_type)
        for term in search.split():
            records = records.filter(
                Q(first_name__icontains=term)
                | Q(last_name__icontains=term)
                | Q(middle_name__icontains=term)
                | Q(full_name__icontains=term)
                | Q(id__icontains=term)
            )
        return records

    def senior_candidates(self, search: str = "") -> list:
        """Civil registry records of residents old enough to enroll and not yet registered."""
        return [
            record
            for record in self.search_registry(RegistryRecord.TYPE_LCR, search).filter(
                is_registered=False
            )
            if calculate_age(record.birth_date) >= settings.OSCA_SENIOR_AGE
        ]

    def build_registration_form(self, record: RegistryRecord) -> dict:
        """
        Prefill a registration form from a registry record.

        Structured name parts are used when present; a combined name string is
        split with the best-effort heuristic otherwise.
        """
        first, middle, last = record.first_name, record.middle_name, record.last_name
        if not first and not last:
            first, middle, last = split_full_name(record.full_name)

        born = parse_loose_date(record.birth_date)
        return {
            "firstName": (first or "").upper(),
            "middleName": (middle or "").upper(),
            "lastName": (last or "").upper(),
            "suffix": record.suffix.upper(),
            "birthDate": born.isoformat() if born else "",
            "birthPlace": record.birth_place.upper(),
            "sex": record.sex,
            "civilStatus": record.civil_status,
            "citizenship": record.citizenship or "Filipino",
            "houseNo": record.house_no,
            "street": record.street,
            "barangay": record.barangay,
            "district": record.district,
            "city": record.city or "San Juan City",
            "province": record.province or "Metro Manila",
        }

    def register_walk_in(self, form_data: dict, documents=None) -> dict:
        """
        Submit an on-site enrollment verified by an encoder.

        Returns:
            dict: Result of ``ApplicationService.submit_application``
        """
        full_name = " ".join(
            part
            for part in (
                form_data.get("firstName"),
                form_data.get("middleName"),
                form_data.get("lastName"),
                form_data.get("suffix"),
            )
            if part
        ).upper()
        address = (
            f"{form_data.get('houseNo') or ''} {form_data.get('street') or ''}, "
            f"Brgy. {form_data.get('barangay') or ''}, {form_data.get('city') or ''}"
        )
        user_id = self.applications.generator.record_id("walk")

        result = self.applications.submit_application(
            {
                "userId": user_id,
                "userName": full_name,
                "type": ApplicationType.REGISTRATION,
                "description": (
                    "Walk-in Enrollment. Data sourced from registry and verified by admin on-site."
                ),
                "documents": documents or [],
                "formData": {
                    **form_data,
                    "address": address,
                    "emergencyContactPerson": form_data.get("emergencyContactPerson") or "N/A",
                    "emergencyContactNumber": form_data.get("emergencyContactNumber") or "N/A",
                    "joinFederation": form_data.get("joinFederation") or False,
                },
            }
        )
        if result["ok"]:
            logger.info(f"Walk-in registration {result['id']} filed for {full_name}")
        return result

    def fetch_external_registry(
        self, registry_type: str, record_type: str = "birth", search: str = "", page: int = 1
    ) -> None:
        """Placeholder for the external registry proxy; registry rows are local."""
        logger.debug(f"fetch_external_registry({registry_type}, {record_type}) is a no-op")
