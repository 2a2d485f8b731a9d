"""
Record normalization for the shapes applicant data arrives in.

Records reach the portal from three places that never agreed on naming:

* database rows and registry exports (``first_name``, ``birthdate``, ``scid_number``)
* form submissions (``firstName``, ``birthDate`` and a nested ``formData`` payload)
* legacy rows (``firstname``, ``birthday``, ``dob``, ``extension``)

Each canonical field resolves through an ordered alias table. The first
non-empty value wins, and snake_case columns come first because the last write
from storage is authoritative.
"""

import enum
import json
import logging
from typing import Any

logger = logging.getLogger(__name__)


class RecordShape(enum.Enum):
    DB_ROW = "db_row"
    FORM_SUBMISSION = "form_submission"
    LEGACY_ROW = "legacy_row"


# Marker for "look this key up in the nested form payload"
FORM = "formData."

FIELD_ALIASES = {
    "firstName": ("first_name", "firstName", FORM + "firstName", "firstname"),
    "lastName": ("last_name", "lastName", FORM + "lastName", "lastname"),
    "middleName": ("middle_name", "middleName", FORM + "middleName", "middlename"),
    "suffix": ("suffix", "extension", FORM + "suffix"),
    "birthDate": (
        "birthdate",
        "birth_date",
        "birthDate",
        "birthday",
        "dob",
        FORM + "birthDate",
    ),
    "status": ("id_status", "ID_Status", "status", "application_status", FORM + "status"),
    "fullName": ("fullname", "name", "full_name", "fullName"),
    "seniorIdNumber": (
        "scid_number",
        "scid_Number",
        "SCID_Number",
        "senior_id_number",
        "seniorIdNumber",
        "senior_id",
    ),
}

# Form payload fields that prefer the nested payload over the record itself
FORM_FIRST_ALIASES = {
    "scid_number": ("scid_number", "scid_Number", "SCID_Number", FORM + "scid_number"),
    "birthPlace": (FORM + "birthPlace", FORM + "birthplace", "birthplace", "birth_place"),
    "sex": (FORM + "sex", "gender", "sex"),
    "civilStatus": (FORM + "civilStatus", "civil_status"),
    "citizenship": (FORM + "citizenship", "citizenship"),
    "address": (FORM + "address", "address"),
    "contactNumber": (FORM + "contactNumber", FORM + "contact_number", "contact_number"),
    "email": (FORM + "email", "email"),
}

FIELD_DEFAULTS = {
    "status": "Pending",
    "citizenship": "Filipino",
}

_SNAKE_MARKERS = ("first_name", "last_name", "birthdate", "birth_date", "scid_number", "id_status")
_LEGACY_MARKERS = ("firstname", "lastname", "middlename", "birthday", "dob", "extension")


def detect_shape(record: dict) -> RecordShape:
    """Classify a raw record by the naming convention of its keys."""
    if any(record.get(key) for key in _SNAKE_MARKERS):
        return RecordShape.DB_ROW
    if any(record.get(key) for key in _LEGACY_MARKERS):
        return RecordShape.LEGACY_ROW
    return RecordShape.FORM_SUBMISSION


def extract_form_payload(record: dict) -> dict:
    """Return the nested form payload of a record, decoding it if stored as JSON text."""
    payload = record.get("formData")
    if payload:
        if isinstance(payload, str):
            payload = json.loads(payload)
        return dict(payload)
    return dict(record.get("form_data") or {})


def resolve(record: dict, payload: dict, aliases, default: Any = "") -> Any:
    """Walk an alias chain and return the first non-empty value."""
    for alias in aliases:
        if alias.startswith(FORM):
            value = payload.get(alias[len(FORM):])
        else:
            value = record.get(alias)
        if value:
            return value
    return default


def normalize_identity(record: dict) -> dict:
    """
    Map a record of any known shape onto the canonical identity shape.

    The returned ``formData`` carries the camelCase keys used by the
    lifecycle logic and the snake_case keys (``scid_number``, ``last_name``,
    ``first_name``, ``birthdate``, ``status``) that display code reads
    directly. Both are kept on purpose.

    Args:
        record: Raw record in any mix of naming conventions

    Returns:
        dict: firstName, lastName, middleName, suffix, birthDate, fullName,
        status, seniorIdNumber, shape and formData
    """
    payload = extract_form_payload(record)
    shape = detect_shape(record)
    logger.debug(f"Normalizing record {record.get('id', '<no id>')} as {shape.value}")

    identity = {
        field: resolve(record, payload, aliases, FIELD_DEFAULTS.get(field, ""))
        for field, aliases in FIELD_ALIASES.items()
        if field != "fullName"
    }
    identity["fullName"] = resolve(record, payload, FIELD_ALIASES["fullName"]) or (
        f"{identity['firstName']} {identity['lastName']}".strip()
    )

    form_fields = {
        field: resolve(record, payload, aliases, FIELD_DEFAULTS.get(field, ""))
        for field, aliases in FORM_FIRST_ALIASES.items()
    }

    form_data = {
        **payload,
        "scid_number": form_fields.pop("scid_number"),
        "last_name": identity["lastName"],
        "first_name": identity["firstName"],
        "birthdate": identity["birthDate"],
        "status": identity["status"],
        "firstName": identity["firstName"],
        "lastName": identity["lastName"],
        "middleName": identity["middleName"],
        "suffix": identity["suffix"],
        "birthDate": identity["birthDate"],
        **form_fields,
    }

    return {
        "firstName": identity["firstName"],
        "lastName": identity["lastName"],
        "middleName": identity["middleName"],
        "suffix": identity["suffix"],
        "birthDate": identity["birthDate"],
        "fullName": identity["fullName"],
        "status": identity["status"],
        "seniorIdNumber": identity["seniorIdNumber"],
        "shape": shape.value,
        "formData": form_data,
    }


def normalize_form_data(form_data: dict) -> dict:
    """
    Canonical, dual-keyed form payload for a submitted ``formData``.

    The payload is read both as the record and as its nested form, so
    snake_case and legacy keys sent inside ``formData`` are recognised.
    An empty payload stays empty.
    """
    if not form_data:
        return {}
    return normalize_identity({**form_data, "formData": form_data})["formData"]


# Keys each canonical form field is stored under
FORM_KEYS = {
    "firstName": ("firstName", "first_name"),
    "lastName": ("lastName", "last_name"),
    "birthDate": ("birthDate", "birthdate"),
}


def _alias_keys(aliases) -> set:
    return {alias[len(FORM):] if alias.startswith(FORM) else alias for alias in aliases}


def expand_form_update(update: dict) -> dict:
    """
    Spread a partial ``formData`` update over every key of the fields it touches.

    Merged over a stored payload, the update then wins whichever alias the
    stored payload resolves first.
    """
    if not update:
        return {}
    canonical = normalize_form_data(update)
    expanded = dict(update)
    for field, aliases in {**FIELD_ALIASES, **FORM_FIRST_ALIASES}.items():
        if field not in canonical or not _alias_keys(aliases) & update.keys():
            continue
        for key in FORM_KEYS.get(field, (field,)):
            expanded[key] = canonical[field]
    return expanded


def trim_strings(value: Any) -> Any:
    """Recursively strip whitespace from every string leaf of a dict/list payload."""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, dict):
        return {key: trim_strings(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [trim_strings(item) for item in value]
    return value


def split_full_name(full_name: str) -> tuple:
    """
    Best-effort split of a combined name into (first, middle, last).

    This is a heuristic for registry rows that only carry one name string and
    is lossy: compound last names without a comma are misread. Prefer the
    structured name parts whenever a record has them.

    ``"LAST, FIRST MIDDLE"``: three or more tokens after the comma give a
    two-word first name and a middle name; two give first and middle; one
    gives the first name only.

    ``"FIRST1 [FIRST2] [MIDDLE] LAST"``: four or more tokens give a two-word
    first name, a middle name and the rest as last name; three give
    first/middle/last; two give first/last; one gives the first name only.
    """
    full = (full_name or "").upper().strip()
    if not full:
        return "", "", ""

    if "," in full:
        last, rest = [part.strip() for part in full.split(",", 1)]
        parts = rest.split()
        if len(parts) >= 3:
            return f"{parts[0]} {parts[1]}", parts[2], last
        if len(parts) == 2:
            return parts[0], parts[1], last
        return (parts[0] if parts else ""), "", last

    parts = full.split()
    if len(parts) >= 4:
        return f"{parts[0]} {parts[1]}", parts[2], " ".join(parts[3:])
    if len(parts) == 3:
        return parts[0], parts[1], parts[2]
    if len(parts) == 2:
        return parts[0], "", parts[1]
    return parts[0], "", ""


def composite_full_name(form_data: dict) -> str:
    """Masterlist match name: ``"LAST, FIRST MIDDLE"``, uppercased and trimmed."""
    last = form_data.get("lastName") or ""
    first = form_data.get("firstName") or ""
    middle = form_data.get("middleName") or ""
    return f"{last}, {first} {middle}".upper().strip()
