from typing import Any, Dict, List

# Record-bearing keys, as returned by the different search types. Person
# search answers with lowercase "persons"; reverse phone with
# "reversePhoneRecords".
LIST_RECORD_KEYS = ("Persons", "persons", "Results", "reversePhoneRecords")
OBJECT_RECORD_KEYS = ("Person",)

CALL_METADATA_FIELDS = ("phoneNumber", "carrier", "phoneType", "latitude", "longitude")

# Nested person field -> default when absent
PERSON_FIELD_DEFAULTS = (
    ("name", dict),
    ("akas", list),
    ("phoneNumbers", list),
    ("addresses", list),
    ("age", None),
    ("dob", None),
    ("gender", None),
)


def _non_empty_list(value: Any) -> bool:
    return isinstance(value, list) and len(value) > 0


def has_records(body: Any) -> bool:
    """True when any record-bearing key carries at least one record."""
    if not isinstance(body, dict):
        return False
    if any(_non_empty_list(body.get(key)) for key in LIST_RECORD_KEYS):
        return True
    return any(bool(body.get(key)) for key in OBJECT_RECORD_KEYS)


def is_flagged_error(body: Any) -> bool:
    """Enformion can report failures with HTTP 200 and ``isError: true``."""
    return isinstance(body, dict) and body.get("isError") is True


def flatten_reverse_phone_record(record: Dict[str, Any]) -> Dict[str, Any]:
    """
    Reshape one reverse-phone record into a person-shaped object.

    Call metadata is promoted to the top level, the embedded ``tahoePerson``
    fields are merged in, and the untouched record is kept under ``_raw``.
    """
    person = record.get("tahoePerson") or {}
    flattened: Dict[str, Any] = {
        field: record.get(field) for field in CALL_METADATA_FIELDS
    }
    for field, default in PERSON_FIELD_DEFAULTS:
        value = person.get(field)
        if value is None and default is not None:
            value = default()
        flattened[field] = value
    flattened["_raw"] = record
    return flattened


def flatten_reverse_phone_records(body: Dict[str, Any]) -> Dict[str, Any]:
    persons: List[Dict[str, Any]] = [
        flatten_reverse_phone_record(record)
        for record in body["reversePhoneRecords"]
        if isinstance(record, dict)
    ]
    return {"Persons": persons, "_original": body}


def promote_lowercase_persons(body: Dict[str, Any]) -> Dict[str, Any]:
    return {"Persons": body["persons"], "_original": body}


def shape_records(body: Dict[str, Any]) -> Dict[str, Any]:
    """
    Give every successful search the same ``Persons`` shape where possible.

    - reversePhoneRecords -> flattened Persons
    - persons (lowercase only) -> Persons
    - anything else is returned as-is
    """
    if _non_empty_list(body.get("reversePhoneRecords")):
        return flatten_reverse_phone_records(body)
    if body.get("persons") and not body.get("Persons"):
        return promote_lowercase_persons(body)
    return body
