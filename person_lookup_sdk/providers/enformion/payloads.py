from typing import Any, Dict, Optional

from ...config.constants import (
    ENFORMION_BASE_URL,
    ENFORMION_CLIENT_TYPE,
    ENFORMION_DEFAULT_PAGE,
    ENFORMION_DEFAULT_RESULTS_PER_PAGE,
    ENFORMION_PERSON_SEARCH_INCLUDES,
)
from ...core.normalization.phone import to_national
from ...core.normalization.values import parse_int
from ...models.lookup import EnformionEndpoint
from ...models.query import CanonicalQuery

# Mode -> (galaxy-search-type header, endpoint path)
SEARCH_TYPES = {
    EnformionEndpoint.CONTACT_ENRICHMENT: ("ContactEnrichment", "ContactEnrichmentSearch"),
    EnformionEndpoint.PERSON_SEARCH: ("Person", "PersonSearch"),
    EnformionEndpoint.REVERSE_PHONE: ("ReversePhone", "ReversePhoneSearch"),
}

ADDRESS_FIELDS = (
    ("address_line1", "AddressLine1"),
    ("address_line2", "AddressLine2"),
    ("city", "City"),
    ("state", "State"),
    ("zip", "Zip"),
)


def endpoint_url(mode: EnformionEndpoint) -> str:
    return f"{ENFORMION_BASE_URL}/{SEARCH_TYPES[mode][1]}"


def build_headers(mode: EnformionEndpoint, api_name: str, api_password: str) -> Dict[str, str]:
    return {
        "Content-Type": "application/json",
        "galaxy-ap-name": api_name,
        "galaxy-ap-password": api_password,
        "galaxy-client-type": ENFORMION_CLIENT_TYPE,
        "galaxy-search-type": SEARCH_TYPES[mode][0],
    }


def build_address(query: CanonicalQuery) -> Optional[Dict[str, str]]:
    """Nested Address object, or None when no address sub-field is present."""
    address = {
        upstream_key: getattr(query, field)
        for field, upstream_key in ADDRESS_FIELDS
        if getattr(query, field)
    }
    return address or None


def build_search_body(query: CanonicalQuery, mode: EnformionEndpoint) -> Dict[str, Any]:
    """
    Build the JSON search body.

    The phone is sent as a bare 10-digit national number; values that cannot
    be reduced to one are dropped so the remaining criteria still apply.
    """
    body: Dict[str, Any] = {}

    if query.first_name:
        body["FirstName"] = query.first_name
    if query.middle_name:
        body["MiddleName"] = query.middle_name
    if query.last_name:
        body["LastName"] = query.last_name
    if query.dob:
        body["Dob"] = query.dob
    age = parse_int(query.age)
    if age is not None:
        body["Age"] = age

    phone = to_national(query.phone)
    if phone:
        body["Phone"] = phone
    if query.email:
        body["Email"] = query.email

    address = build_address(query)
    if address:
        body["Address"] = address

    if mode == EnformionEndpoint.PERSON_SEARCH:
        body["Includes"] = list(ENFORMION_PERSON_SEARCH_INCLUDES)
        body["Page"] = parse_int(query.page) or ENFORMION_DEFAULT_PAGE
        body["ResultsPerPage"] = parse_int(query.results_per_page) or ENFORMION_DEFAULT_RESULTS_PER_PAGE

    return body


def search_criteria(body: Dict[str, Any]) -> Dict[str, bool]:
    """Which of the three criteria groups the body satisfies."""
    address = body.get("Address") or {}
    return {
        "hasName": bool(body.get("FirstName") or body.get("LastName")),
        "hasContact": bool(body.get("Phone") or body.get("Email")),
        "hasAddress": bool(address.get("City") or address.get("State") or address.get("Zip")),
    }
