import json
from typing import Any, Dict, List, Optional

from ...config.constants import (
    PEOPLEDATALABS_BASE_URL,
    PEOPLEDATALABS_DEFAULT_SEARCH_SIZE,
    PEOPLEDATALABS_MAX_SEARCH_SIZE,
)
from ...core.normalization.phone import to_e164, to_national
from ...models.lookup import PeopleDataLabsEndpoint
from ...models.query import CanonicalQuery
from ...core.normalization.values import parse_int

# CanonicalQuery field -> upstream query parameter (phone handled separately)
IDENTIFIER_PARAMS = (
    ("email", "email"),
    ("profile_id", "profile"),
    ("first_name", "first_name"),
    ("last_name", "last_name"),
    ("name", "name"),
    ("company", "company"),
    ("location", "location"),
    ("locality", "locality"),
    ("region", "region"),
    ("country", "country"),
    ("school", "school"),
    ("lid", "lid"),
)


def endpoint_url(mode: PeopleDataLabsEndpoint) -> str:
    return f"{PEOPLEDATALABS_BASE_URL}/{mode.value}"


def build_headers(api_key: str) -> Dict[str, str]:
    return {
        "X-Api-Key": api_key,
        "Accept": "application/json",
    }


def normalize_phone(query: CanonicalQuery) -> Optional[str]:
    """
    E.164 by default, which matches more records upstream; ``phone_format=national``
    sends the bare 10-digit number instead. Uninterpretable numbers are dropped.
    """
    if (query.phone_format or "").lower() == "national":
        return to_national(query.phone)
    return to_e164(query.phone)


def build_identifier_params(query: CanonicalQuery) -> Dict[str, str]:
    """Flat identifier parameters for enrich / identify (without ``pretty``)."""
    params: Dict[str, str] = {}
    phone = normalize_phone(query)
    if phone:
        params["phone"] = phone
    for field, param in IDENTIFIER_PARAMS:
        value = getattr(query, field)
        if value:
            params[param] = value
    return params


def synthesize_search_query(query: CanonicalQuery) -> Optional[Dict[str, Any]]:
    """
    Minimal boolean "must" query from whichever of phone, email and name parts
    are present. Returns None when none of them are.
    """
    must: List[Dict[str, Any]] = []

    phone = to_e164(query.phone)
    if phone:
        must.append({"term": {"phone_numbers": phone}})
    if query.email:
        must.append({"term": {"emails.address": query.email.lower()}})
    if query.first_name:
        must.append({"match": {"first_name": query.first_name.lower()}})
    if query.last_name:
        must.append({"match": {"last_name": query.last_name.lower()}})
    if query.name:
        must.append({"match": {"full_name": query.name.lower()}})

    if not must:
        return None
    return {"bool": {"must": must}}


def search_size(query: CanonicalQuery) -> int:
    """Requested result size, capped to limit per-record cost."""
    size = parse_int(query.size) or PEOPLEDATALABS_DEFAULT_SEARCH_SIZE
    return max(1, min(size, PEOPLEDATALABS_MAX_SEARCH_SIZE))


def build_search_params(query: CanonicalQuery) -> Dict[str, str]:
    """
    Search parameters. An explicit ``query`` (DSL) or ``sql`` wins; otherwise a
    query is synthesized. With nothing to search on, no query is sent and the
    upstream reports the validation error itself.
    """
    params: Dict[str, str] = {"size": str(search_size(query))}

    if query.query is not None:
        dsl = query.query
        params["query"] = dsl if isinstance(dsl, str) else json.dumps(dsl)
    elif query.sql:
        params["sql"] = query.sql
    else:
        synthesized = synthesize_search_query(query)
        if synthesized is not None:
            params["query"] = json.dumps(synthesized)

    params["pretty"] = "true"
    return params
