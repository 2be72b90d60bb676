from typing import Dict, Optional

from ...config.constants import TRESTLE_PHONE_INTEL_URL, TRESTLE_REVERSE_PHONE_URL
from ...config.settings import LookupSettings
from ...models.lookup import TrestleEndpoint
from ...models.query import CanonicalQuery

ENDPOINT_URLS = {
    TrestleEndpoint.PHONE_INTEL: TRESTLE_PHONE_INTEL_URL,
    TrestleEndpoint.REVERSE_PHONE: TRESTLE_REVERSE_PHONE_URL,
}


def endpoint_url(mode: TrestleEndpoint) -> str:
    return ENDPOINT_URLS[mode]


def build_headers(api_key: str) -> Dict[str, str]:
    return {
        "x-api-key": api_key,
        "Accept": "application/json",
    }


def resolve_api_key(settings: LookupSettings, query: CanonicalQuery) -> Optional[str]:
    """
    Pick the key to send upstream.

    The configured key wins. A caller-supplied ``apiKey`` is used only when no
    key is configured, or when TRESTLE_ALLOW_CALLER_API_KEY enables overrides.
    """
    if query.api_key and (settings.trestle_allow_caller_api_key or not settings.trestle_api_key):
        return query.api_key
    return settings.trestle_api_key
