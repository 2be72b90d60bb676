from typing import Dict, Tuple
from urllib.parse import quote

from ...config.constants import TWILIO_LOOKUP_V1_URL, TWILIO_LOOKUP_V2_URL
from ...models.lookup import TwilioAction
from ...models.query import CanonicalQuery

# v2 "Fields" value per POST action
LOOKUP_FIELDS = {
    TwilioAction.IDENTITY: "identity_match",
    TwilioAction.CALLER_NAME: "caller_name",
    TwilioAction.SMS_PUMPING: "sms_pumping_risk",
}

# Identity-match parameters (Twilio capitalization) from CanonicalQuery fields
IDENTITY_PARAMS = (
    ("first_name", "FirstName"),
    ("last_name", "LastName"),
    ("city", "City"),
    ("zip", "PostalCode"),
)


def build_headers() -> Dict[str, str]:
    return {"Accept": "application/json"}


def basic_auth(sid: str, token: str) -> Tuple[str, str]:
    """Account SID and auth token, sent as HTTP Basic credentials by the invoker."""
    return (sid, token)


def phone_url(action: TwilioAction, e164: str) -> str:
    base = TWILIO_LOOKUP_V1_URL if action == TwilioAction.CARRIER else TWILIO_LOOKUP_V2_URL
    return f"{base}/{quote(e164, safe='+')}"


def build_params(action: TwilioAction, query: CanonicalQuery) -> Dict[str, str]:
    if action == TwilioAction.CARRIER:
        return {"Type": "carrier"}

    params = {"Fields": LOOKUP_FIELDS[action]}
    if action == TwilioAction.IDENTITY:
        for field, param in IDENTITY_PARAMS:
            value = getattr(query, field)
            if value:
                params[param] = value
    return params
