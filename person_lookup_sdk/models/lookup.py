from enum import Enum


class ProviderType(str, Enum):
    """Supported lookup providers."""
    ENFORMION = "enformion"
    PEOPLEDATALABS = "peopledatalabs"
    TRESTLE = "trestle"
    TWILIO = "twilio"


class EnformionEndpoint(str, Enum):
    """Enformion search modes."""
    CONTACT_ENRICHMENT = "contact-enrichment"
    PERSON_SEARCH = "person-search"
    REVERSE_PHONE = "reverse-phone"


class PeopleDataLabsEndpoint(str, Enum):
    """PeopleDataLabs person API endpoints."""
    ENRICH = "enrich"
    SEARCH = "search"
    IDENTIFY = "identify"


class TrestleEndpoint(str, Enum):
    """TrestleIQ phone endpoints."""
    PHONE_INTEL = "phone_intel"
    REVERSE_PHONE = "reverse_phone"


class TwilioAction(str, Enum):
    """Twilio Lookup actions.

    CARRIER is the v1 GET lookup; the rest are v2 field lookups selected by the
    ``action`` key of a POST body.
    """
    CARRIER = "carrier"
    IDENTITY = "identity"
    CALLER_NAME = "caller_name"
    SMS_PUMPING = "sms_pumping"
