"""
Upstream endpoint constants.

Central location for provider URLs, header values and response-shaping limits.
Credentials are NOT stored here; see settings.py.
"""

# Enformion (contact enrichment / person search / reverse phone)
ENFORMION_BASE_URL = "https://devapi.enformion.com"
ENFORMION_CLIENT_TYPE = "web"
ENFORMION_PERSON_SEARCH_INCLUDES = [
    "Addresses",
    "PhoneNumbers",
    "EmailAddresses",
    "Relatives",
    "Akas",
]
ENFORMION_DEFAULT_PAGE = 1
ENFORMION_DEFAULT_RESULTS_PER_PAGE = 10
ENFORMION_NOT_FOUND_MESSAGE = "No records were found matching your request"

# PeopleDataLabs (enrich / search / identify)
PEOPLEDATALABS_BASE_URL = "https://api.peopledatalabs.com/v5/person"
PEOPLEDATALABS_DEFAULT_SEARCH_SIZE = 1
PEOPLEDATALABS_MAX_SEARCH_SIZE = 10

# TrestleIQ (phone intel / reverse phone)
TRESTLE_PHONE_INTEL_URL = "https://api.trestleiq.com/3.0/phone_intel"
TRESTLE_REVERSE_PHONE_URL = "https://api.trestleiq.com/3.2/phone"

# Twilio Lookup (carrier v1, identity/caller name/sms pumping v2)
TWILIO_LOOKUP_V1_URL = "https://lookups.twilio.com/v1/PhoneNumbers"
TWILIO_LOOKUP_V2_URL = "https://lookups.twilio.com/v2/PhoneNumbers"

# Where callers obtain credentials (surfaced in configuration errors)
CREDENTIAL_HINTS = {
    "enformion": "Get your credentials from https://api.enformion.com/",
    "peopledatalabs": "Get your API key from https://dashboard.peopledatalabs.com/",
    "trestle": "Get your API key from https://dashboard.trestleiq.com/",
    "twilio": "Get your Account SID and Auth Token from https://console.twilio.com/",
}

# Preview lengths for raw upstream bodies
ERROR_PREVIEW_CHARS = 200
LOG_PREVIEW_CHARS = 500

DEFAULT_HTTP_TIMEOUT_SECONDS = 30.0
