"""
Person Lookup SDK - Multi-provider person and phone lookup with normalization.

This package provides a unified interface for several person/contact data
providers:
- Enformion (contact enrichment, person search, reverse phone)
- PeopleDataLabs (person enrich, search, identify)
- TrestleIQ (phone intel, reverse phone)
- Twilio Lookup (carrier, identity match, caller name, SMS pumping risk)

Features:
- One caller-facing query vocabulary for every provider
- Phone number canonicalization (national and E.164)
- Minimum-criteria validation before any upstream call
- One result envelope: {status, error, data}
"""

__version__ = "0.1.0"

from .api.client import LookupClient, lookup
from .config.settings import LookupSettings
from .models.envelope import CanonicalResult, ErrorPayload, ErrorType
from .models.lookup import (
    EnformionEndpoint,
    PeopleDataLabsEndpoint,
    ProviderType,
    TrestleEndpoint,
    TwilioAction,
)
from .models.query import CanonicalQuery

__all__ = [
    # Main client
    "LookupClient",
    "lookup",

    # Configuration
    "LookupSettings",

    # Models
    "CanonicalQuery",
    "CanonicalResult",
    "ErrorPayload",
    "ErrorType",
    "ProviderType",
    "EnformionEndpoint",
    "PeopleDataLabsEndpoint",
    "TrestleEndpoint",
    "TwilioAction",
]
