"""
Provider Adapters Layer

This layer contains all lookup provider-specific implementations.
Each provider adapter translates between the SDK's canonical query and
result envelope and the provider's specific API requirements.
"""

from .base import (
    ConfigurationError,
    ProviderAdapter,
    ProviderError,
    QueryValidationError,
    UpstreamDecodeError,
    UpstreamError,
)
from .enformion.adapter import EnformionProvider
from .invoker import UpstreamInvoker
from .peopledatalabs.adapter import PeopleDataLabsProvider
from .trestle.adapter import TrestleProvider
from .twilio.adapter import TwilioProvider

__all__ = [
    "ProviderAdapter",
    "ProviderError",
    "ConfigurationError",
    "QueryValidationError",
    "UpstreamError",
    "UpstreamDecodeError",
    "UpstreamInvoker",
    "EnformionProvider",
    "PeopleDataLabsProvider",
    "TrestleProvider",
    "TwilioProvider",
]
