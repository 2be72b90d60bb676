from .envelope import (
    CanonicalResult,
    ErrorPayload,
    ErrorType,
    ProviderRequest,
    UpstreamResponse,
)
from .lookup import (
    EnformionEndpoint,
    PeopleDataLabsEndpoint,
    ProviderType,
    TrestleEndpoint,
    TwilioAction,
)
from .query import CanonicalQuery

__all__ = [
    "CanonicalQuery",
    "CanonicalResult",
    "ErrorPayload",
    "ErrorType",
    "ProviderRequest",
    "UpstreamResponse",
    "ProviderType",
    "EnformionEndpoint",
    "PeopleDataLabsEndpoint",
    "TrestleEndpoint",
    "TwilioAction",
]
