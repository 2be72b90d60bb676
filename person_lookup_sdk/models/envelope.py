from enum import Enum
from typing import Any, Dict, Optional, Tuple
from urllib.parse import urlencode

from pydantic import BaseModel, Field, field_validator


class ErrorType(str, Enum):
    """Canonical error classifications."""
    MISSING_CREDENTIALS = "missing_credentials"
    MISSING_CRITERIA = "missing_criteria"
    MISSING_PHONE = "missing_phone"
    INVALID_PHONE_LENGTH = "invalid_phone_length"
    INVALID_ENDPOINT = "invalid_endpoint"
    INVALID_ACTION = "invalid_action"
    INVALID_QUERY = "invalid_query"
    NOT_FOUND = "not_found"
    UPSTREAM_ERROR = "upstream_error"
    UPSTREAM_NON_JSON = "upstream_non_json"
    UPSTREAM_UNREACHABLE = "upstream_unreachable"
    INTERNAL_ERROR = "internal_error"


class ErrorPayload(BaseModel):
    """Error half of the canonical envelope."""
    type: str = Field(..., description="Error classification (see ErrorType)")
    message: str
    hint: Optional[str] = None
    status: Optional[int] = Field(None, description="Original upstream status, when one exists")
    details: Optional[Dict[str, Any]] = None
    response_preview: Optional[str] = Field(None, description="Bounded preview of a raw upstream body")

    @field_validator("type", mode="before")
    @classmethod
    def _enum_value(cls, value: Any) -> Any:
        return value.value if isinstance(value, Enum) else value

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class CanonicalResult(BaseModel):
    """
    Uniform result returned to callers regardless of provider.

    Exactly one of ``error`` and ``data`` is populated. ``status`` is the
    semantic outcome: 200 for success, domain not-found and upstream error
    passthrough; 4xx for local validation/configuration failures; 5xx for
    transport and decode failures.
    """
    status: int
    error: Optional[ErrorPayload] = None
    data: Optional[Any] = None

    @classmethod
    def success(cls, data: Any, status: int = 200) -> "CanonicalResult":
        return cls(status=status, error=None, data=data)

    @classmethod
    def failure(
        cls,
        code: int,
        error_type: str,
        message: str,
        **error_fields: Any
    ) -> "CanonicalResult":
        return cls(
            status=code,
            error=ErrorPayload(type=error_type, message=message, **error_fields),
            data=None,
        )

    @classmethod
    def not_found(cls, message: str, upstream_status: Optional[int] = None) -> "CanonicalResult":
        return cls.failure(200, ErrorType.NOT_FOUND, message, status=upstream_status)

    @property
    def is_success(self) -> bool:
        return self.error is None

    def to_payload(self) -> Dict[str, Any]:
        """JSON body for the caller; ``error`` and ``data`` keys are always present."""
        return {
            "status": self.status,
            "error": self.error.to_dict() if self.error else None,
            "data": self.data,
        }


class ProviderRequest(BaseModel):
    """Encoded upstream request, built fresh for every invocation."""
    provider: str
    mode: str
    method: str = "GET"
    url: str
    headers: Dict[str, str] = Field(default_factory=dict)
    params: Dict[str, str] = Field(default_factory=dict)
    json_body: Optional[Dict[str, Any]] = None
    secret_headers: Tuple[str, ...] = Field(default=(), description="Header names whose values are never logged")
    auth: Optional[Tuple[str, str]] = Field(None, repr=False, description="HTTP Basic credentials")

    @property
    def target(self) -> str:
        """URL including the encoded query string."""
        if not self.params:
            return self.url
        return f"{self.url}?{urlencode(self.params)}"

    def redacted_headers(self) -> Dict[str, str]:
        secret = {name.lower() for name in self.secret_headers}
        return {
            key: ("REDACTED" if key.lower() in secret else value)
            for key, value in self.headers.items()
        }


class UpstreamResponse(BaseModel):
    """Raw upstream status and body text, captured before any decoding."""
    status_code: int
    text: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def preview(self, limit: int) -> str:
        return self.text[:limit]
