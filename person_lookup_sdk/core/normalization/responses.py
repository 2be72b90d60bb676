"""
Response normalization helpers shared by provider parsers.

These helpers know about the common ways upstreams report errors inside a
decoded body and how to turn an upstream outcome into a CanonicalResult. The
provider-specific record shaping lives in each provider's parsers module.
"""

from typing import Any, Collection, Optional

from ...config.constants import ERROR_PREVIEW_CHARS
from ...models.envelope import CanonicalResult, ErrorType, UpstreamResponse

ERROR_MESSAGE_KEYS = ("error", "Error", "message")

DEFAULT_ERROR_MESSAGE = "Request failed"


def embedded_error_message(body: Any, default: str = DEFAULT_ERROR_MESSAGE) -> str:
    """
    Extract the upstream's own error message from a decoded body.

    Looks at ``error``, ``Error`` and ``message`` in that order. Object-valued
    errors contribute their nested ``message``.
    """
    if not isinstance(body, dict):
        return default
    for key in ERROR_MESSAGE_KEYS:
        value = body.get(key)
        if not value:
            continue
        if isinstance(value, dict):
            nested = value.get("message") or value.get("Message")
            if nested:
                return str(nested)
            continue
        return str(value)
    return default


def embedded_error_type(body: Any) -> Optional[str]:
    """Return ``error.type`` when the upstream classifies its own error."""
    if isinstance(body, dict) and isinstance(body.get("error"), dict):
        error_type = body["error"].get("type")
        if error_type:
            return str(error_type)
    return None


def upstream_error_result(
    upstream: UpstreamResponse,
    body: Any,
    not_found_statuses: Collection[int] = (404,),
    default_message: str = DEFAULT_ERROR_MESSAGE,
) -> CanonicalResult:
    """
    Domain error passthrough: a non-success upstream status with a decodable
    body becomes canonical status 200 carrying the upstream message and its
    original status, so callers never branch on transport status.
    """
    if upstream.status_code in not_found_statuses:
        error_type = ErrorType.NOT_FOUND
    else:
        error_type = ErrorType.UPSTREAM_ERROR
    return CanonicalResult.failure(
        200,
        error_type,
        embedded_error_message(body, default_message),
        status=upstream.status_code,
    )


def undecodable_result(
    upstream: UpstreamResponse,
    message: str,
    hint: Optional[str] = None,
) -> CanonicalResult:
    """500-class result for a body that must be JSON but is not."""
    return CanonicalResult.failure(
        500,
        ErrorType.UPSTREAM_NON_JSON,
        message,
        hint=hint,
        status=upstream.status_code,
        response_preview=upstream.preview(ERROR_PREVIEW_CHARS),
    )
