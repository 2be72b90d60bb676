from typing import Any

from ...core.normalization.responses import embedded_error_message, embedded_error_type
from ...models.envelope import CanonicalResult, ErrorType, UpstreamResponse

# Upstream statuses that mean "no usable match" rather than failure
DOMAIN_NO_MATCH_STATUSES = {
    404: ErrorType.NOT_FOUND.value,
    402: "payment_required",
}


def normalize_no_match(upstream: UpstreamResponse, body: Any) -> CanonicalResult:
    """
    404 (no match) and 402 (credits exhausted) become canonical status 200 with
    ``data: null`` and the original status inside the error.
    """
    default_type = DOMAIN_NO_MATCH_STATUSES[upstream.status_code]
    return CanonicalResult.failure(
        200,
        embedded_error_type(body) or default_type,
        embedded_error_message(body, "No records were found matching your request"),
        status=upstream.status_code,
    )
