from typing import Any

from ...config.constants import CREDENTIAL_HINTS
from ...core.normalization.phone import NATIONAL_DIGITS, strip_phone
from ...core.normalization.responses import upstream_error_result
from ...models.envelope import CanonicalResult, ErrorType, ProviderRequest, UpstreamResponse
from ...models.lookup import ProviderType, TrestleEndpoint
from ...models.query import CanonicalQuery
from ..base import ConfigurationError, ProviderAdapter, QueryValidationError
from .payloads import build_headers, endpoint_url, resolve_api_key


class TrestleProvider(ProviderAdapter):
    """TrestleIQ phone intelligence and reverse phone. The endpoint is required."""

    provider_type = ProviderType.TRESTLE
    mode_enum = TrestleEndpoint
    default_mode = None
    undecodable_hint = "Check TRESTLE_API_KEY and the endpoint parameter"

    def is_available(self) -> bool:
        return bool(self.settings.trestle_api_key)

    def normalize_request(self, query: CanonicalQuery, mode: TrestleEndpoint) -> ProviderRequest:
        phone = strip_phone(query.phone)
        if not phone:
            raise QueryValidationError(
                "Missing required parameter: phone",
                self.get_provider_name(),
                error_type=ErrorType.MISSING_PHONE,
            )

        api_key = resolve_api_key(self.settings, query)
        if not api_key:
            raise ConfigurationError(
                "Missing API key. Add TRESTLE_API_KEY to your .env file.",
                self.get_provider_name(),
                hint=CREDENTIAL_HINTS["trestle"],
            )

        if len(phone) != NATIONAL_DIGITS:
            raise QueryValidationError(
                "Phone number must be 10 digits (numbers only).",
                self.get_provider_name(),
                error_type=ErrorType.INVALID_PHONE_LENGTH,
                details={"digits": len(phone)},
            )

        return ProviderRequest(
            provider=self.get_provider_name(),
            mode=mode.value,
            method="GET",
            url=endpoint_url(mode),
            headers=build_headers(api_key),
            params={"phone": phone},
            secret_headers=("x-api-key",),
        )

    def normalize_body(
        self,
        upstream: UpstreamResponse,
        body: Any,
        mode: TrestleEndpoint,
        query: CanonicalQuery
    ) -> CanonicalResult:
        if not upstream.ok:
            return upstream_error_result(upstream, body)
        return CanonicalResult.success(body)
