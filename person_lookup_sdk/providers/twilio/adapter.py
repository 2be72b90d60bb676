from typing import Any

from ...config.constants import CREDENTIAL_HINTS
from ...core.normalization.phone import to_e164_passthrough
from ...core.normalization.responses import upstream_error_result
from ...models.envelope import CanonicalResult, ErrorType, ProviderRequest, UpstreamResponse
from ...models.lookup import ProviderType, TwilioAction
from ...models.query import CanonicalQuery
from ..base import ConfigurationError, ProviderAdapter, QueryValidationError, UpstreamDecodeError
from .payloads import basic_auth, build_headers, build_params, phone_url


class TwilioProvider(ProviderAdapter):
    """
    Twilio Lookup.

    ``carrier`` uses the v1 API; ``identity``, ``caller_name`` and
    ``sms_pumping`` use v2 with the matching ``Fields`` value. Non-JSON bodies
    are passed back with the upstream status instead of failing as a 500.
    """

    provider_type = ProviderType.TWILIO
    mode_enum = TwilioAction
    default_mode = TwilioAction.IDENTITY
    invalid_mode_type = ErrorType.INVALID_ACTION

    def is_available(self) -> bool:
        return self.settings.has_twilio_credentials

    def _check_credentials(self) -> None:
        if not self.is_available():
            raise ConfigurationError(
                "Twilio credentials not configured on server. Set TWILIO_SID and TWILIO_TOKEN.",
                self.get_provider_name(),
                hint=CREDENTIAL_HINTS["twilio"],
            )

    def _require_phone(self, query: CanonicalQuery) -> str:
        e164 = to_e164_passthrough(query.phone)
        if not e164:
            raise QueryValidationError(
                "Missing required parameter: phone",
                self.get_provider_name(),
                error_type=ErrorType.MISSING_PHONE,
            )
        return e164

    def normalize_request(self, query: CanonicalQuery, mode: TwilioAction) -> ProviderRequest:
        # Carrier lookups validate the phone first; the POST actions check credentials first
        if mode == TwilioAction.CARRIER:
            e164 = self._require_phone(query)
            self._check_credentials()
        else:
            self._check_credentials()
            e164 = self._require_phone(query)

        return ProviderRequest(
            provider=self.get_provider_name(),
            mode=mode.value,
            method="GET",
            url=phone_url(mode, e164),
            headers=build_headers(),
            params=build_params(mode, query),
            auth=basic_auth(self.settings.twilio_sid, self.settings.twilio_token),
        )

    def normalize_body(
        self,
        upstream: UpstreamResponse,
        body: Any,
        mode: TwilioAction,
        query: CanonicalQuery
    ) -> CanonicalResult:
        if not upstream.ok:
            return upstream_error_result(upstream, body)
        return CanonicalResult.success(body)

    def normalize_undecodable(
        self,
        error: UpstreamDecodeError,
        mode: TwilioAction,
        query: CanonicalQuery
    ) -> CanonicalResult:
        upstream = error.upstream
        if query.debug:
            return CanonicalResult.success(
                {"__debug_raw": upstream.text, "__debug_status": upstream.status_code},
                status=upstream.status_code,
            )
        return CanonicalResult.failure(
            upstream.status_code,
            ErrorType.UPSTREAM_NON_JSON,
            upstream.text or "Upstream non-JSON",
            status=upstream.status_code,
        )
