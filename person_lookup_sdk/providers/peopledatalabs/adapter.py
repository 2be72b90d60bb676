from typing import Any

from ...config.constants import CREDENTIAL_HINTS
from ...core.normalization.responses import undecodable_result, upstream_error_result
from ...models.envelope import CanonicalResult, ErrorType, ProviderRequest, UpstreamResponse
from ...models.lookup import PeopleDataLabsEndpoint, ProviderType
from ...models.query import CanonicalQuery
from ..base import ConfigurationError, ProviderAdapter, QueryValidationError, UpstreamDecodeError
from .parsers import DOMAIN_NO_MATCH_STATUSES, normalize_no_match
from .payloads import build_headers, build_identifier_params, build_search_params, endpoint_url


class PeopleDataLabsProvider(ProviderAdapter):
    """PeopleDataLabs person enrich, search and identify."""

    provider_type = ProviderType.PEOPLEDATALABS
    mode_enum = PeopleDataLabsEndpoint
    default_mode = PeopleDataLabsEndpoint.ENRICH

    def is_available(self) -> bool:
        return bool(self.settings.peopledatalabs_api_key)

    def normalize_request(self, query: CanonicalQuery, mode: PeopleDataLabsEndpoint) -> ProviderRequest:
        if not self.is_available():
            raise ConfigurationError(
                "PeopleDataLabs API key not configured. Set PEOPLEDATALABS_API_KEY in .env file.",
                self.get_provider_name(),
                hint=CREDENTIAL_HINTS["peopledatalabs"],
            )

        if mode == PeopleDataLabsEndpoint.SEARCH:
            params = build_search_params(query)
        else:
            params = build_identifier_params(query)
            if not params:
                raise QueryValidationError(
                    "At least one search parameter is required",
                    self.get_provider_name(),
                    error_type=ErrorType.MISSING_CRITERIA,
                    hint="Provide phone, email, profile, name, company, location, or other identifiers",
                )
            params["pretty"] = "true"

        return ProviderRequest(
            provider=self.get_provider_name(),
            mode=mode.value,
            method="GET",
            url=endpoint_url(mode),
            headers=build_headers(self.settings.peopledatalabs_api_key),
            params=params,
            secret_headers=("X-Api-Key",),
        )

    def normalize_body(
        self,
        upstream: UpstreamResponse,
        body: Any,
        mode: PeopleDataLabsEndpoint,
        query: CanonicalQuery
    ) -> CanonicalResult:
        if upstream.status_code in DOMAIN_NO_MATCH_STATUSES:
            return normalize_no_match(upstream, body)
        if not upstream.ok:
            return upstream_error_result(upstream, body)
        return CanonicalResult.success(body)

    def normalize_undecodable(
        self,
        error: UpstreamDecodeError,
        mode: PeopleDataLabsEndpoint,
        query: CanonicalQuery
    ) -> CanonicalResult:
        return undecodable_result(
            error.upstream,
            "PeopleDataLabs returned a non-JSON response. "
            "This usually means authentication failed or wrong endpoint.",
            hint="Check PEOPLEDATALABS_API_KEY and the endpoint parameter",
        )
