from typing import Any

from ...config.constants import CREDENTIAL_HINTS, ENFORMION_NOT_FOUND_MESSAGE
from ...core.normalization.responses import undecodable_result, upstream_error_result
from ...models.envelope import CanonicalResult, ErrorType, ProviderRequest, UpstreamResponse
from ...models.lookup import EnformionEndpoint, ProviderType
from ...models.query import CanonicalQuery
from ..base import ConfigurationError, ProviderAdapter, QueryValidationError, UpstreamDecodeError
from .parsers import has_records, is_flagged_error, shape_records
from .payloads import build_headers, build_search_body, endpoint_url, search_criteria


class EnformionProvider(ProviderAdapter):
    """Enformion contact enrichment, person search and reverse phone."""

    provider_type = ProviderType.ENFORMION
    mode_enum = EnformionEndpoint
    default_mode = EnformionEndpoint.CONTACT_ENRICHMENT

    def is_available(self) -> bool:
        return self.settings.has_enformion_credentials

    def normalize_request(self, query: CanonicalQuery, mode: EnformionEndpoint) -> ProviderRequest:
        if not self.is_available():
            raise ConfigurationError(
                "Enformion API credentials not configured. "
                "Set ENFORMION_API_NAME and ENFORMION_API_PASSWORD in .env file.",
                self.get_provider_name(),
                hint=CREDENTIAL_HINTS["enformion"],
            )

        body = build_search_body(query, mode)

        if mode == EnformionEndpoint.REVERSE_PHONE:
            if not body.get("Phone"):
                raise QueryValidationError(
                    "Phone number is required for reverse phone lookup",
                    self.get_provider_name(),
                    error_type=ErrorType.MISSING_PHONE,
                    hint="Provide a 10-digit US phone number",
                    details={"requestBody": body, "query": query.criteria()},
                )
        else:
            criteria = search_criteria(body)
            if sum(criteria.values()) < 2:
                raise QueryValidationError(
                    "At least two search criteria are required",
                    self.get_provider_name(),
                    error_type=ErrorType.MISSING_CRITERIA,
                    hint="Provide at least two of: Name, Phone, Email, or Address (with City/State/Zip)",
                    details={"receivedCriteria": criteria},
                )

        return ProviderRequest(
            provider=self.get_provider_name(),
            mode=mode.value,
            method="POST",
            url=endpoint_url(mode),
            headers=build_headers(
                mode,
                self.settings.enformion_api_name,
                self.settings.enformion_api_password,
            ),
            json_body=body,
            secret_headers=("galaxy-ap-password",),
        )

    def normalize_body(
        self,
        upstream: UpstreamResponse,
        body: Any,
        mode: EnformionEndpoint,
        query: CanonicalQuery
    ) -> CanonicalResult:
        if not upstream.ok or is_flagged_error(body):
            return upstream_error_result(upstream, body, not_found_statuses=())

        if not has_records(body):
            return CanonicalResult.not_found(ENFORMION_NOT_FOUND_MESSAGE)

        return CanonicalResult.success(shape_records(body))

    def normalize_undecodable(
        self,
        error: UpstreamDecodeError,
        mode: EnformionEndpoint,
        query: CanonicalQuery
    ) -> CanonicalResult:
        return undecodable_result(
            error.upstream,
            "Enformion API returned HTML instead of JSON. "
            "This usually means authentication failed or wrong endpoint.",
            hint="Check your API credentials and ensure they are correct",
        )
