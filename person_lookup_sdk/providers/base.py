"""
Base Provider Adapter Interface

This module defines the abstract base class for all lookup provider adapters.
All provider implementations must inherit from this class and implement
the required methods to ensure consistent behavior across providers.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional, Type

from ..config.constants import ERROR_PREVIEW_CHARS
from ..config.settings import LookupSettings
from ..core.normalization.responses import undecodable_result
from ..models.envelope import CanonicalResult, ErrorType, ProviderRequest, UpstreamResponse
from ..models.lookup import ProviderType
from ..models.query import CanonicalQuery
from ..observability.logging import ProviderLogger

if TYPE_CHECKING:
    from .invoker import UpstreamInvoker


class ProviderError(Exception):
    """
    Base exception for provider-related errors.

    Every ProviderError can be rendered as a canonical envelope, so no
    failure kind ever escapes the adapter as an uncaught fault.

    Attributes:
        message: Error message
        provider: Provider name
        status_code: Canonical status to report
        error_type: Canonical error classification
        hint: Where to look to fix the problem
        details: Extra context echoed back to the caller
        upstream_status: Status returned by the upstream, if any
    """

    default_status = 500
    default_type = ErrorType.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        provider: str,
        status_code: Optional[int] = None,
        error_type: Optional[ErrorType] = None,
        hint: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        upstream_status: Optional[int] = None
    ):
        super().__init__(message)
        self.message = message
        self.provider = provider
        self.status_code = status_code or self.default_status
        self.error_type = error_type or self.default_type
        self.hint = hint
        self.details = details
        self.upstream_status = upstream_status
        self.original_error = None  # Set by ErrorMapper when wrapping

    def to_result(self) -> CanonicalResult:
        """Render this error as a canonical envelope."""
        return CanonicalResult.failure(
            self.status_code,
            self.error_type,
            self.message,
            hint=self.hint,
            details=self.details,
            status=self.upstream_status,
        )


class ConfigurationError(ProviderError):
    """Required credentials are missing from process configuration."""
    default_status = 400
    default_type = ErrorType.MISSING_CREDENTIALS


class QueryValidationError(ProviderError):
    """The query does not meet the provider's minimum criteria."""
    default_status = 400
    default_type = ErrorType.MISSING_CRITERIA


class UpstreamError(ProviderError):
    """The upstream could not be reached or its body could not be read."""
    default_status = 500
    default_type = ErrorType.UPSTREAM_UNREACHABLE


class UpstreamDecodeError(ProviderError):
    """The upstream returned a non-empty body that is not JSON."""
    default_status = 500
    default_type = ErrorType.UPSTREAM_NON_JSON

    def __init__(self, upstream: UpstreamResponse, provider: str):
        super().__init__(
            f"Invalid JSON from upstream (status {upstream.status_code})",
            provider,
            upstream_status=upstream.status_code,
        )
        self.upstream = upstream

    def to_result(self) -> CanonicalResult:
        return CanonicalResult.failure(
            self.status_code,
            self.error_type,
            self.message,
            status=self.upstream_status,
            response_preview=self.upstream.preview(ERROR_PREVIEW_CHARS),
        )


class ProviderAdapter(ABC):
    """
    Abstract base class for lookup provider adapters.

    Every adapter implements the same three-stage contract:
    1. normalize_request: CanonicalQuery + mode -> ProviderRequest
       (raises ConfigurationError / QueryValidationError before any network call)
    2. invoke: exactly one upstream call, body captured as raw text
    3. normalize_response: UpstreamResponse -> CanonicalResult

    Adapters hold only read-only settings and the shared invoker, so a single
    instance serves concurrent lookups.

    Provider adapters should NOT contain:
    - Cross-provider logic
    - Retries or caching
    - Host framework concerns (CORS, routing)
    """

    provider_type: ProviderType
    mode_enum: Type[Enum]
    default_mode: Optional[Enum] = None
    invalid_mode_type: ErrorType = ErrorType.INVALID_ENDPOINT
    undecodable_hint: str = "Check the provider credentials and the endpoint parameter"

    def __init__(self, settings: LookupSettings, invoker: "UpstreamInvoker"):
        self.settings = settings
        self.invoker = invoker
        self.logger = ProviderLogger(self.get_provider_name())

    def get_provider_name(self) -> str:
        """Return the provider name (e.g., "enformion", "twilio")."""
        return self.provider_type.value

    def resolve_mode(self, value: Any) -> Enum:
        """
        Parse the caller's endpoint/action selector into this adapter's mode enum.

        Raises:
            QueryValidationError: If the value names no supported mode
        """
        if isinstance(value, self.mode_enum):
            return value
        text = str(value).strip().lower() if value is not None else ""
        if not text and self.default_mode is not None:
            return self.default_mode
        try:
            return self.mode_enum(text)
        except ValueError:
            choices = ", ".join(f'"{mode.value}"' for mode in self.mode_enum)
            raise QueryValidationError(
                f"Invalid {self._mode_label()}. Use one of: {choices}",
                self.get_provider_name(),
                error_type=self.invalid_mode_type,
                details={"received": value},
            )

    def _mode_label(self) -> str:
        return "action" if self.invalid_mode_type == ErrorType.INVALID_ACTION else "endpoint"

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if the provider is configured.

        Returns:
            bool: True if the required credentials are present
        """
        pass

    @abstractmethod
    def normalize_request(self, query: CanonicalQuery, mode: Enum) -> ProviderRequest:
        """
        Validate the query and encode it for the upstream.

        Raises:
            ConfigurationError: Credentials are missing
            QueryValidationError: Criteria are missing or malformed
        """
        pass

    async def invoke(self, request: ProviderRequest) -> UpstreamResponse:
        """Perform the single outbound call for this lookup."""
        return await self.invoker.send(request)

    def normalize_response(
        self,
        upstream: UpstreamResponse,
        mode: Enum,
        query: CanonicalQuery
    ) -> CanonicalResult:
        """
        Decode the raw body, then map it to a CanonicalResult.

        Decoding is a separate phase: an undecodable body is routed to
        normalize_undecodable instead of raising.
        """
        try:
            body = self.invoker.decode(upstream, self.get_provider_name())
        except UpstreamDecodeError as e:
            self.logger.warning(
                "Upstream returned non-JSON body",
                mode=mode.value,
                status=upstream.status_code,
                preview=repr(upstream.preview(ERROR_PREVIEW_CHARS))
            )
            return self.normalize_undecodable(e, mode, query)
        return self.normalize_body(upstream, body, mode, query)

    @abstractmethod
    def normalize_body(
        self,
        upstream: UpstreamResponse,
        body: Any,
        mode: Enum,
        query: CanonicalQuery
    ) -> CanonicalResult:
        """Map a decoded upstream body to the canonical envelope."""
        pass

    def normalize_undecodable(
        self,
        error: UpstreamDecodeError,
        mode: Enum,
        query: CanonicalQuery
    ) -> CanonicalResult:
        """Handle a body that is not JSON. Default: 500-class error naming the likely cause."""
        return undecodable_result(
            error.upstream,
            f"{self.get_provider_name()} returned a non-JSON response. "
            "This usually means authentication failed or wrong endpoint.",
            hint=self.undecodable_hint,
        )

    async def lookup(
        self,
        query: CanonicalQuery,
        mode: Any = None,
        request_id: Optional[str] = None
    ) -> CanonicalResult:
        """
        Run the full pipeline for one query.

        Always returns a CanonicalResult; ProviderErrors are converted to
        envelopes at this boundary.
        """
        try:
            resolved = self.resolve_mode(mode)
        except ProviderError as e:
            self.logger.warning("Rejected lookup", error_type=e.error_type.value, request_id=request_id)
            return e.to_result()

        with self.logger.track_lookup(resolved.value, request_id=request_id) as trace:
            try:
                request = self.normalize_request(query, resolved)
                self.logger.debug(
                    f"Calling {request.method} {request.target}",
                    mode=resolved.value,
                    request_id=trace.request_id,
                    headers=request.redacted_headers()
                )
                upstream = await self.invoke(request)
                self.logger.log_upstream(
                    upstream.status_code, upstream.text, resolved.value, trace.request_id
                )
                result = self.normalize_response(upstream, resolved, query)
            except ProviderError as e:
                from .errors import ErrorMapper

                classification = ErrorMapper.get_error_classification(e)
                classification.pop('provider', None)
                self.logger.warning(
                    e.message,
                    mode=resolved.value,
                    request_id=trace.request_id,
                    **classification
                )
                result = e.to_result()

            trace.result = result
        return result
