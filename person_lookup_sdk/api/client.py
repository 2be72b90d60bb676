"""Main client interface for Person Lookup SDK."""

from typing import Any, Dict, Mapping, Optional, Union

import httpx
from pydantic import ValidationError

from ..config.settings import LookupSettings
from ..models.envelope import CanonicalResult, ErrorType
from ..models.lookup import ProviderType, TwilioAction
from ..models.query import CanonicalQuery
from ..providers.base import ProviderAdapter
from ..providers.enformion.adapter import EnformionProvider
from ..providers.invoker import UpstreamInvoker
from ..providers.peopledatalabs.adapter import PeopleDataLabsProvider
from ..providers.trestle.adapter import TrestleProvider
from ..providers.twilio.adapter import TwilioProvider
from ..providers.twilio.body import RawBody, decode_request_body


class LookupClient:
    """High-level client for Person Lookup SDK."""

    def __init__(
        self,
        settings: Optional[LookupSettings] = None,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        """
        Initialize the client.

        Args:
            settings: Provider credentials (defaults to LookupSettings.from_env())
            http_client: Optional shared httpx.AsyncClient; the client does not
                close a client it was handed
        """
        self.settings = settings or LookupSettings.from_env()
        self.invoker = UpstreamInvoker(
            client=http_client,
            timeout=self.settings.http_timeout_seconds
        )
        self.providers: Dict[ProviderType, ProviderAdapter] = {
            ProviderType.ENFORMION: EnformionProvider(self.settings, self.invoker),
            ProviderType.PEOPLEDATALABS: PeopleDataLabsProvider(self.settings, self.invoker),
            ProviderType.TRESTLE: TrestleProvider(self.settings, self.invoker),
            ProviderType.TWILIO: TwilioProvider(self.settings, self.invoker),
        }

    async def __aenter__(self) -> "LookupClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.invoker.aclose()

    def get_provider(self, provider: Union[str, ProviderType]) -> Optional[ProviderAdapter]:
        try:
            return self.providers[ProviderType(str(getattr(provider, "value", provider)).lower())]
        except ValueError:
            return None

    def get_provider_status(self) -> Dict[str, bool]:
        """Which providers have credentials configured."""
        return {
            provider_type.value: adapter.is_available()
            for provider_type, adapter in self.providers.items()
        }

    async def lookup(
        self,
        provider: Union[str, ProviderType],
        params: Optional[Mapping[str, Any]] = None,
        endpoint: Optional[str] = None,
        body: RawBody = None,
        request_id: Optional[str] = None
    ) -> CanonicalResult:
        """
        Run one lookup against a provider.

        Args:
            provider: Provider name ("enformion", "peopledatalabs", "trestle", "twilio")
            params: Caller query parameters
            endpoint: Mode selector; falls back to ``params["endpoint"]``
            body: Request body. For Twilio its presence selects the POST actions
                (``action`` key, default identity); without it the carrier lookup runs.
            request_id: Optional correlation id for logs

        Returns:
            CanonicalResult: Always an envelope, never an exception
        """
        adapter = self.get_provider(provider)
        if adapter is None:
            choices = ", ".join(f'"{p.value}"' for p in ProviderType)
            return CanonicalResult.failure(
                400,
                ErrorType.INVALID_ENDPOINT,
                f"Unknown provider. Use one of: {choices}",
                details={"received": str(provider)},
            )

        fields: Dict[str, Any] = dict(params or {})

        if adapter.provider_type == ProviderType.TWILIO:
            if body is None:
                mode = TwilioAction.CARRIER
            else:
                fields.update(decode_request_body(body))
                mode = fields.get("action")
            if endpoint is not None:
                mode = endpoint
        else:
            if isinstance(body, Mapping):
                fields = {**body, **fields}
            mode = endpoint if endpoint is not None else fields.get("endpoint")

        try:
            query = CanonicalQuery.from_mapping(fields)
        except ValidationError as e:
            return CanonicalResult.failure(
                400,
                ErrorType.INVALID_QUERY,
                "Query values must be strings or numbers",
                details={"fields": sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})},
            )
        return await adapter.lookup(query, mode, request_id=request_id)


# Convenience function for quick usage
async def lookup(
    provider: str,
    params: Optional[Mapping[str, Any]] = None,
    endpoint: Optional[str] = None,
    body: RawBody = None
) -> Dict[str, Any]:
    """Quick lookup that returns the JSON envelope as a dict."""
    async with LookupClient() as client:
        result = await client.lookup(provider, params, endpoint=endpoint, body=body)
    return result.to_payload()
