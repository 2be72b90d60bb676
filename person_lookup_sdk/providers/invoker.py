"""
Upstream invoker shared by all adapters.

Performs exactly one outbound call per lookup and always captures the body as
text before any decoding is attempted. There are no retries and no timeout
escalation beyond the configured transport timeout.
"""

import json
from typing import Any, Optional

import httpx

from ..config.constants import DEFAULT_HTTP_TIMEOUT_SECONDS
from ..models.envelope import ProviderRequest, UpstreamResponse
from .base import UpstreamDecodeError
from .errors import ErrorMapper


class UpstreamInvoker:
    """Single-attempt HTTP transport returning raw status and text."""

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS
    ):
        self._client = client
        self._owns_client = client is None
        self.timeout = timeout

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy initialization of the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(self.timeout))
        return self._client

    async def send(self, request: ProviderRequest) -> UpstreamResponse:
        """
        Perform the outbound call.

        Raises:
            UpstreamError: The upstream was unreachable or the body could not be read
        """
        try:
            response = await self.client.request(
                request.method,
                request.url,
                params=request.params or None,
                headers=request.headers,
                json=request.json_body,
                auth=httpx.BasicAuth(*request.auth) if request.auth else httpx.USE_CLIENT_DEFAULT,
            )
            text = response.text
        except httpx.HTTPError as e:
            raise ErrorMapper.map_transport_error(e, request.provider)

        return UpstreamResponse(status_code=response.status_code, text=text)

    @staticmethod
    def decode(upstream: UpstreamResponse, provider: str) -> Any:
        """
        Second decode phase: parse the captured text as JSON.

        Empty or whitespace-only bodies and a JSON ``null`` decode to an empty
        object.

        Raises:
            UpstreamDecodeError: The text is not valid JSON
        """
        if not upstream.text or not upstream.text.strip():
            return {}
        try:
            body = json.loads(upstream.text)
        except ValueError:
            raise UpstreamDecodeError(upstream, provider)
        return {} if body is None else body

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None
