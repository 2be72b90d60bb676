"""FastAPI HTTP endpoints for Person Lookup SDK.

This module provides REST API endpoints for the SDK functionality.
It requires FastAPI to be installed.
"""

import logging
import uuid
from typing import Any, Dict, Optional

try:
    from fastapi import APIRouter, Depends, Request
    from fastapi.responses import JSONResponse
except ImportError:
    raise ImportError(
        "FastAPI is required for HTTP endpoints. "
        "Please install with: pip install person-lookup-sdk"
    )

from ..api.client import LookupClient
from ..models.envelope import CanonicalResult, ErrorType
from ..models.lookup import ProviderType
from ..providers.twilio.body import RawBody

logger = logging.getLogger(__name__)

# Create router instance
router = APIRouter()


async def get_lookup_client(request: Request) -> LookupClient:
    """Shared client stored on the application; created from the environment if startup did not run."""
    client = getattr(request.app.state, "lookup_client", None)
    if client is None:
        client = LookupClient()
        request.app.state.lookup_client = client
    return client


async def _respond(
    request: Request,
    client: LookupClient,
    provider: ProviderType,
    body: RawBody = None
) -> JSONResponse:
    params: Dict[str, Any] = dict(request.query_params)
    request_id: Optional[str] = request.headers.get("X-Request-ID") or uuid.uuid4().hex[:8]
    try:
        result = await client.lookup(provider, params, body=body, request_id=request_id)
    except Exception as e:
        logger.exception(f"Unhandled error in {provider.value} lookup [request_id={request_id}]")
        result = CanonicalResult.failure(
            500,
            ErrorType.INTERNAL_ERROR,
            "Internal server error",
            details={"message": str(e)},
        )
    return JSONResponse(status_code=result.status, content=result.to_payload())


@router.api_route("/enformion", methods=["GET", "POST"])
async def enformion_lookup(request: Request, client: LookupClient = Depends(get_lookup_client)):
    """Enformion lookup; ``endpoint`` selects contact-enrichment, person-search or reverse-phone."""
    return await _respond(request, client, ProviderType.ENFORMION)


@router.api_route("/peopledatalabs", methods=["GET", "POST"])
async def peopledatalabs_lookup(request: Request, client: LookupClient = Depends(get_lookup_client)):
    """PeopleDataLabs lookup; ``endpoint`` selects enrich, search or identify."""
    return await _respond(request, client, ProviderType.PEOPLEDATALABS)


@router.api_route("/trestle", methods=["GET", "POST"])
async def trestle_lookup(request: Request, client: LookupClient = Depends(get_lookup_client)):
    """TrestleIQ lookup; ``endpoint`` must be phone_intel or reverse_phone."""
    return await _respond(request, client, ProviderType.TRESTLE)


@router.get("/twilio")
async def twilio_carrier_lookup(request: Request, client: LookupClient = Depends(get_lookup_client)):
    """Twilio v1 carrier lookup."""
    return await _respond(request, client, ProviderType.TWILIO)


@router.post("/twilio")
async def twilio_action_lookup(request: Request, client: LookupClient = Depends(get_lookup_client)):
    """Twilio v2 lookups; the body's ``action`` selects identity, caller_name or sms_pumping."""
    raw = await request.body()
    return await _respond(request, client, ProviderType.TWILIO, body=raw)


@router.get("/status")
async def provider_status(client: LookupClient = Depends(get_lookup_client)):
    """Which providers have credentials configured."""
    return {"providers": client.get_provider_status()}
