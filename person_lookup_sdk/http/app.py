import logging
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..api.client import LookupClient
from .api import router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the lookup client on startup when none was supplied; close it on shutdown."""
    if app.state.lookup_client is None:
        app.state.lookup_client = LookupClient()

    yield

    if app.state.lookup_client is not None:
        logger.info("Closing lookup client")
        await app.state.lookup_client.aclose()


def create_app(client: Optional[LookupClient] = None, prefix: str = "/api") -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        client: Lookup client to serve requests with; built from the
            environment at startup when omitted
        prefix: Path prefix for the provider routes

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    if client is None:
        load_dotenv()

    app = FastAPI(title="Person Lookup API", version=__version__, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    app.state.lookup_client = client
    app.include_router(router, prefix=prefix)

    return app
