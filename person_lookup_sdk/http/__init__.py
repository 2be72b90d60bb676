"""HTTP API layer for Person Lookup SDK.

This module provides FastAPI integration for the SDK: one route per provider,
each answering with the canonical envelope and an HTTP status equal to the
envelope ``status``.
"""

from .api import router
from .app import create_app

__all__ = ["router", "create_app"]
