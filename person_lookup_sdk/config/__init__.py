"""Configuration for provider credentials and upstream endpoints."""

from .settings import LookupSettings

__all__ = ["LookupSettings"]
