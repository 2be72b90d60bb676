"""Observability layer.

This layer handles structured logging for provider adapters.
"""

from .logging import LookupTrace, ProviderLogger

__all__ = ["LookupTrace", "ProviderLogger"]
