"""
Public API Layer

This layer contains the public-facing API of the Person Lookup SDK.
All user-facing classes and functions should be exposed through this layer.
"""

from .client import LookupClient, lookup

__all__ = ["LookupClient", "lookup"]
