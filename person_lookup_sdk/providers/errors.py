"""
Error mapping utilities for provider adapters.

This module provides consistent error mapping across all providers,
converting transport exceptions to standardized ProviderError instances.
"""

from typing import Any, Dict

import httpx

from .base import ProviderError, UpstreamError


class ErrorMapper:
    """Maps transport errors to standardized ProviderError."""

    @staticmethod
    def map_transport_error(error: Exception, provider: str) -> UpstreamError:
        """
        Map an httpx transport exception to UpstreamError.

        Args:
            error: The exception raised while calling the upstream
            provider: Provider name

        Returns:
            UpstreamError with a caller-readable message
        """
        if isinstance(error, httpx.TimeoutException):
            message = f"{provider} request timed out"
        elif isinstance(error, httpx.ConnectError):
            message = f"Could not connect to {provider}: {error}"
        else:
            message = f"{provider} request failed: {error}"

        upstream_error = UpstreamError(message=message, provider=provider)
        upstream_error.original_error = error
        return upstream_error

    @staticmethod
    def get_error_classification(error: ProviderError) -> Dict[str, Any]:
        """
        Get error classification for logging.

        Args:
            error: The ProviderError to classify

        Returns:
            Dict with error classification details
        """
        return {
            'provider': error.provider,
            'status_code': error.status_code,
            'error_type': error.error_type.value,
            'upstream_status': error.upstream_status,
            'original_error': type(error.original_error).__name__ if error.original_error else None,
            'category': ErrorMapper._categorize_error(error),
        }

    @staticmethod
    def _categorize_error(error: ProviderError) -> str:
        """Categorize error for log aggregation."""
        if error.status_code < 500:
            return 'client_error'
        if isinstance(error.original_error, httpx.TimeoutException):
            return 'timeout'
        if isinstance(error.original_error, httpx.TransportError):
            return 'network'
        return 'server_error'
