"""
Process configuration for provider credentials.

Settings are read once (usually at process start) and passed explicitly into
the client and adapters. The model is frozen so concurrent lookups can share a
single instance.
"""

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from .constants import DEFAULT_HTTP_TIMEOUT_SECONDS


logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


def _env(environ: Mapping[str, str], name: str) -> Optional[str]:
    value = environ.get(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _timeout(environ: Mapping[str, str]) -> float:
    value = _env(environ, "LOOKUP_HTTP_TIMEOUT_SECONDS")
    if value is None:
        return DEFAULT_HTTP_TIMEOUT_SECONDS
    try:
        timeout = float(value)
    except ValueError:
        timeout = 0.0
    if not timeout > 0:
        logger.warning(
            f"Ignoring LOOKUP_HTTP_TIMEOUT_SECONDS={value!r}, using {DEFAULT_HTTP_TIMEOUT_SECONDS}s"
        )
        return DEFAULT_HTTP_TIMEOUT_SECONDS
    return timeout


class LookupSettings(BaseModel):
    """Read-only credentials and transport settings for all providers."""

    model_config = ConfigDict(frozen=True)

    enformion_api_name: Optional[str] = Field(None, description="ENFORMION_API_NAME")
    enformion_api_password: Optional[str] = Field(None, description="ENFORMION_API_PASSWORD")
    peopledatalabs_api_key: Optional[str] = Field(None, description="PEOPLEDATALABS_API_KEY")
    trestle_api_key: Optional[str] = Field(None, description="TRESTLE_API_KEY")
    trestle_allow_caller_api_key: bool = Field(
        False,
        description="Let a caller-supplied apiKey override TRESTLE_API_KEY",
    )
    twilio_sid: Optional[str] = Field(None, description="TWILIO_SID")
    twilio_token: Optional[str] = Field(None, description="TWILIO_TOKEN")
    http_timeout_seconds: float = Field(
        DEFAULT_HTTP_TIMEOUT_SECONDS,
        gt=0,
        description="Per-request transport timeout in seconds",
    )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LookupSettings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            LookupSettings instance
        """
        environ = os.environ if environ is None else environ

        allow_override = _env(environ, "TRESTLE_ALLOW_CALLER_API_KEY") or ""

        return cls(
            enformion_api_name=_env(environ, "ENFORMION_API_NAME"),
            enformion_api_password=_env(environ, "ENFORMION_API_PASSWORD"),
            peopledatalabs_api_key=_env(environ, "PEOPLEDATALABS_API_KEY"),
            trestle_api_key=_env(environ, "TRESTLE_API_KEY"),
            trestle_allow_caller_api_key=allow_override.lower() in _TRUTHY,
            twilio_sid=_env(environ, "TWILIO_SID"),
            twilio_token=_env(environ, "TWILIO_TOKEN"),
            http_timeout_seconds=_timeout(environ),
        )

    @property
    def has_enformion_credentials(self) -> bool:
        return bool(self.enformion_api_name and self.enformion_api_password)

    @property
    def has_twilio_credentials(self) -> bool:
        return bool(self.twilio_sid and self.twilio_token)
