"""
Structured logging for lookup adapters.

Every line carries a bracketed ``key=value`` prefix with the provider, the
mode and the request id, so one lookup can be followed from validation to the
upstream answer. Credentials never reach this module: adapters log redacted
headers and bounded body previews only.
"""

import logging
import time
import uuid
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator, Optional

from ..config.constants import LOG_PREVIEW_CHARS

if TYPE_CHECKING:
    from ..models.envelope import CanonicalResult


class LookupTrace:
    """Per-lookup record filled in by the adapter while the lookup runs."""

    def __init__(self, mode: str, request_id: Optional[str] = None):
        self.mode = mode
        self.request_id = request_id or uuid.uuid4().hex[:8]
        self.started = time.monotonic()
        self.result: Optional["CanonicalResult"] = None

    @property
    def duration_ms(self) -> int:
        return int((time.monotonic() - self.started) * 1000)

    @property
    def outcome(self) -> str:
        """``ok``, or the canonical error type of the finished lookup."""
        if self.result is None:
            return "unknown"
        return self.result.error.type if self.result.error else "ok"


class ProviderLogger:
    """Logger bound to one provider, emitting ``[provider=... mode=...]`` prefixed lines."""

    def __init__(self, provider_name: str):
        self.provider = provider_name
        self.logger = logging.getLogger(f"person_lookup_sdk.providers.{provider_name}")

    def _format_message(self, message: str, **fields) -> str:
        parts = [f"provider={self.provider}"]
        parts.extend(f"{key}={value}" for key, value in fields.items() if value is not None)
        return f"[{' '.join(parts)}] {message}"

    def log(self, level: int, message: str, mode: Optional[str] = None,
            request_id: Optional[str] = None, **fields):
        if self.logger.isEnabledFor(level):
            self.logger.log(level, self._format_message(message, mode=mode, request_id=request_id, **fields))

    def debug(self, message: str, mode: Optional[str] = None,
              request_id: Optional[str] = None, **fields):
        self.log(logging.DEBUG, message, mode, request_id, **fields)

    def warning(self, message: str, mode: Optional[str] = None,
                request_id: Optional[str] = None, **fields):
        self.log(logging.WARNING, message, mode, request_id, **fields)

    @contextmanager
    def track_lookup(self, mode: str, request_id: Optional[str] = None) -> Iterator[LookupTrace]:
        """
        Time one lookup and log how it ended.

        The adapter stores its envelope on ``trace.result``. 5xx outcomes are
        logged as warnings, everything else at INFO. An exception escaping the
        block is logged with its type and re-raised.
        """
        trace = LookupTrace(mode, request_id)
        self.debug("Lookup started", mode=mode, request_id=trace.request_id)
        try:
            yield trace
        except Exception as e:
            self.log(
                logging.ERROR,
                "Lookup failed",
                mode=mode,
                request_id=trace.request_id,
                exception=type(e).__name__,
                duration_ms=trace.duration_ms,
            )
            raise

        status = trace.result.status if trace.result is not None else None
        level = logging.WARNING if status is not None and status >= 500 else logging.INFO
        self.log(
            level,
            "Lookup finished",
            mode=mode,
            request_id=trace.request_id,
            status=status,
            outcome=trace.outcome,
            duration_ms=trace.duration_ms,
        )

    def log_upstream(self, status_code: int, body: str, mode: str,
                     request_id: Optional[str] = None):
        """Upstream status with a bounded preview of the raw body."""
        body = body or ""
        self.debug(
            f"Upstream answered: {body[:LOG_PREVIEW_CHARS]!r}",
            mode=mode,
            request_id=request_id,
            status=status_code,
            body_chars=len(body),
        )
