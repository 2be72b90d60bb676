"""
Decoding of identity-lookup request bodies.

Callers send the POST body as a decoded mapping, raw bytes or text. Text is
parsed as JSON first; when that fails, a last-resort pattern decoder pulls a
phone-like digit run and an ``action`` keyword out of the raw string. The
pattern decoder is heuristic and can misfire on adversarial input. A body with
nothing usable decodes to ``{}`` so that validation reports the missing phone.
"""

import json
import logging
import re
from typing import Any, Dict, Mapping, Union

logger = logging.getLogger(__name__)

PHONE_PATTERN = re.compile(r"(\+?1?\d{10})|\d{10}")
ACTION_PATTERNS = (
    re.compile(r'"action"\s*[:=]\s*"?(\w+)"?', re.IGNORECASE),
    re.compile(r"action\s*[:=]\s*'?(\w+)'?", re.IGNORECASE),
)
_NOT_PHONE_CHARS = re.compile(r"[^\d+]")

RawBody = Union[Mapping[str, Any], bytes, str, None]


def extract_fields(raw: str) -> Dict[str, str]:
    """Best-effort extraction of ``phone`` and ``action`` from undecodable text."""
    extracted: Dict[str, str] = {}

    phone_match = PHONE_PATTERN.search(raw)
    if phone_match:
        extracted["phone"] = _NOT_PHONE_CHARS.sub("", phone_match.group(0))

    for pattern in ACTION_PATTERNS:
        action_match = pattern.search(raw)
        if action_match:
            extracted["action"] = action_match.group(1)
            break

    return extracted


def decode_request_body(raw: RawBody) -> Dict[str, Any]:
    """
    Turn a POST body into a mapping of request fields.

    Args:
        raw: Decoded mapping, raw bytes or text

    Returns:
        Field mapping; empty when the body carries nothing usable
    """
    if raw is None:
        return {}
    if isinstance(raw, Mapping):
        return dict(raw)
    if isinstance(raw, (bytes, bytearray)):
        raw = bytes(raw).decode("utf-8", errors="replace")

    text = str(raw)
    if not text.strip():
        return {}

    try:
        decoded = json.loads(text)
    except ValueError:
        logger.warning("Request body is not JSON, falling back to pattern extraction")
        return extract_fields(text)

    if isinstance(decoded, dict):
        return decoded
    if isinstance(decoded, str):
        # Double-encoded JSON string
        return decode_request_body(decoded)
    return {}
