"""
Phone number canonicalization.

Providers disagree about phone formats: some want bare 10-digit US national
numbers, others want E.164. Every helper here returns either a fully
canonical value or None, never a partially cleaned string, and each is
idempotent on its own output.
"""

import re
from typing import Optional

_NON_DIGITS = re.compile(r"\D")

# E.164 allows at most 15 digits after the "+"
E164_MIN_DIGITS = 8
E164_MAX_DIGITS = 15
NATIONAL_DIGITS = 10


def strip_phone(raw: Optional[str], keep_plus: bool = False) -> str:
    """
    Remove every non-digit character.

    Args:
        raw: Phone value as supplied by the caller
        keep_plus: Preserve a leading "+" when the input explicitly starts with one

    Returns:
        Digits (optionally "+"-prefixed); empty string when nothing remains
    """
    if raw is None:
        return ""
    text = str(raw).strip()
    digits = _NON_DIGITS.sub("", text)
    if keep_plus and text.startswith("+") and digits:
        return f"+{digits}"
    return digits


def has_explicit_plus(raw: Optional[str]) -> bool:
    return raw is not None and str(raw).strip().startswith("+")


def to_national(raw: Optional[str]) -> Optional[str]:
    """Return the 10-digit US national number, or None when not representable."""
    digits = strip_phone(raw)
    if len(digits) == NATIONAL_DIGITS + 1 and digits.startswith("1"):
        digits = digits[1:]
    if len(digits) == NATIONAL_DIGITS:
        return digits
    return None


def to_e164(raw: Optional[str]) -> Optional[str]:
    """
    Return an E.164 number, or None when the input cannot be interpreted.

    An explicit "+" is trusted when the digit count is a plausible
    international length; otherwise US numbers (10 digits, or 11 with a
    leading 1) are prefixed with the country code.
    """
    digits = strip_phone(raw)
    if not digits:
        return None
    if has_explicit_plus(raw):
        if E164_MIN_DIGITS <= len(digits) <= E164_MAX_DIGITS:
            return f"+{digits}"
        return None
    if len(digits) == NATIONAL_DIGITS:
        return f"+1{digits}"
    if len(digits) == NATIONAL_DIGITS + 1 and digits.startswith("1"):
        return f"+{digits}"
    return None


def to_e164_passthrough(raw: Optional[str]) -> Optional[str]:
    """
    Carrier-lookup rule: like to_e164, but any other digit run is passed
    through with a "+" prefix and left for the upstream to judge.
    """
    digits = strip_phone(raw)
    if not digits:
        return None
    if not has_explicit_plus(raw):
        if len(digits) == NATIONAL_DIGITS:
            return f"+1{digits}"
    return f"+{digits}"
