from .phone import strip_phone, to_e164, to_e164_passthrough, to_national
from .responses import (
    embedded_error_message,
    embedded_error_type,
    undecodable_result,
    upstream_error_result,
)
from .values import parse_int

__all__ = [
    "strip_phone",
    "to_national",
    "to_e164",
    "to_e164_passthrough",
    "embedded_error_message",
    "embedded_error_type",
    "upstream_error_result",
    "undecodable_result",
    "parse_int",
]
