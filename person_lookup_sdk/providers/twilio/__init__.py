from .adapter import TwilioProvider
from .body import decode_request_body

__all__ = ["TwilioProvider", "decode_request_body"]
