"""
Core normalization layer.

Provider-independent building blocks used by every adapter:
- Phone canonicalization (national and E.164 forms)
- Shared response shaping (embedded error extraction, error envelopes)
- Lenient integer parsing for paging and size parameters
"""
