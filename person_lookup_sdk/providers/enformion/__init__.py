from .adapter import EnformionProvider

__all__ = ["EnformionProvider"]
