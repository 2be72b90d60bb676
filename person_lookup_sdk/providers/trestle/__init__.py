from .adapter import TrestleProvider

__all__ = ["TrestleProvider"]
