from .adapter import PeopleDataLabsProvider

__all__ = ["PeopleDataLabsProvider"]
