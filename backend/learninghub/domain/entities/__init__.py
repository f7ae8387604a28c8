from .article import Article, Library
from .principal import AdminPrincipal

__all__ = [
    "AdminPrincipal",
    "Article",
    "Library",
]
