from .article import ArticleCreate, ArticleUpdate, ArticleResponse, LibrarySchema

__all__ = [
    "ArticleCreate",
    "ArticleUpdate",
    "ArticleResponse",
    "LibrarySchema",
]
