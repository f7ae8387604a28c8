from .article_gateway import ArticleGateway, Credentials
from .article_repository import ArticleRepository

__all__ = [
    "ArticleGateway",
    "ArticleRepository",
    "Credentials",
]
