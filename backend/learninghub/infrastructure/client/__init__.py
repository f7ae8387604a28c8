from .article_api_client import ArticleApiClient, format_tags
from .service_gateway import ServiceArticleGateway

__all__ = [
    "ArticleApiClient",
    "ServiceArticleGateway",
    "format_tags",
]
