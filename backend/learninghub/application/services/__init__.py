from .article_pipeline import ArticleWritePipeline
from .article_service import ArticleService

__all__ = [
    "ArticleService",
    "ArticleWritePipeline",
]
