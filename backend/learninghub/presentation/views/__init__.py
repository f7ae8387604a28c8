from .admin_view import AdminArticlesView, DialogState
from .common import FALLBACK_GRADIENT, GRADIENTS, Notifier, Toast, ViewState, theme_for
from .detail_view import ArticleDetail, ArticleDetailView, LibraryCard
from .list_view import ArticleListView, ArticleTile

__all__ = [
    "AdminArticlesView",
    "ArticleDetail",
    "ArticleDetailView",
    "ArticleListView",
    "ArticleTile",
    "DialogState",
    "FALLBACK_GRADIENT",
    "GRADIENTS",
    "LibraryCard",
    "Notifier",
    "Toast",
    "ViewState",
    "theme_for",
]
