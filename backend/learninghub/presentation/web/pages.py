"""Server-rendered public pages: article list and article detail."""

from functools import lru_cache

from fastapi import APIRouter, Depends, status
from fastapi.responses import HTMLResponse

from learninghub.config import get_settings
from learninghub.infrastructure.client import ServiceArticleGateway
from learninghub.infrastructure.dependencies import get_article_gateway
from learninghub.presentation.views import ArticleDetailView, ArticleListView, Notifier, ViewState
from learninghub.presentation.web.renderer import PageRenderer

router = APIRouter(tags=["Pages"], include_in_schema=False)


@lru_cache
def get_renderer() -> PageRenderer:
    return PageRenderer(app_title=get_settings().app_title)


@router.get("/languages", response_class=HTMLResponse)
async def article_list_page(
    gateway: ServiceArticleGateway = Depends(get_article_gateway),
    renderer: PageRenderer = Depends(get_renderer),
) -> HTMLResponse:
    """List every article as a themed tile."""
    notifier = Notifier()
    view = ArticleListView(gateway, notifier)
    await view.load()
    return HTMLResponse(renderer.render_list(view, notifier.drain()))


@router.get("/languages/{slug}", response_class=HTMLResponse)
async def article_detail_page(
    slug: str,
    gateway: ServiceArticleGateway = Depends(get_article_gateway),
    renderer: PageRenderer = Depends(get_renderer),
) -> HTMLResponse:
    """Show one article; unknown slugs render the not-found page with a 404."""
    notifier = Notifier()
    view = ArticleDetailView(slug, gateway, notifier)
    await view.load()
    status_code = status.HTTP_200_OK
    if view.state is ViewState.NOT_FOUND:
        status_code = status.HTTP_404_NOT_FOUND
    elif view.state is ViewState.FAILED:
        status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return HTMLResponse(renderer.render_detail(view, notifier.drain()), status_code=status_code)
