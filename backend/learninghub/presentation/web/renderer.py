"""HTML rendering of the public views using Jinja2 templates."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from learninghub.presentation.views import ArticleDetailView, ArticleListView, Toast

_TEMPLATES_DIR = Path(__file__).parent / "templates"


class PageRenderer:
    """Renders view models to HTML. Autoescaping is on except where a
    template opts out explicitly (article content)."""

    def __init__(self, app_title: str = "Learning Hub"):
        self._env = Environment(
            loader=FileSystemLoader(str(_TEMPLATES_DIR)),
            autoescape=select_autoescape(["html"]),
        )
        self._app_title = app_title

    def render_list(self, view: ArticleListView, toasts: list[Toast]) -> str:
        template = self._env.get_template("article_list.html")
        return template.render(view=view, toasts=toasts, app_title=self._app_title)

    def render_detail(self, view: ArticleDetailView, toasts: list[Toast]) -> str:
        template = self._env.get_template("article_detail.html")
        return template.render(
            view=view,
            article=view.article,
            toasts=toasts,
            app_title=self._app_title,
        )
