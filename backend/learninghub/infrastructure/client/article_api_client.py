"""Article API client — implements the ArticleGateway port over HTTP.

Talks to the ``/api/v1/articles`` endpoints using httpx. Credentials are
passed explicitly to each call; nothing is read from global state.
"""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from learninghub.application.interfaces import ArticleGateway, Credentials
from learninghub.domain.exceptions import (
    ApiTransportError,
    DuplicateEntityError,
    EntityNotFoundError,
    EntityValidationError,
)

logger = logging.getLogger(__name__)


def format_tags(tags: list[str] | str | None) -> list[str]:
    """Accept a list or a comma-separated string and return a list of tags."""
    if isinstance(tags, list):
        return tags
    if isinstance(tags, str) and tags.strip():
        return [tag.strip() for tag in tags.split(",")]
    return []


def _segment(value: str) -> str:
    """Percent-encode one path segment, including any slash, ? or #."""
    return quote(value, safe="")


class ArticleApiClient(ArticleGateway):
    """Infrastructure adapter — connects to the article REST API."""

    def __init__(self, base_url: str, http_client: httpx.AsyncClient | None = None):
        self._base_url = base_url.rstrip("/")
        self._http_client = http_client

    @property
    def base_url(self) -> str:
        return self._base_url

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        credentials: Credentials | None = None,
        json: dict[str, Any] | None = None,
        resource: str = "",
    ) -> httpx.Response:
        url = f"{self._base_url}/articles{path}"
        headers = credentials.as_headers() if credentials else {}

        client = await self._get_client()
        should_close = self._http_client is None

        try:
            response = await client.request(method, url, headers=headers, json=json)
        except httpx.HTTPError as exc:
            logger.warning("Article API unreachable: %s %s (%s)", method, url, exc)
            raise ApiTransportError(f"{method} {url} failed: {exc}") from exc
        finally:
            if should_close:
                await client.aclose()

        if response.is_success:
            return response
        self._raise_for_status(response, resource)

    @staticmethod
    def _raise_for_status(response: httpx.Response, resource: str) -> None:
        """Translate an error response into the matching domain exception."""
        try:
            detail = response.json().get("detail", response.text)
        except (ValueError, AttributeError):
            detail = response.text

        status = response.status_code
        if status == 404:
            raise EntityNotFoundError("Article", resource)
        if status == 409:
            if isinstance(detail, dict):
                raise DuplicateEntityError(
                    "Article", detail.get("field", "slug"), str(detail.get("value", ""))
                )
            raise DuplicateEntityError("Article", "slug", resource)
        if status == 422:
            if isinstance(detail, list):
                errors = {
                    ".".join(str(p) for p in item.get("loc", [])[1:]) or "body": item.get("msg", "")
                    for item in detail
                }
            else:
                errors = {"body": str(detail)}
            raise EntityValidationError("Article", errors)
        raise ApiTransportError(str(detail), status_code=status)

    async def list_articles(self, credentials: Credentials | None = None) -> list[dict[str, Any]]:
        response = await self._request("GET", "", credentials=credentials)
        return response.json()

    async def get_article_by_slug(
        self, slug: str, credentials: Credentials | None = None
    ) -> dict[str, Any]:
        response = await self._request(
            "GET", f"/slug/{_segment(slug)}", credentials=credentials, resource=slug
        )
        return response.json()

    async def get_article(
        self, article_id: str, credentials: Credentials | None = None
    ) -> dict[str, Any]:
        response = await self._request(
            "GET", f"/{_segment(article_id)}", credentials=credentials, resource=article_id
        )
        return response.json()

    async def create_article(
        self, fields: dict[str, Any], credentials: Credentials
    ) -> dict[str, Any]:
        response = await self._request("POST", "", credentials=credentials, json=fields)
        return response.json()

    async def update_article(
        self, article_id: str, fields: dict[str, Any], credentials: Credentials
    ) -> dict[str, Any]:
        response = await self._request(
            "PUT",
            f"/{_segment(article_id)}",
            credentials=credentials,
            json=fields,
            resource=article_id,
        )
        return response.json()

    async def delete_article(self, article_id: str, credentials: Credentials) -> None:
        await self._request(
            "DELETE", f"/{_segment(article_id)}", credentials=credentials, resource=article_id
        )
