"""
High-level Republik API client.

Public API:
  - RepublikClient.fetch(filter=None, limit=20) -> List[Document]
  - RepublikClient.fetch_article(path) -> ArticleResponse
  - RepublikClient.get_article_html(path, fallback=None) -> str

Returns typed models from republik.models and hides GraphQL details.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import requests
from pydantic import ValidationError

from ..exceptions import RemoteQueryError
from ..models import ArticleResponse, Document, SearchResponse
from ..rendering.options import RenderConfig
from ..rendering.renderer import ArticleRenderer
from .config import ClientConfig
from .filters import DocumentFilter
from .queries import load_document_query, search_query
from .transport import _GraphQLTransport

LOGGER = logging.getLogger(__name__)

FETCH_FAILED_HTML = "<p>Fetching article failed </p>"


class RepublikClient:
    """Wrapper around the Republik GraphQL API."""

    def __init__(
        self,
        sid: str = "",
        *,
        session: Optional[requests.Session] = None,
        config: Optional[ClientConfig] = None,
        render_config: Optional[RenderConfig] = None,
    ):
        self._http = _GraphQLTransport(sid, session=session, config=config)
        self._document_query = load_document_query()
        self._renderer = ArticleRenderer(render_config)
        LOGGER.info("RepublikClient initialized.")

    # ----- Search -----

    def fetch(
        self, filter: Optional[DocumentFilter] = None, limit: int = 20
    ) -> List[Document]:
        """Newest documents first, excluding section, format and front pages."""
        if limit <= 0:
            return []
        LOGGER.info("Fetching up to %d documents %s", limit, filter or "")
        data = self._http.run(search_query(filter), {"limit": limit})
        try:
            resp = SearchResponse.model_validate(data)
        except ValidationError as e:
            LOGGER.error("Search response validation failed: %s", e)
            raise RemoteQueryError("Search response validation failed", payload=data)
        documents = resp.entities()
        LOGGER.info("Search returned %d documents.", len(documents))
        return documents

    # ----- Single document -----

    def fetch_article(self, path: str) -> ArticleResponse:
        """Fetch the article at ``path`` including its content and metadata."""
        LOGGER.info("Fetching article %s", path)
        data = self._http.run(self._document_query, {"path": path})
        try:
            resp = ArticleResponse.model_validate(data)
        except ValidationError as e:
            LOGGER.error("Article response validation failed: %s", e)
            raise RemoteQueryError("Article response validation failed", payload=data)
        if resp.article is None:
            raise RemoteQueryError(f"No article at {path}", payload=data)
        return resp

    def get_article_html(self, path: str, fallback: Optional[str] = None) -> str:
        """Return the article at ``path`` as HTML.

        Fetch failures raise RemoteQueryError, unless ``fallback`` is given, in
        which case the error is logged and ``fallback`` returned instead.
        """
        try:
            resp = self.fetch_article(path)
        except RemoteQueryError as e:
            if fallback is None:
                raise
            LOGGER.error("Fetching article %s failed with error %s", path, e)
            return fallback
        return self._renderer.render(resp.article)

    @property
    def renderer(self) -> ArticleRenderer:
        return self._renderer
