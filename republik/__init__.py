"""Republik content API client and article HTML renderer."""

from .api import FETCH_FAILED_HTML, ClientConfig, DocumentFilter, RepublikClient
from .exceptions import (
    QueryResourceError,
    RemoteAuthError,
    RemoteQueryError,
    RepublikError,
)
from .models import Article, ArticleResponse, Document, MdAstNode
from .rendering.options import RenderConfig
from .rendering.renderer import ArticleRenderer, render_article, render_node

__all__ = [
    "Article",
    "ArticleRenderer",
    "ArticleResponse",
    "ClientConfig",
    "Document",
    "DocumentFilter",
    "FETCH_FAILED_HTML",
    "MdAstNode",
    "QueryResourceError",
    "RemoteAuthError",
    "RemoteQueryError",
    "RenderConfig",
    "RepublikClient",
    "RepublikError",
    "render_article",
    "render_node",
]
