"""Public exports for the Republik data models."""

from __future__ import annotations

from .document import (
    AudioCoverCrop,
    AudioSource,
    Document,
    DocumentMeta,
    Format,
    FormatMeta,
    SearchResponse,
)
from .mdast import Article, ArticleResponse, Identifier, MdAstNode, NodeKind

__all__ = [
    "Article",
    "ArticleResponse",
    "AudioCoverCrop",
    "AudioSource",
    "Document",
    "DocumentMeta",
    "Format",
    "FormatMeta",
    "Identifier",
    "MdAstNode",
    "NodeKind",
    "SearchResponse",
]
