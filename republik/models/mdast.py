"""
Wire models for article content (mdast, as served by the Republik API).

Based on https://github.com/syntax-tree/mdast with the additions Republik
uses (``sub``, ``sup``, ``span``, ``zone``) and without the node types we do
not read.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, List, Optional

from pydantic import BeforeValidator, Field

from ._base import RepublikModel
from .document import DocumentMeta


class NodeKind(str, Enum):
    BLOCKQUOTE = "blockquote"
    BREAK = "break"
    CODE = "code"
    DEFINITION = "definition"
    EMPHASIS = "emphasis"
    HEADING = "heading"
    HTML = "html"
    IMAGE = "image"
    IMAGE_REFERENCE = "imagereference"
    INLINE_CODE = "inlinecode"
    LINK = "link"
    LINK_REFERENCE = "linkreference"
    LIST = "list"
    LIST_ITEM = "listItem"
    PARAGRAPH = "paragraph"
    ROOT = "root"
    SUB = "sub"
    SUP = "sup"
    STRONG = "strong"
    SPAN = "span"
    TEXT = "text"
    THEMATIC_BREAK = "thematicBreak"
    ZONE = "zone"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["NodeKind"]:
        """Return the member for ``value`` or None for unknown types."""
        try:
            return cls(value)
        except ValueError:
            return None


class Identifier(str, Enum):
    """Identifiers that override kind-based rendering."""

    FIGURE = "FIGURE"
    TITLE = "TITLE"
    CENTER = "CENTER"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["Identifier"]:
        if not value:
            return None
        try:
            return cls(value)
        except ValueError:
            return None


def _none_to_list(v):
    return [] if v is None else v


def _none_to_str(v):
    return "" if v is None else v


# The API sends explicit nulls for absent scalars; keep strings as "" so the
# renderer can interpolate them without checks.
_Str = Annotated[str, BeforeValidator(_none_to_str)]


class MdAstNode(RepublikModel):
    type: _Str = ""
    identifier: _Str = ""
    children: Annotated[List["MdAstNode"], BeforeValidator(_none_to_list)] = Field(
        default_factory=list
    )
    depth: Optional[int] = None
    value: _Str = ""
    alt: _Str = ""
    title: _Str = ""
    url: _Str = ""
    code: _Str = ""
    lang: _Str = ""
    label: _Str = ""
    ordered: Optional[bool] = False

    @property
    def kind(self) -> Optional[NodeKind]:
        return NodeKind.parse(self.type)

    @property
    def override(self) -> Optional[Identifier]:
        return Identifier.parse(self.identifier)


MdAstNode.model_rebuild()


class Article(RepublikModel):
    type: _Str = ""
    id: _Str = ""
    repo_id: _Str = ""
    content: MdAstNode = Field(default_factory=lambda: MdAstNode(type="root"))
    meta: Optional[DocumentMeta] = None

    @property
    def title(self) -> Optional[str]:
        return self.meta.title if self.meta else None


class ArticleResponse(RepublikModel):
    """Top-level ``data`` of the getDocument query."""

    article: Optional[Article] = None
