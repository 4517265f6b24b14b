"""
Pure renderer for Republik article content (mdast).

Converts an article's content tree into HTML. No I/O.

Dispatch is two-staged: a node whose identifier is one of the override
identifiers (``FIGURE``, ``TITLE``, ``CENTER``) is rendered by the identifier
table and its type is ignored; every other node goes through the kind table.
Types missing from the kind table render a visible error marker followed by
their children, so content is never dropped silently.

Text, URLs and attributes are emitted as-is. The source content is trusted
and no escaping is applied. ``html`` nodes are never passed through.
"""

from __future__ import annotations

import html
import logging
from typing import Callable, Dict, Optional

from ..models.mdast import Article, Identifier, MdAstNode, NodeKind
from .options import RenderConfig

LOGGER = logging.getLogger(__name__)

_Rule = Callable[["ArticleRenderer", MdAstNode], str]

MIN_HEADING_DEPTH = 1
MAX_HEADING_DEPTH = 6


def _wrap(tag: str) -> _Rule:
    def rule(r: "ArticleRenderer", node: MdAstNode) -> str:
        return f"<{tag}> {r.render_children(node)} </{tag}>"

    return rule


def _container(css_class: str) -> _Rule:
    def rule(r: "ArticleRenderer", node: MdAstNode) -> str:
        return f'<div class="{css_class}"> {r.render_children(node)} </div>'

    return rule


def _break(r: "ArticleRenderer", node: MdAstNode) -> str:
    return "<br>"


def _code(r: "ArticleRenderer", node: MdAstNode) -> str:
    return f"<pre><code> {r.render_children(node)} </code></pre>"


def _heading(r: "ArticleRenderer", node: MdAstNode) -> str:
    depth = node.depth
    if depth is None or not MIN_HEADING_DEPTH <= depth <= MAX_HEADING_DEPTH:
        LOGGER.warning(
            "Heading depth %s not in range %d-%d, rendering as h%d",
            depth,
            MIN_HEADING_DEPTH,
            MAX_HEADING_DEPTH,
            MIN_HEADING_DEPTH,
        )
        depth = MIN_HEADING_DEPTH
    return f"<h{depth}> {r.render_children(node)} </h{depth}>"


def _image(r: "ArticleRenderer", node: MdAstNode) -> str:
    return f'<img title="{node.title}" alt="{node.alt}" src="{node.url}" />'


def _link(r: "ArticleRenderer", node: MdAstNode) -> str:
    # TODO: rewrite relative hrefs (e.g. "/2024/01/01/slug") against the site root
    return f'<a href="{node.url}"> {r.render_children(node)} </a>'


def _list(r: "ArticleRenderer", node: MdAstNode) -> str:
    tag = "ol" if node.ordered else "ul"
    return f"<{tag}> {r.render_children(node)} </{tag}>"


def _text(r: "ArticleRenderer", node: MdAstNode) -> str:
    return node.value


def _zone(r: "ArticleRenderer", node: MdAstNode) -> str:
    return f'<div class="{node.identifier}">{r.render_children(node)}</div>'


def _thematic_break(r: "ArticleRenderer", node: MdAstNode) -> str:
    if not r.config.render_thematic_break_children:
        if node.children:
            LOGGER.debug(
                "Dropping %d children of thematic break", len(node.children)
            )
        return "<hr/>"
    return f"<hr/> {r.render_children(node)}"


def _unsupported(r: "ArticleRenderer", node: MdAstNode) -> str:
    LOGGER.warning("Unsupported element: %s", node.type)
    return (
        f'<div class="error">Unsupported element: {node.type} </div> '
        f"{r.render_children(node)}"
    )


_IDENTIFIER_RULES: Dict[Identifier, _Rule] = {
    Identifier.CENTER: _container("center"),
    Identifier.FIGURE: _container("figure"),
    Identifier.TITLE: _container("title"),
}

# definition, html, imagereference, linkreference and root are known types
# without a rule; they take the unsupported path.
_KIND_RULES: Dict[NodeKind, _Rule] = {
    NodeKind.BLOCKQUOTE: _wrap("blockquote"),
    NodeKind.BREAK: _break,
    NodeKind.CODE: _code,
    NodeKind.EMPHASIS: _wrap("em"),
    NodeKind.HEADING: _heading,
    NodeKind.IMAGE: _image,
    NodeKind.INLINE_CODE: _wrap("code"),
    NodeKind.LINK: _link,
    NodeKind.LIST: _list,
    NodeKind.LIST_ITEM: _wrap("li"),
    NodeKind.PARAGRAPH: _wrap("p"),
    NodeKind.STRONG: _wrap("strong"),
    NodeKind.SUB: _wrap("sub"),
    NodeKind.SUP: _wrap("sup"),
    NodeKind.SPAN: _wrap("span"),
    NodeKind.TEXT: _text,
    NodeKind.ZONE: _zone,
    NodeKind.THEMATIC_BREAK: _thematic_break,
}


def _rule_for(node: MdAstNode) -> _Rule:
    override = node.override
    if override is not None:
        return _IDENTIFIER_RULES[override]
    kind = node.kind
    if kind is None:
        return _unsupported
    return _KIND_RULES.get(kind, _unsupported)


class ArticleRenderer:
    """Class-based interface for article rendering.

    Holds only configuration; instances can be shared and reused.
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        self.config = config or RenderConfig()

    def render_node(self, node: MdAstNode) -> str:
        """Render one node and its subtree."""
        if self.config.debug:
            LOGGER.debug(
                "render type=%s identifier=%s children=%d",
                node.type,
                node.identifier,
                len(node.children),
            )
        return _rule_for(node)(self, node)

    def render_children(self, node: MdAstNode) -> str:
        """Render each child in order, each followed by a newline."""
        return "".join(self.render_node(child) + "\n" for child in node.children)

    def render(self, article: Article) -> str:
        """Render the article body wrapped in the article container."""
        return f'<div class="article"> {self.render_children(article.content)} </div>'

    def render_full_page(self, title: str, html_fragment: str) -> str:
        """Wrap an HTML fragment in a full page with CSS."""
        return render_article_page(title, html_fragment)


def render_node(node: MdAstNode, config: Optional[RenderConfig] = None) -> str:
    return ArticleRenderer(config).render_node(node)


def render_article(article: Article, config: Optional[RenderConfig] = None) -> str:
    return ArticleRenderer(config).render(article)


def render_article_page(title: str, html_fragment: str, extra_css: str = "") -> str:
    return (
        '<!doctype html><meta charset="utf-8">'
        '<meta name="color-scheme" content="light dark">'
        f"<title>{html.escape(title)}</title>"
        "<style>"
        "body{font-family:Georgia,serif;line-height:1.5;max-width:40em;margin:2em auto;padding:0 1em;background:#fff;color:#000}"
        "pre{white-space:pre-wrap}"
        "blockquote{margin:.5em 0 .5em 1em;padding-left:.8em;border-left:3px solid #ddd}"
        "img{max-width:100%;height:auto}"
        ".title{font-size:1.2em}"
        ".center{text-align:center}"
        ".figure{margin:1em 0}"
        ".error{color:#b00;font-family:monospace}"
        "@media (prefers-color-scheme: dark){"
        "body{background:#111;color:#eee}"
        "a{color:#8ab4f8}"
        "blockquote{border-left-color:#444}"
        "pre{background:#1b1b1b;color:#eee}"
        "}"
        f"{extra_css}</style>{html_fragment}"
    )
