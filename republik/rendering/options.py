"""
Render configuration for article HTML output.

Centralizes behavior flags so callers can tune output without touching the
renderer itself.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderConfig:
    # Logging/debug
    debug: bool = False

    # Thematic breaks have no children in mdast, but earlier output rendered
    # any it was given after the <hr/>. Keep that unless told otherwise.
    render_thematic_break_children: bool = True
