"""Rendering of article content trees to HTML.

Contains:
- options: RenderConfig behavior flags
- renderer: pure mdast -> HTML renderer (fragment + page)
"""
