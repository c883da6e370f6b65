# src/markup_kit/rendering/__init__.py

"""Markdown rendering and the HTML sanitization boundary.

Renderer output is never safe on its own: only `SanitizedHtml`, the
return type of `sanitize_html`, may reach a raw-markup view.
"""

from .markdown import (
    MarkdownRenderer,
    build_markdown_parser,
    has_markdown_formatting,
    parse_markdown,
    strip_html,
)
from .sanitizer import SanitizedHtml, sanitize_html

__all__ = [
    # Rendering
    "MarkdownRenderer",
    "build_markdown_parser",
    "parse_markdown",
    # Sanitization
    "SanitizedHtml",
    "sanitize_html",
    # Helpers
    "has_markdown_formatting",
    "strip_html",
]
