# rendering/markdown.py

import logging
import re
from collections.abc import Sequence
from functools import lru_cache

from markdown_it import MarkdownIt
from markdown_it.renderer import RendererHTML
from markdown_it.token import Token
from markdown_it.utils import EnvType, OptionsDict
from mdit_py_plugins.tasklists import tasklists_plugin

from markup_kit.config import DEFAULT_CONFIG, MarkupConfig

from .sanitizer import SanitizedHtml, sanitize_html

logger = logging.getLogger(__name__)

_TAG = re.compile(r"<[^>]*>")

_MARKDOWN_PATTERNS = (
    re.compile(r"\*\*.*?\*\*"),  # bold
    re.compile(r"\*.*?\*"),  # italic
    re.compile(r"`.*?`"),  # inline code
    re.compile(r"^#{1,6}\s"),  # headers
    re.compile(r"^\s*[-*+]\s"),  # lists
    re.compile(r"^\s*\d+\.\s"),  # numbered lists
    re.compile(r"\[.*?\]\(.*?\)"),  # links
    re.compile(r"```[\s\S]*?```"),  # code blocks
    re.compile(r"^>\s"),  # blockquotes
)


def _render_link_open(
    self: RendererHTML,
    tokens: Sequence[Token],
    idx: int,
    options: OptionsDict,
    env: EnvType,
) -> str:
    # Every link opens in a new tab without leaking the opener or referrer,
    # whatever the author wrote. `title` stays as part of the token attrs.
    token = tokens[idx]
    token.attrSet("target", "_blank")
    token.attrSet("rel", "noopener noreferrer")
    return self.renderToken(tokens, idx, options, env)


@lru_cache(maxsize=None)
def build_markdown_parser(linkify: bool = True) -> MarkdownIt:
    """
    GFM-like parser: tables, strikethrough, autolinks and task lists.

    Single newlines stay soft breaks so a mention spliced between two
    markdown chunks is not pushed onto its own line. The instance is
    shared; rendering does not mutate it.
    """
    md = MarkdownIt("gfm-like", {"breaks": False, "linkify": linkify})
    md.use(tasklists_plugin)
    md.add_render_rule("link_open", _render_link_open)
    return md


class MarkdownRenderer:
    def __init__(self, config: MarkupConfig = DEFAULT_CONFIG) -> None:
        self._md = build_markdown_parser(config.linkify)

    def render(self, text: str) -> str:
        """Render markdown to unsanitized HTML; unbalanced markup degrades to text."""
        html = self._md.render(text)
        logger.debug(
            "Rendered %d chars of markdown to %d chars of html", len(text), len(html)
        )
        return html


def parse_markdown(
    text: str, *, config: MarkupConfig = DEFAULT_CONFIG
) -> SanitizedHtml:
    """Render and sanitize content that carries no mentions."""
    return sanitize_html(MarkdownRenderer(config).render(text))


def strip_html(html: str) -> str:
    return _TAG.sub("", html)


def has_markdown_formatting(text: str) -> bool:
    return any(pattern.search(text) for pattern in _MARKDOWN_PATTERNS)
