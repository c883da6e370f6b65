# Bots
from .bots import BotInfo, BotRegistry, default_bot_registry, load_bot_registry

# Chunking
from .chunking import (
    CheckboxChunk,
    Chunk,
    ContentChunk,
    MarkdownChunk,
    MentionChunk,
    parse_content_with_mentions,
    parse_markdown_with_mentions,
)

# Config
from .config import DEFAULT_CONFIG, MarkupConfig

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    CheckboxSpan,
    CodeRange,
    Mention,
    MentionKind,
    mention_id,
    parse_mentions,
    scan_code_ranges,
)

# Rendering
from .rendering import (
    SanitizedHtml,
    has_markdown_formatting,
    parse_markdown,
    sanitize_html,
    strip_html,
)

__all__ = [
    # Bots
    "BotInfo",
    "BotRegistry",
    "default_bot_registry",
    "load_bot_registry",
    # Chunking
    "Chunk",
    "CheckboxChunk",
    "ContentChunk",
    "MarkdownChunk",
    "MentionChunk",
    "parse_content_with_mentions",
    "parse_markdown_with_mentions",
    # Config
    "DEFAULT_CONFIG",
    "MarkupConfig",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "CheckboxSpan",
    "CodeRange",
    "Mention",
    "MentionKind",
    "mention_id",
    "parse_mentions",
    "scan_code_ranges",
    # Rendering
    "SanitizedHtml",
    "has_markdown_formatting",
    "parse_markdown",
    "sanitize_html",
    "strip_html",
]
