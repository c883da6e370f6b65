from .chunking import (
    CheckboxChunk,
    Chunk,
    ContentChunk,
    MarkdownChunk,
    MentionChunk,
    assemble_chunks,
    parse_content_with_mentions,
    parse_markdown_with_mentions,
)

__all__ = [
    "Chunk",
    "CheckboxChunk",
    "ContentChunk",
    "MarkdownChunk",
    "MentionChunk",
    "assemble_chunks",
    "parse_content_with_mentions",
    "parse_markdown_with_mentions",
]
