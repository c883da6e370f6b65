# src/markup_kit/parsers/__init__.py

"""Recognizers for code ranges, @-mentions and interactive checkboxes.

Every recognizer is a pure function of its input:
- Offsets index into the original message text
- Ids are derived from content, never random
- Anything inside inline code or a fenced block is ignored
"""

from .base import SpanRecognizer
from .checkboxes import CheckboxRecognizer, checkbox_id
from .code_ranges import in_code_range, scan_code_ranges
from .mentions import (
    DEFAULT_BOT_IDS,
    MentionRecognizer,
    is_identifier,
    looks_like_bot,
    mention_id,
    parse_mentions,
    split_disambiguator,
)
from .models import CheckboxSpan, CodeRange, Mention, MentionKind

__all__ = [
    # Recognizers
    "SpanRecognizer",
    "MentionRecognizer",
    "CheckboxRecognizer",
    "scan_code_ranges",
    "in_code_range",
    "parse_mentions",
    # Helpers
    "DEFAULT_BOT_IDS",
    "checkbox_id",
    "is_identifier",
    "looks_like_bot",
    "mention_id",
    "split_disambiguator",
    # Types
    "CheckboxSpan",
    "CodeRange",
    "Mention",
    "MentionKind",
]
