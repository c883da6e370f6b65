# parsers/mentions.py

import logging
import re
from collections.abc import Iterable, Sequence

from .code_ranges import in_code_range, scan_code_ranges
from .models import CodeRange, Mention, MentionKind

logger = logging.getLogger(__name__)

DEFAULT_BOT_IDS: tuple[str, ...] = (
    "editorial-bot",
    "plagiarism-checker",
    "reference-bot",
    "reviewer-checklist",
)

# Lowercase segments joined by single hyphens; linear to match.
_IDENTIFIER_TOKEN = r"[a-z][a-z0-9]*(?:-[a-z0-9]+)*"
_IDENTIFIER = re.compile(rf"{_IDENTIFIER_TOKEN}\Z")

# An @ glued to a preceding word, dot or hyphen belongs to an e-mail address.
_MENTION_START = r"(?<![\w.@-])@"

_DISPLAY_NAME = re.compile(
    _MENTION_START
    + r"(?P<name>[A-Z][a-z]+(?:\s+[A-Z][a-z]+){0,2}(?:\s+\([^()\n]{1,254}\))?)"
    + r"(?=\s|\Z|[.,!?;:])"
)

_DISAMBIGUATOR = re.compile(r"\s+\(([^)]+)\)$")
_WHITESPACE = re.compile(r"\s+")
_NAME_PADDING = re.compile(r"[\s-]")

_BOT_SEGMENTS = frozenset({"bot", "assistant"})
_BOT_SUFFIXES = ("bot", "checker", "reviewer")

MIN_SIGNIFICANT_CHARS = 3


def is_identifier(value: str) -> bool:
    return _IDENTIFIER.match(value) is not None


def split_disambiguator(name: str) -> tuple[str, str | None]:
    """Split `"John Smith (john@x.com)"` into `("John Smith", "john@x.com")`."""
    match = _DISAMBIGUATOR.search(name)
    if match is None:
        return name.strip(), None
    return name[: match.start()].strip(), match.group(1).strip()


def mention_id(name: str) -> str:
    """
    Stable id for a mention name (without the leading `@`).

    The disambiguator is ignored, so every spelling of the same person
    maps to the same id.
    """
    display_name, _ = split_disambiguator(name)
    return _WHITESPACE.sub("-", display_name.lower())


def looks_like_bot(identifier: str) -> bool:
    segments = identifier.split("-")
    if _BOT_SEGMENTS.intersection(segments):
        return True
    return segments[-1].endswith(_BOT_SUFFIXES)


def _overlaps(a: Mention, b: Mention) -> bool:
    return a.start_index < b.end_index and b.start_index < a.end_index


def _significant_length(name: str) -> int:
    display_name, _ = split_disambiguator(name)
    return len(_NAME_PADDING.sub("", display_name))


class MentionRecognizer:
    """
    Two-pass @-mention recognizer.

    - Identifier pass: lowercase-hyphenated ids (`@editorial-bot`)
    - Display-name pass: capitalized names (`@John Smith (john@x.com)`)
    - Identifier matches win where the two overlap
    """

    def __init__(self, known_bot_ids: Iterable[str] = DEFAULT_BOT_IDS) -> None:
        self.known_bot_ids = frozenset(known_bot_ids)
        # Known ids are tried first so they win over a shorter generic token.
        known = sorted(self.known_bot_ids, key=len, reverse=True)
        alternatives = [re.escape(bot_id) for bot_id in known] + [_IDENTIFIER_TOKEN]
        self._identifier = re.compile(
            _MENTION_START + "(?P<name>" + "|".join(alternatives) + r")(?![\w@-])"
        )

    def recognize(
        self, text: str, code_ranges: Sequence[CodeRange]
    ) -> list[Mention]:
        identifiers = self._identifier_mentions(text)
        display_names = [
            m
            for m in self._display_name_mentions(text)
            if not any(_overlaps(m, existing) for existing in identifiers)
        ]

        mentions = [
            m
            for m in identifiers + display_names
            if not in_code_range(m.start_index, m.end_index, code_ranges)
        ]
        mentions.sort(key=lambda m: m.start_index)
        logger.debug(
            "Recognized %d mentions (%d identifier, %d display name candidates)",
            len(mentions),
            len(identifiers),
            len(display_names),
        )
        return mentions

    def classify(self, identifier: str) -> MentionKind:
        if identifier in self.known_bot_ids or looks_like_bot(identifier):
            return MentionKind.BOT
        return MentionKind.USER

    def _identifier_mentions(self, text: str) -> list[Mention]:
        mentions = []
        for match in self._identifier.finditer(text):
            name = match.group("name")
            if _significant_length(name) < MIN_SIGNIFICANT_CHARS:
                continue
            mentions.append(
                Mention(
                    id=mention_id(name),
                    display_text=match.group(0),
                    start_index=match.start(),
                    end_index=match.end(),
                    kind=self.classify(name),
                )
            )
        return mentions

    def _display_name_mentions(self, text: str) -> list[Mention]:
        mentions = []
        for match in _DISPLAY_NAME.finditer(text):
            name = match.group("name")
            if _significant_length(name) < MIN_SIGNIFICANT_CHARS:
                continue
            mentions.append(
                Mention(
                    id=mention_id(name),
                    display_text=match.group(0),
                    start_index=match.start(),
                    end_index=match.end(),
                    kind=MentionKind.USER,
                )
            )
        return mentions


def parse_mentions(
    text: str, *, known_bot_ids: Iterable[str] = DEFAULT_BOT_IDS
) -> list[Mention]:
    """Recognize mentions in `text`, skipping any inside code."""
    return MentionRecognizer(known_bot_ids).recognize(text, scan_code_ranges(text))
