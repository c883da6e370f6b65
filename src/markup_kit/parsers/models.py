# parsers/models.py

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class CodeRange:
    """Half-open character span of inline code or a fenced block."""

    start: int
    end: int

    def contains(self, start: int, end: int) -> bool:
        return start >= self.start and end <= self.end


class MentionKind(str, Enum):
    BOT = "bot"
    USER = "user"


@dataclass(frozen=True)
class Mention:
    """An @-reference recognized in message text.

    `display_text` keeps the leading `@` and any disambiguator exactly as
    written; `id` is derived from the name alone.
    """

    id: str
    display_text: str
    start_index: int
    end_index: int
    kind: MentionKind

    @property
    def is_bot(self) -> bool:
        return self.kind is MentionKind.BOT

    @property
    def name(self) -> str:
        return self.display_text[1:]


@dataclass(frozen=True)
class CheckboxSpan:
    """An unchecked `- [ ] label` list item that the viewer can toggle."""

    id: str
    label: str
    required: bool
    start_index: int
    end_index: int
