import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from time import monotonic
from typing import Literal

from markup_kit.config import DEFAULT_CONFIG, MarkupConfig
from markup_kit.observability import names
from markup_kit.observability.base import MetricsHook, NoOpMetricsHook
from markup_kit.parsers.checkboxes import CheckboxRecognizer
from markup_kit.parsers.code_ranges import scan_code_ranges
from markup_kit.parsers.mentions import MentionRecognizer
from markup_kit.parsers.models import CheckboxSpan, Mention
from markup_kit.rendering.markdown import MarkdownRenderer
from markup_kit.rendering.sanitizer import SanitizedHtml, sanitize_html

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarkdownChunk:
    source_text: str
    html: SanitizedHtml
    offset_start: int
    offset_end: int

    type: Literal["markdown"] = field(default="markdown", init=False)


@dataclass(frozen=True)
class MentionChunk:
    mention: Mention

    type: Literal["mention"] = field(default="mention", init=False)

    @property
    def offset_start(self) -> int:
        return self.mention.start_index

    @property
    def offset_end(self) -> int:
        return self.mention.end_index


@dataclass(frozen=True)
class CheckboxChunk:
    span: CheckboxSpan

    type: Literal["checkbox"] = field(default="checkbox", init=False)

    @property
    def offset_start(self) -> int:
        return self.span.start_index

    @property
    def offset_end(self) -> int:
        return self.span.end_index


Chunk = MarkdownChunk | MentionChunk | CheckboxChunk


@dataclass(frozen=True)
class ContentChunk:
    type: Literal["text", "mention"]
    content: str
    mention: Mention | None = None


def assemble_chunks(
    text: str,
    mentions: Sequence[Mention],
    checkboxes: Sequence[CheckboxSpan],
    *,
    render: Callable[[str], SanitizedHtml],
) -> list[Chunk]:
    """
    Interleave rendered markdown gaps with mention and checkbox spans.

    Gaps that are only whitespace are dropped, except when there are no
    spans at all: then the whole input is returned as one markdown chunk.
    """
    spans: list[Mention | CheckboxSpan] = [*mentions, *checkboxes]
    # Stable sort keeps mentions ahead of checkboxes on equal offsets.
    spans.sort(key=lambda span: span.start_index)

    if not spans:
        return [MarkdownChunk(text, render(text), 0, len(text))]

    chunks: list[Chunk] = []
    cursor = 0

    for span in spans:
        if span.start_index < cursor:
            # Nested in the previous span, e.g. a mention in a checkbox label.
            continue

        if span.start_index > cursor:
            gap = text[cursor : span.start_index]
            if gap.strip():
                chunks.append(
                    MarkdownChunk(gap, render(gap), cursor, span.start_index)
                )

        if isinstance(span, Mention):
            chunks.append(MentionChunk(span))
        else:
            chunks.append(CheckboxChunk(span))
        cursor = span.end_index

    if cursor < len(text):
        rest = text[cursor:]
        if rest.strip():
            chunks.append(MarkdownChunk(rest, render(rest), cursor, len(text)))

    return chunks


def parse_markdown_with_mentions(
    text: str,
    *,
    config: MarkupConfig = DEFAULT_CONFIG,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[Chunk]:
    start = monotonic()
    code_ranges = scan_code_ranges(text)
    mentions = MentionRecognizer(config.known_bot_ids).recognize(text, code_ranges)
    checkboxes = (
        CheckboxRecognizer().recognize(text, code_ranges)
        if config.interactive_checkboxes
        else []
    )

    renderer = MarkdownRenderer(config)

    def render(markdown: str) -> SanitizedHtml:
        return sanitize_html(renderer.render(markdown), metrics_hook=metrics_hook)

    chunks = assemble_chunks(text, mentions, checkboxes, render=render)
    # Spans nested in an earlier span are not emitted and not counted.
    mention_count = sum(isinstance(c, MentionChunk) for c in chunks)
    checkbox_count = sum(isinstance(c, CheckboxChunk) for c in chunks)
    logger.debug(
        "Parsed message into %d chunks (%d mentions, %d checkboxes, %d code ranges)",
        len(chunks),
        mention_count,
        checkbox_count,
        len(code_ranges),
    )

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.PARSE_DURATION, elapsed_ms)
    metrics_hook.increment(names.MENTIONS_RECOGNIZED, mention_count)
    metrics_hook.increment(names.CHECKBOXES_RECOGNIZED, checkbox_count)
    metrics_hook.increment(names.CHUNKS_CREATED, len(chunks))
    return chunks


def parse_content_with_mentions(
    text: str, *, config: MarkupConfig = DEFAULT_CONFIG
) -> list[ContentChunk]:
    """Split text around mentions only; text gaps are kept verbatim."""
    mentions = MentionRecognizer(config.known_bot_ids).recognize(
        text, scan_code_ranges(text)
    )
    if not mentions:
        return [ContentChunk(type="text", content=text)]

    chunks: list[ContentChunk] = []
    cursor = 0
    for mention in mentions:
        if mention.start_index > cursor:
            chunks.append(
                ContentChunk(type="text", content=text[cursor : mention.start_index])
            )
        chunks.append(
            ContentChunk(type="mention", content=mention.display_text, mention=mention)
        )
        cursor = mention.end_index

    if cursor < len(text):
        chunks.append(ContentChunk(type="text", content=text[cursor:]))

    return chunks
