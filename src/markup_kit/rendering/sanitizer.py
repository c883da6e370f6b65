# rendering/sanitizer.py

import logging
from collections.abc import Iterator
from time import monotonic
from typing import Any

from bleach.html5lib_shim import Filter
from bleach.sanitizer import Cleaner

from markup_kit.observability import names
from markup_kit.observability.base import MetricsHook, NoOpMetricsHook

logger = logging.getLogger(__name__)

ALLOWED_TAGS = frozenset(
    {
        "a",
        "b",
        "blockquote",
        "br",
        "code",
        "del",
        "em",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "hr",
        "i",
        "input",
        "li",
        "ol",
        "p",
        "pre",
        "s",
        "span",
        "strong",
        "table",
        "tbody",
        "td",
        "th",
        "thead",
        "tr",
        "ul",
    }
)

_CHECKBOX_ATTRIBUTES = frozenset({"checked", "disabled", "class"})


def _allow_input_attribute(tag: str, name: str, value: str) -> bool:
    if name == "type":
        return value == "checkbox"
    return name in _CHECKBOX_ATTRIBUTES


ALLOWED_ATTRIBUTES: dict[str, Any] = {
    "a": ["href", "title", "target", "rel"],
    "code": ["class"],
    "input": _allow_input_attribute,
    "li": ["class"],
    "ol": ["class", "start"],
    "span": ["class"],
    "ul": ["class"],
}

ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto"})


class SanitizedHtml(str):
    """HTML that has been through `sanitize_html`.

    Only values of this type may be injected into a view as raw markup.
    String operations on it return plain `str`, which is no longer safe.
    """

    __slots__ = ()


class SafeMarkupFilter(Filter):
    """
    Post-sanitizer token pass.

    - `<input>` survives only as a disabled checkbox
    - every `<a>` opens in a new tab with `rel="noopener noreferrer"`
    - a literal `"` in an attribute value is written as `&quot;`
    """

    def __iter__(self) -> Iterator[dict[str, Any]]:
        for token in Filter.__iter__(self):
            if token["type"] not in ("StartTag", "EmptyTag"):
                yield token
                continue

            attrs = token["data"]
            if token["name"] == "input":
                if attrs.get((None, "type")) != "checkbox":
                    continue
                attrs[(None, "disabled")] = "disabled"
            elif token["name"] == "a":
                attrs[(None, "target")] = "_blank"
                attrs[(None, "rel")] = "noopener noreferrer"

            # Entities stay unresolved in attribute values, so this is read
            # back unchanged and the value always serializes double-quoted.
            for key, value in list(attrs.items()):
                if '"' in value:
                    attrs[key] = value.replace('"', "&quot;")
            yield token


def sanitize_html(
    html: str, *, metrics_hook: MetricsHook = NoOpMetricsHook()
) -> SanitizedHtml:
    """
    Strip everything outside the safe tag/attribute/protocol allow-list.

    Removal is silent and the result is stable under repeated
    sanitization. Cleaner instances are not thread-safe, so one is built
    per call.
    """
    start = monotonic()
    cleaner = Cleaner(
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
        strip_comments=True,
        filters=[SafeMarkupFilter],
    )
    cleaned = cleaner.clean(html)
    if len(cleaned) != len(html):
        logger.debug("Sanitizer changed html length %d -> %d", len(html), len(cleaned))

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.SANITIZE_DURATION, elapsed_ms)
    return SanitizedHtml(cleaned)
