# parsers/checkboxes.py

import logging
import re
from collections.abc import Sequence

from .code_ranges import in_code_range
from .models import CheckboxSpan, CodeRange

logger = logging.getLogger(__name__)

# Only unchecked boxes are interactive; `- [x]` is left to the renderer.
_CHECKBOX_LINE = re.compile(r"^[ \t]*- \[ \][ \t]+(?P<body>[^\n]*\S)", re.MULTILINE)
_REQUIRED_MARKER = "*(required)*"
_SLUG_SOURCE_CHARS = 20
_NON_SLUG = re.compile(r"[^a-z0-9]+")


def checkbox_id(ordinal: int, label: str) -> str:
    """
    Id from document position plus a slug of the label's first characters.

    Identical content always yields identical ids; inserting a checkbox
    earlier in the message shifts the ordinal of every later one.
    """
    slug = _NON_SLUG.sub("-", label[:_SLUG_SOURCE_CHARS].lower()).strip("-")
    return f"checkbox-{ordinal}-{slug}" if slug else f"checkbox-{ordinal}"


def _split_required(body: str) -> tuple[str, bool]:
    if body.endswith(_REQUIRED_MARKER):
        label = body[: -len(_REQUIRED_MARKER)].rstrip()
        if label:
            return label, True
    return body, False


class CheckboxRecognizer:
    def recognize(
        self, text: str, code_ranges: Sequence[CodeRange]
    ) -> list[CheckboxSpan]:
        spans: list[CheckboxSpan] = []
        for match in _CHECKBOX_LINE.finditer(text):
            if in_code_range(match.start(), match.end(), code_ranges):
                continue

            label, required = _split_required(match.group("body"))
            spans.append(
                CheckboxSpan(
                    id=checkbox_id(len(spans), label),
                    label=label,
                    required=required,
                    start_index=match.start(),
                    end_index=match.end(),
                )
            )

        logger.debug("Recognized %d checkboxes", len(spans))
        return spans
