# parsers/code_ranges.py

import re
from collections.abc import Sequence

from .models import CodeRange

_INLINE_CODE = re.compile(r"`[^`]+`")
_FENCED_BLOCK = re.compile(r"```[\s\S]*?```")


def scan_code_ranges(text: str) -> list[CodeRange]:
    """
    Locate inline code spans and fenced code blocks.

    Both passes run over the whole string; overlapping ranges are kept
    as-is and only sorted, which is enough for exclusion checks.
    """
    ranges = [CodeRange(m.start(), m.end()) for m in _INLINE_CODE.finditer(text)]
    ranges.extend(CodeRange(m.start(), m.end()) for m in _FENCED_BLOCK.finditer(text))
    ranges.sort(key=lambda r: r.start)
    return ranges


def in_code_range(start: int, end: int, code_ranges: Sequence[CodeRange]) -> bool:
    return any(r.contains(start, end) for r in code_ranges)
