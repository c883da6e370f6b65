# parsers/base.py

from collections.abc import Sequence
from typing import Protocol, TypeVar, runtime_checkable

from .models import CodeRange

SpanT = TypeVar("SpanT", covariant=True)


@runtime_checkable
class SpanRecognizer(Protocol[SpanT]):
    def recognize(self, text: str, code_ranges: Sequence[CodeRange]) -> list[SpanT]:
        """
        Find interactive spans in raw message text.

        Requirements:
        - Deterministic output for same input
        - Offsets index into the original string
        - Spans fully inside a code range are never returned
        - Result sorted by start offset
        """
        ...
