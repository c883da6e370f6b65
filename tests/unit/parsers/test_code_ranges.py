from markup_kit.parsers.code_ranges import in_code_range, scan_code_ranges
from markup_kit.parsers.models import CodeRange


class TestScanCodeRanges:
    def test_no_code_returns_empty(self) -> None:
        assert scan_code_ranges("plain @editorial-bot text") == []

    def test_inline_code_span(self) -> None:
        text = "run `make test` now"
        assert scan_code_ranges(text) == [CodeRange(4, 15)]

    def test_fenced_block_includes_fences(self) -> None:
        text = "before\n```\n@editorial-bot\n```\nafter"
        ranges = scan_code_ranges(text)

        fence_start = text.index("```")
        fence_end = text.rindex("```") + 3
        assert CodeRange(fence_start, fence_end) in ranges

    def test_ranges_sorted_by_start(self) -> None:
        text = "```\nblock\n``` then `inline`"
        ranges = scan_code_ranges(text)

        assert [r.start for r in ranges] == sorted(r.start for r in ranges)

    def test_empty_backticks_are_not_code(self) -> None:
        assert scan_code_ranges("``") == []


class TestInCodeRange:
    def test_fully_inside(self) -> None:
        assert in_code_range(2, 5, [CodeRange(0, 10)])

    def test_partially_outside(self) -> None:
        assert not in_code_range(8, 12, [CodeRange(0, 10)])

    def test_no_ranges(self) -> None:
        assert not in_code_range(0, 1, [])
