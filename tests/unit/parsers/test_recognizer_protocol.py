import pytest

from markup_kit.parsers.base import SpanRecognizer
from markup_kit.parsers.checkboxes import CheckboxRecognizer
from markup_kit.parsers.mentions import MentionRecognizer


@pytest.mark.parametrize("recognizer", [MentionRecognizer(), CheckboxRecognizer()])
def test_recognizers_share_protocol(recognizer: object) -> None:
    assert isinstance(recognizer, SpanRecognizer)


@pytest.mark.parametrize("recognizer", [MentionRecognizer(), CheckboxRecognizer()])
def test_recognizers_are_deterministic(recognizer: SpanRecognizer) -> None:
    text = "- [ ] ping @editorial-bot\n- [ ] ask @John Smith"

    assert recognizer.recognize(text, []) == recognizer.recognize(text, [])
