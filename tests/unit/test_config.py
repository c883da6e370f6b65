import dataclasses

import pytest

from markup_kit.config import DEFAULT_CONFIG, MarkupConfig
from markup_kit.parsers.mentions import DEFAULT_BOT_IDS


class TestMarkupConfig:
    def test_defaults(self) -> None:
        assert DEFAULT_CONFIG.interactive_checkboxes is True
        assert DEFAULT_CONFIG.linkify is True
        assert DEFAULT_CONFIG.known_bot_ids == DEFAULT_BOT_IDS

    def test_rejects_non_identifier_bot_id(self) -> None:
        with pytest.raises(ValueError, match="lowercase and hyphenated"):
            MarkupConfig(known_bot_ids=("Editorial Bot",))

    def test_is_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CONFIG.linkify = False  # type: ignore[misc]
