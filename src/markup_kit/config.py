# src/markup_kit/config.py

from dataclasses import dataclass

from markup_kit.parsers.mentions import DEFAULT_BOT_IDS, is_identifier


@dataclass(frozen=True)
class MarkupConfig:
    """Configuration for the message markup pipeline.

    Immutable. Explicit. No magic defaults from environment.
    """

    interactive_checkboxes: bool = True  # False leaves `- [ ]` to the renderer
    linkify: bool = True
    known_bot_ids: tuple[str, ...] = DEFAULT_BOT_IDS

    def __post_init__(self) -> None:
        for bot_id in self.known_bot_ids:
            if not is_identifier(bot_id):
                raise ValueError(
                    f"Known bot id must be lowercase and hyphenated: {bot_id!r}"
                )


DEFAULT_CONFIG = MarkupConfig()
