import logging
from pathlib import Path

import yaml

from markup_kit.parsers.models import Mention

from .models import BotInfo

logger = logging.getLogger(__name__)

DEFAULT_BOTS = (
    BotInfo(
        id="editorial-bot",
        display_name="Editorial Bot",
        description=(
            "Assists with manuscript editorial workflows, status updates, "
            "and reviewer assignments"
        ),
        role="Editorial Assistant",
    ),
    BotInfo(
        id="plagiarism-checker",
        display_name="Plagiarism Checker",
        description=(
            "Advanced plagiarism detection using multiple academic databases "
            "and AI algorithms"
        ),
        role="Content Reviewer",
    ),
    BotInfo(
        id="reference-bot",
        display_name="Reference Bot",
        description="Validates references and checks DOI availability and correctness",
        role="Reference Validator",
    ),
    BotInfo(
        id="reviewer-checklist",
        display_name="Reviewer Checklist",
        description="Generates customizable checklists for manuscript reviewers",
        role="Review Assistant",
    ),
)


class BotRegistry:
    """Lookup from bot id to tooltip data, injected into the presentation layer."""

    def __init__(self) -> None:
        self._bots: dict[str, BotInfo] = {}

    def register(self, bot: BotInfo) -> None:
        if bot.id in self._bots:
            raise ValueError(f"Bot '{bot.id}' already registered")

        self._bots[bot.id] = bot
        logger.debug("Registered bot: %s", bot.id)

    def get(self, bot_id: str) -> BotInfo:
        try:
            return self._bots[bot_id]
        except KeyError:
            logger.error("Bot not found: %s", bot_id)
            raise KeyError(f"Bot '{bot_id}' not found")

    def remove(self, bot_id: str) -> None:
        try:
            del self._bots[bot_id]
            logger.debug("Removed bot: %s", bot_id)
        except KeyError:
            logger.error("Cannot remove bot, not found: %s", bot_id)
            raise KeyError(f"Bot '{bot_id}' not found")

    def list(self) -> dict[str, BotInfo]:
        return dict(self._bots)

    def known_ids(self) -> tuple[str, ...]:
        return tuple(self._bots)

    def describe(self, mention: Mention) -> BotInfo | None:
        """Tooltip data for a bot mention; None for users and unregistered bots."""
        if not mention.is_bot:
            return None
        return self._bots.get(mention.id)


def default_bot_registry() -> BotRegistry:
    registry = BotRegistry()
    for bot in DEFAULT_BOTS:
        registry.register(bot)
    return registry


def load_bot_registry(directory: str | Path) -> BotRegistry:
    """Build a registry from a directory holding one `*.yaml` file per bot."""
    directory = Path(directory)
    logger.info("Loading bot registry from directory: %s", directory)

    registry = BotRegistry()
    for file_path in sorted(directory.glob("*.yaml")):
        with open(file_path) as f:
            data = yaml.safe_load(f)
        bot = BotInfo(**data)
        registry.register(bot)
        logger.debug("Loaded bot %s from %s", bot.id, file_path)

    logger.info("Loaded %d bots", len(registry.list()))
    return registry
