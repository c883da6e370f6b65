from .models import BotInfo
from .registry import (
    DEFAULT_BOTS,
    BotRegistry,
    default_bot_registry,
    load_bot_registry,
)

__all__ = [
    "DEFAULT_BOTS",
    "BotInfo",
    "BotRegistry",
    "default_bot_registry",
    "load_bot_registry",
]
