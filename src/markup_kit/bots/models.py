from pydantic import BaseModel, ConfigDict, field_validator

from markup_kit.parsers.mentions import is_identifier


class BotInfo(BaseModel):
    """Tooltip data for a bot that can be @-mentioned."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    display_name: str
    description: str
    role: str

    @field_validator("id")
    @classmethod
    def _id_is_identifier(cls, value: str) -> str:
        if not is_identifier(value):
            raise ValueError("bot id must be lowercase and hyphenated")
        return value
