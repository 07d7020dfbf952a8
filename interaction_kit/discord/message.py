from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict

from interaction_kit.discord.components import ActionRow
from interaction_kit.discord.constants import MESSAGE_FLAG_EPHEMERAL
from interaction_kit.discord.ids import Snowflake
from interaction_kit.discord.users import User


class Message(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: Snowflake
    channel_id: Snowflake
    guild_id: Snowflake | None = None
    author: User | None = None
    content: str = ""
    timestamp: datetime | None = None
    edited_timestamp: datetime | None = None
    tts: bool = False
    pinned: bool = False
    flags: int | None = None
    webhook_id: Snowflake | None = None
    application_id: Snowflake | None = None
    embeds: tuple[dict[str, Any], ...] = ()
    components: tuple[ActionRow, ...] = ()

    @property
    def is_ephemeral(self) -> bool:
        return bool(self.flags and self.flags & MESSAGE_FLAG_EPHEMERAL)
