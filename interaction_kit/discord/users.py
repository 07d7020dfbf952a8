from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from interaction_kit.discord.ids import Snowflake
from interaction_kit.discord.permissions import PermissionsField


class User(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: Snowflake
    username: str | None = None
    discriminator: str | None = None
    global_name: str | None = None
    avatar: str | None = None
    bot: bool = False
    system: bool = False

    @property
    def mention(self) -> str:
        return f"<@{self.id}>"


class Member(BaseModel):
    """Guild member record; only sent for interactions triggered inside a guild."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    user: User
    nick: str | None = None
    avatar: str | None = None
    roles: tuple[Snowflake, ...] = Field(default_factory=tuple)
    joined_at: datetime | None = None
    premium_since: datetime | None = None
    deaf: bool = False
    mute: bool = False
    pending: bool = False
    permissions: PermissionsField | None = None
    communication_disabled_until: datetime | None = None

    @property
    def display_name(self) -> str:
        return self.nick or self.user.global_name or self.user.username or self.user.id
