from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict

from interaction_kit.discord.components import ActionRow
from interaction_kit.discord.constants import (
    ACTION_ROW_MAX_COUNT,
    EMBED_MAX_COUNT,
    MESSAGE_CODE_LIMIT,
    MESSAGE_FLAG_EPHEMERAL,
)
from interaction_kit.discord.interaction_types import InteractionResponseType
from interaction_kit.errors import ModelError, ModelErrorKind

if TYPE_CHECKING:
    from interaction_kit.discord.client import DiscordHttp
    from interaction_kit.discord.message import Message


def check_message(
    content: str | None,
    embeds: list[dict[str, Any]] | None,
    components: list[ActionRow] | None,
) -> None:
    """Reject a message body the platform would refuse, before it is sent.

    Content length is counted in unicode code points, which is what `len` counts.
    """
    if content is not None:
        overflow = len(content) - MESSAGE_CODE_LIMIT
        if overflow > 0:
            raise ModelError(ModelErrorKind.MESSAGE_TOO_LONG, overflow, MESSAGE_CODE_LIMIT)

    if embeds is not None:
        overflow = len(embeds) - EMBED_MAX_COUNT
        if overflow > 0:
            raise ModelError(ModelErrorKind.EMBED_AMOUNT, overflow, EMBED_MAX_COUNT)

    if components is not None:
        overflow = len(components) - ACTION_ROW_MAX_COUNT
        if overflow > 0:
            raise ModelError(ModelErrorKind.TOO_MANY_ACTION_ROWS, overflow, ACTION_ROW_MAX_COUNT)


class _MessageBuilder(BaseModel):
    model_config = ConfigDict(extra="forbid")

    content: str | None = None
    embeds: list[dict[str, Any]] | None = None
    components: list[ActionRow] | None = None
    allowed_mentions: dict[str, Any] | None = None

    def check_length(self) -> None:
        check_message(self.content, self.embeds, self.components)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class CreateInteractionResponseData(_MessageBuilder):
    tts: bool | None = None
    flags: int | None = None
    ephemeral: bool = False
    # Only used when responding with a modal.
    custom_id: str | None = None
    title: str | None = None

    def to_payload(self) -> dict[str, Any]:
        payload = self.model_dump(mode="json", exclude_none=True, exclude={"ephemeral"})
        if self.ephemeral:
            payload["flags"] = (self.flags or 0) | MESSAGE_FLAG_EPHEMERAL
        return payload


class CreateInteractionResponse(BaseModel):
    """Initial response to an interaction. Can only be sent once per interaction."""

    model_config = ConfigDict(extra="forbid")

    kind: InteractionResponseType = InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE
    data: CreateInteractionResponseData | None = None

    def check_length(self) -> None:
        if self.data is not None:
            self.data.check_length()

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"type": int(self.kind)}
        if self.data is not None:
            payload["data"] = self.data.to_payload()
        return payload

    async def execute(self, http: DiscordHttp, interaction_id: str, token: str) -> None:
        self.check_length()
        await http.create_interaction_response(interaction_id, token, self.to_payload())


class EditInteractionResponse(_MessageBuilder):
    """Edit of the initial response. Does not work for ephemeral messages."""

    async def execute(self, http: DiscordHttp, application_id: str, token: str) -> Message:
        self.check_length()
        return await http.edit_original_interaction_response(application_id, token, self.to_payload())


class CreateInteractionResponseFollowup(_MessageBuilder):
    tts: bool | None = None
    ephemeral: bool = False
    username: str | None = None
    avatar_url: str | None = None

    def to_payload(self) -> dict[str, Any]:
        payload = self.model_dump(mode="json", exclude_none=True, exclude={"ephemeral"})
        if self.ephemeral:
            payload["flags"] = MESSAGE_FLAG_EPHEMERAL
        return payload

    async def execute(
        self,
        http: DiscordHttp,
        application_id: str,
        token: str,
        message_id: str | None = None,
    ) -> Message:
        self.check_length()
        payload = self.to_payload()
        if message_id is None:
            return await http.create_followup_message(application_id, token, payload)
        return await http.edit_followup_message(application_id, token, message_id, payload)
