from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, TypeAdapter, model_validator
from pydantic_core import PydanticCustomError

from interaction_kit.discord.builders import (
    CreateInteractionResponse,
    CreateInteractionResponseFollowup,
    EditInteractionResponse,
)
from interaction_kit.discord.client import DiscordHttp
from interaction_kit.discord.components import ActionRow, InputText, SelectMenu
from interaction_kit.discord.ids import Snowflake
from interaction_kit.discord.interaction_types import InteractionResponseType
from interaction_kit.discord.message import Message
from interaction_kit.discord.payload import (
    remove_from_map,
    remove_from_map_opt,
    resolve_user,
    validate_field,
)
from interaction_kit.discord.permissions import Permissions, PermissionsField
from interaction_kit.discord.users import Member, User
from interaction_kit.errors import PayloadDecodeError

Version = Annotated[StrictInt, Field(ge=0, le=255)]


class ModalSubmitInteractionData(BaseModel):
    """What the user filled in: the modal's custom id and its component rows."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    custom_id: str
    components: tuple[ActionRow, ...]

    def values(self) -> dict[str, str | tuple[str, ...]]:
        submitted: dict[str, str | tuple[str, ...]] = {}
        for row in self.components:
            for component in row.components:
                if isinstance(component, InputText):
                    submitted[component.custom_id] = component.value
                elif isinstance(component, SelectMenu) and component.custom_id:
                    submitted[component.custom_id] = component.values
        return submitted

    def get_value(self, custom_id: str) -> str | tuple[str, ...] | None:
        return self.values().get(custom_id)


_SNOWFLAKE: TypeAdapter[str] = TypeAdapter(Snowflake)
_STR: TypeAdapter[str] = TypeAdapter(str)
_VERSION: TypeAdapter[int] = TypeAdapter(Version)
_DATA: TypeAdapter[ModalSubmitInteractionData] = TypeAdapter(ModalSubmitInteractionData)
_MEMBER: TypeAdapter[Member] = TypeAdapter(Member)
_USER: TypeAdapter[User] = TypeAdapter(User)
_MESSAGE: TypeAdapter[Message] = TypeAdapter(Message)
_PERMISSIONS: TypeAdapter[Permissions] = TypeAdapter(PermissionsField)


class ModalSubmitInteraction(BaseModel):
    """An interaction triggered by a modal submit.

    Built once from an inbound payload with `from_payload` and read-only from
    then on. `member`, `guild_id`, `app_permissions` and `guild_locale` are only
    sent for guild interactions; `message` is absent when the modal was opened
    from an application command.

    The response helpers borrow a `DiscordHttp`; one client can serve any
    number of interactions. They never retry and raise:

    - `ModelError` when the outgoing content breaks a platform limit
      (checked before any request is made),
    - `HttpError` when the API returns an error, e.g. the message was
      already deleted, or the request did not complete,
    - `JsonError` when the API response cannot be deserialized.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: Snowflake
    application_id: Snowflake
    data: ModalSubmitInteractionData
    guild_id: Snowflake | None = None
    channel_id: Snowflake
    member: Member | None = None
    user: User
    token: str
    version: Version
    message: Message | None = None
    app_permissions: PermissionsField | None = None
    locale: str
    guild_locale: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _user_from_member(cls, data: Any) -> Any:
        # Applies to model_validate and model_validate_json; from_payload resolves first.
        if not isinstance(data, Mapping) or data.get("user") is not None:
            return data
        member = data.get("member")
        if isinstance(member, Member):
            return {**data, "user": resolve_user(None, member)}
        if isinstance(member, Mapping) and member.get("user") is not None:
            return {**data, "user": member["user"]}
        if member is None:
            raise PydanticCustomError("user_or_member", "expected user or member")
        return data

    @classmethod
    def from_payload(cls, payload: Any) -> ModalSubmitInteraction:
        if not isinstance(payload, Mapping):
            raise PayloadDecodeError(
                f"expected an interaction object, got {type(payload).__name__}"
            )
        remaining = dict(payload)

        member = remove_from_map_opt(remaining, "member", _MEMBER)
        user = resolve_user(remove_from_map_opt(remaining, "user", _USER), member)

        # Whatever is left in `remaining` afterwards is unknown to this model and dropped.
        return cls(
            member=member,
            user=user,
            id=remove_from_map(remaining, "id", _SNOWFLAKE),
            application_id=remove_from_map(remaining, "application_id", _SNOWFLAKE),
            data=remove_from_map(remaining, "data", _DATA),
            channel_id=remove_from_map(remaining, "channel_id", _SNOWFLAKE),
            token=remove_from_map(remaining, "token", _STR),
            version=remove_from_map(remaining, "version", _VERSION),
            locale=remove_from_map(remaining, "locale", _STR),
            message=remove_from_map_opt(remaining, "message", _MESSAGE),
            guild_id=remove_from_map_opt(remaining, "guild_id", _SNOWFLAKE),
            app_permissions=remove_from_map_opt(remaining, "app_permissions", _PERMISSIONS),
            guild_locale=remove_from_map_opt(remaining, "guild_locale", _STR),
        )

    @classmethod
    def from_json(cls, raw: str | bytes) -> ModalSubmitInteraction:
        try:
            payload = json.loads(raw)
        except ValueError as exc:
            raise PayloadDecodeError(f"invalid JSON: {exc}") from exc
        return cls.from_payload(payload)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)

    def to_json(self) -> str:
        return self.model_dump_json(exclude_none=True)

    @property
    def is_guild(self) -> bool:
        return self.guild_id is not None

    async def get_interaction_response(self, http: DiscordHttp) -> Message:
        return await http.get_original_interaction_response(self.application_id, self.token)

    async def create_interaction_response(
        self, http: DiscordHttp, builder: CreateInteractionResponse
    ) -> None:
        """Send the initial response. Content must be under 2000 unicode code points."""
        await builder.execute(http, self.id, self.token)

    async def edit_original_interaction_response(
        self, http: DiscordHttp, builder: EditInteractionResponse
    ) -> Message:
        """Edit the initial response. Does not work for ephemeral messages."""
        return await builder.execute(http, self.application_id, self.token)

    async def delete_original_interaction_response(self, http: DiscordHttp) -> None:
        await http.delete_original_interaction_response(self.application_id, self.token)

    async def create_followup_message(
        self, http: DiscordHttp, builder: CreateInteractionResponseFollowup
    ) -> Message:
        return await builder.execute(http, self.application_id, self.token)

    async def edit_followup_message(
        self,
        http: DiscordHttp,
        message_id: Message | str | int,
        builder: CreateInteractionResponseFollowup,
    ) -> Message:
        return await builder.execute(
            http, self.application_id, self.token, message_id=_message_id(message_id)
        )

    async def delete_followup_message(
        self, http: DiscordHttp, message_id: Message | str | int
    ) -> None:
        await http.delete_followup_message(self.application_id, self.token, _message_id(message_id))

    async def defer(self, http: DiscordHttp) -> None:
        builder = CreateInteractionResponse(kind=InteractionResponseType.DEFERRED_UPDATE_MESSAGE)
        await self.create_interaction_response(http, builder)


def _message_id(value: Message | str | int) -> str:
    if isinstance(value, Message):
        return value.id
    return validate_field("message_id", _SNOWFLAKE, value)
