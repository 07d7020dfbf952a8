from __future__ import annotations

from enum import IntEnum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class ComponentType(IntEnum):
    ACTION_ROW = 1
    BUTTON = 2
    STRING_SELECT = 3
    INPUT_TEXT = 4
    USER_SELECT = 5
    ROLE_SELECT = 6
    MENTIONABLE_SELECT = 7
    CHANNEL_SELECT = 8


class ButtonStyle(IntEnum):
    PRIMARY = 1
    SECONDARY = 2
    SUCCESS = 3
    DANGER = 4
    LINK = 5


class _Component(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    @property
    def kind(self) -> ComponentType:
        return ComponentType(self.type)


class Button(_Component):
    type: Literal[2] = 2
    style: ButtonStyle = ButtonStyle.PRIMARY
    label: str | None = None
    emoji: dict[str, Any] | None = None
    custom_id: str | None = None
    url: str | None = None
    disabled: bool = False


class SelectMenuOption(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    label: str
    value: str
    description: str | None = None
    emoji: dict[str, Any] | None = None
    default: bool = False


class SelectMenu(_Component):
    type: Literal[3, 5, 6, 7, 8] = 3
    custom_id: str | None = None
    options: tuple[SelectMenuOption, ...] = ()
    placeholder: str | None = None
    min_values: int | None = None
    max_values: int | None = None
    disabled: bool = False
    # Present in modal submissions of select menus.
    values: tuple[str, ...] = ()


class InputText(_Component):
    """Text input; in a modal submission `value` holds what the user typed."""

    type: Literal[4] = 4
    custom_id: str
    value: str = ""


ActionRowComponent = Annotated[Union[Button, SelectMenu, InputText], Field(discriminator="type")]


class ActionRow(_Component):
    type: Literal[1] = 1
    components: tuple[ActionRowComponent, ...] = ()
