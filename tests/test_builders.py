import pytest

from interaction_kit.discord.builders import (
    CreateInteractionResponse,
    CreateInteractionResponseData,
    CreateInteractionResponseFollowup,
    EditInteractionResponse,
    check_message,
)
from interaction_kit.discord.components import ActionRow, Button
from interaction_kit.discord.interaction_types import InteractionResponseType
from interaction_kit.errors import ModelError, ModelErrorKind


def test_content_at_limit_is_accepted():
    check_message("a" * 2000, None, None)


def test_content_is_counted_in_code_points():
    # Each of these is one code point but several UTF-8 bytes.
    check_message("é" * 2000, None, None)

    with pytest.raises(ModelError) as excinfo:
        check_message("\U0001f600" * 2001, None, None)

    assert excinfo.value.kind is ModelErrorKind.MESSAGE_TOO_LONG
    assert excinfo.value.overflow == 1


def test_too_many_embeds():
    with pytest.raises(ModelError) as excinfo:
        EditInteractionResponse(embeds=[{"title": str(i)} for i in range(12)]).check_length()

    assert excinfo.value.kind is ModelErrorKind.EMBED_AMOUNT
    assert excinfo.value.overflow == 2


def test_too_many_action_rows():
    rows = [ActionRow(components=(Button(custom_id=f"b{i}", label="go"),)) for i in range(6)]

    with pytest.raises(ModelError) as excinfo:
        CreateInteractionResponseFollowup(components=rows).check_length()

    assert excinfo.value.kind is ModelErrorKind.TOO_MANY_ACTION_ROWS


def test_create_response_payload():
    builder = CreateInteractionResponse(
        kind=InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE,
        data=CreateInteractionResponseData(content="Thanks!", ephemeral=True),
    )

    assert builder.to_payload() == {"type": 4, "data": {"content": "Thanks!", "flags": 64}}


def test_deferred_response_has_no_data():
    builder = CreateInteractionResponse(kind=InteractionResponseType.DEFERRED_UPDATE_MESSAGE)

    assert builder.to_payload() == {"type": 6}


def test_ephemeral_keeps_other_flags():
    data = CreateInteractionResponseData(content="x", flags=4, ephemeral=True)

    assert data.to_payload()["flags"] == 68


def test_followup_payload_with_components():
    builder = CreateInteractionResponseFollowup(
        content="done",
        components=[ActionRow(components=(Button(custom_id="again", label="Again"),))],
    )

    assert builder.to_payload() == {
        "content": "done",
        "components": [
            {
                "type": 1,
                "components": [
                    {"type": 2, "style": 1, "label": "Again", "custom_id": "again", "disabled": False}
                ],
            }
        ],
    }


def test_edit_payload_omits_unset_fields():
    assert EditInteractionResponse(content="edited").to_payload() == {"content": "edited"}


def test_unknown_builder_field_is_rejected():
    with pytest.raises(ValueError):
        EditInteractionResponse(contents="typo")
