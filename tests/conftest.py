from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from interaction_kit.discord.client import DiscordHttp


def _dm_payload() -> dict[str, Any]:
    return {
        "id": "1",
        "application_id": "2",
        "type": 5,
        "data": {"custom_id": "x", "components": []},
        "channel_id": "3",
        "user": {"id": "9"},
        "token": "t",
        "version": 1,
        "locale": "en-US",
    }


def _guild_payload() -> dict[str, Any]:
    return {
        "id": "1050000000000000001",
        "application_id": "1040000000000000002",
        "type": 5,
        "data": {
            "custom_id": "feedback_form",
            "components": [
                {
                    "type": 1,
                    "components": [
                        {"type": 4, "custom_id": "title", "value": "Bug report"},
                    ],
                },
                {
                    "type": 1,
                    "components": [
                        {"type": 4, "custom_id": "details", "value": "It crashes on start"},
                    ],
                },
            ],
        },
        "guild_id": "1030000000000000003",
        "channel_id": "1020000000000000004",
        "member": {
            "user": {
                "id": "1010000000000000005",
                "username": "tester",
                "global_name": "Tester",
                "avatar": None,
            },
            "nick": "QA",
            "roles": ["1060000000000000006"],
            "joined_at": "2022-06-01T12:00:00.000000+00:00",
            "deaf": False,
            "mute": False,
            "permissions": "2147483647",
        },
        "token": "aW50ZXJhY3Rpb246MTA1MDAwMDAwMDAwMDAwMDAwMQ",
        "version": 1,
        "app_permissions": "442368",
        "locale": "en-US",
        "guild_locale": "de",
        "entitlements": [],
    }


@pytest.fixture
def dm_payload() -> dict[str, Any]:
    return _dm_payload()


@pytest.fixture
def guild_payload() -> dict[str, Any]:
    return _guild_payload()


@pytest.fixture
def message_body():
    return _message_body


def _message_body(message_id: str = "2000", content: str = "ok") -> dict[str, Any]:
    return {
        "id": message_id,
        "channel_id": "3",
        "content": content,
        "author": {"id": "2", "username": "bot", "bot": True},
        "timestamp": "2023-01-01T00:00:00+00:00",
        "flags": 0,
    }


class RecordingTransport:
    """Collects requests and answers them from a handler."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.handler = handler
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def json_bodies(self) -> list[Any]:
        return [json.loads(r.content) if r.content else None for r in self.requests]


@pytest.fixture
def make_http():
    def factory(handler: Callable[[httpx.Request], httpx.Response]):
        transport = RecordingTransport(handler)
        client = httpx.AsyncClient(transport=httpx.MockTransport(transport))
        http = DiscordHttp(token="bot-token", base_url="https://discord.test/api/v10", client=client)
        return http, transport

    return factory
