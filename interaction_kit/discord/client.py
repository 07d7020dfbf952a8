from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from interaction_kit.config import settings
from interaction_kit.discord.message import Message
from interaction_kit.errors import HttpError, JsonError
from interaction_kit.log import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)

CALLBACK_ROUTE = "/interactions/{interaction_id}/{token}/callback"
ORIGINAL_RESPONSE_ROUTE = "/webhooks/{application_id}/{token}/messages/@original"
FOLLOWUP_ROUTE = "/webhooks/{application_id}/{token}"
FOLLOWUP_MESSAGE_ROUTE = "/webhooks/{application_id}/{token}/messages/{message_id}"


class DiscordHttp:
    """Async client for the interaction response endpoints.

    Requests are sent once; there is no retry and no rate-limit bookkeeping.
    A caller-supplied `httpx.AsyncClient` is borrowed and never closed here.
    """

    def __init__(
        self,
        token: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.token = settings.discord_bot_token if token is None else token
        self.base_url = (base_url or settings.discord_api_base_url).rstrip("/")
        self.timeout = settings.discord_http_timeout if timeout is None else timeout
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=self.timeout)

    async def __aenter__(self) -> DiscordHttp:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def create_interaction_response(
        self, interaction_id: str, token: str, payload: dict[str, Any]
    ) -> None:
        await self._request(
            "POST",
            CALLBACK_ROUTE,
            payload,
            interaction_id=interaction_id,
            token=token,
        )

    async def get_original_interaction_response(self, application_id: str, token: str) -> Message:
        data = await self._request(
            "GET", ORIGINAL_RESPONSE_ROUTE, application_id=application_id, token=token
        )
        return self._parse_message(data)

    async def edit_original_interaction_response(
        self, application_id: str, token: str, payload: dict[str, Any]
    ) -> Message:
        data = await self._request(
            "PATCH", ORIGINAL_RESPONSE_ROUTE, payload, application_id=application_id, token=token
        )
        return self._parse_message(data)

    async def delete_original_interaction_response(self, application_id: str, token: str) -> None:
        await self._request(
            "DELETE", ORIGINAL_RESPONSE_ROUTE, application_id=application_id, token=token
        )

    async def create_followup_message(
        self, application_id: str, token: str, payload: dict[str, Any]
    ) -> Message:
        data = await self._request(
            "POST", FOLLOWUP_ROUTE, payload, application_id=application_id, token=token
        )
        return self._parse_message(data)

    async def edit_followup_message(
        self, application_id: str, token: str, message_id: str, payload: dict[str, Any]
    ) -> Message:
        data = await self._request(
            "PATCH",
            FOLLOWUP_MESSAGE_ROUTE,
            payload,
            application_id=application_id,
            token=token,
            message_id=message_id,
        )
        return self._parse_message(data)

    async def delete_followup_message(self, application_id: str, token: str, message_id: str) -> None:
        await self._request(
            "DELETE",
            FOLLOWUP_MESSAGE_ROUTE,
            application_id=application_id,
            token=token,
            message_id=message_id,
        )

    def _headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "User-Agent": settings.discord_user_agent,
        }
        # Interaction webhook endpoints authenticate through the interaction token.
        if self.token:
            headers["Authorization"] = f"Bot {self.token}"
        return headers

    async def _request(
        self,
        method: str,
        route: str,
        payload: dict[str, Any] | None = None,
        **params: str,
    ) -> Any:
        # Path parameters are opaque; escape them so a token cannot change the route.
        escaped = {name: quote(value, safe="") for name, value in params.items()}
        url = f"{self.base_url}{route.format(**escaped)}"
        # Only the route template is logged or put in errors.
        logger.debug("%s %s", method, route)
        try:
            response = await self._client.request(
                method, url, json=payload, headers=self._headers(), timeout=self.timeout
            )
        except httpx.RequestError as exc:
            logger.warning("Request %s %s failed: %s", method, route, exc)
            raise HttpError(method, route, message=str(exc)) from exc

        if response.is_error:
            code, message = self._error_body(response)
            logger.error(
                "Discord API error status=%s code=%s %s %s: %s",
                response.status_code,
                code,
                method,
                route,
                message,
            )
            raise HttpError(
                method, route, status_code=response.status_code, code=code, message=message
            )

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise JsonError(f"invalid JSON in response to {method} {route}") from exc

    @staticmethod
    def _error_body(response: httpx.Response) -> tuple[int | None, str]:
        try:
            data = response.json()
        except ValueError:
            return None, response.text
        if not isinstance(data, dict):
            return None, response.text
        code = data.get("code")
        return (code if isinstance(code, int) else None), str(data.get("message", "") or "")

    @staticmethod
    def _parse_message(data: Any) -> Message:
        if data is None:
            raise JsonError("expected a message object, got an empty response")
        try:
            return Message.model_validate(data)
        except ValidationError as exc:
            raise JsonError(f"response is not a message object: {exc}") from exc
