from __future__ import annotations

from enum import Enum


class InteractionKitError(Exception):
    """Base class for every error raised by interaction_kit."""


class PayloadDecodeError(InteractionKitError, ValueError):
    """An inbound payload could not be turned into a typed record.

    `field` names the offending key when there is one.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field

    @classmethod
    def missing_field(cls, field: str) -> PayloadDecodeError:
        return cls(f"missing field `{field}`", field=field)

    @classmethod
    def invalid_type(cls, field: str, detail: str) -> PayloadDecodeError:
        return cls(f"invalid type for field `{field}`: {detail}", field=field)


class ModelErrorKind(str, Enum):
    MESSAGE_TOO_LONG = "message_too_long"
    EMBED_AMOUNT = "embed_amount"
    TOO_MANY_ACTION_ROWS = "too_many_action_rows"


class ModelError(InteractionKitError):
    """Local validation failure, raised before any request is sent."""

    def __init__(self, kind: ModelErrorKind, overflow: int, limit: int) -> None:
        super().__init__(f"{kind.value}: exceeds limit of {limit} by {overflow}")
        self.kind = kind
        self.overflow = overflow
        self.limit = limit


class HttpError(InteractionKitError):
    """The API answered with an error status, or the request never completed.

    `status_code` is None for transport failures. `code` and `message` carry the
    platform's JSON error body when one was returned.
    """

    def __init__(
        self,
        method: str,
        route: str,
        status_code: int | None = None,
        code: int | None = None,
        message: str = "",
    ) -> None:
        status = status_code if status_code is not None else "transport"
        super().__init__(f"{method} {route} failed ({status}): {message}".rstrip(": "))
        self.method = method
        self.route = route
        self.status_code = status_code
        self.code = code
        self.message = message

    @property
    def is_transport_error(self) -> bool:
        return self.status_code is None


class JsonError(InteractionKitError):
    """An API response body could not be deserialized."""
