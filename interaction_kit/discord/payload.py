from __future__ import annotations

from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from interaction_kit.discord.users import Member, User
from interaction_kit.errors import PayloadDecodeError

T = TypeVar("T")


def remove_from_map(payload: dict[str, Any], key: str, adapter: TypeAdapter[T]) -> T:
    if key not in payload:
        raise PayloadDecodeError.missing_field(key)
    return validate_field(key, adapter, payload.pop(key))


def remove_from_map_opt(payload: dict[str, Any], key: str, adapter: TypeAdapter[T]) -> T | None:
    # Absent and explicit null are both "not sent".
    value = payload.pop(key, None)
    if value is None:
        return None
    return validate_field(key, adapter, value)


def resolve_user(user: User | None, member: Member | None) -> User:
    if user is not None:
        return user
    if member is not None:
        return member.user
    raise PayloadDecodeError("expected user or member")


def validate_field(key: str, adapter: TypeAdapter[T], value: Any) -> T:
    try:
        return adapter.validate_python(value)
    except ValidationError as exc:
        raise PayloadDecodeError.invalid_type(key, _describe(exc)) from exc


def _describe(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    if location:
        return f"{location}: {first['msg']}"
    return first["msg"]
