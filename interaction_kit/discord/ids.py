from typing import Annotated, Any

from pydantic import BeforeValidator


def _coerce_snowflake(value: Any) -> Any:
    # The platform sends ids as strings; integers are accepted for hand-built payloads.
    if isinstance(value, bool):
        raise ValueError("snowflake must be a string or integer")
    if isinstance(value, int):
        if value < 0:
            raise ValueError("snowflake must not be negative")
        return str(value)
    if isinstance(value, str):
        if not (value.isascii() and value.isdigit()):
            raise ValueError(f"snowflake must be numeric, got {value!r}")
        return value
    raise ValueError(f"snowflake must be a string or integer, got {type(value).__name__}")


Snowflake = Annotated[str, BeforeValidator(_coerce_snowflake)]
