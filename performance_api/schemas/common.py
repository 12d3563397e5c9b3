# performance_api/schemas/common.py
from pydantic import ConfigDict
from pydantic.alias_generators import to_camel

# JSON bodies speak camelCase (playerId, matchDate, ...); snake_case is
# still accepted on input so Python callers can pass field names.
REQUEST_CONFIG = ConfigDict(
    extra="forbid",
    alias_generator=to_camel,
    populate_by_name=True,
)

RESPONSE_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    from_attributes=True,
)


def blank_to_none(v: str | None) -> str | None:
    """Treat a whitespace-only string as missing; otherwise keep it unchanged."""
    if v is None or not v.strip():
        return None
    return v
