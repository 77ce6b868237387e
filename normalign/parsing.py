"""Shared parsing helpers for configuration and CLI value normalization."""

from __future__ import annotations

from .errors import InvalidConfigurationError


_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})
_DETERMINED_BY_LOWERCASE_TOKENS = frozenset(
    {"auto", "determined_by_lowercase", "determined-by-lowercase", "none", "null"}
)


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_permissive_boolean(value: object) -> bool | None:
    """Parse a permissive boolean token and return `None` for invalid values."""

    if isinstance(value, bool):
        return value

    normalized = normalize_optional_string(value)
    if normalized is None:
        return None

    token = normalized.lower()
    if token in _TRUE_BOOLEAN_TOKENS:
        return True
    if token in _FALSE_BOOLEAN_TOKENS:
        return False
    return None


def parse_required_boolean(value: object, field_name: str) -> bool:
    """Parse a required boolean value from accepted textual tokens.

    Args:
        value: Value to parse.
        field_name: Field name for an actionable validation error message.

    Raises:
        InvalidConfigurationError: If the token is not an accepted boolean value.
    """

    parsed = parse_permissive_boolean(value)
    if parsed is not None:
        return parsed

    raise InvalidConfigurationError(
        f"`{field_name}` must be a boolean value (`true`/`false`, `1`/`0`, `yes`/`no`)."
    )


def parse_tri_state(value: object, field_name: str) -> bool | None:
    """Parse a strip-accents style tri-state.

    Returns:
        `True`/`False` for boolean tokens, `None` for `auto`-like tokens or a
        missing value.

    Raises:
        InvalidConfigurationError: If the token is neither boolean nor `auto`.
    """

    if value is None:
        return None
    parsed = parse_permissive_boolean(value)
    if parsed is not None:
        return parsed
    normalized = normalize_optional_string(value)
    if normalized is not None and normalized.lower() in _DETERMINED_BY_LOWERCASE_TOKENS:
        return None

    raise InvalidConfigurationError(
        f"`{field_name}` must be `true`, `false`, or `auto` (determined by lowercase)."
    )
