"""Argument validation shared by the public functions."""

__all__ = [
    "require_non_negative",
    "require_single_char",
]


def require_non_negative(name: str, value: int) -> int:
    """Return value, raising ValueError if it is negative."""
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


def require_single_char(name: str, value: str) -> str:
    """Return value, raising ValueError unless it is exactly one character."""
    if len(value) != 1:
        raise ValueError(f"{name} must be a single character, got {value!r}")
    return value
