"""Exceptions raised by the Code 39 encoder and renderers."""

from __future__ import annotations

from typing import Any, Optional

__all__ = [
    "Code39Error",
    "InvalidCharacterError",
    "InvalidConfigurationError",
]


class Code39Error(Exception):
    """Base class for all Code 39 generation errors."""


class InvalidCharacterError(Code39Error, ValueError):
    """
    Input contains a character outside the Code 39 repertoire.

    Recoverable data error: returned as a Result by generate(),
    raised by generate_or_fail().
    """

    def __init__(self, character: str, position: Optional[int] = None) -> None:
        self.character = character
        self.position = position
        super().__init__(
            f"Invalid character: '{character}'. Only uppercase letters, numbers, "
            f"and specific special characters are allowed."
        )


class InvalidConfigurationError(Code39Error, TypeError):
    """Render configuration is invalid. Programmer error, always raised."""

    def __init__(self, field: str, value: Any, reason: Optional[str] = None) -> None:
        self.field = field
        self.value = value
        msg = f"Invalid configuration: {field}={value!r}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)
