from __future__ import annotations

from typing import Final, Optional

import regex

from src import get_logger
from src.code39.errors import InvalidCharacterError
from src.code39.symbols import SUPPORTED_CHARACTERS

logger = get_logger(__name__)

__all__ = ["find_invalid_character", "validate"]

# Extended grapheme cluster: one user-visible character
_GRAPHEME: Final = regex.compile(r"\X")


def find_invalid_character(text: str) -> Optional[InvalidCharacterError]:
    """
    Scan left to right and return an error for the first unsupported character.

    Characters are grapheme clusters, so a letter with a combining accent
    ("A" + U+0301) is reported whole, and positions count clusters.
    Lowercase letters and the start/stop sentinel are not in the repertoire
    and are reported like any other invalid character. Empty input is valid.
    """
    if not isinstance(text, str):
        raise TypeError(f"Barcode data must be str, got {type(text).__name__}")

    for position, match in enumerate(_GRAPHEME.finditer(text)):
        char = match.group()
        if char not in SUPPORTED_CHARACTERS:
            logger.debug("Rejected %r at position %d", char, position)
            return InvalidCharacterError(char, position)
    return None


def validate(text: str) -> None:
    """
    Validate barcode data.

    Raises:
        InvalidCharacterError: на первом недопустимом символе.
        TypeError: если данные не строка.
    """
    error = find_invalid_character(text)
    if error is not None:
        raise error
