"""
Code 39 symbol table.

Each character maps to 9 elements (5 bars, 4 spaces, alternating, bar first).
0 = narrow element, 1 = wide element. Every pattern has exactly three wide
elements. The table is built once at import and exposed read-only.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, FrozenSet, Mapping, Optional, Tuple

__all__ = [
    "ElementPattern",
    "SENTINEL",
    "SYMBOL_TABLE",
    "SUPPORTED_CHARACTERS",
    "PATTERN_LENGTH",
    "lookup",
    "supported_characters",
]

ElementPattern = Tuple[int, ...]

SENTINEL: Final[str] = "*"
PATTERN_LENGTH: Final[int] = 9

# Declaration order matters: supported_characters() follows it.
_RAW_PATTERNS: Final[Tuple[Tuple[str, str], ...]] = (
    ("0", "000110100"),
    ("1", "100100001"),
    ("2", "001100001"),
    ("3", "101100000"),
    ("4", "000110001"),
    ("5", "100110000"),
    ("6", "001110000"),
    ("7", "000100101"),
    ("8", "100100100"),
    ("9", "001100100"),
    ("A", "100001001"),
    ("B", "001001001"),
    ("C", "101001000"),
    ("D", "000011001"),
    ("E", "100011000"),
    ("F", "001011000"),
    ("G", "000001101"),
    ("H", "100001100"),
    ("I", "001001100"),
    ("J", "000011100"),
    ("K", "100000011"),
    ("L", "001000011"),
    ("M", "101000010"),
    ("N", "000010011"),
    ("O", "100010010"),
    ("P", "001010010"),
    ("Q", "000000111"),
    ("R", "100000110"),
    ("S", "001000110"),
    ("T", "000010110"),
    ("U", "110000001"),
    ("V", "011000001"),
    ("W", "111000000"),
    ("X", "010010001"),
    ("Y", "110010000"),
    ("Z", "011010000"),
    ("-", "010000101"),
    (".", "110000100"),
    (" ", "011000100"),
    ("$", "010101000"),
    ("/", "010100010"),
    ("+", "010001010"),
    ("%", "000101010"),
    (SENTINEL, "010010100"),
)

SYMBOL_TABLE: Final[Mapping[str, ElementPattern]] = MappingProxyType(
    {char: tuple(int(bit) for bit in bits) for char, bits in _RAW_PATTERNS}
)

_SUPPORTED_ORDERED: Final[Tuple[str, ...]] = tuple(
    char for char, _ in _RAW_PATTERNS if char != SENTINEL
)

SUPPORTED_CHARACTERS: Final[FrozenSet[str]] = frozenset(_SUPPORTED_ORDERED)


def lookup(character: str) -> Optional[ElementPattern]:
    """Return the element pattern for a character, sentinel included; None if unknown."""
    return SYMBOL_TABLE.get(character)


def supported_characters() -> Tuple[str, ...]:
    """User-enterable characters: digits, A-Z, then "- . space $ / + %"."""
    return _SUPPORTED_ORDERED
