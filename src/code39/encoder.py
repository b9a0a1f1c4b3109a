from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Iterator, List, Tuple

from src.code39.symbols import SENTINEL, SYMBOL_TABLE

__all__ = [
    "EncodedSequence",
    "WIDE_RATIO",
    "INTER_CHARACTER_GAP",
    "encode",
]

# Wide elements are three times the narrow width. Fixed for Code 39.
WIDE_RATIO: Final[int] = 3
# Narrow space inserted between adjacent character patterns.
INTER_CHARACTER_GAP: Final[int] = 0


@dataclass(frozen=True)
class EncodedSequence:
    """
    Flat element stream for one message, sentinels included.

    Even indices are bars, odd indices are spaces, across the whole stream.
    """

    elements: Tuple[int, ...]
    text: str = ""

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[int]:
        return iter(self.elements)

    @property
    def bar_count(self) -> int:
        return (len(self.elements) + 1) // 2

    def element_widths(self, module_width: int) -> List[int]:
        """Width of each element given the narrow width."""
        wide = module_width * WIDE_RATIO
        return [wide if flag else module_width for flag in self.elements]

    def to_bits(self) -> str:
        return "".join(str(flag) for flag in self.elements)


def encode(text: str) -> EncodedSequence:
    """
    Encode already-validated data.

    The data is uppercased and wrapped in start/stop sentinels; patterns are
    joined by a single narrow space. No validation happens here: an unknown
    character raises KeyError.
    """
    full = f"{SENTINEL}{text.upper()}{SENTINEL}"
    elements: List[int] = []
    for index, char in enumerate(full):
        if index:
            elements.append(INTER_CHARACTER_GAP)
        elements.extend(SYMBOL_TABLE[char])
    return EncodedSequence(elements=tuple(elements), text=full)
