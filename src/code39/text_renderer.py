from __future__ import annotations

from typing import Final, List

from src.code39.config import RenderConfig
from src.code39.encoder import EncodedSequence

__all__ = ["BAR_GLYPH", "BLANK", "render_text"]

BAR_GLYPH: Final[str] = "█"  # FULL BLOCK
BLANK: Final[str] = " "


def render_text(sequence: EncodedSequence, config: RenderConfig) -> str:
    """
    Render the sequence as one line of block characters.

    Narrow elements take one character, wide elements two. Bars use the
    full-block glyph, spaces the ordinary blank. module_width and bar_height
    do not apply here.
    """
    quiet = BLANK * config.quiet_zone
    parts: List[str] = [quiet]
    for index, flag in enumerate(sequence):
        unit = BAR_GLYPH if index % 2 == 0 else BLANK
        parts.append(unit * (2 if flag else 1))
    parts.append(quiet)
    return "".join(parts)
