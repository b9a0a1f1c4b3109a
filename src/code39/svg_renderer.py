"""
SVG rendering of an encoded Code 39 sequence.

Output layout (one rect per bar, left to right):

    <?xml version="1.0" encoding="UTF-8"?>
    <svg width="W" height="H" xmlns="http://www.w3.org/2000/svg">
      <rect x=".." y="0" width=".." height="H" fill="black"/>
    </svg>

The trailing quiet zone is only counted in the document width; no rect is
emitted for it.
"""

from __future__ import annotations

from typing import Final, List, Tuple

from src.code39.config import RenderConfig
from src.code39.encoder import EncodedSequence

__all__ = ["SVG_NAMESPACE", "XML_DECLARATION", "layout_bars", "render_svg"]

XML_DECLARATION: Final[str] = '<?xml version="1.0" encoding="UTF-8"?>'
SVG_NAMESPACE: Final[str] = "http://www.w3.org/2000/svg"
BAR_FILL: Final[str] = "black"

# (x, width) of one bar
BarBox = Tuple[int, int]


def layout_bars(sequence: EncodedSequence, config: RenderConfig) -> Tuple[List[BarBox], int]:
    """
    Walk the sequence with a horizontal cursor.

    Returns:
        (bars, total_width): bar boxes in emission order and the document
        width including both quiet zones.
    """
    bars: List[BarBox] = []
    cursor = config.quiet_zone
    for index, width in enumerate(sequence.element_widths(config.module_width)):
        if index % 2 == 0:
            bars.append((cursor, width))
        cursor += width
    return bars, cursor + config.quiet_zone


def render_svg(sequence: EncodedSequence, config: RenderConfig) -> str:
    bars, total_width = layout_bars(sequence, config)
    height = config.bar_height
    rects = [
        f'  <rect x="{x}" y="0" width="{width}" height="{height}" fill="{BAR_FILL}"/>'
        for x, width in bars
    ]
    lines = [
        XML_DECLARATION,
        f'<svg width="{total_width}" height="{height}" xmlns="{SVG_NAMESPACE}">',
        *rects,
        "</svg>",
    ]
    return "\n".join(lines)
