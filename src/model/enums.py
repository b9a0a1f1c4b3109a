"""
model/enums.py

(Краткое RU: Перечисления для модели штрих-кода Code 39.)

EN: Domain enums for the Code 39 barcoder. Only the two supported output
formats live here; rendering logic is in src/code39.

See Also:
    - src/code39/text_renderer.py
    - src/code39/svg_renderer.py
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Final, Literal, Optional

# Legacy option values accepted from keyword-style configs
_FORMAT_ALIASES: Final[Dict[str, str]] = {
    "ascii": "text",
    "svg": "vector",
}


class OutputFormat(str, Enum):
    TEXT = "text"
    VECTOR = "vector"

    @property
    def mime_type(self) -> str:
        return "image/svg+xml" if self is OutputFormat.VECTOR else "text/plain"

    @property
    def file_extension(self) -> str:
        return ".svg" if self is OutputFormat.VECTOR else ".txt"

    @classmethod
    def parse(cls, value: object) -> Optional["OutputFormat"]:
        """Resolve an enum member, its value or a legacy alias; None if unknown."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        key = value.strip().lower()
        key = _FORMAT_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            return None

    def localized_name(self, lang: Literal["ru", "en"] = "ru") -> str:
        names_ru = {
            OutputFormat.TEXT: "Текст (блочные символы)",
            OutputFormat.VECTOR: "Векторная графика (SVG)",
        }
        names_en = {
            OutputFormat.TEXT: "Text (block characters)",
            OutputFormat.VECTOR: "Vector graphics (SVG)",
        }
        return names_ru[self] if lang == "ru" else names_en[self]
