from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, FrozenSet, Mapping, TypedDict, Union

from src.code39.errors import InvalidConfigurationError
from src.model.enums import OutputFormat

__all__ = [
    "RenderConfig",
    "RenderOptions",
]


class RenderOptions(TypedDict, total=False):
    """
    Типобезопасные опции рендеринга в виде обычного словаря.

    Принимаются RenderConfig.from_dict. Ключи width/height являются
    синонимами module_width/bar_height.
    """

    format: str
    module_width: int
    bar_height: int
    quiet_zone: int
    width: int
    height: int


def _check_int(field: str, value: Any, minimum: int) -> None:
    # bool is an int subclass but never a valid dimension
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfigurationError(field, value, "must be an integer")
    if value < minimum:
        raise InvalidConfigurationError(field, value, f"must be >= {minimum}")


@dataclass(frozen=True)
class RenderConfig:
    """
    Render options record.

    Args:
        format: OutputFormat or its string value ("text", "vector";
            legacy "ascii"/"svg" accepted).
        module_width: narrow element width in SVG units. Vector only.
        bar_height: bar height in SVG units. Vector only.
        quiet_zone: blank margin on each side. Characters for text,
            SVG units for vector.

    Raises:
        InvalidConfigurationError: on any unrecognised format or bad dimension.
    """

    format: Union[OutputFormat, str] = OutputFormat.TEXT
    module_width: int = 2
    bar_height: int = 100
    quiet_zone: int = 10

    _ALIASES: ClassVar[Dict[str, str]] = {
        "width": "module_width",
        "height": "bar_height",
    }
    _FIELDS: ClassVar[FrozenSet[str]] = frozenset(
        {"format", "module_width", "bar_height", "quiet_zone"}
    )

    def __post_init__(self) -> None:
        fmt = OutputFormat.parse(self.format)
        if fmt is None:
            raise InvalidConfigurationError(
                "format", self.format, "expected 'text' or 'vector'"
            )
        object.__setattr__(self, "format", fmt)
        _check_int("module_width", self.module_width, 1)
        _check_int("bar_height", self.bar_height, 1)
        _check_int("quiet_zone", self.quiet_zone, 0)

    @property
    def output_format(self) -> OutputFormat:
        return OutputFormat(self.format)

    def replace(self, **changes: Any) -> "RenderConfig":
        updated = self.to_dict()
        for key, value in changes.items():
            updated[self.canonical_key(key)] = value
        return RenderConfig.from_dict(updated)

    @classmethod
    def canonical_key(cls, key: str) -> str:
        return cls._ALIASES.get(key, key)

    @classmethod
    def from_dict(
        cls, options: Mapping[str, Any], strict: bool = True
    ) -> "RenderConfig":
        """
        Build a config from a plain mapping.

        Keys outside the allowlist raise InvalidConfigurationError when strict,
        and are skipped otherwise. An alias given together with its field
        (e.g. "width" and "module_width") is always rejected.

        Example:
            >>> RenderConfig.from_dict({"format": "svg", "width": 3, "height": 150})
        """
        kwargs: Dict[str, Any] = {}
        seen: Dict[str, str] = {}
        for key, value in options.items():
            name = cls.canonical_key(key)
            if name not in cls._FIELDS:
                if not strict:
                    continue
                raise InvalidConfigurationError(key, value, "unknown option")
            if name in seen:
                raise InvalidConfigurationError(
                    key, value, f"duplicates '{seen[name]}'"
                )
            seen[name] = key
            kwargs[name] = value
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "format": self.output_format.value,
            "module_width": self.module_width,
            "bar_height": self.bar_height,
            "quiet_zone": self.quiet_zone,
        }
