from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Generic, Optional, Tuple, TypeVar

from src import get_logger
from src.code39 import symbols
from src.code39.config import RenderConfig
from src.code39.encoder import EncodedSequence, encode
from src.code39.errors import InvalidCharacterError, InvalidConfigurationError
from src.code39.svg_renderer import render_svg
from src.code39.text_renderer import render_text
from src.code39.validator import find_invalid_character
from src.model.enums import OutputFormat

logger = get_logger(__name__)

__all__ = [
    "ErrorInfo",
    "Result",
    "generate",
    "generate_or_fail",
    "validate_input",
    "supported_characters",
]

T = TypeVar("T")

Renderer = Callable[[EncodedSequence, RenderConfig], str]

_RENDERERS: Dict[OutputFormat, Renderer] = {
    OutputFormat.TEXT: render_text,
    OutputFormat.VECTOR: render_svg,
}


@dataclass(frozen=True)
class ErrorInfo:
    """Structured validation error returned inside a Result."""

    kind: str
    message: str
    character: Optional[str] = None
    position: Optional[int] = None

    @classmethod
    def from_exception(cls, exc: InvalidCharacterError) -> "ErrorInfo":
        return cls(
            kind="invalid_character",
            message=str(exc),
            character=exc.character,
            position=exc.position,
        )

    def to_exception(self) -> InvalidCharacterError:
        return InvalidCharacterError(self.character or "", self.position)


@dataclass(frozen=True)
class Result(Generic[T]):
    """Success value or validation error. Exactly one is meaningful."""

    value: Optional[T] = None
    error: Optional[ErrorInfo] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error.to_exception()
        return self.value  # type: ignore[return-value]


def supported_characters() -> Tuple[str, ...]:
    """Encodable characters in stable order: digits, A-Z, then specials."""
    return symbols.supported_characters()


def validate_input(text: str) -> Result[None]:
    """Check data against the Code 39 repertoire; first offending char wins."""
    error = find_invalid_character(text)
    if error is not None:
        return Result(error=ErrorInfo.from_exception(error))
    return Result(value=None)


def _resolve_config(config: Optional[RenderConfig]) -> RenderConfig:
    if config is None:
        return RenderConfig()
    if not isinstance(config, RenderConfig):
        raise InvalidConfigurationError(
            "config", config, "expected RenderConfig instance"
        )
    return config


def _generate(text: str, config: RenderConfig) -> Result[str]:
    error = find_invalid_character(text)
    if error is not None:
        logger.warning("Barcode data rejected: %s", error)
        return Result(error=ErrorInfo.from_exception(error))

    fmt = OutputFormat.parse(config.format)
    renderer = _RENDERERS.get(fmt) if fmt is not None else None
    if renderer is None:
        raise InvalidConfigurationError("format", config.format, "no renderer")

    # Validation runs on the raw input, uppercasing happens inside encode().
    sequence = encode(text)
    logger.debug(
        "Generating %s barcode: %d chars, %d elements",
        fmt.value,
        len(text),
        len(sequence),
    )
    return Result(value=renderer(sequence, config))


def generate(text: str, config: Optional[RenderConfig] = None) -> Result[str]:
    """
    Generate a Code 39 barcode.

    Args:
        text: данные (цифры, A-Z, "-. $/+%").
        config: опции рендеринга; по умолчанию текстовый вывод.

    Returns:
        Result with the rendered string, or with ErrorInfo naming the first
        invalid character.

    Raises:
        InvalidConfigurationError: config is not usable. Never returned as a Result.

    Examples:
        >>> generate("HELLO").value
        >>> generate("HELLO", RenderConfig(format="vector")).value
        >>> generate("hello").error.message
        "Invalid character: 'h'. Only uppercase letters, numbers, and specific special characters are allowed."
    """
    return _generate(text, _resolve_config(config))


def generate_or_fail(text: str, config: Optional[RenderConfig] = None) -> str:
    """
    Same as generate() but raises on invalid data.

    Raises:
        InvalidCharacterError: data contains an unsupported character.
        InvalidConfigurationError: config is not usable.
    """
    return _generate(text, _resolve_config(config)).unwrap()
