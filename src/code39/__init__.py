"""
code39

Модуль для генерации штрих-кодов Code 39 с типизированным API.

- Таблица символов Code 39 (цифры, A-Z, "-. $/+%", старт/стоп '*').
- Fail-fast валидация: первая ошибка возвращается с символом и позицией.
- Два рендерера: текст из блочных символов и SVG.
- Контрольный символ mod 43 не добавляется.

Public API:
    - generate: результат (Result) с выводом или ошибкой валидации
    - generate_or_fail: то же, но с исключением InvalidCharacterError
    - validate_input: только валидация
    - supported_characters: допустимые символы в стабильном порядке
    - RenderConfig: опции рендеринга (frozen dataclass)
    - OutputFormat: формат вывода (text | vector)
    - InvalidCharacterError, InvalidConfigurationError: исключения

Примеры:
    >>> from src.code39 import generate, RenderConfig
    >>> text = generate("HELLO").unwrap()
    >>> svg = generate("HELLO", RenderConfig(format="vector", bar_height=150)).unwrap()
"""

from src.code39.config import RenderConfig, RenderOptions
from src.code39.encoder import EncodedSequence, encode
from src.code39.errors import (
    Code39Error,
    InvalidCharacterError,
    InvalidConfigurationError,
)
from src.code39.generator import (
    ErrorInfo,
    Result,
    generate,
    generate_or_fail,
    supported_characters,
    validate_input,
)
from src.model.enums import OutputFormat

__all__ = [
    "Code39Error",
    "EncodedSequence",
    "ErrorInfo",
    "InvalidCharacterError",
    "InvalidConfigurationError",
    "OutputFormat",
    "RenderConfig",
    "RenderOptions",
    "Result",
    "encode",
    "generate",
    "generate_or_fail",
    "supported_characters",
    "validate_input",
]
