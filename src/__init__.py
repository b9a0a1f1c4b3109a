"""
Пакет Code 39 Barcoder
======================

Генератор линейных штрих-кодов Code 39 без внешних зависимостей в ядре.

Этот пакет предоставляет:
    - Статическую таблицу символов Code 39 (43 символа, включая старт/стоп '*')
    - Fail-fast валидацию входной строки
    - Кодирование в последовательность узких/широких элементов
    - Рендеринг в текст из блочных символов и в SVG-документ
    - Консольную утилиту `code39`

Пример базового использования:
    >>> from src.code39 import generate, RenderConfig, OutputFormat
    >>>
    >>> result = generate("HELLO")
    >>> if result.ok:
    ...     print(result.value)
    >>>
    >>> svg = generate("HELLO", RenderConfig(format=OutputFormat.VECTOR)).unwrap()

Пример настройки:
    >>> config = load_config()
    >>> print(f"Формат по умолчанию: {config['format']}")
    >>>
    >>> logger = get_logger(__name__)
    >>> logger.debug("Отладочное логирование теперь включено")

Автор: Code 39 Barcoder Development Team
Версия: 0.1.0
Лицензия: MIT
Python: 3.10+
"""

import json
import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

# =============================================================================
# МЕТАДАННЫЕ ВЕРСИИ
# =============================================================================

__version__ = "0.1.0"
__author__ = "Code 39 Barcoder Development Team"
__description__ = "Code 39 barcode encoder with text and SVG renderers"
__license__ = "MIT"
__python_requires__ = ">=3.10"

# Компоненты семантической версии
VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0

LOGGER_NAMESPACE = "code39"

# =============================================================================
# ПРОВЕРКА ВЕРСИИ PYTHON
# =============================================================================

if sys.version_info < (3, 10):
    raise RuntimeError(
        f"Code 39 Barcoder требует Python 3.10 или выше. "
        f"Текущая версия: {sys.version_info.major}."
        f"{sys.version_info.minor}.{sys.version_info.micro}"
    )

# =============================================================================
# КОНФИГУРАЦИЯ ЛОГИРОВАНИЯ
# =============================================================================


def _setup_logging() -> None:
    """
    Инициализировать общепакетную конфигурацию логирования.

    Настраивает логгер пакета с:
    - Консольным обработчиком (stderr) для WARNING и выше
    - Ротирующим файловым обработчиком, только если задана переменная
      окружения CODE39_LOG_FILE
    - Структурированным форматом с временной меткой, уровнем,
      модулем и сообщением

    Уровень логирования задаётся переменной окружения CODE39_LOG_LEVEL.
    Допустимые значения: DEBUG, INFO, WARNING, ERROR, CRITICAL

    Функция идемпотентна - повторные вызовы не имеют дополнительного эффекта.
    """
    log_level_str = os.environ.get("CODE39_LOG_LEVEL", "INFO").upper()

    log_level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    log_level = log_level_map.get(log_level_str, logging.INFO)

    root_logger = logging.getLogger(LOGGER_NAMESPACE)
    if root_logger.handlers:
        return

    root_logger.setLevel(log_level)

    formatter = logging.Formatter(
        fmt=("[%(asctime)s] %(levelname)-8s " "[%(name)s.%(funcName)s:%(lineno)d] %(message)s"),
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Консольный обработчик (stderr) - WARNING и выше
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Файловый обработчик (ротирующий) - только по запросу
    log_file = os.environ.get("CODE39_LOG_FILE")
    if log_file:
        try:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_path,
                maxBytes=10 * 1024 * 1024,  # 10 МБ
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            root_logger.warning(
                f"Не удалось инициализировать файловое логирование: {e}. "
                f"Используется только консоль."
            )

    root_logger.propagate = False


def get_logger(module_name: str) -> logging.Logger:
    """
    Получить настроенный логгер для указанного модуля.

    Логгеры именуются как 'code39.<module_name>' и наследуют
    конфигурацию логгера пакета.

    Аргументы:
        module_name: Имя модуля, запрашивающего логгер. Обычно `__name__`.

    Возвращает:
        Экземпляр logging.Logger.

    Пример:
        >>> logger = get_logger(__name__)
        >>> logger.info("Генерация штрих-кода")
        >>> logger.debug("Длина входа: %d", 5)
    """
    if not module_name.startswith(LOGGER_NAMESPACE):
        if module_name == "__main__":
            full_name = f"{LOGGER_NAMESPACE}.main"
        else:
            clean_name = module_name.lstrip(".")
            full_name = f"{LOGGER_NAMESPACE}.{clean_name}"
    else:
        full_name = module_name

    return logging.getLogger(full_name)


# =============================================================================
# УПРАВЛЕНИЕ КОНФИГУРАЦИЕЙ
# =============================================================================

# Значения конфигурации по умолчанию
_DEFAULT_CONFIG: Dict[str, Any] = {
    "format": "text",
    "module_width": 2,
    "bar_height": 100,
    "quiet_zone": 10,
}

DEFAULT_CONFIG_FILENAME = "code39.json"


def load_config(config_path: Optional[Path] = None, strict: bool = False) -> Dict[str, Any]:
    """
    Загрузить конфигурацию из code39.json или использовать значения по умолчанию.

    Ключи конфигурации:
        - format: str - Формат вывода ("text" или "vector")
        - module_width: int - Ширина узкого элемента в SVG
        - bar_height: int - Высота штрихов в SVG
        - quiet_zone: int - Ширина тихой зоны с каждой стороны

    Уровень логирования задаётся только переменной окружения CODE39_LOG_LEVEL.

    Аргументы:
        config_path: Опциональный путь к файлу конфигурации.
                    Если None, ищет 'code39.json' в текущем каталоге.
        strict: Если True, отсутствующий или некорректный файл вызывает
               исключение вместо возврата значений по умолчанию.
               Используется для файла, явно указанного пользователем.

    Возвращает:
        Словарь со всеми ключами по умолчанию, пользовательские значения
        переопределяют значения по умолчанию.

    Raises:
        FileNotFoundError: strict=True и файл не существует.
        OSError: strict=True и файл не удалось прочитать.
        ValueError: strict=True и файл не является JSON-объектом
                    (включая json.JSONDecodeError).

    Примечание:
        Проверка значений выполняется в RenderConfig.from_dict, а не здесь.
    """
    logger = get_logger(__name__)

    if config_path is None:
        config_path = Path(DEFAULT_CONFIG_FILENAME)

    config = _DEFAULT_CONFIG.copy()

    if not config_path.is_file():
        if strict:
            raise FileNotFoundError(f"Файл конфигурации {config_path} не найден")
        logger.info(
            f"Файл конфигурации {config_path} не найден. "
            f"Используется конфигурация по умолчанию."
        )
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            user_config = json.load(f)

        if not isinstance(user_config, dict):
            raise ValueError(
                f"Файл конфигурации должен содержать JSON-объект, "
                f"получен {type(user_config).__name__}"
            )

        config.update(user_config)

        logger.info(f"Конфигурация загружена из {config_path}")
        logger.debug(f"Конфигурация: {config}")

    except json.JSONDecodeError as e:
        if strict:
            raise
        logger.warning(
            f"Не удалось разобрать {config_path}: Недопустимый JSON "
            f"в строке {e.lineno}, столбце {e.colno}. "
            f"Используется конфигурация по умолчанию."
        )
    except OSError as e:
        if strict:
            raise
        logger.warning(
            f"Не удалось прочитать {config_path}: {e}. "
            f"Используется конфигурация по умолчанию."
        )
    except ValueError as e:
        if strict:
            raise
        logger.warning(
            f"Недопустимый формат конфигурации: {e}. "
            f"Используется конфигурация по умолчанию."
        )

    return config


# =============================================================================
# ИНИЦИАЛИЗАЦИЯ ПАКЕТА
# =============================================================================

_setup_logging()

__all__ = [
    "__version__",
    "__author__",
    "__description__",
    "__license__",
    "__python_requires__",
    "VERSION_MAJOR",
    "VERSION_MINOR",
    "VERSION_PATCH",
    "get_logger",
    "load_config",
]
