"""
Модульные тесты для src/__init__.py
Тестирует метаданные пакета, конфигурацию и логирование.
"""

import json
import logging
import logging.handlers
import re
from pathlib import Path
from unittest import mock

import pytest

import src as barcoder


class TestVersionMetadata:
    """Тестирование метаданных версии и констант."""

    def test_version_format(self) -> None:
        """Проверить, что __version__ следует семантическому версионированию."""
        assert re.match(r"^\d+\.\d+\.\d+$", barcoder.__version__)

    def test_version_components(self) -> None:
        expected = f"{barcoder.VERSION_MAJOR}.{barcoder.VERSION_MINOR}.{barcoder.VERSION_PATCH}"
        assert barcoder.__version__ == expected

    @pytest.mark.parametrize(
        "attr", ["__author__", "__description__", "__license__", "__python_requires__"]
    )
    def test_metadata_attributes(self, attr: str) -> None:
        value = getattr(barcoder, attr)
        assert isinstance(value, str) and value


class TestPublicAPI:
    def test_all_exports_exist(self) -> None:
        for name in barcoder.__all__:
            assert hasattr(barcoder, name), f"Имя '{name}' из __all__ не существует в модуле"

    def test_no_duplicate_exports(self) -> None:
        assert len(barcoder.__all__) == len(set(barcoder.__all__))

    def test_utilities_exported(self) -> None:
        assert "get_logger" in barcoder.__all__
        assert "load_config" in barcoder.__all__


class TestLogging:
    """Тестирование конфигурации логирования."""

    def test_get_logger_name_format(self) -> None:
        logger = barcoder.get_logger("test_module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "code39.test_module"

    def test_get_logger_with_qualified_name(self) -> None:
        assert barcoder.get_logger("code39.encoder").name == "code39.encoder"

    def test_get_logger_with_main(self) -> None:
        assert barcoder.get_logger("__main__").name == "code39.main"

    def test_get_logger_strips_leading_dots(self) -> None:
        assert barcoder.get_logger(".cli").name == "code39.cli"

    def test_logger_is_configured(self) -> None:
        root_logger = logging.getLogger("code39")
        assert len(root_logger.handlers) >= 1
        assert root_logger.propagate is False

    def test_setup_logging_idempotent(self) -> None:
        root_logger = logging.getLogger("code39")
        before = list(root_logger.handlers)
        barcoder._setup_logging()
        assert root_logger.handlers == before

    def test_log_level_and_file_from_environment(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "code39.log"
        root_logger = logging.getLogger("code39")
        saved_handlers = root_logger.handlers[:]
        saved_level = root_logger.level
        env = {"CODE39_LOG_LEVEL": "DEBUG", "CODE39_LOG_FILE": str(log_file)}
        try:
            with mock.patch.dict("os.environ", env):
                for handler in saved_handlers:
                    root_logger.removeHandler(handler)
                barcoder._setup_logging()

                assert root_logger.level == logging.DEBUG
                assert any(
                    isinstance(h, logging.handlers.RotatingFileHandler)
                    for h in root_logger.handlers
                )
                assert log_file.parent.is_dir()
        finally:
            for handler in root_logger.handlers[:]:
                root_logger.removeHandler(handler)
                handler.close()
            for handler in saved_handlers:
                root_logger.addHandler(handler)
            root_logger.setLevel(saved_level)


class TestConfiguration:
    """Тестирование управления конфигурацией."""

    def test_load_config_defaults(self, tmp_path: Path) -> None:
        config = barcoder.load_config(tmp_path / "nonexistent_config.json")
        assert config == {
            "format": "text",
            "module_width": 2,
            "bar_height": 100,
            "quiet_zone": 10,
        }
        assert "log_level" not in config

    def test_load_config_from_file(self, tmp_path: Path) -> None:
        config_path = tmp_path / "code39.json"
        config_path.write_text(
            json.dumps({"format": "vector", "quiet_zone": 0}), encoding="utf-8"
        )
        config = barcoder.load_config(config_path)
        assert config["format"] == "vector"
        assert config["quiet_zone"] == 0
        assert config["module_width"] == 2

    def test_load_config_invalid_json(self, tmp_path: Path) -> None:
        config_path = tmp_path / "broken.json"
        config_path.write_text("{ invalid json }", encoding="utf-8")
        config = barcoder.load_config(config_path)
        assert config["format"] == "text"

    def test_load_config_non_object(self, tmp_path: Path) -> None:
        config_path = tmp_path / "list.json"
        config_path.write_text("[1, 2, 3]", encoding="utf-8")
        config = barcoder.load_config(config_path)
        assert config["quiet_zone"] == 10

    def test_load_config_default_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        (tmp_path / "code39.json").write_text(json.dumps({"bar_height": 7}), encoding="utf-8")
        assert barcoder.load_config()["bar_height"] == 7

    def test_load_config_returns_copy(self, tmp_path: Path) -> None:
        first = barcoder.load_config(tmp_path / "missing.json")
        first["format"] = "mutated"
        assert barcoder.load_config(tmp_path / "missing.json")["format"] == "text"

    def test_strict_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            barcoder.load_config(tmp_path / "missing.json", strict=True)

    def test_strict_invalid_json_raises(self, tmp_path: Path) -> None:
        config_path = tmp_path / "broken.json"
        config_path.write_text("{ invalid json }", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            barcoder.load_config(config_path, strict=True)

    def test_strict_non_object_raises(self, tmp_path: Path) -> None:
        config_path = tmp_path / "list.json"
        config_path.write_text("[1, 2, 3]", encoding="utf-8")
        with pytest.raises(ValueError):
            barcoder.load_config(config_path, strict=True)
