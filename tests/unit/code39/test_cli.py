import json
from pathlib import Path

import pytest

from src.code39.cli import EXIT_INVALID_CONFIG, EXIT_INVALID_DATA, EXIT_OK, main


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep a stray ./code39.json out of the tests."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestCli:
    def test_text_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["HELLO"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "█" in out
        assert out.startswith(" " * 10)

    def test_vector_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["HELLO", "--format", "vector", "--bar-height", "150"]) == EXIT_OK
        out = capsys.readouterr().out
        assert out.startswith("<?xml")
        assert 'height="150"' in out

    def test_output_file(self, isolated_cwd: Path) -> None:
        target = isolated_cwd / "out.svg"
        assert main(["A1", "-f", "vector", "-o", str(target)]) == EXIT_OK
        content = target.read_text(encoding="utf-8")
        assert content.startswith("<?xml")
        assert content.endswith("</svg>")

    def test_invalid_data(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["hello"]) == EXIT_INVALID_DATA
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Invalid character: 'h'" in captured.err

    def test_invalid_number(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["HELLO", "--module-width", "0"]) == EXIT_INVALID_CONFIG
        assert "module_width" in capsys.readouterr().err

    def test_bad_format_choice(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["HELLO", "--format", "png"])
        assert exc_info.value.code == 2

    def test_missing_data(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([]) == EXIT_INVALID_CONFIG
        assert "data is required" in capsys.readouterr().err

    def test_list_characters(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--list-characters"]) == EXIT_OK
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 43
        assert lines[0] == "'0'"
        assert "' '" in lines


class TestCliConfigFile:
    def test_config_file_values(self, isolated_cwd: Path, capsys: pytest.CaptureFixture[str]) -> None:
        cfg = isolated_cwd / "custom.json"
        cfg.write_text(json.dumps({"format": "svg", "height": 42}), encoding="utf-8")
        assert main(["AB", "--config", str(cfg)]) == EXIT_OK
        assert 'height="42"' in capsys.readouterr().out

    def test_cli_flag_beats_file_alias(self, isolated_cwd: Path, capsys: pytest.CaptureFixture[str]) -> None:
        cfg = isolated_cwd / "custom.json"
        cfg.write_text(json.dumps({"format": "svg", "height": 42}), encoding="utf-8")
        assert main(["AB", "-c", str(cfg), "--bar-height", "7"]) == EXIT_OK
        out = capsys.readouterr().out
        assert 'height="7"' in out
        assert 'height="42"' not in out

    def test_cli_overrides_file(self, isolated_cwd: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (isolated_cwd / "code39.json").write_text(
            json.dumps({"format": "vector", "quiet_zone": 3}), encoding="utf-8"
        )
        assert main(["AB", "--format", "text", "--quiet-zone", "0"]) == EXIT_OK
        out = capsys.readouterr().out
        assert out.startswith("█")

    def test_bad_format_in_file(self, isolated_cwd: Path, capsys: pytest.CaptureFixture[str]) -> None:
        cfg = isolated_cwd / "bad.json"
        cfg.write_text(json.dumps({"format": "bogus"}), encoding="utf-8")
        assert main(["AB", "-c", str(cfg)]) == EXIT_INVALID_CONFIG
        assert "format" in capsys.readouterr().err

    def test_missing_explicit_config(self, isolated_cwd: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["AB", "-c", str(isolated_cwd / "absent.json")]) == EXIT_INVALID_CONFIG
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "cannot load config" in captured.err

    @pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]"])
    def test_malformed_explicit_config(
        self, isolated_cwd: Path, capsys: pytest.CaptureFixture[str], content: str
    ) -> None:
        cfg = isolated_cwd / "broken.json"
        cfg.write_text(content, encoding="utf-8")
        assert main(["AB", "--config", str(cfg)]) == EXIT_INVALID_CONFIG
        assert "cannot load config" in capsys.readouterr().err

    def test_malformed_implicit_config_ignored(self, isolated_cwd: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (isolated_cwd / "code39.json").write_text("{not json", encoding="utf-8")
        assert main(["AB"]) == EXIT_OK
        assert "█" in capsys.readouterr().out

    def test_alias_clash_in_file(self, isolated_cwd: Path, capsys: pytest.CaptureFixture[str]) -> None:
        cfg = isolated_cwd / "clash.json"
        cfg.write_text(json.dumps({"height": 42, "bar_height": 50}), encoding="utf-8")
        assert main(["AB", "-c", str(cfg)]) == EXIT_INVALID_CONFIG
        assert "duplicates" in capsys.readouterr().err


class TestCliDashData:
    def test_data_after_double_dash(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--", "-A1"]) == EXIT_OK
        assert "█" in capsys.readouterr().out

    def test_help_mentions_double_dash(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit):
            main(["--help"])
        assert "code39 -- -A1" in capsys.readouterr().out
