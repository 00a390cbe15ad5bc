"""Tests for essentio.config — AppConfig and dotenv loading."""

from pathlib import Path

import pytest

from essentio.config import AppConfig, load_env_file
from essentio.errors import ConfigurationError


class TestAppConfig:
    def test_defaults(self) -> None:
        cfg = AppConfig()
        assert cfg.debug is False
        assert cfg.base_path == "."
        assert cfg.template_dir == "templates"
        assert cfg.autoescape is True

    def test_override(self) -> None:
        cfg = AppConfig(debug=True, base_path="/srv/app")
        assert cfg.debug is True
        assert cfg.base_path == "/srv/app"

    def test_frozen(self) -> None:
        cfg = AppConfig()
        with pytest.raises(AttributeError):
            cfg.debug = True  # type: ignore[misc]

    def test_template_dir_as_path(self) -> None:
        assert AppConfig(template_dir=Path("views")).template_dir == Path("views")


class TestFromEnv:
    def test_reads_prefixed_variables(self) -> None:
        cfg = AppConfig.from_env(
            {"ESSENTIO_DEBUG": "true", "ESSENTIO_TEMPLATE_DIR": "views", "OTHER": "x"}
        )
        assert cfg.debug is True
        assert cfg.template_dir == "views"

    def test_custom_prefix(self) -> None:
        cfg = AppConfig.from_env({"APP_AUTOESCAPE": "off"}, prefix="APP_")
        assert cfg.autoescape is False

    def test_empty_environ_gives_defaults(self) -> None:
        assert AppConfig.from_env({}) == AppConfig()

    def test_invalid_bool(self) -> None:
        with pytest.raises(ConfigurationError, match="ESSENTIO_DEBUG"):
            AppConfig.from_env({"ESSENTIO_DEBUG": "maybe"})

    def test_env_file_overridden_by_environ(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("ESSENTIO_DEBUG=1\nESSENTIO_BASE_PATH=/from/file\n")

        cfg = AppConfig.from_env({"ESSENTIO_BASE_PATH": "/from/env"}, env_file=env_file)
        assert cfg.debug is True
        assert cfg.base_path == "/from/env"


class TestLoadEnvFile:
    def test_parses_lines(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text(
            "# comment\n"
            "\n"
            "PLAIN=value\n"
            'QUOTED="hello world"\n'
            "SINGLE='x=y'\n"
            "export EXPORTED=1\n"
            "NOEQUALS\n"
            "SPACED = padded \n"
        )

        assert load_env_file(env_file) == {
            "PLAIN": "value",
            "QUOTED": "hello world",
            "SINGLE": "x=y",
            "EXPORTED": "1",
            "SPACED": "padded",
        }

    def test_missing_file(self, tmp_path: Path) -> None:
        assert load_env_file(tmp_path / "absent.env") == {}
