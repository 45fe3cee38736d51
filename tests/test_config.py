"""Tests for rendering configuration, CLI parsing and string helpers."""

import logging
from pathlib import Path

import pytest

from termprogress.cli.config import parse_arguments
from termprogress.config import ProgressConfig, get_config, set_config, update_config
from termprogress.utils import clamp, format_percent, repeat


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("PROGRESS_HEADER", "PROGRESS_MODE", "PROGRESS_DELAY", "PROGRESS_STEPS", "LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestProgressConfig:

    def test_defaults(self):
        config = get_config()
        assert config.fallback_width == 75
        assert config.bar_margin == 6
        assert config.fill_char == "="
        assert config.empty_char == "-"
        assert config.green == "\x1b[32m"

    def test_update_config(self):
        update_config(fill_char="#", fallback_width=100)
        assert get_config().fill_char == "#"
        assert get_config().fallback_width == 100

    def test_update_unknown_option_raises(self):
        with pytest.raises(ValueError, match="Unknown configuration option"):
            update_config(colour="blue")

    def test_set_config(self):
        config = ProgressConfig(empty_char=".")
        set_config(config)
        assert get_config() is config


class TestParseArguments:

    def test_defaults(self, clean_env):
        args = parse_arguments([])

        assert args.header == "Tests"
        assert args.delay == 0.5
        assert args.steps == 100
        assert args.progress == "auto"
        assert args.log_file == Path("./logs/progress.log")
        assert args.console_log_level == logging.WARNING

    def test_environment_defaults(self, clean_env):
        clean_env.setenv("PROGRESS_HEADER", "Build")
        clean_env.setenv("PROGRESS_DELAY", "0.1")
        clean_env.setenv("PROGRESS_STEPS", "20")
        clean_env.setenv("PROGRESS_MODE", "off")
        clean_env.setenv("LOG_FILE", "/tmp/build.log")

        args = parse_arguments([])

        assert args.header == "Build"
        assert args.delay == 0.1
        assert args.steps == 20
        assert args.progress == "off"
        assert args.log_file == Path("/tmp/build.log")

    def test_invalid_environment_values_use_defaults(self, clean_env, caplog):
        clean_env.setenv("PROGRESS_DELAY", "soon")
        clean_env.setenv("PROGRESS_STEPS", "0")
        clean_env.setenv("PROGRESS_MODE", "loud")

        with caplog.at_level(logging.WARNING):
            args = parse_arguments([])

        assert args.delay == 0.5
        assert args.steps == 100
        assert args.progress == "auto"
        assert "Invalid PROGRESS_DELAY" in caplog.text
        assert "PROGRESS_STEPS must be at least 1" in caplog.text

    def test_flags_override_environment(self, clean_env):
        clean_env.setenv("PROGRESS_HEADER", "Build")
        args = parse_arguments(["--header", "Deploy", "--steps", "5", "--delay", "0", "--progress", "on"])

        assert args.header == "Deploy"
        assert args.steps == 5
        assert args.delay == 0
        assert args.progress == "on"

    @pytest.mark.parametrize("flag, level", [("--verbose", logging.INFO), ("--debug", logging.DEBUG)])
    def test_console_level(self, clean_env, flag, level):
        assert parse_arguments([flag]).console_log_level == level

    @pytest.mark.parametrize("argv", [["--steps", "0"], ["--delay", "-1"], ["--progress", "maybe"]])
    def test_invalid_flags_exit(self, clean_env, argv):
        with pytest.raises(SystemExit):
            parse_arguments(argv)


class TestUtils:

    def test_repeat(self):
        assert repeat("=", 3) == "==="
        assert repeat("=", 0) == ""
        assert repeat("-", -4) == ""

    def test_clamp(self):
        assert clamp(150, 0, 100) == 100
        assert clamp(-3, 0, 100) == 0
        assert clamp(42, 0, 100) == 42

    def test_format_percent(self):
        assert format_percent(7) == "7% "
        assert format_percent(120) == "120% "
