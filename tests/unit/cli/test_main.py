"""Unit tests for CLI main entry point."""

import logging

import pytest
from click.testing import CliRunner

from src.cli import cli
from src.config.logging_config import JSONFormatter, reset_logging


class TestCLIMain:
    """Test suite for CLI main entry point."""

    @pytest.fixture
    def runner(self, mock_env):
        """Create a Click CLI test runner."""
        yield CliRunner()
        reset_logging()

    def test_cli_help_text(self, runner):
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "Group timesheet lines by day and rate code" in result.output
        for command in ["by-rate-code", "by-day", "render-html", "check"]:
            assert command in result.output

    def test_cli_version_flag(self, runner):
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "1.0.0" in result.output

    def test_invalid_command(self, runner):
        result = runner.invoke(cli, ["group-everything"])

        assert result.exit_code != 0

    def test_subcommand_runs_through_group(self, runner):
        result = runner.invoke(cli, ["by-rate-code"])

        assert result.exit_code == 0
        assert "Standard Rate" in result.output

    def test_debug_flag_sets_debug_level(self, runner):
        runner.invoke(cli, ["--debug", "check"])

        assert logging.getLogger().level == logging.DEBUG

    def test_log_format_option(self, runner):
        runner.invoke(cli, ["--log-format", "json", "check"])

        handlers = logging.getLogger().handlers
        assert handlers
        assert all(isinstance(h.formatter, JSONFormatter) for h in handlers)


class TestLoggingSettingsFromDotenv:
    """Test that logging settings in a working-directory .env take effect."""

    ENV_VARS = [
        "ENVIRONMENT",
        "DEBUG",
        "LOG_LEVEL",
        "LOG_FORMAT",
        "LOG_FILE",
        "STRICT_REPRESENTATIVES",
    ]

    @pytest.fixture
    def runner(self, monkeypatch):
        """Runner with no logging variables set in the process environment."""
        import src.config.settings

        for var in self.ENV_VARS:
            # Set first so teardown also removes values loaded from .env
            monkeypatch.setenv(var, "")
            monkeypatch.delenv(var)
        src.config.settings._config = None

        yield CliRunner()

        src.config.settings._config = None
        reset_logging()

    def test_log_level_from_dotenv(self, runner, tmp_path):
        with runner.isolated_filesystem(temp_dir=tmp_path):
            with open(".env", "w") as f:
                f.write("LOG_LEVEL=DEBUG\n")

            result = runner.invoke(cli, ["check"])

        assert result.exit_code == 0
        assert logging.getLogger().level == logging.DEBUG

    def test_debug_from_dotenv(self, runner, tmp_path):
        with runner.isolated_filesystem(temp_dir=tmp_path):
            with open(".env", "w") as f:
                f.write("DEBUG=true\nLOG_LEVEL=ERROR\n")

            runner.invoke(cli, ["check"])

        assert logging.getLogger().level == logging.DEBUG

    def test_production_environment_defaults_to_json(self, runner, tmp_path):
        with runner.isolated_filesystem(temp_dir=tmp_path):
            with open(".env", "w") as f:
                f.write("ENVIRONMENT=production\n")

            runner.invoke(cli, ["check"])

        handlers = logging.getLogger().handlers
        assert handlers
        assert all(isinstance(h.formatter, JSONFormatter) for h in handlers)

    def test_log_format_option_overrides_environment(self, runner, tmp_path):
        with runner.isolated_filesystem(temp_dir=tmp_path):
            with open(".env", "w") as f:
                f.write("ENVIRONMENT=production\n")

            runner.invoke(cli, ["--log-format", "standard", "check"])

        handlers = logging.getLogger().handlers
        assert handlers
        assert not any(isinstance(h.formatter, JSONFormatter) for h in handlers)


class TestInvalidLoggingSettings:
    """Test that bad logging settings are reported as configuration errors."""

    @pytest.fixture
    def runner(self, mock_env):
        yield CliRunner()
        reset_logging()

    def test_invalid_log_format(self, runner, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "xml")

        result = runner.invoke(cli, ["check"])

        assert result.exit_code == 2
        assert "Configuration Error" in result.output
        assert "Traceback" not in result.output

    def test_invalid_log_level(self, runner, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")

        result = runner.invoke(cli, ["check"])

        assert result.exit_code == 2
        assert "Configuration Error" in result.output
