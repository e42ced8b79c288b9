"""Unit tests for the check command."""

import pytest
from click.testing import CliRunner

from src.cli.commands.check import check


@pytest.fixture
def runner(mock_env):
    """Create a Click CLI test runner."""
    return CliRunner()


class TestCheckCommand:
    def test_sample_lines_are_consistent(self, runner):
        result = runner.invoke(check, [])

        assert result.exit_code == 0
        assert "4 lines checked, no conflicts" in result.output

    def test_conflicts_exit_non_zero(self, runner, tmp_path):
        path = tmp_path / "lines.csv"
        path.write_text(
            "Day,Rate Code,Rate Description,Rate,Volume\n"
            "2019-01-01,ST,Standard Rate,21.00,1\n"
            "2019-01-02,ST,Standard,21.00,2\n"
        )

        result = runner.invoke(check, ["--file", str(path)])

        assert result.exit_code == 1
        assert "1 warning(s)" in result.output
        assert "rate_description" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(check, ["--file", str(tmp_path / "absent.csv")])

        assert result.exit_code == 4
