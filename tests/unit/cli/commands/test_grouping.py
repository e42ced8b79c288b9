"""Unit tests for the by-rate-code and by-day commands."""

import pytest
from click.testing import CliRunner

from src.cli.commands.grouping import by_day, by_rate_code

CONFLICT_CSV = (
    "Day,Rate Code,Rate Description,Rate,Volume\n"
    "2019-01-01,ST,Standard Rate,21.00,1\n"
    "2019-01-02,ST,Standard Rate,22.00,2\n"
)


@pytest.fixture
def runner(mock_env):
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def conflict_csv(tmp_path):
    path = tmp_path / "conflict.csv"
    path.write_text(CONFLICT_CSV)
    return path


class TestByRateCodeCommand:
    def test_sample_lines(self, runner):
        result = runner.invoke(by_rate_code, [])

        assert result.exit_code == 0
        assert "Rate Code" in result.output
        assert "50.50" in result.output
        assert "30.99" in result.output
        assert "Total volume: 81.49" in result.output
        assert result.output.index("ST") < result.output.index("OV")

    def test_reads_file(self, runner, sample_csv):
        result = runner.invoke(by_rate_code, ["--file", str(sample_csv)])

        assert result.exit_code == 0
        assert "50.50" in result.output

    def test_empty_file(self, runner, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("Day,Rate Code,Rate Description,Rate,Volume\n")

        result = runner.invoke(by_rate_code, ["--file", str(path)])

        assert result.exit_code == 0
        assert "No timesheet lines" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(by_rate_code, ["--file", str(tmp_path / "x.csv")])

        assert result.exit_code == 4
        assert "File Not Found" in result.output

    def test_missing_columns(self, runner, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_text("Day,Volume\n2019-01-01,1\n")

        result = runner.invoke(by_rate_code, ["--file", str(path)])

        assert result.exit_code == 3
        assert "Missing column" in result.output

    def test_conflict_keeps_first_values(self, runner, conflict_csv):
        result = runner.invoke(by_rate_code, ["--file", str(conflict_csv)])

        assert result.exit_code == 0
        assert "21.00" in result.output
        assert "22.00" not in result.output

    def test_strict_conflict_fails(self, runner, conflict_csv):
        result = runner.invoke(
            by_rate_code, ["--file", str(conflict_csv), "--strict"]
        )

        assert result.exit_code == 3
        assert "Data Validation Error" in result.output

    def test_strict_from_config(self, runner, conflict_csv, monkeypatch):
        monkeypatch.setenv("STRICT_REPRESENTATIVES", "true")

        result = runner.invoke(by_rate_code, ["--file", str(conflict_csv)])

        assert result.exit_code == 3

    def test_no_strict_overrides_config(self, runner, conflict_csv, monkeypatch):
        monkeypatch.setenv("STRICT_REPRESENTATIVES", "true")

        result = runner.invoke(
            by_rate_code, ["--file", str(conflict_csv), "--no-strict"]
        )

        assert result.exit_code == 0


class TestByDayCommand:
    def test_sample_lines(self, runner):
        result = runner.invoke(by_day, [])

        assert result.exit_code == 0
        assert "Tuesday, 01 January 2019" in result.output
        assert "Wednesday, 02 January 2019" in result.output
        assert "30.30" in result.output
        assert "20.20" in result.output

    def test_day_shown_once_per_block(self, runner):
        result = runner.invoke(by_day, [])

        assert result.output.count("Wednesday, 02 January 2019") == 1
