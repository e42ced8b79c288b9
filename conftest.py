"""
Global pytest configuration and fixtures.
"""
import datetime as dt
import os
from decimal import Decimal
from typing import Dict, List

import pytest

from src.config import GroupingConfig, reload_config
from src.fixtures.sample_lines import sample_timesheet_lines
from src.models.timesheet import TimesheetLine


@pytest.fixture(scope="session")
def test_env_vars() -> Dict[str, str]:
    """Test environment variables for configuration."""
    return {
        'ENVIRONMENT': 'testing',
        'DEBUG': 'true',
        'LOG_LEVEL': 'DEBUG',
        'STRICT_REPRESENTATIVES': 'false',
    }


@pytest.fixture
def mock_env(test_env_vars, monkeypatch):
    """Mock environment variables for testing."""
    for key, value in test_env_vars.items():
        monkeypatch.setenv(key, value)

    # Clear the global config to force reload with test values
    import src.config.settings
    src.config.settings._config = None

    yield test_env_vars

    src.config.settings._config = None


@pytest.fixture
def test_config(mock_env) -> GroupingConfig:
    """Test configuration instance."""
    return reload_config()


@pytest.fixture
def sample_lines() -> List[TimesheetLine]:
    """The four reference timesheet lines."""
    return sample_timesheet_lines()


@pytest.fixture
def conflicting_lines() -> List[TimesheetLine]:
    """Lines where the second ST line disagrees with the first one."""
    return [
        TimesheetLine(
            day=dt.date(2019, 1, 1),
            rate_code="ST",
            rate_description="Standard Rate",
            rate=Decimal("21.00"),
            volume=Decimal("1"),
        ),
        TimesheetLine(
            day=dt.date(2019, 1, 2),
            rate_code="ST",
            rate_description="Standard Rate (revised)",
            rate=Decimal("22.00"),
            volume=Decimal("2"),
        ),
    ]


@pytest.fixture
def sample_csv(tmp_path):
    """CSV export of the reference lines."""
    path = tmp_path / "lines.csv"
    path.write_text(
        "Day,Rate Code,Rate Description,Rate,Volume\n"
        "2019-01-01,ST,Standard Rate,21.00,20.2\n"
        "2019-01-01,ST,Standard Rate,21.00,10.1\n"
        "2019-01-02,ST,Standard Rate,21.00,20.2\n"
        "2019-01-02,OV,Overtime Rate,31.00,30.99\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def cleanup_test_files():
    """Clean up any test files created during testing."""
    yield

    for file in ['coverage.xml', '.coverage']:
        if os.path.exists(file):
            os.remove(file)


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )


def pytest_collection_modifyitems(config, items):
    """Add the unit marker to tests under tests/unit/."""
    for item in items:
        if "tests/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
