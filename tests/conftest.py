"""
Pytest configuration and shared fixtures for all tests.
"""

import logging
import sys
from pathlib import Path

import pytest

# Add src to sys.path so the package imports without installation
src_dir = Path(__file__).parent.parent / "src"
if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Isolate tests from configuration files and environment overrides."""
    for name in (
        "CONFIG_FILE",
        "LOG_FILE",
        "AGROMETEO_LOG_LEVEL",
        "AGROMETEO_STRICT",
        "AGROMETEO_PAR_FRACTION",
        "AGROMETEO_TIMEZONE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)

    yield

    # Undo any package logger configuration made by the calculator facade
    package_logger = logging.getLogger("agrometeo")
    for handler in list(package_logger.handlers):
        handler.close()
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def doy_range():
    """Every day of a leap year."""
    return list(range(1, 367))


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
