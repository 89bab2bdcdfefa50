"""
Pytest configuration and shared fixtures for logfilter tests.

Every test starts with no LOGFILTER_* variables in the environment and
without a cached default LoggerFilter.
"""

import os
import sys

import pytest

# Add parent directory to path for package imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from logfilter.config import EXCLUDE_ENV, INCLUDE_ENV, WHITELIST_ENV  # noqa: E402
from logfilter.engine import LoggerFilter, reset_default_filter  # noqa: E402


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """
    Remove LOGFILTER_* variables for the duration of each test.

    The variables are set before being deleted so that monkeypatch also
    removes anything load_dotenv() writes during the test.
    """
    for name in (INCLUDE_ENV, EXCLUDE_ENV, WHITELIST_ENV):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)

    reset_default_filter()
    yield
    reset_default_filter()


@pytest.fixture
def log_filter():
    """Provide a LoggerFilter with the default profile and no overrides."""
    return LoggerFilter()
