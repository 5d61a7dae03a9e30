"""
Shared fixtures for the safe-env test suite
"""

import pytest
from structlog.testing import LogCapture

from safe_env import logging_config


@pytest.fixture(autouse=True)
def _configure_logging():
    """Start every test from the same logging setup"""
    logging_config.configure_logging(level="DEBUG", fmt="console", force=True)
    yield
    logging_config.configure_logging(level="DEBUG", fmt="console", force=True)


@pytest.fixture
def log_output(monkeypatch):
    """Capture the package's diagnostics as event dicts instead of writing them to stderr"""
    capture = LogCapture()
    monkeypatch.setattr(logging_config, "_processors", [capture])
    return capture.entries


@pytest.fixture
def clean_env(monkeypatch):
    """Remove the variable names the tests rely on from os.environ"""
    for name in (
        "API_KEY",
        "DATABASE_URL",
        "SECRET",
        "MISSING",
        "NEXT_API_URL",
        "NEXT_SECRET",
        "OTHER_VAR",
        "SAFE_ENV_TEST_VALUE",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
