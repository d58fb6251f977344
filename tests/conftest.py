"""
Pytest configuration and shared fixtures for aware-config tests.
"""

import sys
from pathlib import Path

import pytest


# Add project paths to sys.path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "shared"))

from aware_logging import reset_loggers  # noqa: E402


AWARE_ENV_VARS = (
    "AWARE_SUPPORT_ALT_BAND",
    "AWARE_MASTER_PREFERENCE",
    "AWARE_CLUSTER_LOW",
    "AWARE_CLUSTER_HIGH",
    "AWARE_LOG_LEVEL",
    "AWARE_LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def clean_aware_env(monkeypatch):
    """Remove AWARE_* variables inherited from the outer environment."""
    for var in AWARE_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def clean_loggers():
    """Reset cached loggers so handlers never outlive a captured stream."""
    reset_loggers()
    yield
    reset_loggers()


@pytest.fixture
def temp_dir(tmp_path):
    """Alias for pytest's tmp_path fixture."""
    return tmp_path


@pytest.fixture
def write_yaml(temp_dir):
    """Write YAML text to a file in the temp dir and return its path."""

    def _write(text: str, name: str = "aware.yaml") -> Path:
        path = temp_dir / name
        path.write_text(text)
        return path

    return _write
