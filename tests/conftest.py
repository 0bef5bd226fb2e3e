"""
Shared pytest fixtures for rsql tests.
"""

import logging
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from rsql.config import Config
from rsql.log_manager import configure_logging

# Keep test output quiet
logging.basicConfig(level=logging.CRITICAL)


RSQL_ENV_VARS = ("RSQL_BACKEND", "RSQL_STRICT", "RSQL_DEBUG", "RSQL_LOG_DIR")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Run every test without RSQL_* variables from the host environment."""
    for name in RSQL_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def log_dir(tmp_path):
    """Route rsql loggers to files under a temporary directory, at DEBUG."""
    configure_logging(Config(log_dir=str(tmp_path), debug=True))
    yield tmp_path
    configure_logging(Config.defaults())
