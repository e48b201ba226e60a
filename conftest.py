"""
Repository-level pytest configuration.

Why this exists:
  - Configure Loguru once per session from config/config.yaml
  - Expose the loaded configuration to every test package
  - Keep behavior explicit and discoverable
"""

from __future__ import annotations

from typing import Generator

import pytest

from sitechecks.ui_testing.framework.config_loader import ConfigLoader, get_config
from sitechecks.ui_testing.framework.log_setup import init_logger


@pytest.fixture(scope="session", autouse=True)
def _configure_logging() -> Generator[None, None, None]:
    """Initialize Loguru sinks before any test runs."""
    init_logger()
    yield


@pytest.fixture(scope="session")
def app_config() -> ConfigLoader:
    """Process-wide configuration (YAML + environment overrides)."""
    return get_config()
