"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based helpers for checking rendered content on public sites.

Components:
    - smart_locator: Explicit-arity element lookup, link following, overlay dismissal
    - page_base: Base page object for common operations
    - browser_manager: Browser lifecycle management
    - checks: Pure verification rules (rank extraction, heading containment)
    - config_loader / log_setup: YAML configuration and Loguru setup

Author: Automation Team
License: MIT
================================================================================
"""

from .smart_locator import SmartLocator, ElementNotFoundError, LinkNotFoundError
from .page_base import BasePage
from .browser_manager import BrowserManager
from .config_loader import ConfigLoader, ConfigurationError, get_config

__all__ = [
    "SmartLocator",
    "ElementNotFoundError",
    "LinkNotFoundError",
    "BasePage",
    "BrowserManager",
    "ConfigLoader",
    "ConfigurationError",
    "get_config",
]
