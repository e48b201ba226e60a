"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Navigation and load-state waits
    - SmartLocator access for link following and overlay dismissal
    - Blocking element waits and text extraction
    - Screenshot and failure capture for Allure

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional

import allure
from loguru import logger
from playwright.async_api import Page

from .config_loader import ConfigLoader, get_config
from .smart_locator import SmartLocator


# Default output directory for screenshots
SCREENSHOT_DIR = Path(__file__).parents[3] / "screenshots"


class BasePage:
    """
    Base class for all page objects.

    Usage:
        class PortalPage(BasePage):
            URL_CONFIG_KEY = "ui.wikipedia.base_url"

            async def search(self, query: str):
                await self.page.fill("input[name='search']", query)
    """

    # Override in subclasses
    URL_CONFIG_KEY: str = ""

    def __init__(
        self,
        page: Page,
        base_url: str = "",
        config: Optional[ConfigLoader] = None,
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object
            base_url: Page URL; read from URL_CONFIG_KEY when empty
            config: Configuration; process-wide loader when None
        """
        self.page = page
        self.config = config or get_config()
        if not base_url and self.URL_CONFIG_KEY:
            base_url = self.config.get(self.URL_CONFIG_KEY, "")
        self.base_url = base_url
        self.smart = SmartLocator(
            page, default_timeout=self.config.get("ui.timeouts.network_idle", 30000)
        )

    def timeout(self, name: str, default: int = 30000) -> int:
        """Timeout in milliseconds from ``ui.timeouts.<name>``."""
        return self.config.get(f"ui.timeouts.{name}", default)

    async def navigate(self, url: Optional[str] = None, wait_for: str = "load") -> None:
        """
        Navigate to ``url`` (this page's URL by default).

        Args:
            url: Absolute URL to open
            wait_for: Wait condition - 'load', 'domcontentloaded', 'networkidle'
        """
        target = url or self.base_url
        if not target:
            raise ValueError(f"{type(self).__name__} has no URL to navigate to")
        with allure.step(f"Navigate to {target}"):
            await self.page.goto(target, wait_until=wait_for)
            logger.debug(f"Navigated to: {target}")

    # =========================================================================
    # Wait Utilities
    # =========================================================================

    async def wait_for_network_idle(self, timeout: Optional[int] = None) -> None:
        """Wait for network to be idle."""
        await self.page.wait_for_load_state(
            "networkidle", timeout=timeout if timeout is not None else self.timeout("network_idle")
        )

    async def wait_for_element(
        self,
        selector: str,
        state: str = "attached",
        timeout: Optional[int] = None,
    ) -> None:
        """
        Block until ``selector`` reaches ``state``.

        Args:
            selector: CSS selector
            state: Target state - 'visible', 'hidden', 'attached', 'detached'
            timeout: Timeout in milliseconds

        Raises:
            playwright.async_api.TimeoutError: When the state is not reached
        """
        with allure.step(f"Wait for element: {selector}"):
            await self.page.wait_for_selector(
                selector, state=state, timeout=timeout if timeout is not None else self.timeout("element")
            )

    async def get_text(self, selector: str) -> Optional[str]:
        """Text content of the first element matching ``selector``."""
        return await self.page.text_content(selector)

    # =========================================================================
    # Screenshot and Debug Utilities
    # =========================================================================

    async def screenshot(
        self,
        name: str,
        full_page: bool = False,
        attach_to_allure: bool = True,
    ) -> Path:
        """
        Take screenshot and optionally attach to Allure.

        Args:
            name: Screenshot name (without extension)
            full_page: Capture full scrollable page
            attach_to_allure: Whether to attach to Allure report

        Returns:
            Path to saved screenshot
        """
        SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = SCREENSHOT_DIR / f"{name}_{timestamp}.png"

        await self.page.screenshot(path=str(filepath), full_page=full_page)

        if attach_to_allure:
            with open(filepath, "rb") as f:
                allure.attach(
                    f.read(),
                    name=name,
                    attachment_type=allure.attachment_type.PNG,
                )

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath

    async def capture_failure(self, test_name: str) -> None:
        """Attach a full-page screenshot and the current URL to Allure."""
        with allure.step("Capture failure details"):
            await self.screenshot(f"failure_{test_name}", full_page=True)
            allure.attach(
                self.page.url,
                name="Current URL",
                attachment_type=allure.attachment_type.TEXT,
            )


__all__ = [
    "BasePage",
    "PageBase",
]

# Backward-compatible alias (many Page Objects prefer PageBase naming)
PageBase = BasePage
