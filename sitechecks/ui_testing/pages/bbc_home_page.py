"""
================================================================================
BBC Home Page Object (Async / Playwright)
================================================================================

Entry point of the league table scenario:
  - open the homepage
  - dismiss the cookie consent banner when it shows up
  - follow the header navigation to Sport and then Football

================================================================================
"""

from __future__ import annotations

import allure

from sitechecks.ui_testing.framework.page_base import PageBase


COOKIE_BUTTON_NAME = r"accept additional cookies"


class BbcHomePage(PageBase):
    """BBC homepage object (async)."""

    URL_CONFIG_KEY = "ui.bbc.base_url"

    @allure.step("Open BBC homepage")
    async def open(self) -> "BbcHomePage":
        await self.navigate()
        return self

    @allure.step("Dismiss cookie banner if present")
    async def accept_cookies(self) -> bool:
        """Returns True when the banner was shown and dismissed."""
        return await self.smart.dismiss_by_role(
            "button", COOKIE_BUTTON_NAME, timeout=self.timeout("overlay", 3000)
        )

    async def go_to_sport(self) -> None:
        await self.smart.follow_link("Sport", scope="header")

    async def go_to_football(self) -> None:
        await self.smart.follow_link("Football", scope="header")
