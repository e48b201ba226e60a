"""
================================================================================
Football Table Page Object (Async / Playwright)
================================================================================

League table view reached from BBC Sport > Football.

Row lookup policy:
  - A row matches when its text contains the team name, ignoring case
  - When several rows match (e.g. multiple tables), the first one wins
  - Cell texts are returned in document order

================================================================================
"""

from __future__ import annotations

import re
from typing import List, Optional

import allure
from loguru import logger
from playwright.async_api import Locator

from sitechecks.ui_testing.framework.checks import extract_rank, first_cell
from sitechecks.ui_testing.framework.page_base import PageBase


class FootballTablePage(PageBase):
    """Football tables page object (async)."""

    @allure.step("Open league tables")
    async def open_tables(self) -> "FootballTablePage":
        """Click the first 'Tables' link on the page and wait for it to settle."""
        tables_link = self.page.locator("a", has_text="Tables").first
        await tables_link.click()
        await self.wait_for_network_idle()
        logger.info(f"Opened tables page: {self.page.url}")
        return self

    def team_row(self, team: str) -> Locator:
        """First table row whose text contains ``team`` (case-insensitive)."""
        return self.page.locator(
            "tr", has_text=re.compile(re.escape(team), re.IGNORECASE)
        ).first

    @allure.step("Read table row for {team}")
    async def team_cells(self, team: str) -> List[str]:
        cells = await self.team_row(team).locator("td").all_text_contents()
        logger.debug(f"Row cells for {team}: {cells!r}")
        return cells

    async def team_position(self, team: str) -> Optional[str]:
        """League position of ``team`` as a digit string, None if unreadable."""
        return extract_rank(first_cell(await self.team_cells(team)))
