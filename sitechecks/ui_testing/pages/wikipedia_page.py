"""
================================================================================
Wikipedia Page Objects (Async / Playwright)
================================================================================

    - WikipediaPortalPage: wikipedia.org landing page with the search form
    - WikipediaArticlePage: article view reached after a search

================================================================================
"""

from __future__ import annotations

from typing import Optional

import allure
from loguru import logger

from sitechecks.ui_testing.framework.page_base import PageBase


SEARCH_INPUT = 'input[name="search"]'
ARTICLE_HEADING = "#firstHeading"


class WikipediaPortalPage(PageBase):
    """Wikipedia portal page object (async)."""

    URL_CONFIG_KEY = "ui.wikipedia.base_url"

    @allure.step("Open Wikipedia portal")
    async def open(self) -> "WikipediaPortalPage":
        await self.navigate()
        return self

    @allure.step("Search for '{query}'")
    async def search(self, query: str) -> "WikipediaArticlePage":
        """Type ``query`` into the search field and submit with Enter."""
        await self.page.fill(SEARCH_INPUT, query)
        await self.page.press(SEARCH_INPUT, "Enter")
        logger.info(f"Submitted search: {query}")
        return WikipediaArticlePage(self.page, config=self.config)


class WikipediaArticlePage(PageBase):
    """Wikipedia article page object (async)."""

    async def wait_for_heading(self, timeout: Optional[int] = None) -> None:
        """Block until the article heading is in the document."""
        await self.wait_for_element(ARTICLE_HEADING, timeout=timeout)

    async def heading_text(self) -> Optional[str]:
        heading = await self.get_text(ARTICLE_HEADING)
        logger.debug(f"Article heading: {heading!r}")
        return heading
