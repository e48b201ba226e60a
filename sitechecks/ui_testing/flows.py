"""
================================================================================
Scenario Flows
================================================================================

End-to-end step sequences shared by the live tests.

Each flow is strictly sequential: every step waits for the page to settle
before the next lookup starts.

Usage:
    await check_league_position(BbcHomePage(page), FootballTablePage(page),
                                team="Liverpool", expected_position="1")

================================================================================
"""

from __future__ import annotations

from typing import List, Optional

import allure
from loguru import logger

from sitechecks.ui_testing.framework.checks import assert_heading_contains, assert_rank
from sitechecks.ui_testing.pages.bbc_home_page import BbcHomePage
from sitechecks.ui_testing.pages.football_table_page import FootballTablePage
from sitechecks.ui_testing.pages.wikipedia_page import WikipediaPortalPage


async def check_league_position(
    home: BbcHomePage,
    table: FootballTablePage,
    team: str,
    expected_position: str,
) -> List[str]:
    """
    Homepage -> cookie banner (optional) -> Sport -> Football -> Tables,
    then assert ``team`` is listed at ``expected_position``.

    Returns:
        The cell texts of the team's row
    """
    with allure.step("Open homepage"):
        await home.open()
        await home.accept_cookies()

    with allure.step("Navigate to Sport > Football"):
        await home.go_to_sport()
        await home.go_to_football()

    with allure.step("Open tables"):
        await table.open_tables()

    cells = await table.team_cells(team)
    assert_rank(cells, expected_position, team=team)
    logger.info(f"{team} is at position {expected_position}")
    return cells


async def check_search_heading(
    portal: WikipediaPortalPage,
    query: str,
    expected_subject: str,
) -> Optional[str]:
    """
    Search from the portal and assert the article heading contains
    ``expected_subject``.

    Returns:
        The heading text
    """
    await portal.open()
    article = await portal.search(query)

    await article.wait_for_heading()
    heading = await article.heading_text()

    assert_heading_contains(heading, expected_subject)
    return heading


__all__ = [
    "check_league_position",
    "check_search_heading",
]
