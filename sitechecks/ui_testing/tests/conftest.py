"""
================================================================================
UI Testing Pytest Configuration
================================================================================

This module configures pytest for UI scenarios, providing fixtures for browser
management, page objects, and failure capture.

Key Features:
- One browser/context/page per scenario (no state shared between scenarios)
- Page Object fixtures for every page used by the scenarios
- Screenshot + URL attached to Allure when a scenario fails

================================================================================
"""

from typing import AsyncGenerator

import pytest
from loguru import logger
from playwright.async_api import Page

from sitechecks.ui_testing.framework.browser_manager import BrowserManager
from sitechecks.ui_testing.framework.config_loader import ConfigLoader
from sitechecks.ui_testing.framework.page_base import BasePage
from sitechecks.ui_testing.pages.bbc_home_page import BbcHomePage
from sitechecks.ui_testing.pages.football_table_page import FootballTablePage
from sitechecks.ui_testing.pages.wikipedia_page import WikipediaPortalPage


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture
async def browser_manager(app_config: ConfigLoader) -> AsyncGenerator[BrowserManager, None]:
    """
    Function-scoped browser manager.

    Each scenario owns its browser for its whole lifetime.
    """
    async with BrowserManager.from_config(app_config) as manager:
        yield manager


@pytest.fixture
async def page(
    request,
    browser_manager: BrowserManager,
    app_config: ConfigLoader,
) -> AsyncGenerator[Page, None]:
    """
    Function-scoped page in a fresh context.

    On a failed test call, attaches a full-page screenshot and the current
    URL to the Allure report before the page is closed.
    """
    page = await browser_manager.new_page()
    yield page

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        try:
            await BasePage(page, config=app_config).capture_failure(request.node.name)
        except Exception as e:
            logger.warning(f"Failed to capture screenshot on failure: {e}")

    await page.close()


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def bbc_home_page(page: Page, app_config: ConfigLoader) -> BbcHomePage:
    """Provides BbcHomePage instance."""
    return BbcHomePage(page, config=app_config)


@pytest.fixture
def football_table_page(page: Page, app_config: ConfigLoader) -> FootballTablePage:
    """Provides FootballTablePage instance."""
    return FootballTablePage(page, config=app_config)


@pytest.fixture
def wikipedia_portal_page(page: Page, app_config: ConfigLoader) -> WikipediaPortalPage:
    """Provides WikipediaPortalPage instance."""
    return WikipediaPortalPage(page, config=app_config)


# ================================================================================
# Scenario Data
# ================================================================================

@pytest.fixture
def league_data(app_config: ConfigLoader) -> dict:
    """Team and expected league position for the table scenario."""
    return {
        "team": app_config.get("scenarios.league.team", "Liverpool"),
        "expected_position": str(app_config.get("scenarios.league.expected_position", "1")),
    }


@pytest.fixture
def search_data(app_config: ConfigLoader) -> dict:
    """Query and expected heading subject for the search scenario."""
    return {
        "query": app_config.get("scenarios.search.query", "Artificial Intelligence"),
        "expected_subject": app_config.get(
            "scenarios.search.expected_subject", "artificial intelligence"
        ),
    }


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Expose each phase's report on the item (rep_setup / rep_call / rep_teardown)."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)
