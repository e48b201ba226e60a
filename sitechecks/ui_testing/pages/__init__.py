"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for the checked sites.

Each page class encapsulates:
    - Element locators
    - Page-specific actions
    - Data extraction used by verifications

Author: Automation Team
License: MIT
================================================================================
"""

from .bbc_home_page import BbcHomePage
from .football_table_page import FootballTablePage
from .wikipedia_page import WikipediaArticlePage, WikipediaPortalPage

__all__ = [
    "BbcHomePage",
    "FootballTablePage",
    "WikipediaPortalPage",
    "WikipediaArticlePage",
]
