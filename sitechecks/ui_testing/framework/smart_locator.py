"""
================================================================================
Smart Locator
================================================================================

Element resolution helpers for pages whose markup we do not control.

    - Locator results are explicit ordered lists (zero or more matches)
    - "First match wins" is a named policy (first_match), not an indexing habit
    - Text-anchored link navigation with a fatal, descriptive error
    - Optional overlay dismissal with a bounded visibility wait

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import re
from typing import List, Optional, Pattern, Sequence, Union

import allure
from loguru import logger
from playwright.async_api import Locator, Page


class ElementNotFoundError(Exception):
    """Raised when an expected element has no match on the page."""
    pass


class LinkNotFoundError(ElementNotFoundError):
    """Raised when a navigation link with the given text is absent."""

    def __init__(self, text: str, scope: str):
        self.text = text
        self.scope = scope
        super().__init__(f"{text} link not found in {scope}")


class SmartLocator:
    """
    Locator helper bound to one Playwright page.

    Usage:
        >>> smart = SmartLocator(page)
        >>> await smart.dismiss_by_role("button", r"accept additional cookies")
        >>> await smart.follow_link("Sport", scope="header")
    """

    def __init__(self, page: Page, default_timeout: int = 30000):
        """
        Args:
            page: Playwright Page object
            default_timeout: Timeout in milliseconds for load-state waits
        """
        self.page = page
        self.default_timeout = default_timeout

    async def resolve_all(
        self,
        selector: str,
        has_text: Optional[Union[str, Pattern[str]]] = None,
    ) -> List[Locator]:
        """
        Resolve every element matching ``selector`` (and ``has_text``).

        Returns:
            Matches in document order; empty list when nothing matches
        """
        if has_text is None:
            locator = self.page.locator(selector)
        else:
            locator = self.page.locator(selector, has_text=has_text)
        matches = await locator.all()
        logger.debug(f"Resolved {len(matches)} element(s) for {selector!r} (has_text={has_text!r})")
        return matches

    @staticmethod
    def first_match(matches: Sequence[Locator], element_name: str) -> Locator:
        """
        Pick the first of ``matches``.

        Raises:
            ElementNotFoundError: When ``matches`` is empty
        """
        if not matches:
            raise ElementNotFoundError(f"{element_name} not found")
        return matches[0]

    async def follow_link(
        self,
        text: str,
        scope: str = "header",
        wait_for: str = "networkidle",
        timeout: Optional[int] = None,
    ) -> None:
        """
        Click the first link inside ``scope`` whose text contains ``text``.

        Matching is case-sensitive. After the click, waits for ``wait_for``
        load state so the next lookup does not race the destination page.

        Args:
            text: Visible link text, matched as given
            scope: CSS selector of the container to search in
            wait_for: Load state to wait for after the click
            timeout: Load-state timeout in milliseconds

        Raises:
            LinkNotFoundError: No matching link in ``scope``
        """
        with allure.step(f"Follow {scope} link: {text}"):
            links = await self.resolve_all(
                f"{scope} a", has_text=re.compile(re.escape(text))
            )
            if not links:
                error = LinkNotFoundError(text, scope)
                logger.error(str(error))
                raise error

            await self.first_match(links, f"{text} link").click()
            await self.page.wait_for_load_state(
                wait_for, timeout=timeout if timeout is not None else self.default_timeout
            )
            logger.info(f"Followed {scope} link '{text}' -> {self.page.url}")

    async def dismiss_if_visible(
        self,
        locator: Locator,
        element_name: str,
        timeout: int = 3000,
    ) -> bool:
        """
        Click ``locator`` if it becomes visible within ``timeout``.

        A failed visibility check (timeout, detached element, any other
        error) means the element is treated as absent. Errors raised by the
        click itself are not suppressed.

        Returns:
            True if the element was visible and clicked
        """
        try:
            await locator.wait_for(state="visible", timeout=timeout)
        except Exception as e:
            logger.debug(f"{element_name} not present, continuing: {str(e)[:80]}")
            return False

        with allure.step(f"Dismiss: {element_name}"):
            await locator.click()
        logger.info(f"Dismissed {element_name}")
        return True

    async def dismiss_by_role(
        self,
        role: str,
        name_pattern: str,
        timeout: int = 3000,
    ) -> bool:
        """
        Dismiss an optional control found by accessible role and name.

        Args:
            role: ARIA role (e.g. "button")
            name_pattern: Regex matched case-insensitively against the name
            timeout: Bounded visibility wait in milliseconds
        """
        locator = self.page.get_by_role(
            role, name=re.compile(name_pattern, re.IGNORECASE)
        ).first
        return await self.dismiss_if_visible(
            locator, element_name=f"{role} /{name_pattern}/i", timeout=timeout
        )


__all__ = [
    "SmartLocator",
    "ElementNotFoundError",
    "LinkNotFoundError",
]
