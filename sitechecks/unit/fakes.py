"""
Minimal stand-ins for Playwright's async Page and Locator.

Only the calls made by the framework and page objects are implemented; every
interaction is appended to a shared ``calls`` log so tests can assert order.
"""

from typing import Any, Dict, List, Optional

from playwright.async_api import TimeoutError as PlaywrightTimeoutError


class FakeLocator:
    def __init__(
        self,
        name: str = "locator",
        log: Optional[List[tuple]] = None,
        visible: bool = True,
        matches: Optional[List["FakeLocator"]] = None,
        texts: Optional[List[str]] = None,
        children: Optional[Dict[str, "FakeLocator"]] = None,
        wait_error: Optional[Exception] = None,
        click_error: Optional[Exception] = None,
    ):
        self.name = name
        self.log = log if log is not None else []
        self.visible = visible
        self.matches = matches
        self.texts = texts or []
        self.children = children or {}
        self.wait_error = wait_error
        self.click_error = click_error
        self.clicked = False

    @property
    def first(self) -> "FakeLocator":
        return self.matches[0] if self.matches else self

    async def all(self) -> List["FakeLocator"]:
        return list(self.matches or [])

    def locator(self, selector: str) -> "FakeLocator":
        return self.children.get(selector, FakeLocator(f"{self.name} {selector}", self.log))

    async def all_text_contents(self) -> List[str]:
        return list(self.texts)

    async def wait_for(self, state: str = "visible", timeout: Optional[float] = None) -> None:
        self.log.append(("wait_for", self.name, state, timeout))
        if self.wait_error is not None:
            raise self.wait_error
        if not self.visible:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for {self.name}")

    async def click(self, **kwargs: Any) -> None:
        self.log.append(("click", self.name))
        if self.click_error is not None:
            raise self.click_error
        self.clicked = True


class FakePage:
    def __init__(
        self,
        locators: Optional[Dict[Any, FakeLocator]] = None,
        role_locator: Optional[FakeLocator] = None,
        texts: Optional[Dict[str, Optional[str]]] = None,
        missing_selectors: Optional[List[str]] = None,
    ):
        self.calls: List[tuple] = []
        self.locators = locators or {}
        self.role_locator = role_locator
        self.texts = texts or {}
        self.missing_selectors = missing_selectors or []
        self.url = "about:blank"

    def locator(self, selector: str, has_text: Any = None) -> FakeLocator:
        self.calls.append(("locator", selector, has_text))
        text = getattr(has_text, "pattern", has_text)
        if (selector, text) in self.locators:
            return self.locators[(selector, text)]
        return self.locators.get(selector, FakeLocator(selector, self.calls, matches=[]))

    def get_by_role(self, role: str, name: Any = None) -> FakeLocator:
        self.calls.append(("get_by_role", role, name))
        return self.role_locator

    async def goto(self, url: str, wait_until: Optional[str] = None) -> None:
        self.calls.append(("goto", url, wait_until))
        self.url = url

    async def wait_for_load_state(self, state: str = "load", timeout: Optional[float] = None) -> None:
        self.calls.append(("wait_for_load_state", state, timeout))

    async def fill(self, selector: str, value: str) -> None:
        self.calls.append(("fill", selector, value))

    async def press(self, selector: str, key: str) -> None:
        self.calls.append(("press", selector, key))

    async def wait_for_selector(
        self, selector: str, state: Optional[str] = None, timeout: Optional[float] = None
    ) -> None:
        self.calls.append(("wait_for_selector", selector, state, timeout))
        if selector in self.missing_selectors:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for {selector}")

    async def text_content(self, selector: str) -> Optional[str]:
        self.calls.append(("text_content", selector))
        return self.texts.get(selector)

    async def screenshot(self, path: Optional[str] = None, full_page: bool = False) -> bytes:
        self.calls.append(("screenshot", full_page))
        data = b"\x89PNG fake"
        if path:
            with open(path, "wb") as f:
                f.write(data)
        return data


class DummyConfig:
    def __init__(self, data: Optional[Dict[str, Any]] = None):
        self.data = data or {}

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)
