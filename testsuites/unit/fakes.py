"""
In-memory stand-ins for the Playwright page, context and locator objects,
so the helpers can be exercised without launching a browser.
"""

from __future__ import annotations

import asyncio
from typing import Any, Dict, List, Optional

from playwright.async_api import TimeoutError as PlaywrightTimeoutError


PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-image-data"


class FakeMouse:
    def __init__(self):
        self.moves: List[tuple] = []

    async def move(self, x: float, y: float) -> None:
        self.moves.append((x, y))


class FakeBrowserType:
    def __init__(self, name: str):
        self.name = name


class FakeBrowser:
    def __init__(self, name: str = "chromium", version: str = "120.0"):
        self.browser_type = FakeBrowserType(name)
        self.version = version


class FakeContext:
    """Cookie jar and page list of a browser context."""

    def __init__(self, browser: Optional[FakeBrowser] = None):
        self.browser = browser
        self.pages: List["FakePage"] = []
        self.jar: List[Dict[str, Any]] = []
        self.add_cookies_calls = 0

    async def add_cookies(self, cookies: List[Dict[str, Any]]) -> None:
        self.add_cookies_calls += 1
        for cookie in cookies:
            self.jar = [c for c in self.jar if c["name"] != cookie["name"]]
            self.jar.append(dict(cookie))

    async def cookies(self) -> List[Dict[str, Any]]:
        return [dict(c) for c in self.jar]

    async def clear_cookies(self, name: Optional[str] = None) -> None:
        if name is None:
            self.jar = []
        else:
            self.jar = [c for c in self.jar if c["name"] != name]


class FakePage:
    """Records the driver calls made by the helpers."""

    def __init__(
        self,
        context: Optional[FakeContext] = None,
        url: str = "http://app.test/",
        user_agent: str = "Mozilla/5.0 FakeBrowser",
    ):
        self.context = context or FakeContext(FakeBrowser())
        self.context.pages.append(self)
        self.url = url
        self.user_agent = user_agent
        self.mouse = FakeMouse()
        self.calls: List[tuple] = []
        self.angular_stable = True

    async def set_viewport_size(self, size: Dict[str, int]) -> None:
        self.calls.append(("set_viewport_size", size))

    async def goto(self, url: str, **kwargs: Any) -> None:
        self.calls.append(("goto", url))
        self.url = url

    async def wait_for_function(self, expression: str, timeout: Optional[float] = None) -> None:
        self.calls.append(("wait_for_function", timeout))
        if not self.angular_stable:
            await asyncio.sleep((timeout or 0) / 1000)
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded.")

    async def screenshot(self, **kwargs: Any) -> bytes:
        self.calls.append(("screenshot", kwargs))
        return PNG_BYTES

    async def evaluate(self, expression: str) -> Any:
        return self.user_agent

    async def bring_to_front(self) -> None:
        self.calls.append(("bring_to_front",))

    def call_names(self) -> List[str]:
        return [call[0] for call in self.calls]


class FakeLocator:
    """
    Element with a fixed state.

    ``visible``/``attached`` decide which wait states are satisfied; waits
    for any other state sleep for the timeout and raise TimeoutError.
    """

    def __init__(self, class_attr: Optional[str] = None, visible: bool = True, attached: bool = True):
        self.class_attr = class_attr
        self.visible = visible
        self.attached = attached
        self.calls: List[tuple] = []

    def _satisfies(self, state: str) -> bool:
        return {
            "visible": self.attached and self.visible,
            "hidden": not (self.attached and self.visible),
            "attached": self.attached,
            "detached": not self.attached,
        }[state]

    async def wait_for(self, state: str = "visible", timeout: Optional[float] = None) -> None:
        self.calls.append(("wait_for", state, timeout))
        if not self._satisfies(state):
            await asyncio.sleep((timeout or 0) / 1000)
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for {state}")

    async def get_attribute(self, name: str) -> Optional[str]:
        return self.class_attr if name == "class" else None

    async def set_input_files(self, files: Any) -> None:
        self.calls.append(("set_input_files", files))

    async def press_sequentially(self, text: str) -> None:
        self.calls.append(("press_sequentially", text))

    async def press(self, key: str) -> None:
        self.calls.append(("press", key))

    async def hover(self) -> None:
        self.calls.append(("hover",))

    async def click(self, **kwargs: Any) -> None:
        self.calls.append(("click", kwargs))

    async def dblclick(self) -> None:
        self.calls.append(("dblclick",))


