"""
================================================================================
Browser Manager
================================================================================

Caller-side browser lifecycle for scripts and fixtures using BrowserFacade.

Features:
    - Single browser instance per manager
    - Isolated contexts (separate cookies, storage) per test
    - Browser type, headless mode and viewport from configuration

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from loguru import logger
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Page,
    Playwright,
)

from ui_helpers.common.global_config import get_config
from ui_helpers.facade import BrowserFacade


BROWSER_TYPES = ("chromium", "firefox", "webkit")


class BrowserManager:
    """
    Manages a browser instance and its contexts.

    Usage:
        async with BrowserManager() as manager:
            facade = await manager.new_facade()
            await facade.go_to_url("https://example.com")
    """

    DEFAULT_LAUNCH_OPTIONS: Dict[str, Any] = {
        "args": [
            "--ignore-certificate-errors",
        ],
    }

    def __init__(
        self,
        headless: Optional[bool] = None,
        browser_type: Optional[str] = None,
    ):
        """
        Initialize browser manager.

        Args:
            headless: Run browser in headless mode (browser.headless if None)
            browser_type: 'chromium', 'firefox' or 'webkit' (browser.type if None)
        """
        self.headless = headless if headless is not None else get_config("browser.headless", True)
        self.browser_type = browser_type or get_config("browser.type", "chromium")
        if self.browser_type not in BROWSER_TYPES:
            raise ValueError(f"Unknown browser type: {self.browser_type}")

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: List[BrowserContext] = []

    async def __aenter__(self) -> "BrowserManager":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def start(self) -> None:
        """Start Playwright and launch the browser."""
        self._playwright = await async_playwright().start()
        launcher = getattr(self._playwright, self.browser_type)

        self._browser = await launcher.launch(
            **self.DEFAULT_LAUNCH_OPTIONS,
            headless=self.headless,
        )
        logger.debug(
            f"Browser started: {self.browser_type} "
            f"(headless={self.headless})"
        )

    async def close(self) -> None:
        """Close all contexts, the browser and Playwright."""
        for context in self._contexts:
            await context.close()
        self._contexts.clear()

        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

        logger.debug("Browser closed")

    async def new_context(self, **options: Any) -> BrowserContext:
        """
        Create a new isolated browser context.

        The viewport defaults to navigation.window_width x navigation.window_height.
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context_options = {
            "viewport": {
                "width": get_config("navigation.window_width", 1280),
                "height": get_config("navigation.window_height", 1024),
            },
            **options,
        }
        context = await self._browser.new_context(**context_options)
        self._contexts.append(context)
        return context

    async def new_page(
        self,
        context: Optional[BrowserContext] = None,
        **context_options: Any,
    ) -> Page:
        """
        Create a page in a new or existing context.

        Args:
            context: Existing context to use (creates new if None)
            **context_options: Options for the new context
        """
        if context is None:
            context = await self.new_context(**context_options)
        return await context.new_page()

    async def new_facade(self, **context_options: Any) -> BrowserFacade:
        """Open a page in a fresh context and wrap it in a BrowserFacade."""
        return BrowserFacade(await self.new_page(**context_options))


__all__ = [
    "BrowserManager",
]
