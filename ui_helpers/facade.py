"""
================================================================================
Browser Facade
================================================================================

Flat convenience API over an async Playwright page.

Provides:
    - Screenshot capture to a file
    - Safe navigation with viewport and framework synchronization options
    - Browser capability introspection
    - Switching to the most recently opened window
    - Cookie helpers (``facade.cookies``) and DOM helpers (``facade.dom``)

The facade does not own the page: creating and closing browsers, contexts
and pages is the caller's job (see ``BrowserManager``).

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator, Dict, Mapping, Optional, Union

import allure
from loguru import logger
from playwright.async_api import Page

from ui_helpers.common.global_config import get_config
from ui_helpers.cookies import CookieHelpers
from ui_helpers.dom import DomHelpers
from ui_helpers.options import MousePosition, NavigationOptions
from ui_helpers.reporting import attach_json, attach_png


DEFAULT_ANGULAR_TIMEOUT = 11000

# True once every Angular (2+) testability or the AngularJS $http service
# reports no pending work. Pages without Angular are always stable.
ANGULAR_STABLE_JS = """
() => {
    if (window.getAllAngularTestabilities) {
        return window.getAllAngularTestabilities().every(t => t.isStable());
    }
    if (window.angular) {
        const root = document.querySelector('[ng-app], [data-ng-app], .ng-scope');
        if (!root) return true;
        const injector = window.angular.element(root).injector();
        if (!injector) return true;
        return injector.get('$http').pendingRequests.length === 0;
    }
    return true;
}
"""

INTERNET_EXPLORER = "Internet Explorer"


class BrowserFacade:
    """
    Convenience operations layered over a Playwright page.

    Usage:
        facade = BrowserFacade(page)
        await facade.go_to_url("https://example.com", window_width=1440)
        await facade.cookies.add({"name": "session", "value": "abc"})
        await facade.dom.wait_visible(page.locator("#main"))
        await facade.save_screenshot("/tmp/home.png")

    Framework synchronization is per facade instance. ``go_to_url`` with
    ``ignore_synchronization=True`` disables it for that call only; use
    ``ignoring_synchronization()`` to disable it for a block of calls.
    """

    def __init__(
        self,
        page: Page,
        *,
        navigation_defaults: Optional[NavigationOptions] = None,
        wait_timeout: Optional[int] = None,
        angular_timeout: Optional[int] = None,
        mouse_away: Optional[MousePosition] = None,
    ):
        """
        Initialize the facade.

        Args:
            page: Playwright Page to operate on
            navigation_defaults: Defaults for go_to_url (navigation.* config if None)
            wait_timeout: Default element wait timeout in milliseconds
            angular_timeout: Timeout for wait_for_angular in milliseconds
            mouse_away: Coordinate used by dom.mouse_move_away
        """
        self.page = page
        self.navigation_defaults = navigation_defaults or NavigationOptions.from_config()
        self.angular_timeout = angular_timeout or get_config(
            "browser.angular_timeout", DEFAULT_ANGULAR_TIMEOUT
        )
        self._synchronize = True

        self.cookies = CookieHelpers(page)
        self.dom = DomHelpers(page, wait_timeout=wait_timeout, mouse_away=mouse_away)

    def _bind(self, page: Page) -> None:
        """Point the facade and its helpers at another page."""
        self.page = page
        self.cookies.page = page
        self.dom.page = page

    # =========================================================================
    # Screenshots
    # =========================================================================

    @allure.step("Save screenshot: {file_path}")
    async def save_screenshot(
        self,
        file_path: Union[str, Path],
        attach: bool = False,
    ) -> Path:
        """
        Save the current viewport as a PNG file.

        Args:
            file_path: Destination path; an existing file is overwritten
            attach: Also attach the PNG to the Allure report

        Returns:
            Path the screenshot was written to

        Raises:
            OSError: If the path is not writable
        """
        png = await self.page.screenshot(type="png")

        path = Path(file_path)
        path.write_bytes(png)

        if attach:
            attach_png(png, name=path.stem)

        logger.debug(f"Screenshot saved: {path}")
        return path

    # =========================================================================
    # Navigation
    # =========================================================================

    @property
    def synchronization_enabled(self) -> bool:
        """Whether go_to_url waits for the page's framework to settle."""
        return self._synchronize

    @asynccontextmanager
    async def ignoring_synchronization(self) -> AsyncIterator["BrowserFacade"]:
        """
        Disable framework synchronization inside the block.

        Only go_to_url and wait_for_angular consult this flag. The ``dom``
        helpers never wait for the framework, so element interactions
        behave the same inside and outside the block. The previous state
        is restored on exit, including on error.
        """
        previous = self._synchronize
        self._synchronize = False
        try:
            yield self
        finally:
            self._synchronize = previous

    @allure.step("Go to url: {url}")
    async def go_to_url(
        self,
        url: Optional[str],
        options: Union[NavigationOptions, Mapping[str, Any], None] = None,
        **overrides: Any,
    ) -> None:
        """
        Navigate to a URL with a fixed viewport size.

        Caller options are merged over the defaults: fields the caller does
        not pass keep their default value. Nothing happens for an empty url.

        Args:
            url: URL to navigate to
            options: NavigationOptions or mapping (snake_case or camelCase keys)
            **overrides: Individual option fields, applied after ``options``

        Raises:
            ValidationError: On unknown option names
        """
        if not url:
            logger.debug("go_to_url called without a url, skipping navigation")
            return

        resolved = self.navigation_defaults.merged(options, **overrides)
        logger.info(f"Go to url options: {resolved.as_dict()}")
        attach_json(resolved.as_dict(), name="Navigation options")

        await self.page.set_viewport_size(
            {"width": resolved.window_width, "height": resolved.window_height}
        )

        if resolved.ignore_synchronization:
            logger.info("Ignoring synchronization for this navigation")
            async with self.ignoring_synchronization():
                await self._navigate(url, resolved)
        else:
            await self._navigate(url, resolved)

    async def _navigate(self, url: str, options: NavigationOptions) -> None:
        await self.page.goto(url)
        if options.wait_for_angular:
            await self.wait_for_angular()

    async def wait_for_angular(self, timeout: Optional[int] = None) -> None:
        """
        Wait until the page's Angular app has no pending work.

        Returns immediately while synchronization is disabled.

        Raises:
            TimeoutError: If the app does not settle within the timeout
        """
        if not self._synchronize:
            logger.debug("Synchronization disabled, not waiting for Angular")
            return

        await self.page.wait_for_function(
            ANGULAR_STABLE_JS,
            timeout=timeout or self.angular_timeout,
        )

    # =========================================================================
    # Browser Introspection
    # =========================================================================

    async def get_capabilities(self) -> Dict[str, str]:
        """
        Describe the running browser.

        Returns:
            Dict with browserName, browserVersion and userAgent
        """
        browser = self.page.context.browser
        if browser is None:
            raise RuntimeError("Page is not attached to a launched browser")

        user_agent = await self.page.evaluate("() => navigator.userAgent")
        return {
            "browserName": browser.browser_type.name,
            "browserVersion": browser.version,
            "userAgent": user_agent,
        }

    async def get_browser_name(self) -> str:
        """Name of the running browser (e.g. "chromium", "firefox")."""
        capabilities = await self.get_capabilities()
        return capabilities["browserName"]

    async def is_current_browser_ie(self) -> bool:
        """Whether the running browser is Internet Explorer."""
        return INTERNET_EXPLORER in await self.get_browser_name()

    # =========================================================================
    # Windows
    # =========================================================================

    @allure.step("Switch to latest window")
    async def switch_to_latest_window(self) -> Optional[Page]:
        """
        Switch to the most recently opened window of the context.

        Window order is the order Playwright reports, which is open order.

        Returns:
            The page switched to, or None if the context has no pages
        """
        pages = self.page.context.pages
        if not pages:
            logger.debug("No open windows to switch to")
            return None

        latest = pages[-1]
        await latest.bring_to_front()
        self._bind(latest)
        logger.debug(f"Switched to window {len(pages) - 1}: {latest.url}")
        return latest


__all__ = [
    "ANGULAR_STABLE_JS",
    "BrowserFacade",
    "DEFAULT_ANGULAR_TIMEOUT",
]
