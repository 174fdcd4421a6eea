# ================================================================================
# DOM Helpers Module
# ================================================================================
#
# Element interaction helpers operating on Playwright locators supplied by the
# caller. The helpers never create or dispose of elements.
#
# Key Features:
#   - Text input, key presses and file selection
#   - Mouse hover, "mouse away", right and double click
#   - Visibility / presence waits with a shared default timeout
#   - Exact class token checks
#
# No retries: every driver failure propagates unchanged. Wait timeouts raise
# playwright's TimeoutError for that call only.
#
# ================================================================================

from typing import List, Optional, Union
from pathlib import Path

import allure
from loguru import logger
from playwright.async_api import Locator, Page

from ui_helpers.common.global_config import get_config
from ui_helpers.options import MousePosition


DEFAULT_WAIT_TIMEOUT = 5000


class DomHelpers:
    """
    Element interaction helpers bound to a page.

    Example:
        dom = DomHelpers(page)
        await dom.input_text(page.locator("#username"), "testuser")
        await dom.wait_visible(page.locator(".toast"), timeout_ms=2000)
    """

    def __init__(
        self,
        page: Page,
        wait_timeout: Optional[int] = None,
        mouse_away: Optional[MousePosition] = None,
    ):
        """
        Args:
            page: Playwright Page the elements belong to
            wait_timeout: Default wait timeout in milliseconds
                (browser.wait_timeout, 5000 if unset)
            mouse_away: Coordinate used by mouse_move_away
                (dom.mouse_away_x/y, (400, 0) if unset)
        """
        self.page = page
        self.wait_timeout = (
            wait_timeout
            if wait_timeout is not None
            else get_config("browser.wait_timeout", DEFAULT_WAIT_TIMEOUT)
        )
        self.mouse_away = mouse_away or MousePosition.from_config()

    # =========================================================================
    # Input
    # =========================================================================

    @allure.step("Set file upload: {file_path}")
    async def set_file_upload(
        self,
        file_path: Union[str, Path, List[Union[str, Path]]],
        element: Locator,
    ) -> None:
        """
        Select file(s) on a file input element.

        Args:
            file_path: Path(s) of the file(s) to upload
            element: The <input type="file"> locator
        """
        logger.info(f"Setting file upload: {file_path}")
        await element.set_input_files(file_path)

    @allure.step("Input text")
    async def input_text(self, element: Locator, text: str) -> None:
        """Type text into the element, one key event per character."""
        await element.press_sequentially(text)

    @allure.step("Press key: {key}")
    async def press_key(self, element: Locator, key: str) -> None:
        """
        Press a key on the element.

        Args:
            element: Target element
            key: Key name (e.g. "Enter", "Tab", "Control+A")
        """
        await element.press(key)
        logger.debug(f"Pressed key: {key}")

    # =========================================================================
    # Mouse
    # =========================================================================

    @allure.step("Mouse move over element")
    async def mouse_move_over(self, element: Locator) -> None:
        await element.hover()

    @allure.step("Mouse move away")
    async def mouse_move_away(self) -> None:
        """
        Move the cursor to the configured "safe" coordinate.

        The default (400, 0) assumes no interactive element sits at the top
        edge of the viewport; configure dom.mouse_away_x/y for pages where it
        does.
        """
        await self.page.mouse.move(self.mouse_away.x, self.mouse_away.y)

    @allure.step("Right click element")
    async def right_click(self, element: Locator) -> None:
        await element.click(button="right")

    @allure.step("Double click element")
    async def double_click(self, element: Locator) -> None:
        await element.dblclick()

    # =========================================================================
    # Waits
    # =========================================================================

    async def wait_visible(self, element: Locator, timeout_ms: Optional[int] = None) -> None:
        """
        Wait until the element is visible.

        Raises:
            TimeoutError: If the element is not visible within timeout_ms
        """
        await self._wait_for(element, "visible", timeout_ms)

    async def wait_invisible(self, element: Locator, timeout_ms: Optional[int] = None) -> None:
        """Wait until the element is hidden or not in the DOM."""
        await self._wait_for(element, "hidden", timeout_ms)

    async def wait_present(self, element: Locator, timeout_ms: Optional[int] = None) -> None:
        """Wait until the element is attached to the DOM, visible or not."""
        await self._wait_for(element, "attached", timeout_ms)

    async def wait_gone(self, element: Locator, timeout_ms: Optional[int] = None) -> None:
        """Wait until the element is removed from the DOM."""
        await self._wait_for(element, "detached", timeout_ms)

    async def _wait_for(
        self,
        element: Locator,
        state: str,
        timeout_ms: Optional[int],
    ) -> None:
        timeout = timeout_ms or self.wait_timeout
        with allure.step(f"Wait for element to be {state} ({timeout} ms)"):
            logger.debug(f"Waiting for {element} to be {state} (timeout={timeout}ms)")
            await element.wait_for(state=state, timeout=timeout)

    # =========================================================================
    # Inspection
    # =========================================================================

    async def has_class(self, element: Locator, class_name: str) -> bool:
        """
        Check whether the element's class attribute contains class_name.

        Matches whole whitespace-separated tokens only, so "active" does not
        match "activewear".
        """
        classes = await element.get_attribute("class")
        return class_name in (classes or "").split()


__all__ = [
    "DEFAULT_WAIT_TIMEOUT",
    "DomHelpers",
]
