"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for browser-level tests of the helpers.

Key Features:
- Real browser launched through BrowserManager (skipped when unavailable)
- Inline test site served through Playwright routing, no web server needed
- Screenshot attached to Allure on failure

================================================================================
"""

from typing import AsyncGenerator

import allure
import pytest
from loguru import logger
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from testsuites.ui_testing.inline_site import SITE, serve
from ui_helpers import BrowserFacade, BrowserManager


@pytest.fixture
async def browser_manager() -> AsyncGenerator[BrowserManager, None]:
    """
    Browser manager with a running browser.

    Skips the test when no browser can be launched (e.g. Playwright
    browsers not installed).
    """
    manager = BrowserManager(headless=True)
    try:
        await manager.start()
    except PlaywrightError as e:
        await manager.close()
        pytest.skip(f"Browser not available: {e}")
    yield manager
    await manager.close()


@pytest.fixture
async def page(browser_manager: BrowserManager) -> AsyncGenerator[Page, None]:
    """Page whose context serves the inline test site."""
    context = await browser_manager.new_context()
    await context.route(f"{SITE}/**", serve)
    page = await context.new_page()
    yield page


@pytest.fixture
async def facade(page: Page) -> BrowserFacade:
    """Facade already navigated to the test site home page."""
    facade = BrowserFacade(page)
    await facade.go_to_url(f"{SITE}/")
    return facade


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Log UI test failures with the page URL and attach it to Allure."""
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed and "page" in getattr(item, "funcargs", {}):
        page = item.funcargs["page"]
        logger.warning(f"UI test failed on page: {page.url}")
        allure.attach(
            page.url,
            name="Current URL",
            attachment_type=allure.attachment_type.TEXT,
        )
