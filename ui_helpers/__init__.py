"""
================================================================================
UI Helpers
================================================================================

Convenience helpers for Playwright-based UI test automation.

Components:
    - facade: BrowserFacade (navigation, screenshots, windows, introspection)
    - cookies: cookie CRUD on the browser context
    - dom: element input, mouse actions, waits and class checks
    - options: typed navigation and cookie options
    - browser_manager: browser/context/page lifecycle for callers

Example:
    from ui_helpers import BrowserManager

    async with BrowserManager() as manager:
        facade = await manager.new_facade()
        await facade.go_to_url("https://example.com", wait_for_angular=False)
        await facade.save_screenshot("example.png")

================================================================================
"""

__version__ = "1.0.0"

from .browser_manager import BrowserManager
from .cookies import CookieHelpers
from .dom import DomHelpers
from .exceptions import (
    ConfigurationError,
    DriverError,
    TimeoutError,
    UIHelpersError,
    ValidationError,
)
from .facade import BrowserFacade
from .options import CookieDescriptor, MousePosition, NavigationOptions

__all__ = [
    "BrowserFacade",
    "BrowserManager",
    "ConfigurationError",
    "CookieDescriptor",
    "CookieHelpers",
    "DomHelpers",
    "DriverError",
    "MousePosition",
    "NavigationOptions",
    "TimeoutError",
    "UIHelpersError",
    "ValidationError",
]
