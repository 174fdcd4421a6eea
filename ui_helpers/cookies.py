"""
================================================================================
Cookie Helpers
================================================================================

Cookie manipulation for the browser context behind a page.

Usage:
    cookies = CookieHelpers(page)
    await cookies.add({"name": "session", "value": "abc"})
    session = await cookies.get("session")

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Union

import allure
from loguru import logger
from playwright.async_api import Page

from ui_helpers.options import CookieDescriptor


class CookieHelpers:
    """
    Cookie CRUD operations on the page's browser context.

    All reads and deletes are direct pass-throughs to Playwright. ``add``
    validates the descriptor first, so an invalid cookie never reaches
    the browser.
    """

    def __init__(self, page: Page):
        self.page = page

    @allure.step("Add cookie")
    async def add(
        self,
        descriptor: Union[CookieDescriptor, Mapping[str, Any], None],
    ) -> None:
        """
        Add a cookie.

        Args:
            descriptor: CookieDescriptor or mapping with name, value, and
                optional domain, path, secure (or isSecure), expiry

        Raises:
            ValidationError: If name or value is missing
        """
        if not isinstance(descriptor, CookieDescriptor):
            descriptor = CookieDescriptor.from_mapping(descriptor)

        cookie = descriptor.to_playwright(default_url=self.page.url)
        logger.debug(f"Adding cookie: {descriptor.name}")
        await self.page.context.add_cookies([cookie])

    async def get(self, name: str) -> Optional[Dict[str, Any]]:
        """
        Get a cookie by name.

        Returns:
            Cookie dict, or None if no cookie has that name
        """
        for cookie in await self.page.context.cookies():
            if cookie.get("name") == name:
                return cookie
        return None

    @allure.step("Delete cookie: {name}")
    async def delete(self, name: str) -> None:
        """Delete every cookie with the given name."""
        await self.page.context.clear_cookies(name=name)

    @allure.step("Delete all cookies")
    async def delete_all(self) -> None:
        await self.page.context.clear_cookies()

    async def get_all(self) -> List[Dict[str, Any]]:
        """Get all cookies of the browser context."""
        return await self.page.context.cookies()


__all__ = [
    "CookieHelpers",
]
