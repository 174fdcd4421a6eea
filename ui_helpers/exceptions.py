"""
Exceptions raised by the browser helpers.

Driver failures (navigation errors, detached elements, wait timeouts) are
Playwright's own exceptions and propagate unchanged; they are re-exported
here so callers have a single import location.
"""

from playwright.async_api import Error as DriverError
from playwright.async_api import TimeoutError


class UIHelpersError(Exception):
    """Base class for errors raised by the helpers themselves."""
    pass


class ValidationError(UIHelpersError, ValueError):
    """Raised when caller-supplied options fail validation before reaching the driver."""
    pass


class ConfigurationError(UIHelpersError):
    """Raised when configuration loading fails."""
    pass


__all__ = [
    "UIHelpersError",
    "ValidationError",
    "ConfigurationError",
    "DriverError",
    "TimeoutError",
]
