"""
================================================================================
Helper Options
================================================================================

Typed configuration values accepted by the browser helpers.

    - NavigationOptions: viewport and synchronization settings for go_to_url
    - CookieDescriptor: a validated cookie to hand to the browser context
    - MousePosition: a viewport coordinate for pointer moves

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from datetime import datetime
from typing import Any, Dict, Mapping, NamedTuple, Optional, Union
from urllib.parse import urlparse

from ui_helpers.common.global_config import get_config
from ui_helpers.exceptions import ValidationError


# camelCase spellings accepted for option keys
_NAVIGATION_ALIASES: Dict[str, str] = {
    "windowWidth": "window_width",
    "windowHeight": "window_height",
    "waitForAngular": "wait_for_angular",
    "ignoreSynchronization": "ignore_synchronization",
}

_COOKIE_ALIASES: Dict[str, str] = {
    "isSecure": "secure",
    "is_secure": "secure",
}


class MousePosition(NamedTuple):
    """Viewport coordinate in CSS pixels."""
    x: float
    y: float

    @classmethod
    def from_config(cls) -> "MousePosition":
        """Safe "mouse away" point from dom.mouse_away_x / dom.mouse_away_y."""
        return cls(
            get_config("dom.mouse_away_x", 400),
            get_config("dom.mouse_away_y", 0),
        )


@dataclass(frozen=True)
class NavigationOptions:
    """
    Options applied by ``BrowserFacade.go_to_url``.

    Attributes:
        window_width: Viewport width in pixels
        window_height: Viewport height in pixels
        wait_for_angular: Wait for the page's Angular app to become stable
        ignore_synchronization: Skip framework synchronization for this navigation
    """
    window_width: int = 1280
    window_height: int = 1024
    wait_for_angular: bool = True
    ignore_synchronization: bool = False

    @classmethod
    def from_config(cls) -> "NavigationOptions":
        """Build defaults from the navigation.* configuration section."""
        base = cls()
        return cls(
            window_width=get_config("navigation.window_width", base.window_width),
            window_height=get_config("navigation.window_height", base.window_height),
            wait_for_angular=get_config("navigation.wait_for_angular", base.wait_for_angular),
            ignore_synchronization=get_config(
                "navigation.ignore_synchronization", base.ignore_synchronization
            ),
        )

    def merged(
        self,
        overrides: Union["NavigationOptions", Mapping[str, Any], None] = None,
        **kwargs: Any,
    ) -> "NavigationOptions":
        """
        Return a copy with caller-supplied fields applied over this one.

        Only keys the caller passes with a value are replaced; a key given
        as None keeps its current value.

        Raises:
            ValidationError: If an unknown option name is given
        """
        if overrides is None:
            values: Dict[str, Any] = {}
        elif isinstance(overrides, NavigationOptions):
            values = asdict(overrides)
        else:
            values = dict(overrides)
        values.update(kwargs)

        normalized = _normalize_keys(values, _NAVIGATION_ALIASES, type(self))
        return replace(self, **{k: v for k, v in normalized.items() if v is not None})

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CookieDescriptor:
    """
    A cookie to add to the browser context.

    Both ``name`` and ``value`` are required and must be non-empty.
    ``expiry`` is a datetime or Unix timestamp in seconds.
    """
    name: Optional[str] = None
    value: Optional[str] = None
    domain: Optional[str] = None
    path: Optional[str] = None
    secure: Optional[bool] = None
    expiry: Optional[Union[datetime, float, int]] = None

    def __post_init__(self) -> None:
        if not self.name or not self.value:
            raise ValidationError(
                "Cookie descriptor is not valid: both name and value must be provided"
            )

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "CookieDescriptor":
        """
        Build a descriptor from a plain mapping.

        Raises:
            ValidationError: If the mapping is empty, lacks name/value, or has unknown keys
        """
        if not data:
            raise ValidationError(
                "Cookie descriptor is not valid: both name and value must be provided"
            )
        return cls(**_normalize_keys(dict(data), _COOKIE_ALIASES, cls))

    @property
    def expires(self) -> Optional[float]:
        """Expiry as Unix seconds."""
        if self.expiry is None:
            return None
        if isinstance(self.expiry, datetime):
            return self.expiry.timestamp()
        return float(self.expiry)

    def to_playwright(self, default_url: Optional[str] = None) -> Dict[str, Any]:
        """
        Convert to the cookie dict accepted by ``BrowserContext.add_cookies``.

        With a domain and no path the path is "/". A path without a domain
        is kept and the domain is taken from ``default_url``'s host. With
        neither, the cookie is scoped to ``default_url``.
        """
        cookie: Dict[str, Any] = {"name": self.name, "value": self.value}

        if self.domain:
            cookie["domain"] = self.domain
            cookie["path"] = self.path or "/"
        elif self.path and default_url and urlparse(default_url).hostname:
            cookie["domain"] = urlparse(default_url).hostname
            cookie["path"] = self.path
        elif default_url:
            cookie["url"] = default_url
        else:
            raise ValidationError(
                f"Cookie '{self.name}' needs a domain when the page has no URL"
            )

        if self.secure is not None:
            cookie["secure"] = self.secure
        if self.expires is not None:
            cookie["expires"] = self.expires
        return cookie


def _normalize_keys(
    values: Dict[str, Any],
    aliases: Mapping[str, str],
    target: type,
) -> Dict[str, Any]:
    known = {f.name for f in fields(target)}
    normalized: Dict[str, Any] = {}
    for key, value in values.items():
        name = aliases.get(key, key)
        if name not in known:
            raise ValidationError(f"Unknown {target.__name__} option: {key}")
        normalized[name] = value
    return normalized


__all__ = [
    "CookieDescriptor",
    "MousePosition",
    "NavigationOptions",
]
