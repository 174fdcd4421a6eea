"""
================================================================================
Allure Attachment Helpers
================================================================================

Small helpers for attaching browser artifacts to Allure test reports.

================================================================================
"""

import json
from typing import Any

import allure


def attach_json(data: Any, name: str = "Data") -> None:
    """
    Attach JSON data to Allure report.

    Args:
        data: Data to attach (will be JSON serialized)
        name: Attachment name
    """
    allure.attach(
        json.dumps(data, indent=2, default=str),
        name=name,
        attachment_type=allure.attachment_type.JSON,
    )


def attach_png(png: bytes, name: str = "Screenshot") -> None:
    """Attach PNG bytes to Allure report."""
    allure.attach(
        png,
        name=name,
        attachment_type=allure.attachment_type.PNG,
    )


__all__ = [
    "attach_json",
    "attach_png",
]
