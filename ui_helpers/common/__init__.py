"""
================================================================================
UI Helpers Common Utilities
================================================================================

Shared configuration management and logging setup.

Exports:
    - get_config: Get a configuration value by dot-notation path
    - set_config: Override a configuration value at runtime
    - init_logger: Initialize the loguru logger with standard settings

Usage:
    from ui_helpers.common import get_config, init_logger

    init_logger()
    timeout = get_config("browser.wait_timeout", 5000)

================================================================================
"""

from .global_config import (
    get_config,
    get_logger,
    init_logger,
    reload_config,
    reset_config,
    set_config,
)

__all__ = [
    "get_config",
    "get_logger",
    "init_logger",
    "reload_config",
    "reset_config",
    "set_config",
]
