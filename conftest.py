"""
Repository-level pytest configuration.

Points the helpers at the repository's config/ directory so test runs do not
depend on the working directory, and initializes logging once per session.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest

from ui_helpers.common import init_logger, reset_config


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _config_defaults(project_root: Path) -> Generator[None, None, None]:
    """
    Use the repository configuration unless the user/CI provides another one.
    """
    os.environ.setdefault("UI_HELPERS_CONFIG_DIR", str(project_root / "config"))
    reset_config()
    init_logger()

    yield
