"""
================================================================================
Unit Test Fixtures
================================================================================

Unit tests run the helpers against the in-memory fakes in ``fakes.py``;
no browser is launched.

================================================================================
"""

import pytest

from testsuites.unit.fakes import FakePage
from ui_helpers.common import reset_config


@pytest.fixture(autouse=True)
def _fresh_config():
    """Reload configuration for every test so env overrides do not leak."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def fake_page() -> FakePage:
    return FakePage()
