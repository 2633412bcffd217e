"""
Pytest configuration and fixtures for the test suite.

This module contains shared fixtures used across all tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import structlog

from either.config import get_settings
from either.logging import clear_context

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _isolate_ambient_state() -> Iterator[None]:
    """Reset cached settings and structlog configuration around each test."""
    get_settings.cache_clear()
    yield
    clear_context()
    structlog.reset_defaults()
    get_settings.cache_clear()
