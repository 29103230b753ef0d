"""Global pytest configuration."""

from __future__ import annotations

import logging

import pytest

from venueplan.logging import set_global_log_level


@pytest.fixture(autouse=True)
def _restore_log_level():
    """CLI flags change the global venueplan level; put it back after each test."""
    yield
    set_global_log_level(logging.INFO)
