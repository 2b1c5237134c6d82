"""Pytest configuration and shared fixtures for renocost tests."""

import os
import sys

import pytest
import structlog


# ============================================================================
# Ensure the package is importable without an editable install
# ============================================================================
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from tests.fixtures.mock_scope_data import (  # noqa: E402
    VINYL_PLANK_LINE,
    get_flyer_items,
    get_mixed_scope,
    get_raw_scope_rows,
    get_user_pricing,
)


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any logging configuration a test applies."""
    yield
    structlog.reset_defaults()


# ============================================================================
# Scope fixtures
# ============================================================================

@pytest.fixture
def vinyl_line():
    """500 sqft vinyl plank line with no labor hours."""
    return VINYL_PLANK_LINE


@pytest.fixture
def mixed_scope():
    """Area, linear and each lines."""
    return get_mixed_scope()


@pytest.fixture
def raw_scope_rows():
    """camelCase rows with nulls, as stored."""
    return get_raw_scope_rows()


@pytest.fixture
def user_pricing():
    """Contractor override map."""
    return get_user_pricing()


# ============================================================================
# Flyer fixtures
# ============================================================================

@pytest.fixture
def flyer_items():
    """Scanned flyer items."""
    return get_flyer_items()
