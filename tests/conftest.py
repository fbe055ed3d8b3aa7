"""
Pytest configuration and shared fixtures.

This module provides common fixtures and utilities used across all tests.
"""

import random

import pandas as pd
import pytest

from airindex.scales import _SCALES, get_scale
from airindex.types import ScaleId

# ============================================================================
# Registry Fixtures
# ============================================================================


@pytest.fixture
def restore_registry():
    """
    Restore the scale registry after a test that modifies it.

    Scales register themselves on import, so anything a test removes has
    to be put back for the rest of the session.
    """
    original_scales = _SCALES.copy()

    yield _SCALES

    _SCALES.clear()
    _SCALES.update(original_scales)


@pytest.fixture(params=list(ScaleId), ids=lambda scale: scale.value)
def scale(request):
    """Each registered scale definition in turn."""
    return get_scale(request.param)


# ============================================================================
# Randomness
# ============================================================================


@pytest.fixture
def rng():
    """Seeded random generator so property tests are reproducible."""
    return random.Random(20240501)


# ============================================================================
# Sample Readings
# ============================================================================


@pytest.fixture
def europe_readings():
    """Hourly readings for the European end-to-end scenario (µg/m³)."""
    return {"no2": 60, "o3": 90, "pm10": 40, "pm2_5": 20}


@pytest.fixture
def hong_kong_readings():
    """Three-hour averages giving a total added risk of about 9%."""
    return {"no2": 100, "so2": 10, "o3": 50, "pm10": 60, "pm2_5": 40}


@pytest.fixture
def sample_wide_df():
    """
    Sample DataFrame in wide format (one row per site and day).

    Column names follow common data portal conventions rather than the
    library's input keys.
    """
    return pd.DataFrame(
        {
            "site": ["MY1", "KC1", "CLL2", "HRL"],
            "PM2.5": [4.5, None, None, -1.0],
            "pm10": [27.0, 54.0, None, 10.0],
        }
    )
