"""Shared fixtures for the Offshore Wind Siting test suite."""

import sys
import os
import pytest

# Ensure project root is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models.site import WindSite


@pytest.fixture
def ideal_site():
    """Every attribute at or before the start of its ramp."""
    return WindSite(
        id="ideal",
        name="Ideal Site",
        coordinates=(54.0, 3.0),
        water_depth=30,
        distance_to_port_km=20,
        distance_to_grid_km=20,
        capex_eur_m_per_mw=3.0,
        environmental_impact="low",
        overall_score=100,
    )


@pytest.fixture
def worst_site():
    """Every attribute at or beyond the far end of its ramp."""
    return WindSite(
        id="worst",
        name="Worst Site",
        coordinates=(43.0, 4.0),
        water_depth=150,
        distance_to_port_km=200,
        distance_to_grid_km=200,
        capex_eur_m_per_mw=5.0,
        environmental_impact="critical",
        overall_score=10,
    )


@pytest.fixture
def north_sea_site():
    """A single mid-scoring North Sea site for field generation."""
    return WindSite(
        id="ns-1",
        name="North Sea Test",
        coordinates=(55.0, 3.0),
        water_depth=40,
        overall_score=80,
    )


@pytest.fixture
def mock_sites():
    """The full set of 8 mock wind sites."""
    from data.mock_data import get_wind_sites
    return get_wind_sites()
