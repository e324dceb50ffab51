"""
BCD Test Configuration
======================

pytest markers and shared fixtures for engine and session tests.
"""

import logging

import pytest

from bcd.config import DashboardConfig
from bcd.engine import CognitiveEngine, SensorFrame, default_modalities

logger = logging.getLogger(__name__)


# =============================================================================
# Pytest Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: long-running property sweeps (>1s)")


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def modalities():
    """The dashboard's default modality list (physio inactive)."""
    return default_modalities()


@pytest.fixture
def all_active_modalities():
    """All five streams active at their reference confidences."""
    mods = default_modalities()
    for m in mods:
        m.active = True
    return mods


@pytest.fixture
def engine():
    return CognitiveEngine(seed=7)


@pytest.fixture
def neutral_frame():
    """Every reading at the 0-100 midpoint."""
    return SensorFrame.uniform(50.0)


@pytest.fixture
def config():
    return DashboardConfig()
