"""
Pytest configuration and fixtures
"""

import sys
import os

import pytest

# Add src to Python path for all tests
tests_dir = os.path.dirname(__file__)
project_root = os.path.dirname(tests_dir)
src_path = os.path.join(project_root, "src")
src_path = os.path.abspath(src_path)

if src_path not in sys.path:
    sys.path.insert(0, src_path)

from solara.models.config import DeviceConfig, RefractionConfig, SolaraConfig
from solara.models.solar import GeoCoordinate


@pytest.fixture
def boulder():
    return GeoCoordinate(latitude=40.0, longitude=-105.0)


@pytest.fixture
def sample_config(boulder):
    """Two devices in Boulder: a limited south window and a free west panel"""
    return SolaraConfig(
        devices=[
            DeviceConfig(
                id="1",
                name="Living Room Window",
                orientation="south",
                location=boulder,
                locationName="Boulder, CO",
                tiltMin=0,
                tiltMax=60,
            ),
            DeviceConfig(
                id="2",
                name="Garage Panel",
                orientation=270,
                location=boulder,
            ),
        ],
        refraction=RefractionConfig(),
    )
