"""
Package initialization for models
"""

# Value models produced by the solar geometry engine
from .solar import (
    GeoCoordinate,
    SolarPosition,
    SolarEphemeris,
    PanelGeometry,
    OptimizationResult,
    TrackingSnapshot,
)

# Configuration models
from .config import (
    RefractionConfig,
    DeviceConfig,
    SolaraConfig,
)

__all__ = [
    # Value models
    "GeoCoordinate",
    "SolarPosition",
    "SolarEphemeris",
    "PanelGeometry",
    "OptimizationResult",
    "TrackingSnapshot",
    # Config models
    "RefractionConfig",
    "DeviceConfig",
    "SolaraConfig",
]
