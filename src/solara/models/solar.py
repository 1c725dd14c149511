"""
Pydantic value models produced by the solar geometry engine
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class GeoCoordinate(BaseModel):
    """Geographic coordinate in degrees (not range-validated)"""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., description="Latitude in degrees, north positive")
    longitude: float = Field(..., description="Longitude in degrees, east positive")


class SolarPosition(BaseModel):
    """Apparent position of the sun for an instant and location"""

    model_config = ConfigDict(frozen=True)

    elevation: float = Field(
        ..., description="Degrees above the horizon, refraction included"
    )
    azimuth: float = Field(
        ..., description="Degrees clockwise from true north, in [0, 360)"
    )


class SolarEphemeris(BaseModel):
    """Intermediate quantities of a solar position calculation"""

    model_config = ConfigDict(frozen=True)

    julian_day: float = Field(..., description="Continuous Julian Day")
    declination: float = Field(..., description="Solar declination in degrees")
    equation_of_time: float = Field(..., description="Equation of time in minutes")
    true_solar_time: float = Field(
        ..., description="True solar time in minutes, in [0, 1440)"
    )
    hour_angle: float = Field(..., description="Hour angle in degrees")
    geometric_elevation: float = Field(
        ..., description="Elevation before refraction correction, degrees"
    )
    refraction: float = Field(
        ..., description="Refraction correction added to the elevation, degrees"
    )
    elevation: float = Field(..., description="Apparent elevation in degrees")
    azimuth: float = Field(..., description="Azimuth in degrees, in [0, 360)")

    def to_position(self) -> SolarPosition:
        return SolarPosition(elevation=self.elevation, azimuth=self.azimuth)


class PanelGeometry(BaseModel):
    """Orientation of a panel: fixed facade azimuth and tilt from horizontal"""

    model_config = ConfigDict(frozen=True)

    panel_azimuth: float = Field(..., description="Facade compass heading in degrees")
    tilt: float = Field(..., description="Tilt from horizontal in degrees")


class OptimizationResult(BaseModel):
    """Best achievable tilt for a fixed panel azimuth"""

    model_config = ConfigDict(frozen=True)

    optimal_tilt: float = Field(
        ..., description="Tilt in degrees, clamped to the mechanical range"
    )
    cos_incidence: float = Field(
        ..., description="Incidence cosine at the clamped tilt, in [0, 1]"
    )


class TrackingSnapshot(BaseModel):
    """Everything a tracking update computes for one device at one instant"""

    model_config = ConfigDict(frozen=True)

    device_id: str = Field(..., description="Device the snapshot was computed for")
    time: datetime = Field(..., description="UTC instant of the snapshot")
    position: SolarPosition = Field(..., description="Sun position")
    optimal_tilt: float = Field(..., description="Commanded tilt in degrees")
    panel: PanelGeometry = Field(
        ..., description="Commanded panel orientation (facade azimuth and tilt)"
    )
    cos_incidence: float = Field(
        ..., description="Incidence cosine from the closed-form optimizer"
    )
    efficiency: float = Field(
        ..., description="Incidence efficiency evaluated at the commanded tilt"
    )
    sun_direction: str = Field(..., description="Compass label of the sun azimuth")
    sun_is_up: bool = Field(..., description="Whether the sun is above the horizon")
