"""
Pydantic models for configuration data
"""

from typing import List, Optional, Union
from pydantic import BaseModel, Field, field_validator, model_validator

from solara.utils.solar.constants import SolarConstants
from solara.utils.solar.panel import PanelAnalyzer
from .solar import GeoCoordinate


class RefractionConfig(BaseModel):
    """Atmosphere used by the refraction correction"""

    pressure_hpa: float = Field(
        default=SolarConstants.DEFAULT_PRESSURE_HPA,
        description="Surface air pressure in hPa",
    )
    temperature_c: float = Field(
        default=SolarConstants.DEFAULT_TEMPERATURE_C,
        description="Surface air temperature in degrees Celsius",
    )


class DeviceConfig(BaseModel):
    """Individual panel/window actuator configuration"""

    id: str = Field(..., description="Device ID")
    name: str = Field(..., description="Friendly name")
    orientation: float = Field(
        default=180.0,
        description="Facade azimuth in degrees, or a compass name such as 'south'",
    )
    location: GeoCoordinate = Field(..., description="Where the device is installed")
    locationName: Optional[str] = Field(
        default=None, description="Human readable location name"
    )
    tiltMin: float = Field(
        default=SolarConstants.DEFAULT_TILT_MIN,
        description="Lowest reachable tilt in degrees from horizontal",
    )
    tiltMax: float = Field(
        default=SolarConstants.DEFAULT_TILT_MAX,
        description="Highest reachable tilt in degrees from horizontal",
    )

    @field_validator("orientation", mode="before")
    @classmethod
    def resolve_orientation(cls, value: Union[str, float, int]):
        if isinstance(value, str):
            return PanelAnalyzer.orientation_to_azimuth(value)
        return value

    @model_validator(mode="after")
    def check_tilt_range(self) -> "DeviceConfig":
        if self.tiltMin > self.tiltMax:
            raise ValueError(
                f"tiltMin ({self.tiltMin}) must not exceed tiltMax ({self.tiltMax})"
            )
        return self


class SolaraConfig(BaseModel):
    """Solara configuration"""

    devices: List[DeviceConfig] = Field(
        default_factory=list, description="Configured devices"
    )
    refraction: RefractionConfig = Field(
        default_factory=RefractionConfig, description="Refraction atmosphere"
    )
