"""
Tracking planner: sun position and commanded tilt for configured devices
"""

import logging
from datetime import datetime, timedelta
from typing import Dict, Iterator

from solara.models.config import DeviceConfig, SolaraConfig
from solara.models.solar import PanelGeometry, TrackingSnapshot
from solara.utils.solar import JulianCalendar, PanelAnalyzer, SolarCalculator
from solara.utils.solar.constants import SolarConstants

logger = logging.getLogger(__name__)


class TrackingPlanner:
    """Computes tracking updates for the devices of a configuration.

    The planner only holds the (immutable) configuration, so a single
    instance can serve a periodic update loop or concurrent callers.
    """

    def __init__(self, config: SolaraConfig):
        self.config = config
        self._devices: Dict[str, DeviceConfig] = {
            device.id: device for device in config.devices
        }

    def device(self, device_id: str) -> DeviceConfig:
        """Look up a configured device by ID"""
        if device_id not in self._devices:
            raise KeyError(f"Unknown device: {device_id}")
        return self._devices[device_id]

    def snapshot(self, device: DeviceConfig, instant: datetime) -> TrackingSnapshot:
        """Sun position, commanded tilt and efficiency for one device"""
        utc = JulianCalendar.to_utc(instant)
        position = SolarCalculator.position(
            utc,
            device.location.latitude,
            device.location.longitude,
            self.config.refraction,
        )

        result = PanelAnalyzer.optimal_tilt_for_fixed_azimuth(
            position.elevation,
            position.azimuth,
            device.orientation,
            tilt_min=device.tiltMin,
            tilt_max=device.tiltMax,
        )
        panel = PanelGeometry(panel_azimuth=device.orientation, tilt=result.optimal_tilt)
        efficiency = PanelAnalyzer.panel_incidence_efficiency(
            position.azimuth, position.elevation, panel.panel_azimuth, panel.tilt
        )

        logger.debug(
            f"Tracking {device.name} at {utc.isoformat()}: "
            f"elevation={position.elevation:.2f}, azimuth={position.azimuth:.2f}, "
            f"tilt={result.optimal_tilt:.2f}, efficiency={efficiency:.3f}"
        )

        return TrackingSnapshot(
            device_id=device.id,
            time=utc,
            position=position,
            optimal_tilt=result.optimal_tilt,
            panel=panel,
            cos_incidence=result.cos_incidence,
            efficiency=efficiency,
            sun_direction=PanelAnalyzer.compass_direction(position.azimuth),
            sun_is_up=position.elevation > SolarConstants.CIVIL_TWILIGHT_THRESHOLD,
        )

    def series(
        self,
        device: DeviceConfig,
        start: datetime,
        end: datetime,
        interval_minutes: float = 1,
    ) -> Iterator[TrackingSnapshot]:
        """Snapshots from start to end (both inclusive) at a fixed interval"""
        if interval_minutes <= 0:
            raise ValueError(f"interval_minutes must be positive, got {interval_minutes}")

        step = timedelta(minutes=interval_minutes)
        current = JulianCalendar.to_utc(start)
        end = JulianCalendar.to_utc(end)

        while current <= end:
            yield self.snapshot(device, current)
            current += step

    def snapshot_all(self, instant: datetime) -> Dict[str, TrackingSnapshot]:
        """Snapshots for every configured device at the same instant"""
        return {
            device.id: self.snapshot(device, instant) for device in self.config.devices
        }
