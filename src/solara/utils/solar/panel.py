"""
Panel incidence and tilt optimization for facades of fixed azimuth
"""

import logging
import math
from typing import Union

import numpy as np

from solara.models.solar import OptimizationResult
from .constants import SolarConstants

logger = logging.getLogger(__name__)

# Orientation names with separators removed, so "north-east" matches "northeast"
_ORIENTATION_LOOKUP = {
    name.replace("-", ""): azimuth
    for name, azimuth in SolarConstants.ORIENTATION_TO_AZIMUTH.items()
}


class PanelAnalyzer:
    """Direct-beam incidence on a tilted panel and its optimal tilt.

    Azimuths are compass headings (0 = north, 90 = east) and tilt is measured
    from horizontal. The incidence cosine for a panel of azimuth gp and tilt b
    under a sun at elevation a and azimuth gs reduces to

        cos(theta) = cos(a) cos(gs - gp) sin(b) + sin(a) cos(b)

    which is a sinusoid in b with a closed-form maximum.
    """

    @staticmethod
    def cos_incidence(
        elevation: float, solar_azimuth: float, tilt: float, panel_azimuth: float
    ) -> float:
        """Closed-form incidence cosine, clamped to [0, 1]"""
        with np.errstate(all="ignore"):
            alpha = np.radians(elevation)
            beta = np.radians(tilt)
            delta = np.radians(solar_azimuth - panel_azimuth)
            c = np.cos(alpha) * np.sin(beta) * np.cos(delta) + np.sin(alpha) * np.cos(
                beta
            )
        return float(np.clip(c, 0.0, 1.0))

    @staticmethod
    def direct_power_fraction(
        elevation: float, solar_azimuth: float, tilt: float, panel_azimuth: float
    ) -> float:
        """Fraction of rated direct-beam power at an arbitrary tilt (0..1)"""
        return PanelAnalyzer.cos_incidence(elevation, solar_azimuth, tilt, panel_azimuth)

    @staticmethod
    def optimal_tilt_for_fixed_azimuth(
        elevation: float,
        solar_azimuth: float,
        panel_azimuth: float,
        tilt_min: float = SolarConstants.DEFAULT_TILT_MIN,
        tilt_max: float = SolarConstants.DEFAULT_TILT_MAX,
    ) -> OptimizationResult:
        """Tilt maximizing direct-beam capture within the mechanical range.

        The unconstrained optimum atan2(A, B) is clamped to
        [tilt_min, tilt_max] first, and the incidence cosine is then evaluated
        at the clamped tilt: the result describes what the actuator can
        actually reach, not the theoretical optimum.
        """
        with np.errstate(all="ignore"):
            alpha = np.radians(elevation)
            delta = np.radians(solar_azimuth - panel_azimuth)
            a = np.cos(alpha) * np.cos(delta)  # coefficient of sin(tilt)
            b = np.sin(alpha)  # coefficient of cos(tilt)

            unconstrained = np.degrees(np.arctan2(a, b))
            tilt = np.clip(unconstrained, tilt_min, tilt_max)
            if np.isfinite(unconstrained) and tilt != unconstrained:
                logger.debug(
                    f"Optimal tilt {unconstrained:.2f} clamped to {tilt:.2f} "
                    f"(range {tilt_min}..{tilt_max})"
                )

            beta = np.radians(tilt)
            cos_theta = np.clip(a * np.sin(beta) + b * np.cos(beta), 0.0, 1.0)

        return OptimizationResult(
            optimal_tilt=float(tilt), cos_incidence=float(cos_theta)
        )

    @staticmethod
    def panel_incidence_efficiency(
        solar_azimuth: float,
        solar_elevation: float,
        panel_azimuth: float,
        panel_tilt: float,
    ) -> float:
        """Relative direct-beam efficiency of a panel at any commanded tilt.

        Dot product of the panel's unit normal and the unit sun vector in a
        local East-North-Up frame. Backside incidence counts as zero.
        """
        with np.errstate(all="ignore"):
            sun_az = np.radians(solar_azimuth)
            sun_el = np.radians(solar_elevation)
            panel_az = np.radians(panel_azimuth)
            tilt = np.radians(panel_tilt)

            normal = np.array(
                [
                    np.sin(tilt) * np.sin(panel_az),
                    np.sin(tilt) * np.cos(panel_az),
                    np.cos(tilt),
                ]
            )
            sun = np.array(
                [
                    np.cos(sun_el) * np.sin(sun_az),
                    np.cos(sun_el) * np.cos(sun_az),
                    np.sin(sun_el),
                ]
            )
            dot = np.dot(normal, sun)

        return float(np.clip(dot, 0.0, 1.0))

    @staticmethod
    def compass_direction(azimuth: float, points: int = 8) -> str:
        """Compass label for an azimuth, on an 8- or 16-point rose"""
        if points == 8:
            labels = SolarConstants.COMPASS_POINTS_8
        elif points == 16:
            labels = SolarConstants.COMPASS_DIRECTIONS
        else:
            raise ValueError(f"Unsupported compass resolution: {points}")

        if not math.isfinite(azimuth):
            raise ValueError(f"Azimuth must be finite, got {azimuth}")

        sector = 360.0 / points
        index = int(((azimuth + sector / 2.0) % 360.0) // sector) % points
        return labels[index]

    @staticmethod
    def orientation_to_azimuth(orientation: Union[str, float, int]) -> float:
        """Resolve a facade orientation (degrees or compass name) to degrees"""
        if isinstance(orientation, (int, float)):
            return float(orientation)

        text = orientation.strip().lower()
        try:
            return float(text)
        except ValueError:
            pass

        key = text.replace(" ", "").replace("_", "").replace("-", "")
        if key not in _ORIENTATION_LOOKUP:
            raise ValueError(f"Unknown orientation: {orientation}")
        return float(_ORIENTATION_LOOKUP[key])
