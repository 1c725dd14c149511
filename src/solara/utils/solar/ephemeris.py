"""
Low-precision solar ephemeris (NOAA / Meeus), accurate to about 0.01 degrees
"""

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Optional

import numpy as np

from solara.models.solar import SolarEphemeris, SolarPosition
from .constants import SolarConstants
from .julian import JulianCalendar

if TYPE_CHECKING:
    from solara.models.config import RefractionConfig

logger = logging.getLogger(__name__)


def _normalize_degrees(angle):
    return np.mod(angle, 360.0)


def _clamp_unit(value):
    # np.clip keeps NaN, so non-finite input propagates instead of clamping
    return np.clip(value, -1.0, 1.0)


class SolarCalculator:
    """Sun position for a UTC instant and geographic coordinate.

    All inputs and outputs are degrees. Evaluation goes through numpy so that
    non-finite coordinates yield NaN rather than raising a math domain error.
    """

    @staticmethod
    def refraction_correction(
        altitude_deg: float, refraction: Optional["RefractionConfig"] = None
    ) -> float:
        """Atmospheric refraction in degrees for a geometric elevation.

        ``refraction`` is an optional RefractionConfig; the standard
        atmosphere (1013.25 hPa, 15 C) is used when it is omitted. Returns 0.0
        at or below -0.575 degrees, where the empirical formula diverges.
        """
        pressure = SolarConstants.DEFAULT_PRESSURE_HPA
        temperature = SolarConstants.DEFAULT_TEMPERATURE_C
        if refraction is not None:
            pressure = refraction.pressure_hpa
            temperature = refraction.temperature_c

        if not altitude_deg > SolarConstants.REFRACTION_ELEVATION_LIMIT:
            return 0.0

        with np.errstate(all="ignore"):
            alt_rad = np.radians(altitude_deg)
            correction = (0.00452 * pressure) / (
                (273.0 + temperature)
                * np.tan(alt_rad + 0.00312536 / (alt_rad + 0.089011))
            )
        return float(correction)

    @staticmethod
    def details(
        instant: datetime,
        latitude: float,
        longitude: float,
        refraction: Optional["RefractionConfig"] = None,
    ) -> SolarEphemeris:
        """Solar position together with its intermediate quantities"""
        utc = JulianCalendar.to_utc(instant)
        jd = JulianCalendar.julian_day(utc)
        t = JulianCalendar.julian_century(jd)

        with np.errstate(all="ignore"):
            # Mean longitude, mean anomaly and orbital eccentricity
            l0 = _normalize_degrees(280.46646 + 36000.76983 * t + 0.0003032 * t * t)
            m = _normalize_degrees(357.52911 + 35999.05029 * t - 0.0001537 * t * t)
            e = 0.016708634 - 0.000042037 * t - 0.0000001267 * t * t

            m_rad = np.radians(m)
            center = (
                (1.914602 - 0.004817 * t - 0.000014 * t * t) * np.sin(m_rad)
                + (0.019993 - 0.000101 * t) * np.sin(2 * m_rad)
                + 0.000289 * np.sin(3 * m_rad)
            )
            true_long = l0 + center

            omega = np.radians(125.04 - 1934.136 * t)
            apparent_long = true_long - 0.00569 - 0.00478 * np.sin(omega)

            mean_obliquity = 23.0 + (
                26.0 + (21.448 - t * (46.815 + t * (0.00059 - t * 0.001813))) / 60.0
            ) / 60.0
            obliquity = np.radians(mean_obliquity + 0.00256 * np.cos(omega))

            declination = np.arcsin(
                _clamp_unit(np.sin(obliquity) * np.sin(np.radians(apparent_long)))
            )

            y = np.tan(obliquity / 2.0) ** 2
            l0_rad = np.radians(l0)
            eq_time_rad = (
                y * np.sin(2 * l0_rad)
                - 2 * e * np.sin(m_rad)
                + 4 * e * y * np.sin(m_rad) * np.cos(2 * l0_rad)
                - 0.5 * y * y * np.sin(4 * l0_rad)
                - 1.25 * e * e * np.sin(2 * m_rad)
            )
            eq_time = 4.0 * np.degrees(eq_time_rad)

            minutes_utc = (
                utc.hour * 60.0
                + utc.minute
                + (utc.second + utc.microsecond / 1e6) / 60.0
            )
            # Reduce longitude first so 4 * longitude cannot overflow
            true_solar_time = np.mod(
                minutes_utc + 4.0 * np.mod(longitude, 360.0) + eq_time,
                SolarConstants.MINUTES_PER_DAY,
            )

            hour_angle = true_solar_time / 4.0 - 180.0
            h_rad = np.radians(hour_angle)
            phi = np.radians(latitude)

            sin_alt = _clamp_unit(
                np.sin(phi) * np.sin(declination)
                + np.cos(phi) * np.cos(declination) * np.cos(h_rad)
            )
            geometric_alt = np.arcsin(sin_alt)

            # Azimuth is geometric, so it uses the unrefracted elevation.
            # Near the poles the denominator vanishes; the clamp keeps acos defined.
            denominator = np.cos(phi) * np.cos(geometric_alt)
            if abs(denominator) < 1e-12:
                logger.debug(
                    f"Degenerate azimuth at latitude={latitude}, "
                    f"elevation={np.degrees(geometric_alt):.6f}"
                )
            cos_az = (np.sin(declination) - np.sin(phi) * sin_alt) / denominator
            azimuth = np.degrees(np.arccos(_clamp_unit(cos_az)))
            # acos is ambiguous between morning and afternoon: reflect after noon
            if np.sin(h_rad) > 0:
                azimuth = 360.0 - azimuth
            # 360 - 0 wraps back to north
            azimuth = _normalize_degrees(azimuth)

        geometric_elevation = float(np.degrees(geometric_alt))
        correction = SolarCalculator.refraction_correction(
            geometric_elevation, refraction
        )
        elevation = float(np.clip(geometric_elevation + correction, -90.0, 90.0))

        return SolarEphemeris(
            julian_day=jd,
            declination=float(np.degrees(declination)),
            equation_of_time=float(eq_time),
            true_solar_time=float(true_solar_time),
            hour_angle=float(hour_angle),
            geometric_elevation=geometric_elevation,
            refraction=correction,
            elevation=elevation,
            azimuth=float(azimuth),
        )

    @staticmethod
    def position(
        instant: datetime,
        latitude: float,
        longitude: float,
        refraction: Optional["RefractionConfig"] = None,
    ) -> SolarPosition:
        """Apparent elevation and azimuth of the sun in degrees"""
        return SolarCalculator.details(
            instant, latitude, longitude, refraction
        ).to_position()
