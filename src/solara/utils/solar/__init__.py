"""
Solar geometry package for Solara panel tracking

This package computes the sun's apparent position for a UTC instant and
location, and the panel tilt that maximizes direct-beam capture for a
facade of fixed azimuth.
"""

from .constants import SolarConstants
from .julian import JulianCalendar
from .ephemeris import SolarCalculator
from .panel import PanelAnalyzer

julian_day = JulianCalendar.julian_day
julian_century = JulianCalendar.julian_century
julian_day_to_datetime = JulianCalendar.to_datetime

solar_position = SolarCalculator.position
solar_position_details = SolarCalculator.details
refraction_correction = SolarCalculator.refraction_correction

optimal_tilt_for_fixed_azimuth = PanelAnalyzer.optimal_tilt_for_fixed_azimuth
panel_incidence_efficiency = PanelAnalyzer.panel_incidence_efficiency
cos_incidence = PanelAnalyzer.cos_incidence
direct_power_fraction = PanelAnalyzer.direct_power_fraction
compass_direction = PanelAnalyzer.compass_direction
orientation_to_azimuth = PanelAnalyzer.orientation_to_azimuth

__all__ = [
    "SolarConstants",
    "JulianCalendar",
    "SolarCalculator",
    "PanelAnalyzer",
    "julian_day",
    "julian_century",
    "julian_day_to_datetime",
    "solar_position",
    "solar_position_details",
    "refraction_correction",
    "optimal_tilt_for_fixed_azimuth",
    "panel_incidence_efficiency",
    "cos_incidence",
    "direct_power_fraction",
    "compass_direction",
    "orientation_to_azimuth",
]
