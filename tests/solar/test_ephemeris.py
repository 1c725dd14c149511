"""
Tests for the solar ephemeris calculator
"""

import inspect
import logging
import math
from datetime import datetime

import pandas as pd
import pytest
import pytz
from pvlib import solarposition

from solara.models.config import RefractionConfig
from solara.models.solar import SolarPosition
from solara.utils.solar import (
    SolarCalculator,
    refraction_correction,
    solar_position,
    solar_position_details,
)


def reference_position(instant, latitude, longitude):
    """NREL SPA position from pvlib with the engine's standard atmosphere"""
    times = pd.DatetimeIndex([instant])
    ref = solarposition.get_solarposition(
        times, latitude, longitude, pressure=101325.0, temperature=15.0
    )
    return ref["apparent_elevation"].iloc[0], ref["azimuth"].iloc[0]


def angular_difference(a, b):
    """Smallest difference between two compass angles in degrees"""
    return abs((a - b + 180.0) % 360.0 - 180.0)


class TestAgainstReferenceEphemeris:
    """Test cases comparing against pvlib's NREL SPA implementation"""

    def test_boulder_solstice_morning(self):
        """Test 2024-06-21T12:00Z at 40N 105W (sun just above the horizon)"""
        instant = datetime(2024, 6, 21, 12, 0, tzinfo=pytz.utc)
        pos = solar_position(instant, 40.0, -105.0)
        ref_elevation, ref_azimuth = reference_position(instant, 40.0, -105.0)

        assert pos.elevation == pytest.approx(ref_elevation, abs=0.1)
        assert angular_difference(pos.azimuth, ref_azimuth) < 0.1
        assert 0.0 < pos.elevation < 10.0
        assert 45.0 < pos.azimuth < 75.0

    @pytest.mark.parametrize(
        "instant, latitude, longitude",
        [
            (datetime(2024, 6, 21, 18, 0, tzinfo=pytz.utc), 40.0, -105.0),
            (datetime(2024, 12, 21, 12, 0, tzinfo=pytz.utc), 51.5, -0.1),
            (datetime(2024, 3, 20, 6, 0, tzinfo=pytz.utc), -33.9, 151.2),
            (datetime(2025, 9, 1, 3, 30, tzinfo=pytz.utc), 35.7, 139.7),
            (datetime(2030, 1, 15, 20, 0, tzinfo=pytz.utc), 19.4, -99.1),
            (datetime(2019, 7, 4, 21, 0, tzinfo=pytz.utc), 64.1, -21.9),
        ],
    )
    def test_matches_reference(self, instant, latitude, longitude):
        """Test elevation and azimuth within 0.1 degrees for daylight instants"""
        pos = solar_position(instant, latitude, longitude)
        ref_elevation, ref_azimuth = reference_position(instant, latitude, longitude)

        assert pos.elevation == pytest.approx(ref_elevation, abs=0.1)
        assert angular_difference(pos.azimuth, ref_azimuth) < 0.1

    def test_equinox_equator_noon(self):
        """Test the sun is nearly overhead at (0, 0) on the March equinox"""
        instant = datetime(2024, 3, 20, 12, 0, tzinfo=pytz.utc)
        pos = solar_position(instant, 0.0, 0.0)
        ref_elevation, _ = reference_position(instant, 0.0, 0.0)

        assert pos.elevation == pytest.approx(ref_elevation, abs=0.5)
        # Equation of time (about -7.5 min) shifts the sun ~1.9 degrees from zenith
        assert 87.0 < pos.elevation < 90.0


class TestEphemerisDetails:
    """Test cases for intermediate quantities"""

    def test_declination_at_june_solstice(self):
        details = solar_position_details(
            datetime(2024, 6, 20, 20, 51, tzinfo=pytz.utc), 0.0, 0.0
        )
        assert details.declination == pytest.approx(23.44, abs=0.02)

    def test_declination_at_march_equinox(self):
        details = solar_position_details(
            datetime(2024, 3, 20, 3, 6, tzinfo=pytz.utc), 0.0, 0.0
        )
        assert details.declination == pytest.approx(0.0, abs=0.05)

    def test_equation_of_time_early_november(self):
        """Test the annual maximum of the equation of time (~16.4 minutes)"""
        details = solar_position_details(
            datetime(2024, 11, 3, 12, 0, tzinfo=pytz.utc), 0.0, 0.0
        )
        assert details.equation_of_time == pytest.approx(16.4, abs=0.2)

    def test_hour_angle_at_utc_noon_on_greenwich(self):
        """Test that the hour angle at 12:00 UTC on longitude 0 is EoT / 4"""
        details = solar_position_details(
            datetime(2024, 5, 1, 12, 0, tzinfo=pytz.utc), 10.0, 0.0
        )
        assert details.hour_angle == pytest.approx(
            details.equation_of_time / 4.0, abs=1e-9
        )

    def test_longitude_shifts_hour_angle(self):
        """Test that 15 degrees of longitude move the hour angle 15 degrees"""
        instant = datetime(2024, 5, 1, 12, 0, tzinfo=pytz.utc)
        west = solar_position_details(instant, 10.0, 0.0)
        east = solar_position_details(instant, 10.0, 15.0)
        assert east.hour_angle - west.hour_angle == pytest.approx(15.0, abs=1e-9)

    def test_true_solar_time_wraps(self):
        """Test that true solar time stays inside one day"""
        for longitude in (-180.0, -179.9, 0.0, 179.9, 180.0):
            details = solar_position_details(
                datetime(2024, 1, 1, 0, 1, tzinfo=pytz.utc), 0.0, longitude
            )
            assert 0.0 <= details.true_solar_time < 1440.0

    def test_refraction_is_added(self):
        details = solar_position_details(
            datetime(2024, 6, 21, 12, 0, tzinfo=pytz.utc), 40.0, -105.0
        )
        assert details.refraction > 0
        assert details.elevation == pytest.approx(
            details.geometric_elevation + details.refraction, abs=1e-12
        )

    def test_position_projection(self):
        instant = datetime(2024, 6, 21, 18, 0, tzinfo=pytz.utc)
        details = SolarCalculator.details(instant, 40.0, -105.0)
        pos = SolarCalculator.position(instant, 40.0, -105.0)
        assert isinstance(pos, SolarPosition)
        assert pos == details.to_position()


class TestRefraction:
    """Test cases for the atmospheric refraction correction"""

    def test_at_horizon(self):
        """Test the standard ~0.45 degree lift at the geometric horizon"""
        assert refraction_correction(0.0) == pytest.approx(0.45, abs=0.01)

    def test_below_limit_is_zero(self):
        assert refraction_correction(-0.575) == 0.0
        assert refraction_correction(-5.0) == 0.0

    def test_decreases_with_elevation(self):
        values = [refraction_correction(e) for e in (0.0, 5.0, 15.0, 45.0, 80.0)]
        assert values == sorted(values, reverse=True)

    def test_negligible_overhead(self):
        assert abs(refraction_correction(90.0)) < 1e-3

    def test_default_matches_standard_atmosphere(self):
        standard = RefractionConfig(pressure_hpa=1013.25, temperature_c=15.0)
        assert refraction_correction(3.0) == refraction_correction(3.0, standard)

    def test_denser_air_refracts_more(self):
        cold = RefractionConfig(pressure_hpa=1030.0, temperature_c=-20.0)
        hot = RefractionConfig(pressure_hpa=990.0, temperature_c=35.0)
        assert refraction_correction(2.0, cold) > refraction_correction(2.0, hot)

    @pytest.mark.parametrize(
        "method",
        [
            SolarCalculator.refraction_correction,
            SolarCalculator.details,
            SolarCalculator.position,
        ],
    )
    def test_refraction_parameter_is_annotated(self, method):
        parameter = inspect.signature(method).parameters["refraction"]
        assert parameter.default is None
        assert "RefractionConfig" in str(parameter.annotation)

    def test_config_flows_into_position(self):
        instant = datetime(2024, 6, 21, 12, 0, tzinfo=pytz.utc)
        default = solar_position(instant, 40.0, -105.0)
        configured = solar_position(
            instant, 40.0, -105.0, RefractionConfig(pressure_hpa=1050.0)
        )
        assert configured.elevation > default.elevation
        assert configured.azimuth == default.azimuth


class TestPositionRanges:
    """Test cases for output ranges and azimuth disambiguation"""

    @pytest.mark.parametrize(
        "latitude", [-90.0, -66.5, -45.0, -10.0, 0.0, 23.4, 51.5, 78.2, 90.0]
    )
    @pytest.mark.parametrize("longitude", [-180.0, -105.0, 0.0, 77.2, 180.0])
    def test_ranges(self, latitude, longitude):
        """Test azimuth in [0, 360) and elevation in [-90, 90] around the clock"""
        for hour in range(0, 24, 3):
            for month in (3, 6, 12):
                instant = datetime(2024, month, 21, hour, 17, tzinfo=pytz.utc)
                pos = solar_position(instant, latitude, longitude)
                assert 0.0 <= pos.azimuth < 360.0
                assert -90.0 <= pos.elevation <= 90.0

    @pytest.mark.parametrize("latitude", [90.0, -90.0])
    def test_poles_do_not_produce_nan(self, latitude):
        """Test the near-singular azimuth at the poles stays finite"""
        for hour in range(24):
            pos = solar_position(
                datetime(2024, 6, 21, hour, 0, tzinfo=pytz.utc), latitude, 0.0
            )
            assert math.isfinite(pos.elevation)
            assert math.isfinite(pos.azimuth)

    def test_pole_logs_degenerate_azimuth(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="solara.utils.solar.ephemeris"):
            solar_position(datetime(2024, 6, 21, 0, 0, tzinfo=pytz.utc), 90.0, 0.0)
        assert "Degenerate azimuth at latitude=90.0" in caplog.text

    def test_mid_latitude_azimuth_is_not_degenerate(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="solara.utils.solar.ephemeris"):
            solar_position(datetime(2024, 6, 21, 18, 0, tzinfo=pytz.utc), 40.0, -105.0)
        assert "Degenerate azimuth" not in caplog.text

    def test_polar_elevation_tracks_declination(self):
        """Test that at the north pole the elevation is about the declination"""
        details = solar_position_details(
            datetime(2024, 6, 21, 0, 0, tzinfo=pytz.utc), 90.0, 0.0
        )
        assert details.geometric_elevation == pytest.approx(details.declination, abs=1e-6)

    def test_morning_east_afternoon_west(self):
        """Test the azimuth reflection on the hour-angle sign"""
        morning = solar_position(datetime(2024, 6, 21, 15, 0, tzinfo=pytz.utc), 40.0, -105.0)
        afternoon = solar_position(datetime(2024, 6, 21, 21, 0, tzinfo=pytz.utc), 40.0, -105.0)
        assert morning.azimuth < 180.0
        assert afternoon.azimuth > 180.0

    def test_southern_hemisphere_noon_sun_is_north(self):
        """Test the winter noon sun stands in the north at Sydney"""
        pos = solar_position(datetime(2024, 6, 21, 1, 57, tzinfo=pytz.utc), -33.9, 151.2)
        assert angular_difference(pos.azimuth, 0.0) < 5.0
        assert pos.elevation == pytest.approx(90.0 - 33.9 - 23.44, abs=1.0)

    def test_midnight_sun_below_horizon(self):
        pos = solar_position(datetime(2024, 3, 21, 7, 0, tzinfo=pytz.utc), 39.8, -89.6)
        assert pos.elevation < 0.0

    def test_localized_instant_same_as_utc(self):
        denver = pytz.timezone("America/Denver").localize(datetime(2024, 6, 21, 12, 0))
        utc = datetime(2024, 6, 21, 18, 0, tzinfo=pytz.utc)
        assert solar_position(denver, 40.0, -105.0) == solar_position(utc, 40.0, -105.0)


class TestNonFiniteInput:
    """Test cases for NaN propagation without exceptions"""

    @pytest.mark.parametrize(
        "latitude, longitude",
        [
            (float("nan"), 0.0),
            (0.0, float("nan")),
            (float("inf"), 0.0),
            (0.0, float("-inf")),
        ],
    )
    def test_propagates_nan(self, latitude, longitude):
        pos = solar_position(
            datetime(2024, 6, 21, 12, 0, tzinfo=pytz.utc), latitude, longitude
        )
        assert math.isnan(pos.elevation)
        assert math.isnan(pos.azimuth)

    @pytest.mark.parametrize("longitude", [1e308, -1e308, 1.7976931348623157e308])
    def test_huge_finite_longitude_stays_in_range(self, longitude):
        """Test that 4 * longitude overflowing a double does not turn into NaN"""
        pos = solar_position(
            datetime(2024, 6, 21, 12, 0, tzinfo=pytz.utc), 40.0, longitude
        )
        assert 0.0 <= pos.azimuth < 360.0
        assert -90.0 <= pos.elevation <= 90.0

    def test_longitude_wraps_by_full_turns(self):
        instant = datetime(2024, 6, 21, 18, 0, tzinfo=pytz.utc)
        base = solar_position_details(instant, 40.0, -105.0)
        wrapped = solar_position_details(instant, 40.0, -105.0 + 720.0)
        assert wrapped.true_solar_time == pytest.approx(base.true_solar_time, abs=1e-9)
        assert wrapped.elevation == pytest.approx(base.elevation, abs=1e-9)

    def test_out_of_range_latitude_is_accepted(self):
        """Test that physically meaningless input still returns finite numbers"""
        pos = solar_position(datetime(2024, 6, 21, 12, 0, tzinfo=pytz.utc), 120.0, 400.0)
        assert math.isfinite(pos.elevation)
        assert 0.0 <= pos.azimuth < 360.0
