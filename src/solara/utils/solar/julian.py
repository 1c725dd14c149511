"""
Conversions between UTC instants and continuous Julian Day numbers
"""

import math
from datetime import datetime, timedelta

import pytz

from .constants import SolarConstants


class JulianCalendar:
    """Gregorian calendar <-> Julian Day conversions (Meeus, chapter 7)"""

    @staticmethod
    def to_utc(instant: datetime) -> datetime:
        """Normalize an instant to UTC; naive datetimes are taken as UTC"""
        if instant.tzinfo is None:
            return pytz.utc.localize(instant)
        return instant.astimezone(pytz.utc)

    @staticmethod
    def julian_day(instant: datetime) -> float:
        """Continuous Julian Day for a UTC instant, valid for Gregorian dates"""
        utc = JulianCalendar.to_utc(instant)

        year = utc.year
        month = utc.month
        day = (
            utc.day
            + utc.hour / 24.0
            + utc.minute / 1440.0
            + (utc.second + utc.microsecond / 1e6) / 86400.0
        )

        # January and February count as months 13 and 14 of the previous year
        if month <= 2:
            year -= 1
            month += 12

        a = math.floor(year / 100.0)
        b = 2 - a + math.floor(a / 4.0)

        return (
            math.floor(365.25 * (year + 4716))
            + math.floor(30.6001 * (month + 1))
            + day
            + b
            - 1524.5
        )

    @staticmethod
    def julian_century(jd: float) -> float:
        """Julian centuries elapsed since J2000.0"""
        return (jd - SolarConstants.J2000_JULIAN_DAY) / SolarConstants.DAYS_PER_CENTURY

    @staticmethod
    def to_datetime(jd: float) -> datetime:
        """Inverse of julian_day, returning an aware UTC datetime.

        Always takes the Gregorian branch so that it exactly inverts
        julian_day, which applies the Gregorian century correction to
        every date.
        """
        shifted = jd + 0.5
        z = math.floor(shifted)
        fraction = shifted - z

        alpha = math.floor((z - 1867216.25) / 36524.25)
        a = z + 1 + alpha - math.floor(alpha / 4.0)
        b = a + 1524
        c = math.floor((b - 122.1) / 365.25)
        d = math.floor(365.25 * c)
        e = math.floor((b - d) / 30.6001)

        day = b - d - math.floor(30.6001 * e)
        month = e - 1 if e < 14 else e - 13
        year = c - 4716 if month > 2 else c - 4715

        return datetime(year, month, day, tzinfo=pytz.utc) + timedelta(days=fraction)
