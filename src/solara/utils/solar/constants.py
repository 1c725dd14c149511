"""
Constants for solar calculations and panel orientations
"""


class SolarConstants:
    """Constants used throughout the solar calculation package"""

    # Julian Day of the J2000.0 epoch and days per Julian century
    J2000_JULIAN_DAY = 2451545.0
    DAYS_PER_CENTURY = 36525.0

    MINUTES_PER_DAY = 1440.0

    # Standard atmosphere used by the refraction correction
    DEFAULT_PRESSURE_HPA = 1013.25
    DEFAULT_TEMPERATURE_C = 15.0
    # Refraction is only applied above this geometric elevation (degrees)
    REFRACTION_ELEVATION_LIMIT = -0.575

    # Sun center below the horizon at sunrise/sunset (degrees)
    CIVIL_TWILIGHT_THRESHOLD = -0.833

    # Mechanical tilt range of a panel actuator (degrees from horizontal)
    DEFAULT_TILT_MIN = -90.0
    DEFAULT_TILT_MAX = 90.0

    # Facade orientation to azimuth mapping (degrees clockwise from north)
    ORIENTATION_TO_AZIMUTH = {
        "north": 0,
        "north-northeast": 22.5,
        "northeast": 45,
        "east-northeast": 67.5,
        "east": 90,
        "east-southeast": 112.5,
        "southeast": 135,
        "south-southeast": 157.5,
        "south": 180,
        "south-southwest": 202.5,
        "southwest": 225,
        "west-southwest": 247.5,
        "west": 270,
        "west-northwest": 292.5,
        "northwest": 315,
        "north-northwest": 337.5,
    }

    # Compass labels shown for the sun direction
    COMPASS_POINTS_8 = [
        "North",
        "North-East",
        "East",
        "South-East",
        "South",
        "South-West",
        "West",
        "North-West",
    ]

    COMPASS_DIRECTIONS = [
        "north",
        "north-northeast",
        "northeast",
        "east-northeast",
        "east",
        "east-southeast",
        "southeast",
        "south-southeast",
        "south",
        "south-southwest",
        "southwest",
        "west-southwest",
        "west",
        "west-northwest",
        "northwest",
        "north-northwest",
    ]
