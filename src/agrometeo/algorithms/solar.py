"""
Solar geometry module.

Declination, sunset hour angle, day length and extraterrestrial radiation
for a given day of year and latitude. All functions accept scalars or
arrays and apply elementwise.

Polar day and polar night have no sunset hour angle: where
|tan(latitude) * tan(declination)| > 1 the result is NaN and every
formula built on it propagates NaN.
"""

import numpy as np

from ..core.constants import (
    AXIAL_TILT,
    MARCH_EQUINOX_DOY,
    RADIAN,
    ROTATION_DEGREES_PER_HOUR,
    SOLAR_CONSTANT,
    TERRAN_ANGULAR_VELOCITY,
)
from ._arrays import as_arrays, unwrap


def inverse_relative_distance(DOY):
    """
    Inverse relative distance between Earth and Sun.

    Args:
        DOY: Day of year

    Returns:
        Dimensionless distance factor, periodic in DOY with period 365.25
    """
    (doy,) = as_arrays("inverse_relative_distance", DOY)
    return unwrap(1. + 0.033 * np.cos(TERRAN_ANGULAR_VELOCITY * doy))


def solar_declination(DOY):
    """
    Solar declination for a given day of year.

    The declination is 0 at the March equinox, rises to the axial tilt of
    23.4 degrees at the June solstice, crosses 0 again at the September
    equinox and reaches -23.4 degrees at the December solstice.

    Args:
        DOY: Day of year

    Returns:
        Solar declination (radians)
    """
    (doy,) = as_arrays("solar_declination", DOY)
    return unwrap(AXIAL_TILT * np.sin(TERRAN_ANGULAR_VELOCITY * (doy - MARCH_EQUINOX_DOY)))


def sunset_hourangle(DOY, latitude):
    """
    Sunset hour angle for a given day of year at a given latitude.

    Args:
        DOY: Day of year
        latitude: Geographical latitude (degrees)

    Returns:
        Hour angle (radians), NaN during polar day or polar night
    """
    doy, lat = as_arrays("sunset_hourangle", DOY, latitude)
    declination = solar_declination(doy)
    with np.errstate(invalid="ignore"):
        hourangle = np.arccos(-np.tan(lat * RADIAN) * np.tan(declination))
    return unwrap(hourangle)


def extraterrestrial_radiation(DOY, lat):
    """
    Daily average extraterrestrial radiation.

    Args:
        DOY: Day of year
        lat: Geographical latitude (degrees)

    Returns:
        Average extraterrestrial radiation (W/m², J/s/m²), sometimes called srad
    """
    doy, lat = as_arrays("extraterrestrial_radiation", DOY, lat)
    d = np.asarray(solar_declination(doy))
    hourangle = np.asarray(sunset_hourangle(doy, lat))
    term1 = 1 / np.pi * SOLAR_CONSTANT * np.asarray(inverse_relative_distance(doy))
    term2 = (hourangle * np.sin(lat * RADIAN) * np.sin(d) +
             np.cos(lat * RADIAN) * np.cos(d) * np.sin(hourangle))
    return unwrap(term1 * term2)


def day_length(DOY, latitude):
    """
    Day length for a given day of year at a given latitude.

    Args:
        DOY: Day of year
        latitude: Geographical latitude (degrees)

    Returns:
        Day length (hours), NaN during polar day or polar night
    """
    doy, lat = as_arrays("day_length", DOY, latitude)
    hourangle = np.asarray(sunset_hourangle(doy, lat))
    # Factor 2 because sunrise and sunset are symmetric around noon
    return unwrap(2 * hourangle / (ROTATION_DEGREES_PER_HOUR * RADIAN))
