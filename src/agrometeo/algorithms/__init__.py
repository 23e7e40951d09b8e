"""
Formula implementations.

Provides solar geometry, radiation, evapotranspiration and Swiss grid
formulas, and a calculator facade combining them.
"""

from .solar import (
    inverse_relative_distance,
    solar_declination,
    sunset_hourangle,
    extraterrestrial_radiation,
    day_length,
)
from .radiation import srad_to_PAR, terrestrial_radiation, relative_sunshine_duration
from .evapotranspiration import (
    hargreaves_et0,
    hargreaves_et0_terrestrial,
    hargreaves_et0_extraterrestrial,
    radiation_to_evapotranspiration_unit_conversion,
)
from .swiss_grid import swiss_coords_to_lat_lon
from .calculator import AgroMeteoCalculator, RadiationComponents

__all__ = [
    "inverse_relative_distance",
    "solar_declination",
    "sunset_hourangle",
    "extraterrestrial_radiation",
    "day_length",
    "srad_to_PAR",
    "terrestrial_radiation",
    "relative_sunshine_duration",
    "hargreaves_et0",
    "hargreaves_et0_terrestrial",
    "hargreaves_et0_extraterrestrial",
    "radiation_to_evapotranspiration_unit_conversion",
    "swiss_coords_to_lat_lon",
    "AgroMeteoCalculator",
    "RadiationComponents",
]
