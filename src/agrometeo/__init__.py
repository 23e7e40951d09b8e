"""
Agro-meteorological formula library.

This package provides closed-form solar geometry, radiation and reference
evapotranspiration formulas, plus the Swiss LV03 grid conversion.
"""

__version__ = "0.1.0"
__description__ = "Closed-form agro-meteorological and geodetic formulas"

from .core.constants import SOLAR_CONSTANT, TERRAN_ANGULAR_VELOCITY, RADIAN
from .core.exceptions import AgroMeteoError, DomainError, ShapeMismatchError
from .algorithms.solar import (
    inverse_relative_distance,
    solar_declination,
    sunset_hourangle,
    extraterrestrial_radiation,
    day_length,
)
from .algorithms.radiation import (
    srad_to_PAR,
    terrestrial_radiation,
    relative_sunshine_duration,
)
from .algorithms.evapotranspiration import (
    hargreaves_et0,
    hargreaves_et0_terrestrial,
    hargreaves_et0_extraterrestrial,
    radiation_to_evapotranspiration_unit_conversion,
)
from .algorithms.swiss_grid import swiss_coords_to_lat_lon
from .algorithms.calculator import AgroMeteoCalculator, RadiationComponents
from .core.config import Config


__all__ = [
    "SOLAR_CONSTANT",
    "TERRAN_ANGULAR_VELOCITY",
    "RADIAN",
    "AgroMeteoError",
    "DomainError",
    "ShapeMismatchError",
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
    "Config",
]
