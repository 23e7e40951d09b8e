"""
Physical constants shared by all formulas.

These are defined once at import time and must never be reassigned; every
formula reads them from this module so a change in precision propagates
consistently.
"""

import math

# Power per area emitted by the sun reaching the top of the atmosphere
SOLAR_CONSTANT = 1361.0  # W/m²

# Angular velocity of Earth's orbit around the sun
TERRAN_ANGULAR_VELOCITY = 2 * math.pi / 365.25  # radians/day

# Degrees to radians multiplicative factor
RADIAN = math.pi / 180

# Day of year of the March equinox (31 + 28 + 20)
MARCH_EQUINOX_DOY = 79

# Earth's axial tilt, 23.4 degrees
AXIAL_TILT = 0.408  # radians

# Earth's rotation around itself
ROTATION_DEGREES_PER_HOUR = 15

SECONDS_PER_DAY = 86400

# Latent heat of vaporization of water
LATENT_HEAT_VAPORIZATION = 2.45e6  # J/kg

# Default photosynthetically active portion of global radiation
DEFAULT_PAR_FRACTION = 0.47
