"""
Radiation conversions.

Photosynthetically active radiation, the Angstrom-Prescott estimate of
terrestrial radiation, and the relative sunshine duration it is driven by.
"""

import numpy as np

from ..core.constants import DEFAULT_PAR_FRACTION, SECONDS_PER_DAY
from ._arrays import as_arrays, unwrap
from .solar import day_length


def srad_to_PAR(srad, fraction=DEFAULT_PAR_FRACTION):
    """
    Convert irradiance to photosynthetically active radiation.

    Integrates the daily average irradiance over a full day and applies a
    fractional conversion factor.

    Args:
        srad: Average sunlight irradiance (W/m², J/s/m²)
        fraction: Portion of srad that is photosynthetically active (default 0.47)

    Returns:
        PAR (MJ/m² per day)
    """
    srad, fraction = as_arrays("srad_to_PAR", srad, fraction)
    # 1e-6 converts J to MJ
    return unwrap(srad * fraction * SECONDS_PER_DAY * 1e-6)


def terrestrial_radiation(r_extraterrestrial, relative_sunshine_duration):
    """
    Portion of extraterrestrial radiation that reaches Earth's surface.

    Angstrom-Prescott formula with the regression coefficients a and b of
    Rietveld, M. R. (1978). A New Method for Estimating the Regression
    Coefficients in the Formula Relating Solar Radiation to Sunshine.
    Agricultural Meteorology 19 (2), 243-252.

    Args:
        r_extraterrestrial: Average extraterrestrial radiation (W/m²)
        relative_sunshine_duration: Sunshine duration as a fraction of the day length (n/N)

    Returns:
        Average terrestrial radiation (W/m²)
    """
    r_extraterrestrial, rssd = as_arrays(
        "terrestrial_radiation", r_extraterrestrial, relative_sunshine_duration
    )
    a = 0.10 + 0.24 * rssd
    b = 0.78 - 0.44 * rssd
    return unwrap(1.07 * (a + b * rssd) * r_extraterrestrial)


def relative_sunshine_duration(sunshine_hours, DOY, latitude):
    """
    Ratio of measured sunshine hours to the astronomical day length (n/N).

    Args:
        sunshine_hours: Actual hours of sunshine
        DOY: Day of year
        latitude: Geographical latitude (degrees)

    Returns:
        Relative sunshine duration, NaN where the day length is undefined
    """
    hours, doy, lat = as_arrays("relative_sunshine_duration", sunshine_hours, DOY, latitude)
    n_max = np.asarray(day_length(doy, lat))
    with np.errstate(divide="ignore", invalid="ignore"):
        return unwrap(hours / n_max)
