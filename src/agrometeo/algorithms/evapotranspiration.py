"""
Reference evapotranspiration (ET0) from temperature and radiation.

Hargreaves variants after "Crop evapotranspiration - Guidelines for
computing crop water requirements", FAO Irrigation and drainage paper 56,
chapter 3, and the original Hargreaves-Samani formulation.

A daily temperature range with T_max < T_min has no square root; those
results are NaN.
"""

import numpy as np

from ..core.constants import LATENT_HEAT_VAPORIZATION, SECONDS_PER_DAY
from ._arrays import as_arrays, unwrap


def hargreaves_et0(T_mean, T_max, T_min, r_extraterrestrial):
    """
    FAO Hargreaves equation (FAO-56 equation 52).

    Args:
        T_mean: Daily average temperature (°C)
        T_max: Daily maximum temperature (°C)
        T_min: Daily minimum temperature (°C)
        r_extraterrestrial: Daily average extraterrestrial radiation (W/m²)

    Returns:
        Reference evapotranspiration (mm/day)
    """
    t_mean, t_max, t_min, r_ext = as_arrays(
        "hargreaves_et0", T_mean, T_max, T_min, r_extraterrestrial
    )
    # Integrate over a day and express as mm of evaporated water
    r_integrated = r_ext * SECONDS_PER_DAY / LATENT_HEAT_VAPORIZATION
    with np.errstate(invalid="ignore"):
        temperature_range = np.sqrt(t_max - t_min)
    return unwrap(0.0023 * (t_mean + 17.8) * temperature_range * r_integrated)


def hargreaves_et0_terrestrial(T_mean, r_terrestrial):
    """
    Original Hargreaves-Samani equation.

    Args:
        T_mean: Daily average temperature (°C)
        r_terrestrial: Daily average terrestrial radiation (W/m²)

    Returns:
        Reference evapotranspiration (mm/day)
    """
    t_mean, r_ter = as_arrays("hargreaves_et0_terrestrial", T_mean, r_terrestrial)
    r_integrated = r_ter * SECONDS_PER_DAY / LATENT_HEAT_VAPORIZATION
    return unwrap(0.0135 * r_integrated * (t_mean + 17.8))


def hargreaves_et0_extraterrestrial(T_mean, T_max, T_min, r_extraterrestrial):
    """
    FAO Hargreaves equation, derived via the Hargreaves-Samani form.

    Terrestrial radiation is estimated as 0.17 * sqrt(T_max - T_min) of the
    extraterrestrial radiation.

    Args:
        T_mean: Daily average temperature (°C)
        T_max: Daily maximum temperature (°C)
        T_min: Daily minimum temperature (°C)
        r_extraterrestrial: Daily average extraterrestrial radiation (W/m²)

    Returns:
        Reference evapotranspiration (mm/day)
    """
    t_mean, t_max, t_min, r_ext = as_arrays(
        "hargreaves_et0_extraterrestrial", T_mean, T_max, T_min, r_extraterrestrial
    )
    with np.errstate(invalid="ignore"):
        r_terrestrial = r_ext * 0.17 * np.sqrt(t_max - t_min)
    return hargreaves_et0_terrestrial(t_mean, r_terrestrial)


def radiation_to_evapotranspiration_unit_conversion(radiation):
    """
    Convert W/m² to mm of evaporated water per day.

    Args:
        radiation: Radiation (W/m²)

    Returns:
        Radiative evapotranspiration (mm H2O/day)
    """
    (radiation,) = as_arrays("radiation_to_evapotranspiration_unit_conversion", radiation)
    return unwrap(radiation * SECONDS_PER_DAY * 0.408e-6)
