"""
Agro-meteorological calculator facade.

This module provides a simplified interface to the formula functions,
handling day-of-year derivation, location metadata and strict domain
checking.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Iterable, Optional, Union

import numpy as np

from ..core import Config, DateUtils, LoggerContext, check_finite, setup_logger
from ._arrays import as_arrays
from .evapotranspiration import (
    hargreaves_et0,
    hargreaves_et0_extraterrestrial,
    hargreaves_et0_terrestrial,
)
from .radiation import srad_to_PAR, terrestrial_radiation
from .solar import (
    day_length,
    extraterrestrial_radiation,
    inverse_relative_distance,
    solar_declination,
    sunset_hourangle,
)
from .swiss_grid import swiss_coords_to_lat_lon

ET0_METHODS = ("fao", "samani", "terrestrial")


@dataclass
class RadiationComponents:
    """Container for the daily solar geometry and radiation values."""

    declination: float  # radians
    sunset_hourangle: float  # radians
    day_length: float  # hours
    inverse_relative_distance: float  # dimensionless
    extraterrestrial: float  # W/m²
    par: float  # MJ/m²/day, from extraterrestrial radiation
    terrestrial: Optional[float] = None  # W/m², requires relative sunshine


class AgroMeteoCalculator:
    """
    High-level calculator for daily radiation and reference evapotranspiration.

    This class acts as a facade over the formula functions. With strict
    checking enabled, undefined (NaN) results raise DomainError instead of
    being returned.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        strict: Optional[bool] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize calculator.

        Args:
            config: Configuration (defaults to Config())
            strict: Override config.strict
            logger: Logger instance. If None, the package logger is configured from
                    config.log_level and config.log_file
        """
        self.config = config or Config()
        self.strict = self.config.strict if strict is None else strict
        if logger is None:
            setup_logger(log_file=self.config.log_file, log_level=self.config.log_level)
            logger = logging.getLogger(__name__)
        self.logger = logger
        self.date_utils = DateUtils(timezone=self.config.timezone, logger=self.logger)

    def _checked(self, name: str, value: Any) -> Any:
        if np.any(np.isnan(value)):
            self.logger.debug(f"{name} undefined for given inputs (polar day/night or T_max < T_min)")
            if self.strict:
                check_finite(name, value)
        return value

    def radiation_components(
        self,
        day_number: int,
        latitude: float,
        relative_sunshine: Optional[float] = None
    ) -> RadiationComponents:
        """
        Calculate the solar geometry and radiation values for one day.

        Args:
            day_number: Day of year (1-365/366)
            latitude: Location latitude (degrees)
            relative_sunshine: Relative sunshine duration n/N (optional)

        Returns:
            RadiationComponents object containing all values
        """
        self.logger.debug(f"Calculating radiation components for day {day_number} at {latitude:.4f}°")

        r_ext = self._checked(
            "extraterrestrial_radiation", extraterrestrial_radiation(day_number, latitude)
        )
        terrestrial = None
        if relative_sunshine is not None:
            terrestrial = terrestrial_radiation(r_ext, relative_sunshine)

        return RadiationComponents(
            declination=solar_declination(day_number),
            sunset_hourangle=sunset_hourangle(day_number, latitude),
            day_length=day_length(day_number, latitude),
            inverse_relative_distance=inverse_relative_distance(day_number),
            extraterrestrial=r_ext,
            par=srad_to_PAR(r_ext, self.config.par_fraction),
            terrestrial=terrestrial
        )

    def reference_evapotranspiration(
        self,
        day_number,
        latitude,
        t_min,
        t_max,
        t_mean=None,
        method: str = "fao",
        relative_sunshine=None
    ):
        """
        Calculate reference evapotranspiration with a Hargreaves variant.

        Args:
            day_number: Day of year (1-365/366), scalar or array
            latitude: Location latitude (degrees)
            t_min: Minimum temperature (°C)
            t_max: Maximum temperature (°C)
            t_mean: Mean temperature (°C), defaults to (t_max + t_min) / 2
            method: 'fao' (FAO-56 eq. 52), 'samani' (via 0.17 * sqrt(ΔT) terrestrial
                    radiation) or 'terrestrial' (Angstrom-Prescott terrestrial radiation)
            relative_sunshine: Relative sunshine duration n/N, required for 'terrestrial'

        Returns:
            ET0 in mm/day

        Raises:
            ValueError: If the method is unknown or sunshine is missing for 'terrestrial'
            DomainError: In strict mode, if the result is undefined
        """
        if method not in ET0_METHODS:
            raise ValueError(
                f"Unknown ET0 method '{method}'. Available methods: {', '.join(ET0_METHODS)}"
            )
        if method == "terrestrial" and relative_sunshine is None:
            raise ValueError("Method 'terrestrial' requires relative_sunshine")

        temperatures = [] if t_mean is None else [t_mean]
        _, _, t_min, t_max, *_ = as_arrays(
            "reference_evapotranspiration", day_number, latitude, t_min, t_max, *temperatures
        )
        if t_mean is None:
            t_mean = (t_max + t_min) / 2

        try:
            r_ext = extraterrestrial_radiation(day_number, latitude)

            if method == "fao":
                et0 = hargreaves_et0(t_mean, t_max, t_min, r_ext)
            elif method == "samani":
                et0 = hargreaves_et0_extraterrestrial(t_mean, t_max, t_min, r_ext)
            else:
                r_ter = terrestrial_radiation(r_ext, relative_sunshine)
                et0 = hargreaves_et0_terrestrial(t_mean, r_ter)

            return self._checked(f"reference_evapotranspiration[{method}]", et0)

        except Exception as e:
            self.logger.error(f"Error calculating reference evapotranspiration: {e}", exc_info=True)
            raise

    def resolve_latitude(self, location_metadata: Dict[str, Any]) -> float:
        """
        Get the latitude of a location from its metadata.

        Uses 'latitude' when present, otherwise converts the Swiss grid
        coordinates 'swiss_x' and 'swiss_y' (meters).

        Raises:
            ValueError: If neither is available
        """
        location = location_metadata.get("location", {})
        if location.get("latitude") is not None:
            return float(location["latitude"])

        if location.get("swiss_x") is not None and location.get("swiss_y") is not None:
            lat, lon = swiss_coords_to_lat_lon(location["swiss_x"], location["swiss_y"])
            self.logger.debug(
                f"Converted Swiss grid ({location['swiss_x']}, {location['swiss_y']}) "
                f"to lat={lat:.4f}°, lon={lon:.4f}°"
            )
            return lat

        raise ValueError("Location metadata must include 'latitude' or 'swiss_x'/'swiss_y'")

    def calculate_with_metadata(
        self,
        aggregates: Dict[str, float],
        location_metadata: Dict[str, Any],
        calculation_date: Union[date, datetime],
        method: str = "fao"
    ) -> float:
        """
        Calculate ET0 with daily aggregates and location metadata.

        Args:
            aggregates: Dictionary with daily aggregates:
                - t_min: Minimum temperature (°C)
                - t_max: Maximum temperature (°C)
                - t_mean: Mean temperature (°C, optional)
                - relative_sunshine: Relative sunshine duration n/N (optional)
            location_metadata: Location metadata with latitude or Swiss grid coordinates
            calculation_date: Date of calculation
            method: ET0 method, see reference_evapotranspiration()

        Returns:
            ET0 in mm/day
        """
        latitude = self.resolve_latitude(location_metadata)
        day_number = self.date_utils.day_of_year(calculation_date)

        self.logger.info(
            f"ET0 calculation parameters - "
            f"Day: {day_number}, "
            f"T_min: {aggregates['t_min']:.2f}°C, "
            f"T_max: {aggregates['t_max']:.2f}°C, "
            f"Lat: {latitude:.4f}°, "
            f"Method: {method}"
        )

        return self.reference_evapotranspiration(
            day_number=day_number,
            latitude=latitude,
            t_min=aggregates["t_min"],
            t_max=aggregates["t_max"],
            t_mean=aggregates.get("t_mean"),
            method=method,
            relative_sunshine=aggregates.get("relative_sunshine")
        )

    def calculate_series(
        self,
        dates: Iterable[Union[date, datetime]],
        latitude: float,
        t_min,
        t_max,
        method: str = "fao"
    ) -> np.ndarray:
        """
        Calculate ET0 for a sequence of days at one location.

        Args:
            dates: Dates of calculation
            latitude: Location latitude (degrees)
            t_min: Minimum temperatures (°C), one per date
            t_max: Maximum temperatures (°C), one per date
            method: 'fao' or 'samani'

        Returns:
            Array of ET0 values in mm/day, same order as dates
        """
        day_numbers = self.date_utils.day_numbers(dates)

        with LoggerContext(self.logger, f"ET0 series for {len(day_numbers)} days"):
            return np.asarray(
                self.reference_evapotranspiration(
                    day_number=day_numbers,
                    latitude=latitude,
                    t_min=t_min,
                    t_max=t_max,
                    method=method
                )
            )
