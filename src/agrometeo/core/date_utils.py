"""
Date and timezone utilities.

Derives the day of year used by the solar formulas from dates and datetimes,
with proper timezone handling.
"""

import logging
from datetime import date, datetime
from typing import Iterable, Optional, Union

import numpy as np
import pytz
from pytz.tzinfo import BaseTzInfo


class DateUtils:
    """Utilities for day-of-year and timezone handling."""

    def __init__(self, timezone: str = "UTC", logger: Optional[logging.Logger] = None):
        """
        Initialize date utilities.

        Args:
            timezone: Default timezone for aware datetimes (e.g., 'Europe/Zurich')
            logger: Logger instance
        """
        self.timezone = timezone
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def parse_timezone(timezone_str: str) -> BaseTzInfo:
        """
        Parse timezone string to pytz timezone object.

        Args:
            timezone_str: Timezone string (e.g., 'Europe/Zurich', 'UTC')

        Returns:
            pytz timezone object

        Raises:
            ValueError: If timezone is invalid
        """
        try:
            return pytz.timezone(timezone_str)
        except pytz.exceptions.UnknownTimeZoneError:
            raise ValueError(f"Invalid timezone: {timezone_str}")

    def day_of_year(
        self,
        value: Union[date, datetime],
        timezone_str: Optional[str] = None
    ) -> int:
        """
        Get the day of year (1-365/366) of a date or datetime.

        Naive datetimes are taken as UTC and converted to the target timezone;
        plain dates are used as-is.

        Args:
            value: Date or datetime
            timezone_str: Target timezone (defaults to the instance timezone)

        Returns:
            Day of year
        """
        if isinstance(value, datetime):
            tz = self.parse_timezone(timezone_str or self.timezone)
            if value.tzinfo is None:
                value = pytz.UTC.localize(value)
            local_time = value.astimezone(tz)
            self.logger.debug(
                f"Reference time: {value.isoformat()} -> "
                f"Local time: {local_time.isoformat()}"
            )
            return local_time.timetuple().tm_yday

        return value.timetuple().tm_yday

    def day_numbers(
        self,
        values: Iterable[Union[date, datetime]],
        timezone_str: Optional[str] = None
    ) -> np.ndarray:
        """
        Get the days of year of a sequence of dates as an integer array.

        Args:
            values: Dates or datetimes
            timezone_str: Target timezone (defaults to the instance timezone)

        Returns:
            Array of day numbers, same order as the input
        """
        return np.array(
            [self.day_of_year(value, timezone_str) for value in values],
            dtype=int
        )
