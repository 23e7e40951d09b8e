"""
Configuration module for the agro-meteorological formula library.

Loads optional settings from a JSON file and environment variables. The
physical constants are not configurable; only logging, strict domain
checking and facade defaults are.
"""

import json
import logging
import os
from typing import Dict, Any, Optional
from pathlib import Path

from . import constants

DEFAULT_CONFIG_FILE = "agrometeo.json"


class Config:
    """Configuration manager for the calculator facade."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration JSON file. If None, uses CONFIG_FILE env var
                        or 'agrometeo.json'; a missing default file leaves all defaults
        """
        self._explicit = config_file is not None or os.getenv("CONFIG_FILE") is not None
        self.config_file = config_file or os.getenv("CONFIG_FILE", DEFAULT_CONFIG_FILE)
        self.config: Dict[str, Any] = {}
        self._load_config()
        self._override_from_env()
        self._validate_config()

    def _load_config(self) -> None:
        """Load configuration from JSON file."""
        config_path = Path(self.config_file)
        if not config_path.exists():
            if self._explicit:
                raise FileNotFoundError(f"Configuration file not found: {self.config_file}")
            return

        with open(config_path, "r", encoding="utf-8") as f:
            self.config = json.load(f)

    def _set(self, section: str, key: str, value: Any) -> None:
        self.config.setdefault(section, {})[key] = value

    def _override_from_env(self) -> None:
        """Override configuration with environment variables."""
        if os.getenv("AGROMETEO_LOG_LEVEL"):
            self._set("logging", "level", os.getenv("AGROMETEO_LOG_LEVEL"))

        if os.getenv("LOG_FILE"):
            self._set("logging", "file", os.getenv("LOG_FILE"))

        if os.getenv("AGROMETEO_STRICT"):
            strict = os.getenv("AGROMETEO_STRICT").strip().lower() in ("1", "true", "yes", "on")
            self._set("calculation", "strict", strict)

        if os.getenv("AGROMETEO_PAR_FRACTION"):
            try:
                fraction = float(os.getenv("AGROMETEO_PAR_FRACTION"))
            except ValueError:
                raise ValueError(
                    f"Invalid AGROMETEO_PAR_FRACTION: {os.getenv('AGROMETEO_PAR_FRACTION')}"
                )
            self._set("calculation", "par_fraction", fraction)

        if os.getenv("AGROMETEO_TIMEZONE"):
            self._set("calculation", "timezone", os.getenv("AGROMETEO_TIMEZONE"))

    def _validate_config(self) -> None:
        """Validate configured values."""
        level = str(self.log_level).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Invalid logging level: {self.log_level}")

        fraction = self.par_fraction
        if not 0 < fraction <= 1:
            raise ValueError(
                f"Invalid par_fraction: {fraction} (must be in (0, 1])"
            )

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'logging.level')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def log_level(self) -> str:
        """Get logging level."""
        return self.get("logging.level", "INFO")

    @property
    def log_file(self) -> Optional[str]:
        """Get log file path."""
        return self.get("logging.file")

    @property
    def strict(self) -> bool:
        """Whether undefined (NaN) results raise DomainError."""
        return bool(self.get("calculation.strict", False))

    @property
    def par_fraction(self) -> float:
        """Get photosynthetically active fraction of global radiation."""
        return float(self.get("calculation.par_fraction", constants.DEFAULT_PAR_FRACTION))

    @property
    def timezone(self) -> str:
        """Get timezone used to derive day of year from datetimes."""
        return self.get("calculation.timezone", "UTC")

    def __repr__(self) -> str:
        """String representation of config."""
        return f"Config(file={self.config_file}, strict={self.strict})"
