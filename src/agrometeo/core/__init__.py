"""
Core utilities for the agro-meteorological formula library.

Provides constants, exceptions, configuration management and logging.
"""

from .config import Config
from .logger import setup_logger, LoggerContext
from . import constants
from .date_utils import DateUtils
from .exceptions import AgroMeteoError, DomainError, ShapeMismatchError, check_finite

__all__ = [
    "Config",
    "setup_logger",
    "LoggerContext",
    "constants",
    "DateUtils",
    "AgroMeteoError",
    "DomainError",
    "ShapeMismatchError",
    "check_finite",
]
