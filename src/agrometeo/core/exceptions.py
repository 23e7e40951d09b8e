"""
Exception types for agro-meteorological formulas.

Formulas propagate NaN for out-of-domain inputs; DomainError is raised only
where a caller opts into strict checking via check_finite().
"""

from typing import Any, Iterable, Tuple

import numpy as np


class AgroMeteoError(Exception):
    """Base class for all errors raised by this package."""


class DomainError(AgroMeteoError, ValueError):
    """A formula produced an undefined (NaN) result."""

    def __init__(self, function: str, value: Any):
        self.function = function
        self.value = value
        super().__init__(f"{function}: result outside mathematical domain ({value!r})")


class ShapeMismatchError(AgroMeteoError, ValueError):
    """Array inputs of different shapes were combined."""

    def __init__(self, function: str, shapes: Iterable[Tuple[int, ...]]):
        self.function = function
        self.shapes = sorted(shapes)
        super().__init__(
            f"{function}: array inputs must have identical shapes, got "
            f"{', '.join(str(shape) for shape in self.shapes)}"
        )


def check_finite(function: str, value: Any) -> Any:
    """
    Raise DomainError if any element of a formula result is NaN.

    Args:
        function: Name of the formula that produced the value
        value: Scalar or array result

    Returns:
        The value unchanged

    Raises:
        DomainError: If the value is or contains NaN
    """
    if np.any(np.isnan(value)):
        raise DomainError(function, value)
    return value
