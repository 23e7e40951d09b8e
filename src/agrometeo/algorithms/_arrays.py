"""Elementwise input handling shared by the formula modules."""

from typing import Any, List

import numpy as np

from ..core.exceptions import ShapeMismatchError


def as_arrays(function: str, *values: Any) -> List[np.ndarray]:
    """
    Convert formula inputs to float arrays.

    Scalars combine with arrays of any shape. Non-scalar inputs must all
    share one shape; they are never recycled or truncated.

    Raises:
        ShapeMismatchError: If two non-scalar inputs differ in shape
    """
    arrays = [np.asarray(value, dtype=float) for value in values]
    shapes = {array.shape for array in arrays if array.ndim > 0}
    if len(shapes) > 1:
        raise ShapeMismatchError(function, shapes)
    return arrays


def unwrap(result: np.ndarray) -> Any:
    """Return a Python float for 0-d results, the array otherwise."""
    result = np.asarray(result)
    if result.ndim == 0:
        return float(result)
    return result
