"""
Code to get the index of the minimum, or the indices of the k smallest values, of an array.
Useful as a map-style accessor, e.g. 'list(map(argmin, arrays))'.
"""
from __future__ import annotations

# IMPORTs alias
import numpy as np

# IMPORTs local
from ndconv.errors import InvalidArgumentError

# TYPE ANNOTATIONs
import numpy.typing as npt

# API public
__all__ = ['argmin']



def argmin(values: npt.ArrayLike, k: int = 1, axis: int = -1) -> int | np.ndarray:
    """
    Gives the index of the minimum (k=1) or the indices of the k smallest values along an axis.
    The indices are ordered by increasing value and equal values keep their original order. NaNs
    are considered larger than any other value.

    Args:
        values (npt.ArrayLike): the numeric values, with at least one dimension.
        k (int, optional): the number of smallest values to get the indices of. If larger than the
            axis length, all the indices along the axis are returned. Defaults to 1.
        axis (int, optional): the axis along which to search. The last axis is used by default
            and not the first non-singleton one, so pass the axis explicitly for column-wise
            searches on matrices. Defaults to -1.

    Raises:
        InvalidArgumentError: if 'values' is not a numeric array with at least one dimension, if
            the axis is out of range or if 'k' is not a non-negative integer.

    Returns:
        int | np.ndarray: for k=1, the index of the minimum with 'axis' removed (an int for 1D
            inputs). Otherwise, the indices of the k smallest values with 'axis' kept.
    """

    values = np.asarray(values)
    if not (np.issubdtype(values.dtype, np.number) or np.issubdtype(values.dtype, np.bool_)):
        raise InvalidArgumentError(f"'values' must be numeric, got dtype {values.dtype}.")
    elif values.ndim == 0:
        raise InvalidArgumentError("'values' must have at least one dimension.")
    elif not -values.ndim <= axis < values.ndim:
        raise InvalidArgumentError(f"'axis' {axis} is out of range for {values.ndim} dimensions.")
    if isinstance(k, bool) or not isinstance(k, (int, np.integer)) or k < 0:
        raise InvalidArgumentError(f"'k' must be a non-negative integer, got {k!r}.")

    # SORT stable (NaNs last)
    order = np.argsort(values, axis=axis, kind='stable')
    if k == 1:
        if values.shape[axis] == 0:
            raise InvalidArgumentError("Can't get the minimum of an empty axis.")
        index = np.take(order, 0, axis=axis)
        return int(index) if index.ndim == 0 else index
    return np.take(order, np.arange(min(k, values.shape[axis])), axis=axis)
