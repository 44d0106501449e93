""" Conversion of array-like inputs into read-only numpy arrays. """

__all__ = ["read_only_array"]

from typing import Any, Optional

import numpy as np
import numpy.typing as npt


def read_only_array(values: Any, dtype: npt.DTypeLike, num_columns: Optional[int] = None, name: str = "array"):
    """
    Copies the input values into a new numpy array whose write flag is disabled.

    Args:
        values: Array-like input values.
        dtype: Data type of the created array.
        num_columns: Expected number of columns. If set to :code:`None`, a one-dimensional array is expected.
        name: Name of the input used in error messages.

    Returns:
        Read-only copy of the input values.

    Raises:
        ValueError: If the input values do not have the expected shape.
    """

    array = np.array(values, dtype=dtype, copy=True)

    if num_columns is None:
        if array.ndim != 1:
            raise ValueError(f"{name} must be a one-dimensional array.")
    else:
        if array.size == 0:
            array = array.reshape((0, num_columns))
        if array.ndim != 2 or array.shape[1] != num_columns:
            raise ValueError(f"{name} must be an array with shape (N, {num_columns}).")

    array.setflags(write=False)
    return array
