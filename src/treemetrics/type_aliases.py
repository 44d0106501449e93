"""Type aliases."""

__all__ = ["BoolArray", "FloatArray", "LongArray"]

import numpy as np
import numpy.typing as npt

BoolArray = npt.NDArray[np.bool_]
FloatArray = npt.NDArray[np.float64]
LongArray = npt.NDArray[np.int64]
