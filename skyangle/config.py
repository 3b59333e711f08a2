"""Global configuration and numeric type definitions for skyangle.

This module centralizes the numeric widths the package supports and the
tolerances used when comparing angles. Every conversion and angle value in
the package is computed in one of exactly two floating-point widths, single
(``numpy.float32``) and double (``numpy.float64``); nothing else is accepted.

Type Definitions:
    BASE_TYPE: Union of raw payload types a caller may hand to an angle or a
               conversion. Python numbers are promoted to double precision,
               NumPy scalars and arrays keep their own width.

Constants:
    SUPPORTED_DTYPES: Closed set of payload widths.
    DEFAULT_DTYPE: Width used for Python ``int``/``float`` payloads.
    RELATIVE_TOLERANCE: Relative tolerance per width used by ``isclose``.

Example:
    >>> from skyangle.config import BASE_TYPE, tolerance_for
    >>> import numpy as np
    >>> scalar: BASE_TYPE = 3.14159
    >>> array_data: BASE_TYPE = np.array([1.0, 2.0, 3.0], dtype=np.float32)
    >>> tolerance_for(np.float32)
    1e-05
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy import floating, ndarray

BASE_TYPE = int | float | floating | ndarray | Sequence[float]

SUPPORTED_DTYPES: tuple[type[floating], ...] = (np.float32, np.float64)
DEFAULT_DTYPE: type[floating] = np.float64

RELATIVE_TOLERANCE: dict[type[floating], float] = {
    np.float64: 1e-9,
    np.float32: 1e-5,
}


def tolerance_for(dtype) -> float:
    """Return the relative tolerance associated with a payload width.

    Args:
        dtype: ``numpy.float32``, ``numpy.float64`` or an equivalent
            ``numpy.dtype``.

    Returns:
        float: Relative tolerance for comparisons in that width.
    """
    return RELATIVE_TOLERANCE[np.dtype(dtype).type]
