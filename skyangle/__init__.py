"""Astronomical angles tagged with their unit.

skyangle represents an angular measurement in one of five conventional
astronomical units and converts between them without the caller tracking
unit tags by hand. All conversions go through the canonical unit, radian.

Architecture:
    The package is organized into two layers, the second built strictly on
    top of the first:

    - conversion: Radian <-> {degree, arcminute, arcsecond, milliarcsecond}
      capabilities per floating-point width (float32, float64), with an
      element-wise variant for sequences
    - angle: SkyAngle values (Radian, Degree, Arcminute, Arcsecond,
      MilliArcsec) with explicit re-tagging and unit-agnostic arithmetic

    Supporting modules:

    - config: Supported widths and comparison tolerances
    - exceptions: Error types for unsupported payloads and width mismatches
    - display: Rich table rendering of an angle in every unit

Key Features:
    - Unit Ladder: Every conversion is composed from its neighbour's,
      degree -> arcminute -> arcsecond -> milliarcsecond
    - Two Widths: Single and double precision, never mixed silently
    - Bulk Conversion: Lists, tuples and arrays convert element-wise
    - Untagged Results: Sums, differences, ratios and scaled angles are bare
      radian values; re-tag them explicitly

Example:
    >>> from skyangle import Arcsecond, Degree, Radian
    >>> Degree(180.0) + Degree(180.0)  # full turn, in radians
    np.float64(6.283185307179586)
    >>> Radian(Degree(90.0) * 2.0).into_degree().value  # ~180.0
    >>> print(Arcsecond(3600.0).into_degree())  # ~1.0

Logging:
    The package logs through the standard ``logging`` module under the
    ``skyangle`` logger, at DEBUG level only, and installs a NullHandler.
"""

import logging

from .angle import Angle, Arcminute, Arcsecond, Degree, MilliArcsec, Radian, SkyAngle
from .config import BASE_TYPE, DEFAULT_DTYPE, SUPPORTED_DTYPES
from .conversion import (
    Conversion,
    conversion_for,
    from_arcmin,
    from_arcsec,
    from_degree,
    from_mas,
    to_arcmin,
    to_arcsec,
    to_degree,
    to_mas,
)
from .exceptions import SkyAngleError, UnsupportedPayloadError, WidthMismatchError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.3.0"

# Define public API
__all__ = [
    # Angle values
    "SkyAngle",
    "Angle",
    "Radian",
    "Degree",
    "Arcminute",
    "Arcsecond",
    "MilliArcsec",
    # Conversion capability
    "Conversion",
    "conversion_for",
    "from_degree",
    "from_arcmin",
    "from_arcsec",
    "from_mas",
    "to_degree",
    "to_arcmin",
    "to_arcsec",
    "to_mas",
    # Configuration
    "BASE_TYPE",
    "DEFAULT_DTYPE",
    "SUPPORTED_DTYPES",
    # Errors
    "SkyAngleError",
    "UnsupportedPayloadError",
    "WidthMismatchError",
]
