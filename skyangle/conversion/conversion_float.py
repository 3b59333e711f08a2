"""Scalar conversion capabilities for single and double precision floats.

Every conversion on the unit ladder is defined in terms of its neighbour:

    degree -> arcminute -> arcsecond -> milliarcsecond

Only the degree <-> radian step touches pi, through NumPy's native
``deg2rad``/``rad2deg`` primitives. Each further step is a single division
or multiplication by 60 or 1000 applied on top of the previous one, so
rounding stays consistent across the ladder. All arithmetic runs in the
capability's own width; constants are cast to ``DTYPE`` before use.

Classes:
    FloatConversion: Width-generic scalar capability.
    Float32Conversion: Single precision (``numpy.float32``).
    Float64Conversion: Double precision (``numpy.float64``).

Example:
    >>> Float64Conversion.from_degree(180.0)
    np.float64(3.141592653589793)
    >>> Float32Conversion.from_mas(3_600_000.0).dtype
    dtype('float32')
"""

from __future__ import annotations

from typing import ClassVar

import numpy as np

from .conversion_base import Conversion


class FloatConversion(Conversion):
    """Scalar conversion capability, parameterized by ``DTYPE``.

    Subclasses only pick a width; the ladder itself is shared.

    Attributes:
        SEXAGESIMAL (ClassVar[float]): Factor between degree/arcminute and arcminute/arcsecond.
        MILLI (ClassVar[float]): Factor between arcsecond and milliarcsecond.
    """

    __slots__ = ()

    SEXAGESIMAL: ClassVar[float] = 60.0
    MILLI: ClassVar[float] = 1e3

    @classmethod
    def coerce(cls, value):
        return cls.DTYPE(value)

    @classmethod
    def _as_width(cls, value):
        return np.asarray(value, dtype=cls.DTYPE)

    # ------------------------------- Radian <- unit ---------------------------------
    @classmethod
    def from_degree(cls, value):
        """Convert angle in degree to radian."""
        return np.deg2rad(cls._as_width(value))

    @classmethod
    def from_arcmin(cls, value):
        """Convert angle in arcminute to radian."""
        return cls.from_degree(cls._as_width(value) / cls.DTYPE(cls.SEXAGESIMAL))

    @classmethod
    def from_arcsec(cls, value):
        """Convert angle in arcsecond to radian."""
        return cls.from_arcmin(cls._as_width(value) / cls.DTYPE(cls.SEXAGESIMAL))

    @classmethod
    def from_mas(cls, value):
        """Convert angle in milliarcsecond to radian."""
        return cls.from_arcsec(cls._as_width(value) * cls.DTYPE(1.0 / cls.MILLI))

    # ------------------------------- Radian -> unit ---------------------------------
    @classmethod
    def to_degree(cls, value):
        """Convert angle in radian to degree."""
        return np.rad2deg(cls._as_width(value))

    @classmethod
    def to_arcmin(cls, value):
        """Convert angle in radian to arcminute."""
        return cls.DTYPE(cls.SEXAGESIMAL) * cls.to_degree(value)

    @classmethod
    def to_arcsec(cls, value):
        """Convert angle in radian to arcsecond."""
        return cls.DTYPE(cls.SEXAGESIMAL) * cls.to_arcmin(value)

    @classmethod
    def to_mas(cls, value):
        """Convert angle in radian to milliarcsecond."""
        return cls.DTYPE(cls.MILLI) * cls.to_arcsec(value)


class Float32Conversion(FloatConversion):
    """Single precision scalar capability."""

    __slots__ = ()

    DTYPE = np.float32


class Float64Conversion(FloatConversion):
    """Double precision scalar capability."""

    __slots__ = ()

    DTYPE = np.float64
