"""Bulk (sequence) conversion capabilities.

The sequence variants carry no conversion logic of their own. Each of the
eight operations is produced by ``_lift``, which maps the matching scalar
operation of ``SCALAR`` over every element of a sequence, preserving order
and shape, and hands back a newly allocated array.

Both owned sequences (``list``, writable arrays) and borrowed read-only views
(``tuple``, ``memoryview``, read-only array views) are accepted; the input is
copied before conversion and never modified.

Classes:
    SequenceConversion: Width-generic element-wise capability.
    Float32SequenceConversion: Sequences of ``numpy.float32``.
    Float64SequenceConversion: Sequences of ``numpy.float64``.

Example:
    >>> Float64SequenceConversion.to_degree([0.0, np.pi])
    array([  0., 180.])
    >>> Float64SequenceConversion.from_arcmin(())
    array([], dtype=float64)
"""

from __future__ import annotations

from typing import ClassVar

import numpy as np

from ..exceptions import UnsupportedPayloadError
from .conversion_base import Conversion
from .conversion_float import Float32Conversion, Float64Conversion, FloatConversion


def _lift(name: str):
    """Build the element-wise version of the scalar operation ``name``."""

    def bulk(cls, values) -> np.ndarray:
        scalar_op = getattr(cls.SCALAR, name)
        return np.asarray(scalar_op(cls.coerce(values)), dtype=cls.DTYPE)

    bulk.__name__ = name
    bulk.__qualname__ = f"SequenceConversion.{name}"
    bulk.__doc__ = f"Element-wise ``{name}`` over a sequence; returns a new array."
    return classmethod(bulk)


class SequenceConversion(Conversion):
    """Element-wise lift of a scalar capability.

    Attributes:
        SCALAR (ClassVar[type[FloatConversion]]): Capability applied to each element.
    """

    __slots__ = ()

    IS_SEQUENCE = True
    SCALAR: ClassVar[type[FloatConversion]]

    @classmethod
    def coerce(cls, values) -> np.ndarray:
        items = np.array(values, dtype=cls.DTYPE, copy=True)
        if items.ndim == 0:
            msg = f"{cls.__name__} expects a sequence, got {type(values).__name__}"
            raise UnsupportedPayloadError(msg)
        return items

    from_degree = _lift("from_degree")
    from_arcmin = _lift("from_arcmin")
    from_arcsec = _lift("from_arcsec")
    from_mas = _lift("from_mas")
    to_degree = _lift("to_degree")
    to_arcmin = _lift("to_arcmin")
    to_arcsec = _lift("to_arcsec")
    to_mas = _lift("to_mas")


class Float32SequenceConversion(SequenceConversion):
    """Element-wise capability for sequences of single precision floats."""

    __slots__ = ()

    DTYPE = np.float32
    SCALAR = Float32Conversion


class Float64SequenceConversion(SequenceConversion):
    """Element-wise capability for sequences of double precision floats."""

    __slots__ = ()

    DTYPE = np.float64
    SCALAR = Float64Conversion
