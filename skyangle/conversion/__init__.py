"""Radian conversion capabilities for single/double precision payloads.

Architecture:
    - conversion_base: Conversion contract, registry and ``conversion_for``
    - conversion_float: Scalar capabilities (float32, float64)
    - conversion_sequence: Element-wise lift of the scalar capabilities

The module-level functions below resolve the capability for their argument
and apply the named conversion, so callers can stay width-agnostic:

    >>> import numpy as np
    >>> from skyangle.conversion import from_arcsec, from_degree
    >>> from_degree(180.0)
    np.float64(3.141592653589793)
    >>> from_arcsec(np.array([3600.0], dtype=np.float32)).dtype
    dtype('float32')
"""

from .conversion_base import OPERATIONS, Conversion, conversion_for
from .conversion_float import Float32Conversion, Float64Conversion, FloatConversion
from .conversion_sequence import (
    Float32SequenceConversion,
    Float64SequenceConversion,
    SequenceConversion,
)


def _resolved(name: str):
    def convert(value):
        return getattr(conversion_for(value), name)(value)

    convert.__name__ = name
    convert.__qualname__ = name
    convert.__doc__ = getattr(Conversion, name).__doc__
    return convert


from_degree = _resolved("from_degree")
from_arcmin = _resolved("from_arcmin")
from_arcsec = _resolved("from_arcsec")
from_mas = _resolved("from_mas")
to_degree = _resolved("to_degree")
to_arcmin = _resolved("to_arcmin")
to_arcsec = _resolved("to_arcsec")
to_mas = _resolved("to_mas")

__all__ = [
    # Capabilities
    "Conversion",
    "FloatConversion",
    "Float32Conversion",
    "Float64Conversion",
    "SequenceConversion",
    "Float32SequenceConversion",
    "Float64SequenceConversion",
    "OPERATIONS",
    "conversion_for",
    # Width-agnostic conversions
    "from_degree",
    "from_arcmin",
    "from_arcsec",
    "from_mas",
    "to_degree",
    "to_arcmin",
    "to_arcsec",
    "to_mas",
]
