"""Angular unit definitions for astronomical measurements.

This module provides the five units an angle can be tagged with. Radian is
the canonical unit every conversion and every arithmetic result goes
through; the other four form the unit ladder

    degree -> arcminute -> arcsecond -> milliarcsecond

where each step is a factor of 60, 60 and 1000 respectively.

Classes:
    Radian: Canonical angular unit.
    Degree: 1/360 of a full turn.
    Arcminute: 1/60 of a degree.
    Arcsecond: 1/60 of an arcminute.
    MilliArcsec: 1/1000 of an arcsecond.

Type Aliases:
    Angle: Union type for all angular units.

Example:
    >>> parallax = MilliArcsec(768.0665)  # Proxima Centauri
    >>> print(parallax)
    768.0665
    >>> print(parallax.into_arcsec())  # ~0.7680665
    >>> seeing = Arcsecond([0.6, 0.8, 1.1])
    >>> seeing.to_radians().shape
    (3,)
"""

from __future__ import annotations

from .angle_base import SkyAngle


class Radian(SkyAngle):
    """Angular unit: Radian (canonical unit).

    One radian is the angle subtended by an arc equal in length to the
    radius. Conversions to and from radian are the identity.

    Attributes:
        SYMBOL (str): "rad".

    Example:
        >>> angle = Radian(1.5708)
        >>> print(angle.into_degree())  # ~90.0002
    """

    __slots__ = ()

    SYMBOL = "rad"


class Degree(SkyAngle):
    """Angular unit: Degree (1/360 of a full rotation).

    The only unit converted to radian through the native degree/radian
    primitive; all smaller units go through it.

    Attributes:
        SYMBOL (str): "°".

    Example:
        >>> declination = Degree(-29.0)
        >>> declination.to_radians()  # -0.5061...
    """

    __slots__ = ()

    SYMBOL = "°"
    TO_RADIANS = "from_degree"
    FROM_RADIANS = "to_degree"


class Arcminute(SkyAngle):
    """Angular unit: Arcminute (1/60 degree).

    Attributes:
        SYMBOL (str): "′".
    """

    __slots__ = ()

    SYMBOL = "′"
    TO_RADIANS = "from_arcmin"
    FROM_RADIANS = "to_arcmin"


class Arcsecond(SkyAngle):
    """Angular unit: Arcsecond (1/60 arcminute).

    Typical unit for seeing, plate scales and astrometric offsets.

    Attributes:
        SYMBOL (str): "″".
    """

    __slots__ = ()

    SYMBOL = "″"
    TO_RADIANS = "from_arcsec"
    FROM_RADIANS = "to_arcsec"


class MilliArcsec(SkyAngle):
    """Angular unit: Milliarcsecond (1/1000 arcsecond).

    Typical unit for parallaxes and proper motions.

    Attributes:
        SYMBOL (str): "mas".
    """

    __slots__ = ()

    SYMBOL = "mas"
    TO_RADIANS = "from_mas"
    FROM_RADIANS = "to_mas"


Angle = Radian | Degree | Arcminute | Arcsecond | MilliArcsec  # Type alias for any angle unit
