"""Angles tagged with an astronomical unit.

    - angle_base: SkyAngle, conversion routing and arithmetic
    - angle_units: Radian, Degree, Arcminute, Arcsecond, MilliArcsec
"""

from .angle_base import SkyAngle
from .angle_units import Angle, Arcminute, Arcsecond, Degree, MilliArcsec, Radian

__all__ = [
    "SkyAngle",
    "Angle",
    "Radian",
    "Degree",
    "Arcminute",
    "Arcsecond",
    "MilliArcsec",
]
