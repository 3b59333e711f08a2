"""Tagged angle value built on the radian conversion capabilities.

This module provides the SkyAngle base class. A SkyAngle pairs a numeric
payload with a unit tag (the concrete subclass); the tag alone decides how
the payload is interpreted. Unlike most quantity types, the payload is kept
in the unit it was given in, so displaying an angle shows its magnitude in
the unit it currently carries.

Every unit conversion is routed through the canonical unit, radian: an angle
is first turned into radians with its unit's ``TO_RADIANS`` operation, then
into the target unit with that unit's ``FROM_RADIANS`` operation. Both are
looked up on the payload's conversion capability; the angle never hardcodes a
conversion formula itself.

Arithmetic between angles, and scaling by a raw number, deliberately returns
a bare radian value rather than a re-tagged angle. Wrap the result in the
unit you want (``Radian(a + b).into_degree()``) to tag it again.

Classes:
    SkyAngle: Abstract base class for the five angle units.

Example:
    >>> from skyangle.angle import Degree
    >>> half_turn = Degree(180.0)
    >>> print(half_turn)
    180.0
    >>> half_turn + Degree(180.0)  # radians, untagged
    np.float64(6.283185307179586)
    >>> Degree(180.0) / Degree(90.0)
    np.float64(2.0)
"""

from __future__ import annotations

from numbers import Real
from typing import ClassVar

import numpy as np
from rich.text import Text

from ..config import BASE_TYPE, tolerance_for
from ..conversion import Conversion, conversion_for
from ..exceptions import WidthMismatchError


class SkyAngle:
    """Base class for angles tagged with an astronomical unit.

    Instances are immutable. Sequence payloads are copied on construction
    and stored read-only, so an angle owns its payload exclusively.

    Attributes:
        SYMBOL (ClassVar[str]): Unit symbol used for rich rendering.
        TO_RADIANS (ClassVar[str | None]): Conversion operation mapping this
            unit to radian, ``None`` for the canonical unit.
        FROM_RADIANS (ClassVar[str | None]): Conversion operation mapping
            radian to this unit, ``None`` for the canonical unit.
        UNITS (ClassVar[dict[str, type[SkyAngle]]]): Every concrete unit by class name.
    """

    __slots__ = ("_value", "_conversion")
    __array_priority__ = 1000

    SYMBOL: ClassVar[str] = ""
    TO_RADIANS: ClassVar[str | None] = None
    FROM_RADIANS: ClassVar[str | None] = None
    UNITS: ClassVar[dict[str, type[SkyAngle]]] = {}

    _value: object
    _conversion: type[Conversion]

    def __init_subclass__(cls, **kwargs):
        """Register concrete units so re-tagging can find them by name.

        Args:
            **kwargs: Additional keyword arguments passed to super().__init_subclass__.
        """
        super().__init_subclass__(**kwargs)
        SkyAngle.UNITS[cls.__name__] = cls

    def __init__(self, value: BASE_TYPE, dtype=None):
        """Tag ``value`` with this unit.

        Args:
            value: Number, NumPy scalar, or sequence of numbers in this unit.
            dtype: Optional width (``numpy.float32`` or ``numpy.float64``);
                inferred from ``value`` when omitted.

        Raises:
            TypeError: If instantiated as the abstract SkyAngle.
            AttributeError: If called again on an already built angle.
            UnsupportedPayloadError: If the payload is not a supported float width.
        """
        if type(self) is SkyAngle:
            msg = "SkyAngle is abstract; use Radian, Degree, Arcminute, Arcsecond or MilliArcsec"
            raise TypeError(msg)

        if hasattr(self, "_value"):
            msg = f"{type(self).__name__} is immutable"
            raise AttributeError(msg)

        conversion = conversion_for(value, dtype)
        payload = conversion.coerce(value)
        if isinstance(payload, np.ndarray):
            payload.flags.writeable = False
        object.__setattr__(self, "_conversion", conversion)
        object.__setattr__(self, "_value", payload)

    def __setattr__(self, name, value):
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __delattr__(self, name):
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __reduce__(self):
        return (type(self), (self._value, self.dtype))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    # -------------------------------- Introspection --------------------------------
    @property
    def value(self):
        """Payload in this angle's own unit."""
        return self._value

    @property
    def dtype(self) -> type[np.floating]:
        """Floating-point width of the payload."""
        return self._conversion.DTYPE

    @property
    def is_sequence(self) -> bool:
        """True when the payload is a sequence of values."""
        return self._conversion.IS_SEQUENCE

    # -------------------------------- Conversions --------------------------------
    def to_radians(self):
        """Return the payload expressed in radians.

        Returns:
            Scalar or new array of the payload's width.
        """
        if self.TO_RADIANS is None:
            return self._conversion.coerce(self._value)
        return getattr(self._conversion, self.TO_RADIANS)(self._value)

    @classmethod
    def from_radians(cls, radians, dtype=None) -> SkyAngle:
        """Create an angle of this unit from a value in radians.

        Args:
            radians: Value (or sequence) in radians.
            dtype: Optional width; inferred from ``radians`` when omitted.

        Returns:
            SkyAngle: New instance of this unit.
        """
        if cls.FROM_RADIANS is None:
            return cls(radians, dtype)
        conversion = conversion_for(radians, dtype)
        return cls(getattr(conversion, cls.FROM_RADIANS)(radians), conversion.DTYPE)

    def into(self, unit: type[SkyAngle] | str) -> SkyAngle:
        """Re-express this angle in another unit.

        Args:
            unit: Target unit class, or its class name.

        Returns:
            SkyAngle: New angle of the target unit, same width.
        """
        if isinstance(unit, str):
            unit = self.UNITS[unit]
        return unit.from_radians(self.to_radians(), self.dtype)

    def into_radians(self) -> SkyAngle:
        """Re-express this angle in radian."""
        return self.into("Radian")

    def into_degree(self) -> SkyAngle:
        """Re-express this angle in degree."""
        return self.into("Degree")

    def into_arcmin(self) -> SkyAngle:
        """Re-express this angle in arcminute."""
        return self.into("Arcminute")

    def into_arcsec(self) -> SkyAngle:
        """Re-express this angle in arcsecond."""
        return self.into("Arcsecond")

    def into_mas(self) -> SkyAngle:
        """Re-express this angle in milliarcsecond."""
        return self.into("MilliArcsec")

    # -------------------------------- Arithmetic Operations --------------------------------
    def _check_same_width(self, other: SkyAngle):
        """Check that two angles share a floating-point width.

        Args:
            other: The other angle.

        Raises:
            WidthMismatchError: If the widths differ.
        """
        if self.dtype is not other.dtype:
            msg = (
                f"Cannot combine {np.dtype(self.dtype).name} and "
                f"{np.dtype(other.dtype).name} angles"
            )
            raise WidthMismatchError(msg)

    def _scale(self, factor):
        """Cast a raw factor to the payload width, or None if it is not a number."""
        if isinstance(factor, (Real, np.ndarray)):
            return self._conversion.cast(factor)
        return None

    def __add__(self, other: SkyAngle):
        """Sum of two angles, in radians.

        Args:
            other: Angle of any unit and the same width.

        Returns:
            Bare radian value.

        Raises:
            WidthMismatchError: If the angles have different widths.
        """
        if not isinstance(other, SkyAngle):
            return NotImplemented
        self._check_same_width(other)
        return self.to_radians() + other.to_radians()

    def __sub__(self, other: SkyAngle):
        """Difference of two angles, in radians.

        Args:
            other: Angle of any unit and the same width.

        Returns:
            Bare radian value.

        Raises:
            WidthMismatchError: If the angles have different widths.
        """
        if not isinstance(other, SkyAngle):
            return NotImplemented
        self._check_same_width(other)
        return self.to_radians() - other.to_radians()

    def __mul__(self, k):
        """Scale the angle by a raw number.

        Args:
            k: Numeric scalar (or array), cast to the payload width.

        Returns:
            Bare radian value scaled by ``k``.
        """
        factor = self._scale(k)
        if factor is None:
            return NotImplemented
        return self.to_radians() * factor

    def __rmul__(self, k):
        return self.__mul__(k)

    def __truediv__(self, other):
        """Divide by another angle (dimensionless ratio) or by a raw number.

        Args:
            other: Angle of the same width, or a numeric scalar (or array).

        Returns:
            Ratio of both angles in radians, or the radian value divided by ``other``.

        Raises:
            WidthMismatchError: If ``other`` is an angle of a different width.
        """
        if isinstance(other, SkyAngle):
            self._check_same_width(other)
            return self.to_radians() / other.to_radians()
        factor = self._scale(other)
        if factor is None:
            return NotImplemented
        return self.to_radians() / factor

    # -------------------------------- Comparison --------------------------------
    def isclose(self, other: SkyAngle) -> bool:
        """Compare the magnitudes of two angles in radians.

        The relative tolerance is the one configured for the payload width
        (see ``skyangle.config.RELATIVE_TOLERANCE``).

        Args:
            other: Angle of any unit and the same width.

        Returns:
            bool: True if every element agrees within tolerance.

        Raises:
            TypeError: If ``other`` is not an angle.
            WidthMismatchError: If the widths differ.
        """
        if not isinstance(other, SkyAngle):
            msg = f"Cannot compare {type(self).__name__} with {type(other).__name__}"
            raise TypeError(msg)
        self._check_same_width(other)
        return bool(
            np.allclose(
                self.to_radians(),
                other.to_radians(),
                rtol=tolerance_for(self.dtype),
                atol=0.0,
            )
        )

    def __eq__(self, other) -> bool:
        """Exact equality of unit, width and payload."""
        if type(other) is not type(self):
            return NotImplemented
        return self.dtype is other.dtype and bool(np.array_equal(self._value, other._value))

    def __hash__(self) -> int:
        if self.is_sequence:
            msg = f"unhashable {type(self).__name__} with a sequence payload"
            raise TypeError(msg)
        return hash((type(self).__name__, self.dtype, self._value.item()))

    # -------------------------------- Display --------------------------------
    def __str__(self) -> str:
        """Return the bare payload, without unit.

        Returns:
            str: Magnitude in the angle's own unit (e.g., "180.0").
        """
        return str(self._value)

    def __repr__(self) -> str:
        """Return unit, payload and width (e.g., "Degree(180.0, dtype=float64)")."""
        return f"{type(self).__name__}({self._value}, dtype={np.dtype(self.dtype).name})"

    def __rich__(self) -> Text:
        text = Text(str(self._value), style="bold cyan")
        text.append(f" {self.SYMBOL}", style="dim")
        return text
