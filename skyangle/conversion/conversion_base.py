"""Conversion capability foundation for angular payloads.

This module provides the Conversion base class, the contract every numeric
payload type must satisfy before an angle can carry it: eight pure mappings
between the canonical unit (radian) and the four other units of the unit
ladder (degree, arcminute, arcsecond, milliarcsecond).

Concrete capabilities register themselves automatically when subclassed,
keyed by their floating-point width and by whether they operate on a single
value or on a sequence. The set of registered capabilities is closed: one
scalar and one sequence capability for each width in
``skyangle.config.SUPPORTED_DTYPES``.

Key Concepts:
- DTYPE: Floating-point width every computation of the capability runs in
- IS_SEQUENCE: Marks the bulk (element-wise) variant of a capability
- Automatic Registration: Subclasses declaring a DTYPE are registered via
  ``__init_subclass__`` and resolved with ``conversion_for``

Classes:
    Conversion: Abstract base class for all conversion capabilities.

Functions:
    conversion_for: Resolve the capability that handles a given payload.

Example:
    >>> conversion = conversion_for(180.0)
    >>> conversion.from_degree(180.0)
    np.float64(3.141592653589793)
    >>> conversion_for([1.0, 2.0]).IS_SEQUENCE
    True
"""

from __future__ import annotations

import logging
from numbers import Real
from typing import ClassVar

import numpy as np

from ..config import BASE_TYPE, DEFAULT_DTYPE, SUPPORTED_DTYPES
from ..exceptions import UnsupportedPayloadError

logger = logging.getLogger(__name__)

OPERATIONS: tuple[str, ...] = (
    "from_degree",
    "from_arcmin",
    "from_arcsec",
    "from_mas",
    "to_degree",
    "to_arcmin",
    "to_arcsec",
    "to_mas",
)


class Conversion:
    """Base class for radian conversion capabilities.

    A capability is stateless: every operation is a classmethod mapping a
    value to a new value of the same width. Subclasses that set ``DTYPE``
    are registered and become reachable through ``conversion_for``.

    Attributes:
        DTYPE (ClassVar[type[np.floating]]): Width of every computation.
        IS_SEQUENCE (ClassVar[bool]): True for the element-wise variant.
    """

    __slots__ = ()

    DTYPE: ClassVar[type[np.floating]]
    IS_SEQUENCE: ClassVar[bool] = False

    _REGISTRY: ClassVar[dict[tuple[type[np.floating], bool], type[Conversion]]] = {}

    def __init_subclass__(cls, **kwargs):
        """Register subclasses that declare a concrete width.

        Args:
            **kwargs: Additional keyword arguments passed to super().__init_subclass__.

        Raises:
            UnsupportedPayloadError: If DTYPE is not one of the supported widths.
        """
        super().__init_subclass__(**kwargs)
        dtype = cls.__dict__.get("DTYPE")
        if dtype is None:
            return

        if dtype not in SUPPORTED_DTYPES:
            msg = f"{cls.__name__}: unsupported width {dtype!r}"
            raise UnsupportedPayloadError(msg)

        Conversion._REGISTRY[(dtype, cls.IS_SEQUENCE)] = cls
        logger.debug(
            "Registered %s for %s (sequence=%s)",
            cls.__name__,
            np.dtype(dtype).name,
            cls.IS_SEQUENCE,
        )

    def __new__(cls, *args, **kwargs):
        msg = f"{cls.__name__} is a stateless capability; call its classmethods"
        raise TypeError(msg)

    @classmethod
    def coerce(cls, value):
        """Return ``value`` as a freshly owned payload of this capability's width.

        Args:
            value: Raw number or sequence of numbers.

        Returns:
            A ``DTYPE`` scalar, or a new ``DTYPE`` array for sequence variants.
        """
        raise NotImplementedError

    @classmethod
    def cast(cls, factor):
        """Cast a raw scaling factor (scalar or array) to this width."""
        return np.asarray(factor, dtype=cls.DTYPE)[()]

    # ------------------------------- Radian <- unit ---------------------------------
    @classmethod
    def from_degree(cls, value):
        """Convert angle in degree to radian."""
        raise NotImplementedError

    @classmethod
    def from_arcmin(cls, value):
        """Convert angle in arcminute to radian."""
        raise NotImplementedError

    @classmethod
    def from_arcsec(cls, value):
        """Convert angle in arcsecond to radian."""
        raise NotImplementedError

    @classmethod
    def from_mas(cls, value):
        """Convert angle in milliarcsecond to radian."""
        raise NotImplementedError

    # ------------------------------- Radian -> unit ---------------------------------
    @classmethod
    def to_degree(cls, value):
        """Convert angle in radian to degree."""
        raise NotImplementedError

    @classmethod
    def to_arcmin(cls, value):
        """Convert angle in radian to arcminute."""
        raise NotImplementedError

    @classmethod
    def to_arcsec(cls, value):
        """Convert angle in radian to arcsecond."""
        raise NotImplementedError

    @classmethod
    def to_mas(cls, value):
        """Convert angle in radian to milliarcsecond."""
        raise NotImplementedError


def _width_of(value, dtype) -> tuple[type[np.floating], bool]:
    """Infer ``(width, is_sequence)`` for a raw payload."""
    if isinstance(value, (bool, np.bool_, str, bytes)):
        msg = f"Cannot use {type(value).__name__} as an angle payload"
        raise UnsupportedPayloadError(msg)

    if isinstance(value, np.ndarray):
        inferred, is_sequence = value.dtype, value.ndim > 0
    elif isinstance(value, np.generic):
        inferred, is_sequence = value.dtype, False
    elif isinstance(value, Real):
        try:
            float(value)
        except OverflowError as exc:
            msg = f"{type(value).__name__} payload is too large for a float"
            raise UnsupportedPayloadError(msg) from exc
        inferred, is_sequence = np.dtype(DEFAULT_DTYPE), False
    else:
        try:
            items = np.asarray(value)
        except (TypeError, ValueError) as exc:
            msg = f"Cannot use {type(value).__name__} as an angle payload"
            raise UnsupportedPayloadError(msg) from exc
        if items.ndim == 0 or items.dtype.kind not in "fiu":
            msg = f"Cannot use {type(value).__name__} as an angle payload"
            raise UnsupportedPayloadError(msg)
        # Only Python-level sequences of integers are promoted like Python numbers;
        # buffers (memoryview, bytearray) must already hold floats.
        if items.dtype.kind != "f" and not isinstance(value, (list, tuple, range)):
            msg = f"{type(value).__name__} of {items.dtype.name} is not an angle payload"
            raise UnsupportedPayloadError(msg)
        inferred = items.dtype if items.dtype.kind == "f" else np.dtype(DEFAULT_DTYPE)
        is_sequence = True

    if dtype is not None:
        inferred = np.dtype(dtype)
    if inferred.type not in SUPPORTED_DTYPES:
        msg = f"Unsupported payload width {inferred.name!r}; use float32 or float64"
        raise UnsupportedPayloadError(msg)
    return inferred.type, is_sequence


def conversion_for(value: BASE_TYPE, dtype=None) -> type[Conversion]:
    """Resolve the conversion capability handling ``value``.

    Python numbers resolve to the double precision scalar capability, NumPy
    scalars to the scalar capability of their own width, and sequences
    (lists, tuples, memoryviews, arrays) to the sequence capability.

    Integers are promoted to double precision only as Python ``int`` values
    or inside a ``list``/``tuple``/``range``. NumPy integer scalars and arrays, and
    integer buffers, carry an explicit non-float width and are rejected; cast
    them with ``dtype=`` or ``astype`` first.

    Args:
        value: Raw payload.
        dtype: Optional width overriding the inferred one.

    Returns:
        type[Conversion]: The registered capability.

    Raises:
        UnsupportedPayloadError: If no capability handles the payload.
    """
    key = _width_of(value, dtype)
    try:
        conversion = Conversion._REGISTRY[key]
    except KeyError as exc:
        msg = f"No conversion registered for {np.dtype(key[0]).name} (sequence={key[1]})"
        raise UnsupportedPayloadError(msg) from exc
    logger.debug("Resolved %s for %s", conversion.__name__, type(value).__name__)
    return conversion
