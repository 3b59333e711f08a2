class SkyAngleError(Exception):
    """
    Base exception for all skyangle errors.
    """


class UnsupportedPayloadError(SkyAngleError, TypeError):
    """
    Raised when a payload is not a single or double precision float,
    or a sequence of one of them.
    """


class WidthMismatchError(SkyAngleError, TypeError):
    """
    Raised when two angles of different floating-point widths are combined.
    Cast one of them explicitly with ``dtype=`` first.
    """
