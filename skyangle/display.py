"""Rich rendering helpers for interactive inspection of angles."""

from __future__ import annotations

from rich.table import Table

from .angle import SkyAngle

UNIT_ORDER = ("Radian", "Degree", "Arcminute", "Arcsecond", "MilliArcsec")


def angle_table(angle: SkyAngle, title: str | None = None) -> Table:
    """Build a table showing one angle re-expressed in every unit.

    Args:
        angle: Angle to display.
        title: Optional table title; defaults to the angle's repr.

    Returns:
        Table: Two-column table (unit, value) ready for ``Console.print``.
    """
    t = Table(title=title if title is not None else repr(angle), show_header=True)
    t.add_column("Unit", style="bold")
    t.add_column("Value", justify="right")

    for name in UNIT_ORDER:
        label = f"[b]{name}[/b] ({SkyAngle.UNITS[name].SYMBOL})"
        if type(angle).__name__ == name:
            converted = angle
            label += " *"
        else:
            converted = angle.into(name)
        t.add_row(label, str(converted))
    return t
