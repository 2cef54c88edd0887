"""Length conversion between stored millimetres and working inches.

Specifications are persisted in millimetres while every geometric rule in
this package works in inches. Conversion happens only at the two edges of
the engine: when a spec is accepted (see ``resolve_spec``) and when node
geometry is emitted. Values are quantised to a fixed number of decimal
places so that converting back and forth never accumulates drift.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

MM_PER_INCH = Decimal("25.4")

# Six places keeps repeated round trips well inside 0.01"
PRECISION_PLACES = 6
_QUANTUM = Decimal(1).scaleb(-PRECISION_PLACES)

# Common shop fractions, checked in order
_FRACTIONS: tuple[tuple[float, str], ...] = (
    (0.75, "3/4"),
    (0.5, "1/2"),
    (0.25, "1/4"),
    (0.125, "1/8"),
    (0.0625, "1/16"),
)


def _to_decimal(value: float | int | Decimal) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() avoids binary float artifacts such as 0.1 -> 0.1000000000000000055
    return Decimal(str(value))


def quantize(value: float | int | Decimal) -> float:
    """Round a length to the working precision.

    Args:
        value: Length in any unit.

    Returns:
        The value rounded half-up to ``PRECISION_PLACES`` decimals.
    """
    result = float(_to_decimal(value).quantize(_QUANTUM, rounding=ROUND_HALF_UP))
    # Normalise -0.0 so emitted geometry never shows a signed zero
    return result + 0.0


def mm_to_inches(mm: float | int | Decimal) -> float:
    """Convert millimetres to quantised inches."""
    return quantize(_to_decimal(mm) / MM_PER_INCH)


def inches_to_mm(inches: float | int | Decimal) -> float:
    """Convert inches to quantised millimetres."""
    return quantize(_to_decimal(inches) * MM_PER_INCH)


def format_fractional(inches: float) -> str:
    """Format a length in inches using woodworking fractions.

    Examples:
        >>> format_fractional(23.25)
        '23 1/4"'
        >>> format_fractional(0.75)
        '3/4"'
        >>> format_fractional(30.0)
        '30"'
    """
    whole = int(inches)
    fraction = inches - whole

    fraction_str = ""
    for value, text in _FRACTIONS:
        if abs(fraction - value) < 0.001:
            fraction_str = text
            break
    else:
        if fraction > 0.001:
            fraction_str = f"{fraction:.3f}"

    if whole == 0 and fraction_str:
        return f'{fraction_str}"'
    if not fraction_str:
        return f'{whole}"'
    return f'{whole} {fraction_str}"'


class Unit(str, Enum):
    """Length units understood by the engine."""

    INCHES = "in"
    MILLIMETERS = "mm"
    CENTIMETERS = "cm"

    @property
    def per_inch(self) -> Decimal:
        """How many of this unit make up one inch."""
        return _UNITS_PER_INCH[self]


_UNITS_PER_INCH: dict[Unit, Decimal] = {
    Unit.INCHES: Decimal(1),
    Unit.MILLIMETERS: MM_PER_INCH,
    Unit.CENTIMETERS: Decimal("2.54"),
}


@dataclass(frozen=True)
class Length:
    """A single length with its unit.

    Attributes:
        value: Magnitude in ``unit``.
        unit: Unit the magnitude is expressed in.
    """

    value: float
    unit: Unit = Unit.INCHES

    @classmethod
    def inches(cls, value: float) -> Length:
        return cls(value, Unit.INCHES)

    @classmethod
    def mm(cls, value: float) -> Length:
        return cls(value, Unit.MILLIMETERS)

    @classmethod
    def cm(cls, value: float) -> Length:
        return cls(value, Unit.CENTIMETERS)

    def to_inches(self) -> float:
        """Return the length in quantised inches."""
        if self.unit is Unit.INCHES:
            return float(self.value)
        return quantize(_to_decimal(self.value) / self.unit.per_inch)

    def to_millimeters(self) -> float:
        """Return the length in quantised millimetres."""
        if self.unit is Unit.MILLIMETERS:
            return float(self.value)
        return inches_to_mm(self.to_inches())

    def __add__(self, other: Length) -> Length:
        return Length.inches(quantize(self.to_inches() + other.to_inches()))

    def __sub__(self, other: Length) -> Length:
        return Length.inches(quantize(self.to_inches() - other.to_inches()))

    def format(self) -> str:
        """Format as ``<value> <symbol>`` without trailing zeros."""
        text = f"{self.value:f}".rstrip("0").rstrip(".")
        return f"{text} {self.unit.value}"

    def format_fractional(self) -> str:
        return format_fractional(self.to_inches())
