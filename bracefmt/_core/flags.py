"""
Formatting flags for a single placeholder and the conversion of one value
under those flags.

Flags are immutable and built from scratch for every placeholder, so nothing
set by one placeholder can carry over to the next one.
"""

import dataclasses
import decimal
import enum
import fractions
from typing import Any, Optional


class Base(enum.Enum):
    """Numeric base used for integers"""

    DECIMAL = 1
    HEXADECIMAL = 2
    OCTAL = 3


class Align(enum.Enum):
    """Where the value sits inside its column"""

    RIGHT = 1
    LEFT = 2


_base_format_specs = {
    Base.DECIMAL: "d",
    Base.HEXADECIMAL: "x",
    Base.OCTAL: "o",
}

_fractional_types = (float, decimal.Decimal, fractions.Fraction)


@dataclasses.dataclass(frozen=True)
class FormatFlags:
    """Display settings for exactly one placeholder

    Attributes:
        base: base for integers
        align: alignment inside 'width'
        width: minimum column width, no padding if None
        fill: character used to pad up to 'width'
        precision: digits after the decimal point for fractional values,
            None to use the default textual form of the value
    """

    base: Base = Base.DECIMAL
    align: Align = Align.RIGHT
    width: Optional[int] = None
    fill: str = " "
    precision: Optional[int] = None


DEFAULT_FLAGS = FormatFlags()


def _is_integer(value: Any) -> bool:
    # bool is an int subclass but is shown as True/False
    return isinstance(value, int) and not isinstance(value, bool)


def _fraction_fixed_point(value: fractions.Fraction, precision: int) -> str:
    # Fraction only gained fixed point formatting in 3.12, round exactly instead
    scaled = round(value * 10**precision)
    sign = "-" if scaled < 0 else ""
    digits = str(abs(scaled)).rjust(precision + 1, "0")

    if precision == 0:
        return sign + digits

    return f"{sign}{digits[:-precision]}.{digits[-precision:]}"


def _convert(value: Any, flags: FormatFlags) -> str:
    if _is_integer(value):
        return format(value, _base_format_specs[flags.base])

    if isinstance(value, _fractional_types):
        if flags.precision is None:
            return str(value)
        if isinstance(value, fractions.Fraction):
            return _fraction_fixed_point(value, flags.precision)
        return format(value, f".{flags.precision}f")

    return str(value)


def render_value(value: Any, flags: FormatFlags = DEFAULT_FLAGS) -> str:
    """Convert a value to text under the given flags

    Base only applies to integers and precision only applies to fractional
    values, anything else is shown with str() and then padded.

    Example:

        >>> render_value(255, FormatFlags(base=Base.HEXADECIMAL))
        'ff'
        >>> render_value(7, FormatFlags(width=5, fill="*"))
        '****7'
        >>> render_value(3.14159, FormatFlags(precision=2))
        '3.14'

    Args:
        value: thing to render
        flags: display settings

    Returns:
        rendered text, never shorter than 'width'
    """
    converted = _convert(value, flags)

    if flags.width is None:
        return converted

    if flags.align == Align.LEFT:
        return converted.ljust(flags.width, flags.fill)
    else:
        return converted.rjust(flags.width, flags.fill)
