"""Fixed-point scalar plumbing for timestamps, durations and Julian days.

Every time value in this package is carried as a :class:`decimal.Decimal` evaluated in a
package-wide context whose precision comes from the ``[time] DecimalPrecision`` config
option. The default of 40 significant digits keeps sub-femtosecond resolution for
instants a billion years away from the epoch.
"""

from __future__ import annotations

# Standard Library Imports
from decimal import ROUND_DOWN, ROUND_FLOOR, ROUND_HALF_EVEN, Context, Decimal
from fractions import Fraction
from functools import lru_cache
from numbers import Integral, Real

# Third Party Imports
import numpy as np

# Local Imports
from ..common.behavioral_config import BehavioralConfig

FIXED_ZERO = Decimal(0)


@lru_cache(maxsize=8)
def _contextFor(precision: int) -> Context:
    """Build the arithmetic context used for a given number of significant digits."""
    return Context(prec=precision, rounding=ROUND_HALF_EVEN)


def fixedContext() -> Context:
    """Return the ``decimal`` context that all fixed-point arithmetic is performed in."""
    return _contextFor(BehavioralConfig.getConfig().time.DecimalPrecision)


def toFixed(value) -> Decimal:
    """Convert a numeric value into the fixed-point scalar.

    Floats are converted via their shortest ``repr`` so that ``0.1`` becomes ``Decimal("0.1")``
    rather than the exact binary expansion.

    Args:
        value (``int | float | str | Decimal | Fraction | numpy.number``): value to convert

    Raises:
        TypeError: if `value` is not a supported numeric type

    Returns:
        ``Decimal``: fixed-point representation of `value`
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError(f"Cannot convert {type(value)} to a fixed-point value")
    if isinstance(value, (int, np.integer)):
        return Decimal(int(value))
    if isinstance(value, str):
        return fixedContext().create_decimal(value)
    if isinstance(value, Fraction):
        return fixedContext().divide(Decimal(value.numerator), Decimal(value.denominator))
    if isinstance(value, (float, np.floating)):
        return Decimal(repr(float(value)))
    if isinstance(value, Integral):
        return Decimal(int(value))
    if isinstance(value, Real):
        return Decimal(repr(float(value)))
    raise TypeError(f"Cannot convert {type(value)} to a fixed-point value")


def floorFixed(value: Decimal) -> Decimal:
    """Round `value` toward negative infinity, keeping it a ``Decimal``."""
    return value.to_integral_value(rounding=ROUND_FLOOR)


def truncFixed(value: Decimal) -> Decimal:
    """Round `value` toward zero, keeping it a ``Decimal``."""
    return value.to_integral_value(rounding=ROUND_DOWN)


def floorDivMod(value: Decimal, divisor) -> tuple[Decimal, Decimal]:
    """Floor division of `value` by `divisor`.

    Note:
        ``divmod`` on ``Decimal`` truncates toward zero, which is wrong for instants before an
        epoch. Here the quotient is floored and the remainder has the sign of `divisor`.

    Returns:
        ``tuple``: integral quotient and remainder, both ``Decimal``
    """
    ctx = fixedContext()
    divisor = toFixed(divisor)
    quotient = floorFixed(ctx.divide(value, divisor))
    remainder = ctx.subtract(value, ctx.multiply(quotient, divisor))
    return quotient, remainder


def roundFixed(value: Decimal, prec: int, rounding: str = ROUND_HALF_EVEN) -> Decimal:
    """Round `value` to `prec` fractional decimal digits, ties to even by default.

    A negative `prec` leaves `value` untouched, as does a `prec` finer than `value` already is.
    """
    if prec < 0 or value.as_tuple().exponent >= -prec:
        return value
    ctx = fixedContext()
    if value.adjusted() + prec + 1 > ctx.prec:
        # Integer digits plus the requested fraction must fit the working precision
        ctx = ctx.copy()
        ctx.prec = value.adjusted() + prec + 2
    return value.quantize(Decimal(1).scaleb(-prec), rounding=rounding, context=ctx)


def showFixed(value: Decimal, max_prec: int = 9, width: int = 1) -> str:
    """Render `value` in fixed notation.

    Args:
        value (``Decimal``): value to render
        max_prec (``int``, optional): maximum number of fractional digits; trailing zeros are
            dropped. A negative value shows every available digit. Defaults to 9.
        width (``int``, optional): minimum number of integer digits, zero padded. Defaults to 1.

    Returns:
        ``str``: e.g. ``"-05.25"`` for ``showFixed(Decimal("-5.25"), 9, 2)``
    """
    value = roundFixed(value, max_prec)
    sign = "-" if value < 0 else ""
    text = f"{value.copy_abs():f}"
    whole, _, frac = text.partition(".")
    frac = frac.rstrip("0")
    whole = whole.rjust(max(width, 1), "0")
    if sign and not frac and int(whole) == 0:
        sign = ""
    return f"{sign}{whole}.{frac}" if frac else f"{sign}{whole}"
