"""Defines :class:`.Duration`, a signed span of SI seconds.

A :class:`.Duration` is independent of any time scale, which makes it the canonical unit
for differencing instants that are expressed in different scales.
"""

from __future__ import annotations

# Standard Library Imports
from datetime import timedelta
from decimal import Decimal
from functools import total_ordering

# Local Imports
from .fixed import fixedContext, showFixed, toFixed


@total_ordering
class Duration:
    """Immutable span of SI seconds backed by the fixed-point scalar."""

    __slots__ = ("_seconds",)

    def __init__(self, seconds=0):
        """Create a duration of `seconds` SI seconds.

        Args:
            seconds (``int | float | str | Decimal``, optional): length of the span. Defaults to 0.
        """
        if isinstance(seconds, Duration):
            seconds = seconds.seconds
        self._seconds: Decimal = toFixed(seconds)

    @classmethod
    def fromTimedelta(cls, delta: timedelta) -> Duration:
        """Build a :class:`.Duration` from a ``datetime.timedelta``, keeping its microseconds."""
        ctx = fixedContext()
        whole = Decimal(delta.days * 86400 + delta.seconds)
        return cls(ctx.add(whole, Decimal(delta.microseconds).scaleb(-6)))

    @property
    def seconds(self) -> Decimal:
        """``Decimal``: length of this span in SI seconds."""
        return self._seconds

    def toTimedelta(self) -> timedelta:
        """Return the nearest ``datetime.timedelta``, rounded to microseconds."""
        return timedelta(seconds=float(self._seconds))

    def __add__(self, other):
        """."""
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(fixedContext().add(self._seconds, other.seconds))

    def __sub__(self, other):
        """."""
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(fixedContext().subtract(self._seconds, other.seconds))

    def __neg__(self):
        """."""
        return Duration(self._seconds.copy_negate())

    def __pos__(self):
        """."""
        return self

    def __abs__(self):
        """."""
        return Duration(self._seconds.copy_abs())

    def __mul__(self, scalar):
        """."""
        if isinstance(scalar, Duration):
            return NotImplemented
        try:
            factor = toFixed(scalar)
        except TypeError:
            return NotImplemented
        return Duration(fixedContext().multiply(self._seconds, factor))

    __rmul__ = __mul__

    def __truediv__(self, other):
        """Divide by a scalar, or by another :class:`.Duration` to get a ratio."""
        ctx = fixedContext()
        if isinstance(other, Duration):
            return ctx.divide(self._seconds, other.seconds)
        try:
            divisor = toFixed(other)
        except TypeError:
            return NotImplemented
        return Duration(ctx.divide(self._seconds, divisor))

    def __eq__(self, other):
        """."""
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds == other.seconds

    def __lt__(self, other):
        """."""
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds < other.seconds

    def __hash__(self):
        """."""
        return hash(self._seconds)

    def __bool__(self):
        """."""
        return not self._seconds.is_zero()

    def __float__(self):
        """."""
        return float(self._seconds)

    def __repr__(self):
        """Return a string representation of a :class:`.Duration` object."""
        return f"Duration({self._seconds} seconds)"

    def __str__(self):
        """Return the span in seconds, e.g. ``"1.5s"``."""
        return f"{showFixed(self._seconds, max_prec=-1)}s"


DURATION_ZERO = Duration(0)
"""Duration: the empty span."""
