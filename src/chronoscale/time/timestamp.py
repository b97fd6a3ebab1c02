"""Defines :class:`.Timestamp`, a scale-relative point in time.

A timestamp is a fixed-point count of seconds since the epoch of *some* time scale, so it is
only meaningful when paired with a :class:`.Timescale`. Time scales with leap seconds need an
extra overlay: while an inserted leap second elapses, :attr:`.Timestamp.since` stays within the
last nominal second of the day and :attr:`.Timestamp.leap` counts the inserted seconds.

.. code-block:: python

    # 2016-12-31T23:59:60.25 UTC, relative to the UTC y2k epoch
    Timestamp(Decimal("536543999.25"), leap=1)
"""

from __future__ import annotations

# Standard Library Imports
from decimal import Decimal
from functools import total_ordering

# Local Imports
from .duration import Duration
from .fixed import fixedContext, floorFixed, roundFixed, showFixed, toFixed


def _toSpan(value) -> Decimal:
    """Accept either a :class:`.Duration` or a raw scalar as a span of seconds."""
    if isinstance(value, Duration):
        return value.seconds
    return toFixed(value)


@total_ordering
class Timestamp:
    """Immutable seconds count relative to a time scale epoch, with a leap-second overlay."""

    __slots__ = ("_since", "_leap")

    def __init__(self, since=0, leap: int = 0):
        """Create a timestamp.

        Args:
            since (``int | float | str | Decimal``, optional): seconds since the scale epoch,
                excluding any leap second currently elapsing. Defaults to 0.
            leap (``int``, optional): inserted leap seconds elapsed at this point. Defaults to 0.
        """
        self._since: Decimal = toFixed(since)
        self._leap: int = int(leap)

    @property
    def since(self) -> Decimal:
        """``Decimal``: seconds since the scale epoch, without the leap overlay."""
        return self._since

    @property
    def leap(self) -> int:
        """``int``: leap seconds elapsed in the current leap-second period."""
        return self._leap

    def totalSeconds(self) -> Decimal:
        """Return the elapsed seconds including the leap overlay."""
        if not self._leap:
            return self._since
        return fixedContext().add(self._since, Decimal(self._leap))

    def splitLeap(self) -> tuple[Decimal, int]:
        """Split into the non-leap seconds and the leap seconds components."""
        return self._since, self._leap

    def addLeapSeconds(self, leap: int) -> Timestamp:
        """Return a copy of this timestamp with `leap` more seconds in its leap overlay."""
        return Timestamp(self._since, self._leap + int(leap))

    def roundToPrec(self, prec: int) -> Timestamp:
        """Round the fractional seconds to `prec` digits. A negative `prec` is a no-op."""
        if prec < 0:
            return self
        return Timestamp(roundFixed(self._since, prec), self._leap)

    def __add__(self, span):
        """Shift by a span of seconds, keeping the leap overlay."""
        if isinstance(span, Timestamp):
            return NotImplemented
        try:
            seconds = _toSpan(span)
        except TypeError:
            return NotImplemented
        return Timestamp(fixedContext().add(self._since, seconds), self._leap)

    __radd__ = __add__

    def __sub__(self, other):
        """Subtract a span, or another timestamp of the same scale to get the seconds between."""
        ctx = fixedContext()
        if isinstance(other, Timestamp):
            return ctx.subtract(self.totalSeconds(), other.totalSeconds())
        try:
            seconds = _toSpan(other)
        except TypeError:
            return NotImplemented
        return Timestamp(ctx.subtract(self._since, seconds), self._leap)

    def _key(self) -> tuple[Decimal, int, Decimal]:
        # An elapsing leap second sorts after 23:59:59 and before the next day's 00:00:00
        return floorFixed(self._since), self._leap, self._since

    def __eq__(self, other):
        """."""
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self._since == other.since and self._leap == other.leap

    def __lt__(self, other):
        """."""
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self):
        """."""
        return hash((self._since, self._leap))

    def show(self, max_prec: int = 9, secs_width: int = 1) -> str:
        """Render the seconds count, followed by the leap overlay when one is present."""
        text = showFixed(self._since, max_prec, secs_width)
        if self._leap:
            text = f"{text}+{self._leap}"
        return text

    def __repr__(self):
        """Return a string representation of a :class:`.Timestamp` object."""
        if self._leap:
            return f"Timestamp({self._since} seconds, leap={self._leap})"
        return f"Timestamp({self._since} seconds)"


TIMESTAMP_ZERO = Timestamp(0)
"""Timestamp: the epoch of any time scale."""
