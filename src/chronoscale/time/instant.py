"""Defines :class:`.Instant`, a point in time together with the time scale it is expressed in.

Instants are immutable: converting (:meth:`.Instant.use`), shifting (``+``/``-``) and rounding
all return new instants. Two instants are always compared after projecting one into the scale of
the other, so instants in different scales order correctly.

.. code-block:: python

    i = instantSinceEpoch(Duration(60))   # one minute after 2000-01-01T00:00:00 TAI
    j = i.use(TS_GPS)                     # same physical instant, GPS timestamp
    assert i == j and (j - i) == DURATION_ZERO
"""

from __future__ import annotations

# Standard Library Imports
from decimal import Decimal
from enum import Enum

# Local Imports
from .duration import Duration
from .fixed import showFixed
from .timescales import TS_TAI, Timescale, convert
from .timestamp import Timestamp


class Order(Enum):
    """Result of a three-way comparison."""

    LT = -1
    EQ = 0
    GT = 1


class Instant:
    """A :class:`.Timestamp` and the :class:`.Timescale` it is relative to.

    Warning:
        The constructor does not validate that `since` was computed for `scale`. Use the
        scale-aware constructors (:func:`.instantSinceEpoch`, :func:`.instantAtMJD`,
        :func:`.getInstant`) unless the timestamp is already known to belong to `scale`.
    """

    __slots__ = ("_since", "_scale")

    def __init__(self, since: Timestamp, scale: Timescale = TS_TAI):
        """Pair `since` with `scale`.

        Args:
            since (:class:`.Timestamp`): timestamp relative to the epoch of `scale`
            scale (:class:`.Timescale`, optional): scale of `since`. Defaults to TAI.
        """
        if not isinstance(since, Timestamp):
            since = Timestamp(since)
        self._since = since
        self._scale = scale

    @property
    def since(self) -> Timestamp:
        """:class:`.Timestamp`: timestamp in this instant's own scale."""
        return self._since

    @property
    def timescale(self) -> Timescale:
        """:class:`.Timescale`: scale this instant is expressed in."""
        return self._scale

    def use(self, scale: Timescale) -> Instant:
        """Re-express this instant in `scale` without changing the physical instant."""
        if self._scale.name == scale.name:
            return self
        return Instant(convert(self._since, self._scale, scale), scale)

    def timestamp(self, scale: Timescale = TS_TAI) -> Timestamp:
        """Return the raw timestamp of this instant relative to `scale`."""
        return self.use(scale).since

    def timespan(self, scale: Timescale = TS_TAI) -> Decimal:
        """Return the seconds since the epoch of `scale`, leap overlay included."""
        return self.timestamp(scale).totalSeconds()

    def sinceEpoch(self) -> Duration:
        """Return the TAI duration since the global epoch, 2000-01-01T00:00:00 TAI."""
        return TS_TAI.toTAI(self.timestamp(TS_TAI))

    def compare(self, other: Instant) -> Order:
        """Three-way comparison, performed in this instant's scale."""
        mine = self._since
        theirs = convert(other.since, other.timescale, self._scale)
        if mine < theirs:
            return Order.LT
        if mine == theirs:
            return Order.EQ
        return Order.GT

    def min(self, other: Instant) -> Instant:
        """Return the earlier of the two instants, preferring `self` on ties."""
        return self if self <= other else other

    def max(self, other: Instant) -> Instant:
        """Return the later of the two instants, preferring `self` on ties."""
        return self if self >= other else other

    def __eq__(self, other):
        """."""
        if not isinstance(other, Instant):
            return NotImplemented
        return self.compare(other) is Order.EQ

    def __ne__(self, other):
        """."""
        if not isinstance(other, Instant):
            return NotImplemented
        return self.compare(other) is not Order.EQ

    def __lt__(self, other):
        """."""
        if not isinstance(other, Instant):
            return NotImplemented
        return self.compare(other) is Order.LT

    def __le__(self, other):
        """."""
        if not isinstance(other, Instant):
            return NotImplemented
        return self.compare(other) is not Order.GT

    def __gt__(self, other):
        """."""
        if not isinstance(other, Instant):
            return NotImplemented
        return self.compare(other) is Order.GT

    def __ge__(self, other):
        """."""
        if not isinstance(other, Instant):
            return NotImplemented
        return self.compare(other) is not Order.LT

    def __hash__(self):
        """Hash on the TAI duration so equal instants in different scales hash alike."""
        return hash(self.sinceEpoch())

    def __add__(self, duration):
        """Shift by a :class:`.Duration`.

        Note:
            Only scales in the ``"TAI"`` unit group are shifted in place. Any other instant is
            converted to TAI first and the result stays in TAI; re-:meth:`use` it to go back.
        """
        if not isinstance(duration, Duration):
            return NotImplemented
        if self._scale.unit == "TAI":
            return Instant(self._since + duration, self._scale)
        return instantSinceEpoch(self.sinceEpoch() + duration)

    __radd__ = __add__

    def __sub__(self, other):
        """Subtract a :class:`.Duration`, or another instant to get the physical duration between."""
        if isinstance(other, Instant):
            return self.sinceEpoch() - other.sinceEpoch()
        if isinstance(other, Duration):
            return self + (-other)
        return NotImplemented

    def roundToPrec(self, prec: int) -> Instant:
        """Round the fractional seconds to `prec` digits.

        A negative `prec` returns this instant unchanged. Instants in a scale with leap seconds
        are rounded in TAI, so that rounding into or out of a leap second is correct, and the
        result stays expressed in TAI.
        """
        if prec < 0:
            return self
        if self._scale.has_leap_seconds:
            return Instant(self.timestamp(TS_TAI).roundToPrec(prec), TS_TAI)
        return Instant(self._since.roundToPrec(prec), self._scale)

    def show(self, max_prec: int = 9, secs_width: int = 1) -> str:
        """Show as TAI seconds since the global epoch, labelled with this instant's scale.

        Args:
            max_prec (``int``, optional): maximum fractional digits. Defaults to 9.
            secs_width (``int``, optional): minimum integer digits of the seconds. Defaults to 1.

        Returns:
            ``str``: e.g. ``"60s"`` in TAI, ``"60s GPS"`` in GPS or ``"60 UTC"`` in UTC
        """
        text = showFixed(self.timespan(TS_TAI), max_prec, secs_width)
        if self._scale.unit == "TAI":
            text += "s"
        if self._scale.name and self._scale.name != "TAI":
            text += f" {self._scale.name}"
        return text

    def showRaw(self, max_prec: int = 9, secs_width: int = 1) -> str:
        """Show the raw timestamp in this instant's own scale, e.g. ``"630720000s GPS"``."""
        text = f"{self._since.show(max_prec, secs_width)}s"
        if self._scale.name:
            text += f" {self._scale.name}"
        return text

    def __str__(self):
        """."""
        return self.show()

    def __repr__(self):
        """Return a string representation of an :class:`.Instant` object."""
        return f"Instant({self._since!r}, {self._scale.name})"


def instantSinceEpoch(duration: Duration) -> Instant:
    """Return the TAI instant `duration` after the global epoch, 2000-01-01T00:00:00 TAI."""
    return Instant(TS_TAI.fromTAI(duration), TS_TAI)


EPOCH = Instant(Timestamp(0), TS_TAI)
"""Instant: the global epoch, 2000-01-01T00:00:00 TAI."""
