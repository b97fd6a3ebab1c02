"""Defines :class:`.Timescale` descriptors, their factories and the conversion engine.

A time scale pairs a name with the functions that move timestamps to and from TAI, the
canonical reference scale. Scales that share a non-empty :attr:`.Timescale.unit` only differ by
a constant epoch shift, so conversions between them never transit through TAI.

Two families are provided:

- constant-offset scales built with :func:`.taiTimescale` (TAI, GPS, TT), and
- general scales built with :func:`.timescale`, which may have leap seconds (UTC, see
  :mod:`.utc`) or a rate difference (TCG).

Note:
    Callers are responsible for supplying mutually-inverse ``from_tai``/``to_tai`` functions;
    nothing checks this, and a mismatched pair silently produces wrong conversions.
"""

from __future__ import annotations

# Standard Library Imports
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING, Union

# Local Imports
from ..common.logger import chronoscaleLogDebug
from . import constants as const
from .duration import Duration
from .fixed import fixedContext, toFixed
from .timestamp import Timestamp

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Callable


class TimescaleTransform(ABC):
    """Capability interface converting between TAI and a scale's timestamps."""

    @abstractmethod
    def fromTAI(self, tai: Duration) -> Timestamp:
        """Convert a TAI duration since the global epoch into a timestamp of this scale."""
        raise NotImplementedError

    @abstractmethod
    def toTAI(self, timestamp: Timestamp) -> Duration:
        """Convert a timestamp of this scale into a TAI duration since the global epoch."""
        raise NotImplementedError


@dataclass(frozen=True)
class OffsetTransform(TimescaleTransform):
    """Transform of a scale that is TAI shifted by a constant number of seconds."""

    shift: Decimal
    """``Decimal``: timestamp of this scale at the global epoch."""

    def fromTAI(self, tai: Duration) -> Timestamp:
        """Add the constant shift to the TAI seconds."""
        return Timestamp(fixedContext().add(tai.seconds, self.shift))

    def toTAI(self, timestamp: Timestamp) -> Duration:
        """Remove the constant shift, leap overlay included."""
        return Duration(fixedContext().subtract(timestamp.totalSeconds(), self.shift))


@dataclass(frozen=True)
class FunctionTransform(TimescaleTransform):
    """Transform wrapping an arbitrary pair of conversion functions."""

    from_tai: Callable[[Duration], Timestamp]
    to_tai: Callable[[Timestamp], Duration]

    def fromTAI(self, tai: Duration) -> Timestamp:
        """Delegate to the wrapped `from_tai` function."""
        return self.from_tai(tai)

    def toTAI(self, timestamp: Timestamp) -> Duration:
        """Delegate to the wrapped `to_tai` function."""
        return self.to_tai(timestamp)


@dataclass(frozen=True)
class NoLeapSeconds:
    """Day length of a scale where every day lasts exactly :data:`.SECS_PER_DAY` seconds."""


@dataclass(frozen=True)
class LeapSecondsFn:
    """Day length of a scale whose days may be lengthened or shortened by leap seconds."""

    seconds_in_day: Callable[[Timestamp], Decimal]
    """Returns the length, in seconds, of the day containing the given timestamp."""


DayLength = Union[NoLeapSeconds, LeapSecondsFn]
"""Sum type describing how long the days of a :class:`.Timescale` are."""


@dataclass(frozen=True, eq=False)
class Timescale:
    """Immutable, named conversion descriptor for one time scale."""

    name: str
    """``str``: unique display identifier, e.g. ``"TAI"``."""

    unit: str
    """``str``: conversion group; equal non-empty units convert by an epoch shift alone."""

    transform: TimescaleTransform = field(repr=False)
    """:class:`.TimescaleTransform`: conversion functions to and from TAI."""

    y2k_epoch: Timestamp = field(default_factory=Timestamp)
    """:class:`.Timestamp`: timestamp, in this scale, of the civil date 2000-01-01."""

    epoch_shift: Decimal = Decimal(0)
    """``Decimal``: offset used by the same-unit conversion fast path."""

    day_length: DayLength = field(default_factory=NoLeapSeconds, repr=False)
    """:data:`.DayLength`: whether days of this scale can contain leap seconds."""

    def fromTAI(self, tai: Duration) -> Timestamp:
        """Convert a TAI duration since the global epoch into a timestamp of this scale."""
        return self.transform.fromTAI(tai)

    def toTAI(self, timestamp: Timestamp) -> Duration:
        """Convert a timestamp of this scale into a TAI duration since the global epoch."""
        return self.transform.toTAI(timestamp)

    @property
    def has_leap_seconds(self) -> bool:
        """``bool``: whether this scale declares a day-length function."""
        return isinstance(self.day_length, LeapSecondsFn)

    def secondsInDay(self, timestamp: Timestamp) -> Decimal:
        """Return the length of the day containing `timestamp`, in seconds."""
        if isinstance(self.day_length, LeapSecondsFn):
            return self.day_length.seconds_in_day(timestamp)
        return Decimal(const.SECS_PER_DAY)

    def __str__(self):
        """."""
        return self.name


def taiTimescale(name: str, offset=0, y2k_epoch=0) -> Timescale:
    """Create a time scale that is a constant-offset transform of TAI.

    Args:
        name (``str``): name of the time scale
        offset (``int | float | str | Decimal``, optional): seconds this scale runs ahead of TAI.
            Defaults to 0.
        y2k_epoch (``int | float | str | Decimal``, optional): timestamp of 2000-01-01 in this scale,
            i.e. the number of seconds from this scale's epoch to 2000-01-01. Defaults to 0.

    Returns:
        :class:`.Timescale`: scale in the ``"TAI"`` unit group
    """
    shift = fixedContext().add(toFixed(y2k_epoch), toFixed(offset))
    chronoscaleLogDebug(f"Creating TAI-derived time scale {name!r} with epoch shift {shift}")
    return Timescale(
        name=name,
        unit="TAI",
        transform=OffsetTransform(shift),
        y2k_epoch=Timestamp(y2k_epoch),
        epoch_shift=shift,
        day_length=NoLeapSeconds(),
    )


def timescale(
    name: str,
    from_tai: Callable[[Duration], Timestamp],
    to_tai: Callable[[Timestamp], Duration],
    y2k_epoch=0,
    unit: str | None = None,
    seconds_in_day: Callable[[Timestamp], Decimal] | None = None,
) -> Timescale:
    """Create a time scale from an arbitrary pair of conversion functions.

    Args:
        name (``str``): name of the time scale
        from_tai (``callable``): converts a TAI :class:`.Duration` since the global epoch into a
            :class:`.Timestamp` of this scale
        to_tai (``callable``): inverse of `from_tai`
        y2k_epoch (``int | float | str | Decimal``, optional): timestamp of 2000-01-01 in this scale.
            Defaults to 0.
        unit (``str``, optional): conversion group. Defaults to `name`.
        seconds_in_day (``callable``, optional): day length function, only for scales with leap
            seconds. Defaults to ``None``, meaning every day lasts 86400 seconds.

    Returns:
        :class:`.Timescale`: the new time scale
    """
    if unit is None:
        unit = name
    day_length = NoLeapSeconds() if seconds_in_day is None else LeapSecondsFn(seconds_in_day)
    chronoscaleLogDebug(f"Creating time scale {name!r} in unit group {unit!r}")
    return Timescale(
        name=name,
        unit=unit,
        transform=FunctionTransform(from_tai, to_tai),
        y2k_epoch=Timestamp(y2k_epoch),
        epoch_shift=toFixed(y2k_epoch),
        day_length=day_length,
    )


def convert(timestamp: Timestamp, from_scale: Timescale, to_scale: Timescale) -> Timestamp:
    """Re-express `timestamp` from `from_scale` in `to_scale`.

    The cheapest applicable of three tiers is used:

    #. identical scale names: `timestamp` is returned unchanged,
    #. equal non-empty units: only the epoch-shift difference is applied, so leap-second
       functions are never invoked,
    #. otherwise: transit through TAI.

    Args:
        timestamp (:class:`.Timestamp`): timestamp relative to `from_scale`
        from_scale (:class:`.Timescale`): scale `timestamp` is expressed in
        to_scale (:class:`.Timescale`): scale to express the result in

    Returns:
        :class:`.Timestamp`: the same physical instant relative to `to_scale`
    """
    if from_scale.name == to_scale.name:
        return timestamp
    if from_scale.unit and from_scale.unit == to_scale.unit:
        return (timestamp - from_scale.epoch_shift) + to_scale.epoch_shift
    return to_scale.fromTAI(from_scale.toTAI(timestamp))


def _tcgFromTAI(tai: Duration) -> Timestamp:
    ctx = fixedContext()
    tt = ctx.add(tai.seconds, const.TT_TAI_OFFSET)
    scaled = ctx.divide(ctx.subtract(tt, const.TCG_TT_EPOCH), ctx.subtract(Decimal(1), const.TCG_RATE))
    return Timestamp(ctx.add(const.TCG_TT_EPOCH, scaled))


def _tcgToTAI(timestamp: Timestamp) -> Duration:
    ctx = fixedContext()
    elapsed = ctx.subtract(timestamp.totalSeconds(), const.TCG_TT_EPOCH)
    tt = ctx.add(const.TCG_TT_EPOCH, ctx.multiply(elapsed, ctx.subtract(Decimal(1), const.TCG_RATE)))
    return Duration(ctx.subtract(tt, const.TT_TAI_OFFSET))


TS_TAI: Timescale = taiTimescale("TAI")
"""Timescale: International Atomic Time, the canonical reference scale."""

TS_GPS: Timescale = taiTimescale("GPS", const.GPS_TAI_OFFSET, const.GPS_Y2K_EPOCH)
"""Timescale: GPS time, counted from 1980-01-06T00:00:00 GPS."""

TS_TT: Timescale = taiTimescale("TT", const.TT_TAI_OFFSET)
"""Timescale: Terrestrial Time."""

TS_TCG: Timescale = timescale("TCG", _tcgFromTAI, _tcgToTAI)
"""Timescale: Geocentric Coordinate Time, which runs faster than TT by :data:`.TCG_RATE`."""
