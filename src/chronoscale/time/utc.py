"""Leap-second aware time scales: UTC and Unix time.

Timestamps of these scales count 86400 seconds per day, like POSIX time, and carry inserted
leap seconds in the :attr:`.Timestamp.leap` overlay. Days containing a leap second therefore last
86401 SI seconds (or 86399 for a removed one), which :meth:`.Timescale.secondsInDay` reports.
"""

from __future__ import annotations

# Local Imports
from . import constants as const
from .duration import Duration
from .fixed import fixedContext, toFixed
from .leapseconds import LeapSecondTable, getLeapSecondTable
from .timescales import Timescale, timescale
from .timestamp import Timestamp


def utcTimescale(name: str = "UTC", table: LeapSecondTable | None = None, y2k_epoch=0) -> Timescale:
    """Create a UTC-like time scale governed by a leap-second table.

    Args:
        name (``str``, optional): name of the time scale. Defaults to ``"UTC"``.
        table (:class:`.LeapSecondTable`, optional): leap seconds to apply. Defaults to the table
            of the configured loader.
        y2k_epoch (``int | float | str | Decimal``, optional): timestamp of 2000-01-01T00:00:00 UTC
            in this scale. Defaults to 0.

    Returns:
        :class:`.Timescale`: scale in the ``"UTC"`` unit group with a day-length function
    """
    if table is None:
        table = getLeapSecondTable()
    epoch = toFixed(y2k_epoch)

    def fromTAI(tai: Duration) -> Timestamp:
        since, leap = table.fromTAI(tai.seconds)
        return Timestamp(fixedContext().add(since, epoch), leap)

    def toTAI(stamp: Timestamp) -> Duration:
        since, leap = stamp.splitLeap()
        return Duration(table.toTAI(fixedContext().subtract(since, epoch), leap))

    def secondsInDay(stamp: Timestamp):
        return table.secondsInDay(fixedContext().subtract(stamp.since, epoch))

    return timescale(name, fromTAI, toTAI, y2k_epoch=epoch, unit="UTC", seconds_in_day=secondsInDay)


TS_UTC: Timescale = utcTimescale("UTC")
"""Timescale: Coordinated Universal Time, counted from 2000-01-01T00:00:00 UTC."""

TS_UNIX: Timescale = utcTimescale("UNIX", y2k_epoch=const.UNIX_Y2K_EPOCH)
"""Timescale: Unix time, counted from 1970-01-01T00:00:00 UTC, with leap seconds kept."""
