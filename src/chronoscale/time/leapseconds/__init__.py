"""Leap-second table package.

A :class:`.LeapSecondTable` lists the TAI-UTC offset in effect from each listed UTC date onward.
It answers every question the UTC-like time scales ask: the offset at a UTC timestamp, the length
of a UTC day, and the mapping between TAI and (UTC seconds, leap overlay).

All seconds counts in this package are relative to 2000-01-01T00:00:00 of the respective scale.
"""

from __future__ import annotations

# Standard Library Imports
import datetime
from bisect import bisect_right
from dataclasses import dataclass
from decimal import Decimal

# Local Imports
from ...common.exceptions import LeapSecondTableError
from ..constants import SECS_PER_DAY
from ..fixed import fixedContext, floorDivMod, floorFixed
from ..gregorian import daysFromCivil


@dataclass(frozen=True)
class LeapSecondEntry:
    """Data class defining one row of a leap-second table."""

    date: datetime.date
    """datetime.date: UTC date at whose start the offset takes effect."""

    start: Decimal
    """Decimal: UTC seconds since 2000-01-01 of the start of :attr:`date`."""

    offset: Decimal
    """Decimal: TAI minus UTC from :attr:`date` onward (seconds)."""

    @classmethod
    def fromDate(cls, date: datetime.date, offset) -> LeapSecondEntry:
        """Build an entry from its date, computing :attr:`start`."""
        days = daysFromCivil(date.year, date.month, date.day)
        return cls(date=date, start=Decimal(days * SECS_PER_DAY), offset=Decimal(offset))


class LeapSecondTable:
    """Immutable, sorted table of TAI-UTC offsets.

    Before the first entry the first offset applies, and after the last entry the last offset
    applies, so the table never introduces a discontinuity outside of its own rows.
    """

    def __init__(self, entries):
        """Validate and store `entries`.

        Args:
            entries (``iterable``): :class:`.LeapSecondEntry` objects, in increasing date order

        Raises:
            LeapSecondTableError: if the table is empty, unsorted or not day aligned
        """
        self._entries: tuple[LeapSecondEntry, ...] = tuple(entries)
        if not self._entries:
            raise LeapSecondTableError("A leap-second table needs at least one entry")

        for prev, entry in zip(self._entries, self._entries[1:]):
            if entry.date <= prev.date:
                err = f"Leap-second entries out of order: {prev.date} is followed by {entry.date}"
                raise LeapSecondTableError(err)
        for entry in self._entries:
            if floorDivMod(entry.start, SECS_PER_DAY)[1] != 0:
                err = f"Leap-second entry for {entry.date} doesn't start on a day boundary"
                raise LeapSecondTableError(err)

        ctx = fixedContext()
        self._starts = [entry.start for entry in self._entries]
        self._tai_starts = [ctx.add(entry.start, entry.offset) for entry in self._entries]

    @property
    def entries(self) -> tuple[LeapSecondEntry, ...]:
        """``tuple``: rows of this table, in date order."""
        return self._entries

    def __len__(self):
        """."""
        return len(self._entries)

    def earliestDate(self) -> datetime.date:
        """Returns the date of the first row."""
        return self._entries[0].date

    def latestDate(self) -> datetime.date:
        """Returns the date of the last row."""
        return self._entries[-1].date

    def offsetAt(self, utc: Decimal) -> Decimal:
        """Return TAI-UTC in effect at `utc` seconds since 2000-01-01 UTC."""
        index = bisect_right(self._starts, utc) - 1
        return self._entries[max(index, 0)].offset

    def secondsInDay(self, utc: Decimal) -> Decimal:
        """Return the length in SI seconds of the UTC day containing `utc`."""
        ctx = fixedContext()
        day_start = ctx.multiply(floorDivMod(utc, SECS_PER_DAY)[0], Decimal(SECS_PER_DAY))
        next_start = ctx.add(day_start, Decimal(SECS_PER_DAY))
        change = ctx.subtract(self.offsetAt(next_start), self.offsetAt(day_start))
        return ctx.add(Decimal(SECS_PER_DAY), change)

    def toTAI(self, utc: Decimal, leap: int = 0) -> Decimal:
        """Convert UTC seconds plus a leap overlay into TAI seconds since 2000-01-01 TAI."""
        ctx = fixedContext()
        return ctx.add(ctx.add(utc, self.offsetAt(utc)), Decimal(leap))

    def fromTAI(self, tai: Decimal) -> tuple[Decimal, int]:
        """Convert TAI seconds since 2000-01-01 TAI into UTC seconds plus a leap overlay.

        While an inserted leap second elapses the UTC seconds stay within 23:59:59 and the
        overlay is positive. UTC seconds skipped by a removed leap second are never produced.
        """
        ctx = fixedContext()
        index = bisect_right(self._tai_starts, tai) - 1
        if index < 0:
            return ctx.subtract(tai, self._entries[0].offset), 0

        entry = self._entries[index]
        if index + 1 < len(self._entries):
            upcoming = self._entries[index + 1]
            inserted_from = ctx.add(upcoming.start, entry.offset)
            if upcoming.offset > entry.offset and tai >= inserted_from:
                # Inside the inserted second(s) at the end of the day before `upcoming`
                elapsed = ctx.subtract(tai, inserted_from)
                whole = floorFixed(elapsed)
                since = ctx.add(ctx.subtract(upcoming.start, Decimal(1)), ctx.subtract(elapsed, whole))
                return since, int(whole) + 1

        return ctx.subtract(tai, entry.offset), 0


# Local Imports
# forward-facing API import
from .getter import getLeapSecondTable  # noqa: E402, F401
