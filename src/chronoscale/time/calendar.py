"""Civil (proleptic Gregorian) calendar bridge for :class:`.Instant` values.

Civil fields are always read in the reckoning of a particular time scale: ``2017-01-01T00:00:00``
in GPS is a different instant from the same fields in UTC. Leap seconds are only representable on
scales that declare them, where they render as ``23:59:60``.
"""

from __future__ import annotations

# Standard Library Imports
from datetime import datetime, timedelta, timezone
from decimal import ROUND_FLOOR, Decimal

# Local Imports
from .constants import SECS_PER_DAY, SECS_PER_HOUR, SECS_PER_MINUTE
from .fixed import fixedContext, floorDivMod, floorFixed, roundFixed, showFixed, toFixed
from .gregorian import civilFromDays, daysFromCivil, daysInMonth
from .instant import Instant
from .timescales import Timescale
from .timestamp import Timestamp
from .utc import TS_UTC


def getInstant(year, month, day, hour=0, minute=0, second=0, scale: Timescale = TS_UTC) -> Instant:
    """From civil date and time fields in `scale`, return the :class:`.Instant`.

    Args:
        year (int): Calendar year
        month (int): Month of the year
        day (int): Day of the month
        hour (int, optional): Hours in the day. Defaults to 0.
        minute (int, optional): Minutes in the hour. Defaults to 0.
        second (``int | float | str | Decimal``, optional): Seconds in the minute; 60 and above
            denote a leap second on scales that have them. Defaults to 0.
        scale (:class:`.Timescale`, optional): scale the fields are read in. Defaults to UTC.

    Raises:
        ValueError: if a field is out of range, or seconds of 60 and up don't fall on a leap
            second of `scale`

    Returns:
        :class:`.Instant`: corresponding instant expressed in `scale`
    """
    if month > 12 or month < 1:
        raise ValueError("getInstant: Month must be an integer (1-12).")
    if day > daysInMonth(year, month) or day < 1:
        raise ValueError(f"getInstant: Day must be an integer (1-{daysInMonth(year, month)}).")
    if hour > 23 or hour < 0:
        raise ValueError("getInstant: Hour must be an integer (0-23).")
    if minute > 59 or minute < 0:
        raise ValueError("getInstant: Minute must be an integer (0-59).")

    ctx = fixedContext()
    second = toFixed(second)
    if second < 0 or (second >= SECS_PER_MINUTE and not scale.has_leap_seconds):
        raise ValueError("getInstant: Second must be a number (0-60).")

    # Seconds 60.x are carried by the leap overlay on top of 59.x
    leap = 0
    if second >= SECS_PER_MINUTE:
        leap = int(floorFixed(second)) - (SECS_PER_MINUTE - 1)
        second = ctx.subtract(second, Decimal(leap))

    day_secs = ctx.add(Decimal(hour * SECS_PER_HOUR + minute * SECS_PER_MINUTE), second)
    days = Decimal(daysFromCivil(year, month, day) * SECS_PER_DAY)
    since = ctx.add(ctx.add(scale.y2k_epoch.since, days), day_secs)
    if leap:
        # Only the last minute of a day lengthened by the leap table has seconds 60 and up
        extra = ctx.subtract(scale.secondsInDay(Timestamp(since)), Decimal(SECS_PER_DAY))
        if hour != 23 or minute != 59 or leap > extra:
            raise ValueError(
                f"getInstant: Second must be a number (0-60); {year}-{month:02d}-{day:02d} "
                f"{hour:02d}:{minute:02d} has no leap second in {scale.name}."
            )
    return Instant(Timestamp(since, leap), scale)


def _civilFields(instant: Instant, scale: Timescale, max_prec: int):
    """Split `instant` into ``((year, month, day), (hour, minute, second))`` of `scale`."""
    ctx = fixedContext()
    stamp = instant.timestamp(scale)
    secs, leap = stamp.splitLeap()
    rel = ctx.subtract(secs, scale.y2k_epoch.since)
    if leap:
        # Never round a leap second over into the next day
        rel = roundFixed(rel, max_prec, rounding=ROUND_FLOOR)
    else:
        days = floorDivMod(rel, SECS_PER_DAY)[0]
        rel = roundFixed(rel, max_prec)
        if floorDivMod(rel, SECS_PER_DAY)[0] > days and scale.secondsInDay(stamp) > SECS_PER_DAY:
            # Rounded up into the leap second ending the day
            rel, leap = ctx.subtract(rel, Decimal(1)), 1
    days, day_secs = floorDivMod(rel, SECS_PER_DAY)
    day_secs = ctx.add(day_secs, Decimal(leap))

    if day_secs >= SECS_PER_DAY:
        hour, minute = 23, 59
        second = ctx.subtract(day_secs, Decimal(SECS_PER_DAY - SECS_PER_MINUTE))
    else:
        whole = int(floorFixed(day_secs))
        hour, rest = divmod(whole, SECS_PER_HOUR)
        minute, _ = divmod(rest, SECS_PER_MINUTE)
        second = ctx.subtract(day_secs, Decimal(hour * SECS_PER_HOUR + minute * SECS_PER_MINUTE))

    return civilFromDays(int(days)), (hour, minute, second)


def isoFormat(instant: Instant, scale: Timescale | None = None, max_prec: int = 9) -> str:
    """Render `instant` as ISO-8601 civil time of `scale`.

    Args:
        instant (:class:`.Instant`): instant to render
        scale (:class:`.Timescale`, optional): scale whose civil reckoning is used. Defaults to
            the instant's own scale.
        max_prec (``int``, optional): maximum fractional digits of the seconds. Defaults to 9.

    Returns:
        ``str``: e.g. ``"2016-12-31T23:59:60Z"`` in UTC, or ``"1980-01-06T00:00:19Z TAI"``
    """
    if scale is None:
        scale = instant.timescale
    (year, month, day), (hour, minute, second) = _civilFields(instant, scale, max_prec)
    year_text = f"{year:04d}" if 0 <= year <= 9999 else f"{year:+05d}"
    text = f"{year_text}-{month:02d}-{day:02d}T{hour:02d}:{minute:02d}:{showFixed(second, max_prec, 2)}Z"
    if scale.name and scale.name != "UTC":
        text += f" {scale.name}"
    return text


def datetimeToInstant(date_time: datetime, scale: Timescale = TS_UTC) -> Instant:
    """Convert a ``datetime`` object to an :class:`.Instant`.

    Aware ``datetime`` objects are normalized to UTC fields first; naive ones are read as civil
    fields of `scale`.
    """
    if date_time.tzinfo is not None:
        date_time = date_time.astimezone(timezone.utc).replace(tzinfo=None)
    second = fixedContext().add(Decimal(date_time.second), Decimal(date_time.microsecond).scaleb(-6))
    return getInstant(
        date_time.year,
        date_time.month,
        date_time.day,
        date_time.hour,
        date_time.minute,
        second,
        scale=scale,
    )


def instantToDatetime(instant: Instant, scale: Timescale = TS_UTC) -> datetime:
    """Convert an :class:`.Instant` to a naive ``datetime`` of `scale`'s civil fields.

    Raises:
        ValueError: during a leap second, which ``datetime`` can't represent
    """
    (year, month, day), (hour, minute, second) = _civilFields(instant, scale, 6)
    if second >= SECS_PER_MINUTE:
        raise ValueError(f"Cannot represent leap second {isoFormat(instant, scale)} as a datetime")
    micros = int(fixedContext().multiply(second, Decimal(1000000)))
    return datetime(year, month, day, hour, minute) + timedelta(microseconds=micros)
