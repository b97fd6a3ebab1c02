"""Julian-day bridge: conversions between :class:`.Instant` and (modified) Julian days.

Days are classified purely by the scale's declared day length. For scales without leap seconds a
day is always 86400 seconds and the conversion is a plain scaling. On a UTC day that contains a
leap second the fraction of the day is scaled by the *actual* day length, so that the fraction
stays within [0, 1) while 23:59:60 elapses, and no second is produced on a day that lost one.

References:
    #. :cite:t:`vallado_2013_astro`, Section 3.5.1
"""

from __future__ import annotations

# Standard Library Imports
from decimal import Decimal
from typing import TYPE_CHECKING

# Third Party Imports
import numpy as np

# Local Imports
from ..common.logger import chronoscaleLogWarning
from .constants import JD_EPOCH_DELTA, MJD_EPOCH_DELTA, SECS_PER_DAY
from .fixed import FIXED_ZERO, fixedContext, floorDivMod, floorFixed, toFixed
from .instant import Instant
from .timescales import TS_TAI, TS_TT
from .timestamp import Timestamp

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Iterable

    # Local Imports
    from .duration import Duration
    from .timescales import Timescale

J2000_JD = Decimal(2451545)
"""``Decimal``: Julian day of the J2000.0 epoch, 2000-01-01T12:00:00."""

DAYS_PER_JULIAN_CENTURY = Decimal(36525)


def mjd(instant: Instant, scale: Timescale, delta: Duration | None = None) -> Decimal:
    """Return the modified Julian day of `instant` in `scale`.

    Args:
        instant (:class:`.Instant`): instant to convert
        scale (:class:`.Timescale`): scale whose days are counted
        delta (:class:`.Duration`, optional): span added before splitting into days, e.g. to
            count days from a shifted day boundary. Defaults to ``None``.

    Returns:
        ``Decimal``: days since 1858-11-17T00:00:00 of `scale`
    """
    ctx = fixedContext()
    stamp = instant.timestamp(scale)
    if delta is not None:
        stamp = stamp + delta
    epoch = scale.y2k_epoch.since
    day_secs = scale.secondsInDay(stamp)

    if day_secs == SECS_PER_DAY:
        days = ctx.divide(ctx.subtract(stamp.totalSeconds(), epoch), Decimal(SECS_PER_DAY))
        return ctx.add(days, MJD_EPOCH_DELTA)

    secs, leap = stamp.splitLeap()
    days, remainder = floorDivMod(ctx.subtract(secs, epoch), SECS_PER_DAY)
    days = ctx.add(days, MJD_EPOCH_DELTA)
    frac = ctx.divide(ctx.add(remainder, Decimal(leap)), day_secs)
    value = ctx.add(days, frac)
    next_day = ctx.add(days, Decimal(1))
    if value >= next_day:
        chronoscaleLogWarning(
            f"Seconds into day {remainder}+{leap} exceed day length {day_secs} in {scale.name}",
        )
        value = ctx.next_minus(next_day)
    return value


def instantAtMJD(mjd_value, scale: Timescale) -> Instant:
    """Return the instant at modified Julian day `mjd_value` of `scale`; the inverse of :func:`.mjd`.

    Args:
        mjd_value (``int | float | str | Decimal``): modified Julian day
        scale (:class:`.Timescale`): scale whose days are counted

    Returns:
        :class:`.Instant`: instant expressed in `scale`
    """
    ctx = fixedContext()
    rel_days = ctx.subtract(toFixed(mjd_value), MJD_EPOCH_DELTA)
    epoch = scale.y2k_epoch.since
    trial = Timestamp(ctx.add(epoch, ctx.multiply(rel_days, Decimal(SECS_PER_DAY))))
    day_secs = scale.secondsInDay(trial)
    if day_secs == SECS_PER_DAY:
        return Instant(trial, scale)

    days = floorFixed(rel_days)
    secs = ctx.multiply(ctx.subtract(rel_days, days), day_secs)
    whole = floorFixed(secs)
    frac = ctx.subtract(secs, whole)

    last_second = day_secs - 1
    if whole > last_second or whole < 0:
        chronoscaleLogWarning(f"Seconds into day {whole} outside a {day_secs}s day in {scale.name}")
        whole = min(max(whole, FIXED_ZERO), floorFixed(last_second))

    # Seconds past 23:59:59 are inserted leap seconds
    leap = 0
    if whole > SECS_PER_DAY - 1:
        leap = int(whole) - (SECS_PER_DAY - 1)
        whole = Decimal(SECS_PER_DAY - 1)

    base = ctx.add(epoch, ctx.multiply(days, Decimal(SECS_PER_DAY)))
    since = ctx.add(ctx.add(base, whole), frac)
    return Instant(Timestamp(since).addLeapSeconds(leap), scale)


def jd(instant: Instant, scale: Timescale, delta: Duration | None = None) -> Decimal:
    """Return the Julian day of `instant` in `scale`."""
    return fixedContext().add(mjd(instant, scale, delta), JD_EPOCH_DELTA)


def instantAtJD(jd_value, scale: Timescale) -> Instant:
    """Return the instant at Julian day `jd_value` of `scale`."""
    return instantAtMJD(fixedContext().subtract(toFixed(jd_value), JD_EPOCH_DELTA), scale)


def julianCenturies(instant: Instant, scale: Timescale = TS_TT) -> Decimal:
    """Return the Julian centuries of `scale` elapsed since J2000.0.

    References:
        :cite:t:`vallado_2013_astro`, Section 3.5.5, Eq. 3-42
    """
    ctx = fixedContext()
    return ctx.divide(ctx.subtract(jd(instant, scale), J2000_JD), DAYS_PER_JULIAN_CENTURY)


def mjdArray(instants: Iterable[Instant], scale: Timescale = TS_TAI) -> np.ndarray:
    """Return the modified Julian days of `instants` as a ``float64`` array.

    Note:
        ``float64`` resolves roughly 10 microseconds at present day MJDs; keep the ``Decimal``
        values from :func:`.mjd` where more is needed.
    """
    return np.array([float(mjd(instant, scale)) for instant in instants], dtype=np.float64)
