"""Contains classes and conversion functions for different definitions of time.

Every point in time is an :class:`.Instant`: a fixed-point :class:`.Timestamp` paired with the
:class:`.Timescale` it is relative to. All scales count from 2000-01-01T00:00:00 in their own
reckoning and convert through TAI, so instants in different scales compare and subtract directly.
"""

from __future__ import annotations

# Local Imports
from .calendar import datetimeToInstant, getInstant, instantToDatetime, isoFormat
from .duration import DURATION_ZERO, Duration
from .instant import EPOCH, Instant, Order, instantSinceEpoch
from .julian import instantAtJD, instantAtMJD, jd, julianCenturies, mjd, mjdArray
from .timescales import TS_GPS, TS_TAI, TS_TCG, TS_TT, Timescale, convert, taiTimescale, timescale
from .timestamp import TIMESTAMP_ZERO, Timestamp
from .utc import TS_UNIX, TS_UTC, utcTimescale

__all__ = [
    "DURATION_ZERO",
    "EPOCH",
    "TIMESTAMP_ZERO",
    "TS_GPS",
    "TS_TAI",
    "TS_TCG",
    "TS_TT",
    "TS_UNIX",
    "TS_UTC",
    "Duration",
    "Instant",
    "Order",
    "Timescale",
    "Timestamp",
    "convert",
    "datetimeToInstant",
    "getInstant",
    "instantAtJD",
    "instantAtMJD",
    "instantSinceEpoch",
    "instantToDatetime",
    "isoFormat",
    "jd",
    "julianCenturies",
    "mjd",
    "mjdArray",
    "taiTimescale",
    "timescale",
    "utcTimescale",
]
