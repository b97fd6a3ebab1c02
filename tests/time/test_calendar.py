from __future__ import annotations

# Standard Library Imports
from datetime import datetime, timedelta, timezone
from decimal import Decimal

# Third Party Imports
import pytest

# chronoscale Imports
from chronoscale.time.calendar import datetimeToInstant, getInstant, instantToDatetime, isoFormat
from chronoscale.time.duration import Duration
from chronoscale.time.instant import EPOCH, Instant
from chronoscale.time.julian import instantAtJD
from chronoscale.time.timescales import TS_GPS, TS_TAI, TS_TT, Timescale
from chronoscale.time.timestamp import Timestamp
from chronoscale.time.utc import TS_UNIX, TS_UTC

# Local Imports
from .. import UTC_2016_END, UTC_2017_START


def testGPSEpoch():
    """Test that the GPS epoch is 19 seconds into its day in TAI."""
    gps_epoch = getInstant(1980, 1, 6, scale=TS_GPS)
    assert gps_epoch.since == Timestamp(0)
    assert isoFormat(gps_epoch) == "1980-01-06T00:00:00Z GPS"
    assert isoFormat(gps_epoch, TS_TAI) == "1980-01-06T00:00:19Z TAI"
    assert isoFormat(gps_epoch, TS_UTC) == "1980-01-06T00:00:00Z"


def testGlobalEpoch():
    """Test the global epoch rendered in different scales."""
    assert isoFormat(EPOCH) == "2000-01-01T00:00:00Z TAI"
    assert isoFormat(EPOCH, TS_UTC) == "1999-12-31T23:59:28Z"
    assert isoFormat(EPOCH, TS_TT) == "2000-01-01T00:00:32.184Z TT"
    assert isoFormat(EPOCH, TS_UNIX) == "1999-12-31T23:59:28Z UNIX"
    assert getInstant(2000, 1, 1, scale=TS_TAI) == EPOCH


def testJ2000():
    """Test that J2000.0 is noon of 2000-01-01 in TT."""
    j2000 = instantAtJD(2451545, TS_TT)
    assert j2000 == getInstant(2000, 1, 1, 12, scale=TS_TT)
    assert isoFormat(j2000) == "2000-01-01T12:00:00Z TT"
    assert isoFormat(j2000, TS_UTC) == "2000-01-01T11:58:55.816Z"


def testThroughLeapSecond():
    """Test stepping one second at a time through the 2016 leap second."""
    last_second = getInstant(2016, 12, 31, 23, 59, 59)
    assert last_second.since == Timestamp(UTC_2016_END)

    expected = [
        "2016-12-31T23:59:59Z",
        "2016-12-31T23:59:60Z",
        "2017-01-01T00:00:00Z",
        "2017-01-01T00:00:01Z",
    ]
    for step, text in enumerate(expected):
        # Non-TAI instants come back from arithmetic in TAI
        assert isoFormat((last_second + Duration(step)).use(TS_UTC)) == text


def testLeapSecondFields():
    """Test reading and writing the seconds field of a leap second."""
    leap = getInstant(2016, 12, 31, 23, 59, 60)
    assert leap.since == Timestamp(UTC_2016_END, leap=1)
    assert leap - getInstant(2016, 12, 31, 23, 59, 59) == Duration(1)
    assert getInstant(2017, 1, 1) - leap == Duration(1)

    half = getInstant(2016, 12, 31, 23, 59, "60.5")
    assert half.since == Timestamp(UTC_2016_END + Decimal("0.5"), leap=1)
    assert isoFormat(half) == "2016-12-31T23:59:60.5Z"
    assert isoFormat(half, TS_TAI) == "2017-01-01T00:00:36.5Z TAI"


def testRoundingNearLeapSecond():
    """Test that rounding never skips or wraps the leap second."""
    late_leap = Instant(Timestamp(UTC_2016_END + Decimal("0.9996"), leap=1), TS_UTC)
    assert isoFormat(late_leap, max_prec=3) == "2016-12-31T23:59:60.999Z"

    late_59 = Instant(Timestamp(UTC_2016_END + Decimal("0.9996")), TS_UTC)
    assert isoFormat(late_59, max_prec=3) == "2016-12-31T23:59:60Z"

    # Ordinary days round over into the next one
    late_day = Instant(Timestamp(UTC_2017_START + 86400 - Decimal("0.0004")), TS_UTC)
    assert isoFormat(late_day, max_prec=3) == "2017-01-02T00:00:00Z"


def testLeapSecondBeforeEpoch():
    """Test that leap seconds before 2000 truncate within their own day."""
    leap = getInstant(1998, 12, 31, 23, 59, "60.99996")
    assert leap.since == Timestamp(Decimal("-31536000.00004"), leap=1)
    assert isoFormat(leap, max_prec=3) == "1998-12-31T23:59:60.999Z"
    assert isoFormat(leap, max_prec=0) == "1998-12-31T23:59:60Z"
    assert isoFormat(getInstant(1972, 6, 30, 23, 59, "60.5"), max_prec=0) == "1972-06-30T23:59:60Z"
    with pytest.raises(ValueError, match="leap second"):
        instantToDatetime(leap)


def testLeapSecondsOnlyEndLongDays(double_leap_scale: Timescale, negative_leap_scale: Timescale):
    """Test which days accept seconds of 60 and above."""
    first = getInstant(2000, 6, 30, 23, 59, 60, scale=double_leap_scale)
    second = getInstant(2000, 6, 30, 23, 59, "61.25", scale=double_leap_scale)
    assert second - first == Duration("1.25")
    assert isoFormat(second) == "2000-06-30T23:59:61.25Z DBLUTC"
    with pytest.raises(ValueError, match="Second"):
        getInstant(2000, 6, 30, 23, 59, 62, scale=double_leap_scale)
    with pytest.raises(ValueError, match="Second"):
        getInstant(2000, 6, 30, 23, 59, 60, scale=negative_leap_scale)


def testFractionalSeconds():
    """Test rendering of fractional seconds."""
    instant = getInstant(2000, 1, 1, 0, 0, "1.123456789123", scale=TS_TAI)
    assert isoFormat(instant) == "2000-01-01T00:00:01.123456789Z TAI"
    assert isoFormat(instant, max_prec=2) == "2000-01-01T00:00:01.12Z TAI"
    assert isoFormat(instant, max_prec=-1) == "2000-01-01T00:00:01.123456789123Z TAI"
    assert isoFormat(getInstant(2000, 1, 1, 0, 0, 0.25)) == "2000-01-01T00:00:00.25Z"


def testYearsOutsideFourDigits():
    """Test signed years outside 0000-9999."""
    assert isoFormat(getInstant(10000, 1, 1, scale=TS_TAI)) == "+10000-01-01T00:00:00Z TAI"
    assert isoFormat(getInstant(-1, 12, 31, scale=TS_TAI)) == "-0001-12-31T00:00:00Z TAI"
    assert isoFormat(getInstant(0, 2, 29, scale=TS_TAI)) == "0000-02-29T00:00:00Z TAI"


@pytest.mark.parametrize(
    ("fields", "scale", "message"),
    [
        ((2017, 13, 1), TS_UTC, "Month"),
        ((2017, 0, 1), TS_UTC, "Month"),
        ((2017, 2, 29), TS_UTC, "Day"),
        ((2016, 2, 30), TS_UTC, "Day"),
        ((2017, 1, 1, 24), TS_UTC, "Hour"),
        ((2017, 1, 1, 0, 60), TS_UTC, "Minute"),
        ((2017, 1, 1, 0, 0, 60), TS_GPS, "Second"),
        ((2017, 1, 1, 0, 0, 61), TS_UTC, "Second"),
        ((2017, 1, 1, 0, 0, -1), TS_TAI, "Second"),
        ((2016, 6, 15, 12, 0, 60), TS_UTC, "Second"),
        ((2016, 12, 31, 23, 58, 60), TS_UTC, "Second"),
        ((2016, 6, 30, 23, 59, 60), TS_UTC, "Second"),
        ((2016, 12, 31, 23, 59, 61), TS_UTC, "Second"),
    ],
)
def testGetInstantValidation(fields: tuple, scale, message: str):
    """Test that out of range fields are rejected."""
    with pytest.raises(ValueError, match=message):
        getInstant(*fields, scale=scale)


def testDatetimeConversions():
    """Test conversion to and from ``datetime`` objects."""
    naive = datetime(2016, 12, 31, 23, 59, 59, 500000)
    instant = datetimeToInstant(naive)
    assert instant.since == Timestamp(UTC_2016_END + Decimal("0.5"))
    assert instantToDatetime(instant) == naive

    aware = datetime(2017, 1, 1, 1, 0, 0, tzinfo=timezone(timedelta(hours=1)))
    assert datetimeToInstant(aware) == getInstant(2017, 1, 1)

    gps = datetimeToInstant(datetime(1980, 1, 6), TS_GPS)
    assert gps.since == Timestamp(0)
    assert instantToDatetime(gps, TS_TAI) == datetime(1980, 1, 6, 0, 0, 19)


def testDatetimeRejectsLeapSecond():
    """Test that a leap second can't become a ``datetime``."""
    with pytest.raises(ValueError, match="leap second"):
        instantToDatetime(getInstant(2016, 12, 31, 23, 59, 60))
