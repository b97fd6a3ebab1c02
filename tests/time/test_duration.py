from __future__ import annotations

# Standard Library Imports
from datetime import timedelta
from decimal import Decimal

# Third Party Imports
import pytest

# chronoscale Imports
from chronoscale.time.duration import DURATION_ZERO, Duration


def testConstruction():
    """Test that durations are built exactly from every numeric form."""
    assert Duration(1).seconds == Decimal(1)
    assert Duration("0.1").seconds == Decimal("0.1")
    assert Duration(0.1).seconds == Decimal("0.1")
    assert Duration(Duration(3)) == Duration(3)
    assert Duration() == DURATION_ZERO
    with pytest.raises(TypeError):
        Duration(None)


def testArithmetic():
    """Test arithmetic with durations and scalars."""
    one = Duration(1)
    half = Duration("0.5")
    assert one + half == Duration("1.5")
    assert one - half == half
    assert -one == Duration(-1)
    assert +one is one
    assert abs(Duration(-2)) == Duration(2)
    assert one * 3 == Duration(3)
    assert 3 * one == Duration(3)
    assert one / 4 == Duration("0.25")
    assert one / half == Decimal(2)
    # Ten additions of 0.1 are exact
    total = DURATION_ZERO
    for _ in range(10):
        total += Duration("0.1")
    assert total == one


def testRejectsScalars():
    """Test that durations and bare numbers don't mix additively."""
    with pytest.raises(TypeError):
        Duration(1) + 1
    with pytest.raises(TypeError):
        Duration(1) * Duration(1)


def testOrderingAndHash():
    """Test ordering, truthiness and hashing."""
    assert Duration(-1) < DURATION_ZERO < Duration("1e-30")
    assert max(Duration(2), Duration(5), Duration(3)) == Duration(5)
    assert not DURATION_ZERO
    assert Duration(1)
    assert len({Duration(1), Duration("1.0"), Duration(2)}) == 2
    assert Duration(1) != 1


def testTimedelta():
    """Test conversion to and from ``datetime.timedelta``."""
    delta = timedelta(days=1, seconds=1, microseconds=500)
    duration = Duration.fromTimedelta(delta)
    assert duration == Duration("86401.0005")
    assert duration.toTimedelta() == delta
    assert Duration.fromTimedelta(timedelta(microseconds=-1)) == Duration("-0.000001")


def testStrings():
    """Test the text representations."""
    assert str(Duration("1.50")) == "1.5s"
    assert str(Duration(-60)) == "-60s"
    assert repr(Duration(2)) == "Duration(2 seconds)"
    assert float(Duration("0.25")) == 0.25
