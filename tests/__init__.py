"""Configure importable things that aren't pytest fixtures."""

from __future__ import annotations

# Standard Library Imports
from decimal import Decimal
from pathlib import Path

# chronoscale Imports
from chronoscale.time.duration import Duration
from chronoscale.time.instant import Instant

# Common file paths
FIXTURE_DATA_DIR = Path(__file__).parent / "datafiles"
LEAP_SECONDS_DAT = Path("dat/leap_seconds.dat")
EMPTY_DAT = Path("dat/empty.dat")
INVALID_DAT = Path("dat/invalid.dat")
SHORT_ROWS_DAT = Path("dat/short_rows.dat")

# Common UTC timestamps, seconds since 2000-01-01T00:00:00 UTC
UTC_2017_START = Decimal(536544000)
"""Decimal: 2017-01-01T00:00:00 UTC, right after the most recent inserted leap second."""

UTC_2016_END = UTC_2017_START - 1
"""Decimal: 2016-12-31T23:59:59 UTC."""

TCG_TOLERANCE = Duration("1e-12")
"""Duration: conversions through TCG are exact only to the working precision."""


def assertSameInstant(first: Instant, second: Instant, tolerance: Duration | None = None) -> None:
    """Assert that two instants denote the same physical instant, within `tolerance` if given."""
    if tolerance is None:
        assert first == second, f"{first!r} != {second!r}"
    else:
        assert abs(first - second) <= tolerance, f"{first!r} !~ {second!r}"
