from __future__ import annotations

# Standard Library Imports
import datetime

# Third Party Imports
import pytest

# chronoscale Imports
from chronoscale.common.behavioral_config import BehavioralConfig
from chronoscale.time.leapseconds import LeapSecondEntry, LeapSecondTable
from chronoscale.time.timescales import Timescale
from chronoscale.time.utc import utcTimescale


@pytest.fixture(autouse=True)
def _resetConfig() -> None:
    """Automatically start every test from the packaged default configuration.

    Note:
        Tests are free to overwrite :class:`.BehavioralConfig` values, the shared instance is
        thrown away afterwards.
    """
    BehavioralConfig.resetConfig()
    yield
    BehavioralConfig.resetConfig()


@pytest.fixture(name="negative_leap_table")
def getNegativeLeapTable() -> LeapSecondTable:
    """Return a table whose only change removes a second at the end of 2000-06-30."""
    return LeapSecondTable(
        [
            LeapSecondEntry.fromDate(datetime.date(2000, 1, 1), 10),
            LeapSecondEntry.fromDate(datetime.date(2000, 7, 1), 9),
        ],
    )


@pytest.fixture(name="negative_leap_scale")
def getNegativeLeapScale(negative_leap_table: LeapSecondTable) -> Timescale:
    """Return a UTC-like scale that loses a second at the end of 2000-06-30."""
    return utcTimescale("NEGUTC", table=negative_leap_table)


@pytest.fixture(name="double_leap_scale")
def getDoubleLeapScale() -> Timescale:
    """Return a UTC-like scale that inserts two seconds at the end of 2000-06-30."""
    table = LeapSecondTable(
        [
            LeapSecondEntry.fromDate(datetime.date(2000, 1, 1), 10),
            LeapSecondEntry.fromDate(datetime.date(2000, 7, 1), 12),
        ],
    )
    return utcTimescale("DBLUTC", table=table)
