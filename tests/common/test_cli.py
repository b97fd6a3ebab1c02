from __future__ import annotations

# Third Party Imports
import pytest

# chronoscale Imports
from chronoscale import runChronoscale
from chronoscale.common import cli
from chronoscale.common.exceptions import UnknownTimescaleError
from chronoscale.time.timescales import TS_GPS
from chronoscale.time.utc import TS_UTC


def validateArgs(args):
    """Wrap `parser.parseargs()` to catch `SystemExit` for easier unit testing."""
    try:
        parser = cli.getCommandLineParser()
        parser.parse_args(args)
        return True
    except SystemExit:
        return False


def testMJDArgument():
    """Test valid and invalid modified Julian days."""
    assert validateArgs(["57753"]) is True
    assert validateArgs(["57753.999988425925"]) is True
    assert validateArgs(["-12.5"]) is True
    assert validateArgs(["fifty"]) is False
    assert validateArgs(["inf"]) is False
    assert validateArgs([]) is False


def testScaleArguments():
    """Test valid and invalid time scale names."""
    assert validateArgs(["57753", "-s", "GPS"]) is True
    assert validateArgs(["57753", "--scale", "tt", "--to", "TCG"]) is True
    assert validateArgs(["57753", "-t", "unix"]) is True
    assert validateArgs(["57753", "-s", "LST"]) is False
    assert validateArgs(["57753", "-t", "LST"]) is False


def testParsedValues():
    """Test that parsed values are normalized."""
    parser = cli.getCommandLineParser()
    args = parser.parse_args(["57753.5", "-s", "gps", "-p", "3"])
    assert args.mjd == "57753.5"
    assert args.scale == "GPS"
    assert args.target is None
    assert args.precision == 3


def testGetTimescale():
    """Test lookup of the predefined time scales."""
    assert cli.getTimescale("UTC") is TS_UTC
    assert cli.getTimescale("gps") is TS_GPS
    with pytest.raises(UnknownTimescaleError, match="expected one of"):
        cli.getTimescale("LST")
    # Unknown names are also plain key errors
    with pytest.raises(KeyError):
        cli.getTimescale("")


def testRunChronoscale(capsys: pytest.CaptureFixture):
    """Test a full conversion of the last UTC midnight before the 2017 leap second."""
    lines = runChronoscale("57753", scale_name="UTC", target_name="TAI", precision=3)
    assert lines[0] == "2016-12-31T00:00:36Z TAI"
    assert lines[1] == "MJD 57753.000416666666667 TAI"
    assert lines[2] == "536457636s"

    captured = capsys.readouterr()
    assert captured.out.splitlines()[:3] == lines


def testRunChronoscaleSameScale(capsys: pytest.CaptureFixture):
    """Test that the report defaults to the input scale."""
    lines = runChronoscale("51544.5", scale_name="GPS")
    assert lines[0] == "2000-01-01T12:00:00Z GPS"
    assert lines[1] == "MJD 51544.5 GPS"
    assert lines[2] == "43219s GPS"
    capsys.readouterr()
