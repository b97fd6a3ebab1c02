"""Define the command line interface for the chronoscale conversion tool."""

from __future__ import annotations

# Standard Library Imports
import argparse
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING

# Local Imports
from .exceptions import UnknownTimescaleError
from .logger import chronoscaleLogError

# Type Checking Imports
if TYPE_CHECKING:
    # Local Imports
    from ..time.timescales import Timescale


def _timescaleMap() -> dict[str, Timescale]:
    # Local Imports
    from ..time.timescales import TS_GPS, TS_TAI, TS_TCG, TS_TT
    from ..time.utc import TS_UNIX, TS_UTC

    return {scale.name: scale for scale in (TS_TAI, TS_UTC, TS_GPS, TS_TT, TS_TCG, TS_UNIX)}


def getTimescale(name: str) -> Timescale:
    """Look up one of the predefined time scales by name, case insensitively.

    Raises:
        UnknownTimescaleError: if no predefined scale has that name
    """
    scales = _timescaleMap()
    try:
        return scales[name.upper()]
    except KeyError as err:
        chronoscaleLogError(f"Unknown time scale: {name!r}")
        err_msg = f"Unknown time scale {name!r}, expected one of: {', '.join(scales)}"
        raise UnknownTimescaleError(err_msg) from err


def mjdChecker(value: str) -> str:
    """Checks for valid modified Julian days passed to the CLI parser.

    Args:
        value (``str``): MJD given to CLI parser.

    Raises:
        argparse.ArgumentTypeError: if `value` isn't a finite decimal number

    Returns:
        ``str``: the unchanged MJD text
    """
    try:
        valid = Decimal(value).is_finite()
    except InvalidOperation:
        valid = False
    if not valid:
        chronoscaleLogError("Bad MJD given to CLI")
        raise argparse.ArgumentTypeError(f"not a decimal number: {value!r}")
    return value


def scaleChecker(value: str) -> str:
    """Checks for time scale names passed to the CLI parser."""
    try:
        return getTimescale(value).name
    except UnknownTimescaleError as err:
        raise argparse.ArgumentTypeError(err.args[0]) from err


def getCommandLineParser():
    """Create parser for command line arguments.

    Returns:
        ``argparse.ArgumentParser``: valid parser object
    """
    parser = argparse.ArgumentParser(description="chronoscale Command Line Interface")

    parser.add_argument(
        "mjd",
        metavar="MJD",
        type=mjdChecker,
        help="Modified Julian day to convert",
    )

    parser.add_argument(
        "-s",
        "--scale",
        dest="scale",
        metavar="SCALE",
        default="UTC",
        type=scaleChecker,
        help="Time scale MJD is counted in. DEFAULT: UTC",
    )

    parser.add_argument(
        "-t",
        "--to",
        dest="target",
        metavar="SCALE",
        default=None,
        type=scaleChecker,
        help="Time scale to report in. DEFAULT: same as --scale",
    )

    parser.add_argument(
        "-p",
        "--precision",
        dest="precision",
        metavar="DIGITS",
        default=9,
        type=int,
        help="Maximum fractional digits of the seconds. DEFAULT: 9",
    )

    return parser
