"""Main Module Documentation.

The top-level module is documented below, which mainly serves as a command line entry point for
converting modified Julian days between time scales.
"""

from __future__ import annotations

__version__ = "1.0.0"


def runChronoscale(
    mjd_value: str,
    scale_name: str = "UTC",
    target_name: str | None = None,
    precision: int = 9,
) -> list[str]:
    """Convert a modified Julian day of one time scale into another and report it.

    Args:
        mjd_value (``str``): modified Julian day, kept as text so no digits are lost
        scale_name (``str``, optional): name of the scale `mjd_value` is counted in. Defaults to
            ``"UTC"``.
        target_name (``str``, optional): name of the scale to report in. Defaults to ``None``,
            which reports in `scale_name`.
        precision (``int``, optional): maximum fractional digits of the seconds. Defaults to 9.

    Returns:
        ``list``: report lines, also printed to stdout
    """
    # Local Imports
    from .common.cli import getTimescale
    from .common.logger import Logger
    from .time.calendar import isoFormat
    from .time.fixed import showFixed
    from .time.julian import instantAtMJD, mjd

    logger = Logger("chronoscale")
    scale = getTimescale(scale_name)
    target = scale if target_name is None else getTimescale(target_name)

    instant = instantAtMJD(mjd_value, scale).use(target)
    logger.info(f"Converted MJD {mjd_value} {scale.name} to {target.name}")

    lines = [
        isoFormat(instant, target, precision),
        f"MJD {showFixed(mjd(instant, target), 15)} {target.name}",
        instant.show(precision),
    ]
    for line in lines:
        print(line)
    return lines


def main() -> None:
    """Time scale conversion main entry point.

    This is the function that the :command:`chronoscale` command points to. See :mod:`.cli` for
    details on what command line options are available.
    """
    # Local Imports
    from .common.cli import getCommandLineParser

    parser = getCommandLineParser()
    cli_args = parser.parse_args()

    runChronoscale(
        cli_args.mjd,
        scale_name=cli_args.scale,
        target_name=cli_args.target,
        precision=cli_args.precision,
    )
