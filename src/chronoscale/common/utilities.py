"""Various helper functions that are used across multiple modules."""

from __future__ import annotations

# Standard Library Imports
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING

# Local Imports
from .logger import chronoscaleLogError

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Callable
    from os import PathLike
    from typing import Any


def loadDatFile(
    file_name: str | PathLike,
    delim: str | None = None,
    convert: Callable[[str], Any] = Decimal,
    comment: str = "#",
) -> list[list[Any]]:
    """Load the corresponding dat file.

    Note:
        Values are parsed exactly by default, via ``Decimal``, so that tabulated offsets keep
        every digit written in the file.

    Args:
        file_name (``str``): name of dat file to load
        delim (``str``, optional): delimiter character to separate data on same line. Defaults to
            ``None``, which removes all whitespace between values.
        convert (``callable``, optional): parser applied to each value. Defaults to ``Decimal``.
        comment (``str``, optional): lines starting with this prefix, and blank lines, are skipped.

    Raises:
        ``FileNotFoundError``: helps with debugging bad filenames
        ``ValueError``: error parsing dat file, likely because values aren't convertible
        ``IOError``: valid dat file is empty

    Returns:
        ``list``: nested list of parsed values of each row
    """
    try:
        with open(file_name, encoding="utf-8") as data_file:
            data = [
                [convert(x) for x in line.split(sep=delim)]
                for line in data_file
                if line.strip() and not line.lstrip().startswith(comment)
            ]
    except FileNotFoundError as err:
        msg = f"Could not find DAT file: {file_name}"
        chronoscaleLogError(msg)
        raise err
    except (ValueError, InvalidOperation) as err:
        msg = f"Parsing error reading DAT file: {file_name}"
        chronoscaleLogError(msg)
        raise ValueError(msg) from err

    if not data:
        msg = f"Empty DAT file: {file_name}"
        chronoscaleLogError(msg)
        raise OSError(msg)

    return data
