"""Module defining how to retrieve leap-second tables from various sources."""

from __future__ import annotations

# Standard Library Imports
from collections import namedtuple
from typing import TYPE_CHECKING

# Local Imports
from ...common.behavioral_config import BehavioralConfig
from .loaders import LocalDotDatLeapSecondLoader, ModuleDotDatLeapSecondLoader

# Type Checking Imports
if TYPE_CHECKING:
    # Local Imports
    from . import LeapSecondTable
    from .loaders import LeapSecondLoader


LoaderTag = namedtuple("LoaderTag", ("loader_name", "loader_location"))
"""NamedTuple: Tag used to identify different :class:`.LeapSecondLoader`'s."""

_LOADER_MAP: dict[str, type[LeapSecondLoader]] = {
    "ModuleDotDatLeapSecondLoader": ModuleDotDatLeapSecondLoader,
    "LocalDotDatLeapSecondLoader": LocalDotDatLeapSecondLoader,
}
"""dict[str, LeapSecondLoader]: Maps loader class names to loader class references."""

_LEAP_SECOND_LOADERS: dict[LoaderTag, LeapSecondLoader] = {}
"""dict[LoaderTag, LeapSecondLoader]: Stores configured loaders based on tag."""


def _loadLoader(loader_name: str | None = None, loader_location: str | None = None):
    """Return leap-second loader specified by `loader_name` and `loader_location`.

    Args:
        loader_name (str, optional): Name of the concrete :class:`.LeapSecondLoader` to use.
        loader_location (str, optional): Location that the specified :class:`.LeapSecondLoader`
            will load leap-second data from.

    Returns:
        LeapSecondLoader: loader specified by `loader_name` and `loader_location`.
    """
    behave_config = BehavioralConfig.getConfig()
    if loader_name is None:
        loader_name = behave_config.leapseconds.LoaderName

    if loader_location is None:
        loader_location = behave_config.leapseconds.LoaderLocation

    tag = LoaderTag(loader_name, loader_location)
    loader = _LEAP_SECOND_LOADERS.get(tag)
    if not loader:
        try:
            loader = _LOADER_MAP[loader_name](loader_location)
        except KeyError:
            err = f"Specified loader '{loader_name}' is undefined"
            raise ValueError(err)  # noqa: B904
        _LEAP_SECOND_LOADERS[tag] = loader
    return loader


def getLeapSecondTable(
    loader_name: str | None = None,
    loader_location: str | None = None,
) -> LeapSecondTable:
    """Return the :class:`.LeapSecondTable` provided by the configured loader.

    Args:
        loader_name (str, optional): Name of the concrete :class:`.LeapSecondLoader` to use.
        loader_location (str, optional): Location that the specified :class:`.LeapSecondLoader`
            will load leap-second data from.

    See Also:
        Default values obtained from the IERS Bulletin C history.

    Returns:
        :class:`.LeapSecondTable`: the loaded leap-second table.
    """
    loader = _loadLoader(loader_name, loader_location)
    return loader.getTable()
