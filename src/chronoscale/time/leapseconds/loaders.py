"""Module defining the infrastructure used to retrieve leap-second tables from various sources."""

from __future__ import annotations

# Standard Library Imports
import datetime
from abc import ABC, abstractmethod
from importlib import resources
from pathlib import Path

# Local Imports
from ...common.logger import chronoscaleLogInfo
from ...common.utilities import loadDatFile
from . import LeapSecondEntry, LeapSecondTable


class LeapSecondLoader(ABC):
    """Abstract class defining how leap-second tables should be loaded."""

    def __init__(self, location: str):
        """Initializes the loader.

        Args:
            location (str): Specifies where the leap-second content to load is located.
        """
        self._location: str = location
        self._table: LeapSecondTable | None = None

    def getTable(self) -> LeapSecondTable:
        """Return the loaded :class:`.LeapSecondTable`, loading it on first use."""
        if self._table is None:
            self.load()
        return self._table

    @abstractmethod
    def load(self):
        """Load the leap-second content into local memory.

        A concrete implementation of this method should set :attr:`._table`.
        """
        raise NotImplementedError


class DotDatLeapSecondLoader(LeapSecondLoader, ABC):
    """Abstract interface defining how to properly load a '.dat' leap-second data file."""

    def _parseDatData(self, raw_data: list[list]):
        """Loads the specified `raw_data` into local memory.

        Args:
            raw_data (list[list]): leap-second file contents parsed using :meth:`.loadDatFile()`,
                one ``[year, month, day, tai_minus_utc]`` row per entry.
        """
        entries = []
        for row in raw_data:
            if len(row) != 4:
                err = f"Leap-second rows need 4 columns, got {len(row)}: {row}"
                raise ValueError(err)
            entry_date = datetime.date(int(row[0]), int(row[1]), int(row[2]))
            entries.append(LeapSecondEntry.fromDate(entry_date, row[3]))

        self._table = LeapSecondTable(entries)
        chronoscaleLogInfo(
            f"Loaded {len(self._table)} leap-second entries from {self._location!r}, "
            f"{self._table.earliestDate()} to {self._table.latestDate()}",
        )


class ModuleDotDatLeapSecondLoader(DotDatLeapSecondLoader):
    """Concrete class defining how leap seconds should be loaded as a Python module resource."""

    DATA_MODULE: str = "chronoscale.time.data"
    """``str``: defines leap-second data module location."""

    def load(self) -> None:
        """Loads the leap-second resources."""
        res = resources.files(self.DATA_MODULE).joinpath(self._location)
        with resources.as_file(res) as file_resource:
            raw_data = loadDatFile(file_resource)
        self._parseDatData(raw_data)


class LocalDotDatLeapSecondLoader(DotDatLeapSecondLoader):
    """Concrete class defining how leap seconds should be loaded from a local '.dat' file."""

    def __init__(self, location: str) -> None:
        """Initializes the loader.

        Args:
            location (str): Specifies where the leap-second content to load is located.
        """
        super().__init__(location)
        self._path = Path(self._location)

    def load(self) -> None:
        """Load the leap-second content into local memory."""
        raw_data = loadDatFile(self._path)
        self._parseDatData(raw_data)
