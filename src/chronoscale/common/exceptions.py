"""Contains all the custom-defined exceptions used in chronoscale."""

from __future__ import annotations


class LeapSecondTableError(Exception):
    """Exception indicating a leap-second table is malformed."""


class UnknownTimescaleError(KeyError):
    """Exception indicating a time scale name doesn't match any well-known time scale."""
