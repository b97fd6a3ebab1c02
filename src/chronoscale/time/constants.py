"""Time constants shared by the time scale, instant and Julian-day modules.

All values are exact ``Decimal`` or ``int`` values so that they never introduce binary
floating point error into timestamp arithmetic.

References:
    #. IERS Conventions (2010), Chapter 10
    #. IAU 2000 Resolution B1.9 (definition of TT and TCG)
"""

from __future__ import annotations

# Standard Library Imports
from decimal import Decimal

# Day conversion constants
SECS_PER_MINUTE = 60
SECS_PER_HOUR = 3600
SECS_PER_DAY = 86400
"""``int``: SI seconds in an ordinary (solar) day, without leap seconds."""

MJD_EPOCH_DELTA = Decimal(51544)
"""``Decimal``: modified Julian day of the global epoch, 2000-01-01T00:00:00."""

JD_EPOCH_DELTA = Decimal("2400000.5")
"""``Decimal``: difference between a Julian day and a modified Julian day."""

# GPS constants
GPS_TAI_OFFSET = Decimal(-19)
"""``Decimal``: GPS time minus TAI, in seconds."""

GPS_Y2K_EPOCH = Decimal(630720000)
"""``Decimal``: GPS timestamp of 2000-01-01T00:00:00 GPS, counted from 1980-01-06T00:00:00 GPS."""

# Terrestrial & geocentric coordinate time constants
TT_TAI_OFFSET = Decimal("32.184")
"""``Decimal``: TT minus TAI, in seconds."""

TCG_RATE = Decimal("6.969290134e-10")
"""``Decimal``: :math:`L_G`, the defining rate between TCG and TT."""

TCG_TT_EPOCH = Decimal(-725760000) + TT_TAI_OFFSET
"""``Decimal``: TT timestamp of 1977-01-01T00:00:32.184 TT, where TCG and TT coincide."""

# Unix constants
UNIX_Y2K_EPOCH = Decimal(946684800)
"""``Decimal``: Unix-time timestamp of 2000-01-01T00:00:00 UTC."""
