"""Calendar units and enumerations.

This module provides:
    - TimeUnit: Calendar units (YEAR, MONTH, DAY, HOUR, MINUTE, SECOND)
    - Day: Named weekdays with translation
    - Month: Named months with translation
    - Timezone lookup against the IANA database
"""

from __future__ import annotations

from chronos.units.day import Day
from chronos.units.month import Month
from chronos.units.timeunit import TimeUnit
from chronos.units.timezone import get_zone, list_identifiers

__all__: list[str] = [
    "Day",
    "Month",
    "TimeUnit",
    "get_zone",
    "list_identifiers",
]
