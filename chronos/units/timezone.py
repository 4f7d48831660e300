"""Timezone lookup backed by the IANA timezone database.

Chronos names timezones by their canonical IANA identifiers
("Europe/Istanbul", "America/New_York", "UTC"). Identifiers are
resolved through :mod:`zoneinfo`; the ``tzdata`` distribution supplies
the database on systems that do not ship one.
"""

from __future__ import annotations

import zoneinfo
from datetime import tzinfo

from chronos._internal.decorators import compute_once
from chronos.errors import InvalidTimezoneError


@compute_once
def list_identifiers() -> frozenset[str]:
    """Return every timezone identifier known to the platform.

    The set is read once and cached for the life of the process.

    Returns:
        Frozen set of IANA identifiers.

    Examples:
        >>> "Europe/Istanbul" in list_identifiers()
        True
    """
    return frozenset(zoneinfo.available_timezones())


def get_zone(name: str) -> tzinfo:
    """Resolve a timezone identifier to a tzinfo.

    Args:
        name: IANA timezone identifier.

    Returns:
        The ZoneInfo for the identifier.

    Raises:
        InvalidTimezoneError: If the identifier is not known.

    Examples:
        >>> get_zone("UTC").key
        'UTC'
    """
    if not isinstance(name, str) or name not in list_identifiers():
        raise InvalidTimezoneError(f"{name!r} is not a valid timezone")
    return zoneinfo.ZoneInfo(name)


def zone_name(tz: tzinfo | None) -> str | None:
    """Return the identifier of a tzinfo, if it has one.

    ZoneInfo instances carry their key; ``datetime.timezone.utc`` maps
    to "UTC". Fixed offsets without a name return None.
    """
    if tz is None:
        return None
    key = getattr(tz, "key", None)
    if key:
        return key
    if tz.utcoffset(None) is not None and tz.utcoffset(None).total_seconds() == 0:
        return "UTC"
    return None


__all__ = ["list_identifiers", "get_zone", "zone_name"]
