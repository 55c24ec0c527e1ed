"""Adapter over the date/time collaborators: clock, zone lookup, civil time.

Rules keep their start as a *civil* timestamp: a naive ``datetime`` holding
the UTC wall-clock reading of the instant. Iteration binds that civil value
to the rule's zone, producing an aware ``datetime`` that resolves its own UTC
offset at every point in time.
"""

from datetime import datetime, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import tzlocal

from recur.config import get_default_zone
from recur.logging import get_logger

_log = get_logger(__name__)

UTC = timezone.utc


class ConfigurationError(Exception):
    """Raised when a rule cannot be configured from its inputs."""
    pass


class UnknownZoneError(ConfigurationError):
    """Raised when a time zone identifier cannot be resolved."""
    pass


class LocalZoneError(ConfigurationError):
    """Raised when the host time zone cannot be determined."""
    pass


def now() -> datetime:
    """Return the current instant as an aware UTC datetime."""
    return datetime.now(UTC)


def resolve_zone(zone: str | tzinfo) -> tzinfo:
    """Resolve an IANA identifier (or pass through a tzinfo).

    Raises:
        UnknownZoneError: If the identifier is not known to the zone database.
        TypeError: If ``zone`` is neither a string nor a tzinfo.
    """
    if isinstance(zone, tzinfo):
        return zone
    if not isinstance(zone, str):
        raise TypeError(f"zone must be a str or tzinfo, got {type(zone).__name__}")
    try:
        return ZoneInfo(zone)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise UnknownZoneError(f"Unknown time zone: {zone!r}") from exc


def local_zone() -> tzinfo:
    """Return the default zone for rules built without one.

    Uses the configured ``default_zone`` when set, otherwise asks the host.

    Raises:
        LocalZoneError: If the host zone cannot be determined or resolved.
    """
    configured = get_default_zone()
    if configured is not None:
        return resolve_zone(configured)

    try:
        name = tzlocal.get_localzone_name()
    except (LookupError, ValueError, OSError) as exc:
        raise LocalZoneError("Could not determine the local time zone") from exc
    if not name:
        raise LocalZoneError("Could not determine the local time zone")

    try:
        zone = resolve_zone(name)
    except UnknownZoneError as exc:
        raise LocalZoneError(f"Local time zone {name!r} is not resolvable") from exc
    _log.debug("local_zone_discovered", zone=name)
    return zone


def to_civil(value: datetime, zone: tzinfo) -> datetime:
    """Strip the zone from an instant, giving its naive UTC civil timestamp.

    Naive input is read as wall-clock time in ``zone``.
    """
    if not isinstance(value, datetime):
        raise TypeError(f"expected a datetime, got {type(value).__name__}")
    if value.tzinfo is None or value.utcoffset() is None:
        value = value.replace(tzinfo=zone)
    return value.astimezone(UTC).replace(tzinfo=None)


def bind(civil: datetime, zone: tzinfo) -> datetime:
    """Bind a civil timestamp to a zone, giving a zone-aware datetime."""
    return civil.replace(tzinfo=UTC).astimezone(zone)


def to_instant(value: datetime, zone: tzinfo) -> datetime:
    """Normalize an aware or naive datetime to an aware UTC instant."""
    return to_civil(value, zone).replace(tzinfo=UTC)
