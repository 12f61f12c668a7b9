"""
Appointment scheduling core - pure date/time arithmetic.

Points in time are timezone-aware UTC datetimes truncated to millisecond
precision. Local calendar components are read in a configurable zone
(None = the host's local timezone, resolved per instant so DST applies).

Key behaviors:
- create_appointment offsets a point in time by whole days
- get_appointment_timestamp serializes to YYYY-MM-DDTHH:mm:ss.sssZ
- get_appointment_details decomposes into local components (zero-based month)
- update_appointment overrides components in order with calendar roll-over
- time_between returns absolute elapsed seconds, rounded half up
- is_valid checks strict ordering
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta, tzinfo
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from appointbot.ports.clock import ClockPort

MS_PER_DAY = 24 * 60 * 60 * 1000
EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

DETAIL_FIELDS = ("year", "month", "date", "hour", "minute")

# Upper limits used by the historical update guard.
_LEGACY_UPPER = {"month": 12, "date": 31, "hour": 60, "minute": 60}

# Calendar bounds used when strict_bounds is enabled.
STRICT_BOUNDS = {"month": (0, 11), "date": (1, 31), "hour": (0, 23), "minute": (0, 59)}

_DATE_ONLY = re.compile(r"\d{4}-\d{2}-\d{2}")


# --- Configuration ---


@dataclass(frozen=True)
class AppointmentConfig:
    """Appointment configuration from rules."""

    timezone: str | None = None
    strict_bounds: bool = False


DEFAULT_CONFIG = AppointmentConfig()


# --- Errors ---


class AppointmentError(ValueError):
    """Base appointment error."""

    pass


class TimestampParseError(AppointmentError):
    """Timestamp text could not be parsed."""

    def __init__(self, timestamp: object, reason: str) -> None:
        self.timestamp = timestamp
        self.reason = reason
        super().__init__(f"Invalid timestamp {timestamp!r}: {reason}")


class AppointmentRangeError(AppointmentError):
    """Result falls outside the representable date range."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Appointment out of range: {reason}")


class InvalidUpdateError(AppointmentError):
    """An update option was rejected."""

    def __init__(self, field: str, value: object, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid value {value!r} for {field}: {reason}")


# --- Details Record ---


@dataclass(frozen=True)
class AppointmentDetails:
    """Local calendar components of a point in time. Month is zero-based."""

    year: int
    month: int
    date: int
    hour: int
    minute: int

    def as_dict(self) -> dict[str, int]:
        return {
            "year": self.year,
            "month": self.month,
            "date": self.date,
            "hour": self.hour,
            "minute": self.minute,
        }


# --- Zone Helpers ---


def resolve_zone(tz_name: str | None) -> tzinfo | None:
    """
    Resolve an IANA zone name.

    Returns None for the host local timezone.

    Raises:
        ValueError: if the zone name is unknown
    """
    if not tz_name:
        return None
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown timezone: {tz_name}") from e


def _to_local(point: datetime, zone: tzinfo | None) -> datetime:
    try:
        if zone is None:
            return point.astimezone()
        return point.astimezone(zone)
    except (OverflowError, OSError, ValueError) as e:
        raise AppointmentRangeError(str(e)) from e


def _localize(naive: datetime, zone: tzinfo | None) -> datetime:
    """Interpret a naive wall-clock time in the zone and convert to UTC."""
    if zone is None:
        # Naive datetimes are taken as host local time by astimezone()
        return naive.astimezone(UTC)
    return naive.replace(tzinfo=zone).astimezone(UTC)


def _truncate_ms(point: datetime) -> datetime:
    return point.replace(microsecond=point.microsecond // 1000 * 1000)


def as_utc(point: datetime) -> datetime:
    """Normalize a datetime to UTC. Naive values are treated as UTC."""
    if point.tzinfo is None:
        point = point.replace(tzinfo=UTC)
    return _truncate_ms(point.astimezone(UTC))


def from_epoch_ms(ms: int) -> datetime:
    """Convert milliseconds since the epoch to a UTC datetime."""
    try:
        return EPOCH + timedelta(milliseconds=ms)
    except OverflowError as e:
        raise AppointmentRangeError(f"{ms} ms since epoch") from e


def to_epoch_ms(point: datetime) -> int:
    """Convert a datetime to milliseconds since the epoch."""
    return (as_utc(point) - EPOCH) // timedelta(milliseconds=1)


# --- Core Operations ---


def create_appointment(
    days: int,
    now: datetime | int | None = None,
    *,
    clock: ClockPort | None = None,
) -> datetime:
    """
    Offset a point in time by a whole number of days.

    Args:
        days: Days to add (may be negative or zero)
        now: Base instant as datetime or epoch milliseconds. Defaults to the
            clock's current time.
        clock: Time source used when now is omitted

    Returns:
        The appointment as a UTC datetime

    Raises:
        AppointmentRangeError: if the result is not representable
    """
    if now is None:
        now = clock.now_utc() if clock is not None else datetime.now(UTC)

    base = from_epoch_ms(now) if isinstance(now, int) else as_utc(now)
    try:
        return base + timedelta(milliseconds=days * MS_PER_DAY)
    except OverflowError as e:
        raise AppointmentRangeError(f"{days} days from {base.isoformat()}") from e


def get_appointment_timestamp(point: datetime) -> str:
    """Serialize a point in time as YYYY-MM-DDTHH:mm:ss.sssZ."""
    utc = as_utc(point)
    return (
        f"{utc.year:04d}-{utc.month:02d}-{utc.day:02d}"
        f"T{utc.hour:02d}:{utc.minute:02d}:{utc.second:02d}"
        f".{utc.microsecond // 1000:03d}Z"
    )


def parse_timestamp(timestamp: str, zone: tzinfo | None = None) -> datetime:
    """
    Parse ISO 8601 timestamp text into a UTC point in time.

    Date-only text is read as UTC midnight. Date-time text without an
    offset is read as local time in the zone.

    Raises:
        TimestampParseError: if the text is not a recognizable timestamp
    """
    if not isinstance(timestamp, str):
        raise TimestampParseError(timestamp, "expected a string")

    text = timestamp.strip()
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as e:
        raise TimestampParseError(timestamp, str(e)) from e

    if parsed.tzinfo is None:
        if _DATE_ONLY.fullmatch(text):
            parsed = parsed.replace(tzinfo=UTC)
        else:
            try:
                parsed = _localize(parsed, zone)
            except (OverflowError, OSError, ValueError) as e:
                raise TimestampParseError(timestamp, str(e)) from e

    try:
        return as_utc(parsed)
    except OverflowError as e:
        raise TimestampParseError(timestamp, str(e)) from e


def decompose(point: datetime, zone: tzinfo | None = None) -> AppointmentDetails:
    """
    Split a point in time into local calendar components.

    Raises:
        AppointmentRangeError: if the local time is not representable
    """
    local = _to_local(as_utc(point), zone)
    return AppointmentDetails(
        year=local.year,
        month=local.month - 1,
        date=local.day,
        hour=local.hour,
        minute=local.minute,
    )


def get_appointment_details(
    timestamp: str, zone: tzinfo | None = None
) -> AppointmentDetails:
    """
    Get local calendar components of a timestamp.

    Raises:
        TimestampParseError: if the timestamp cannot be parsed
        AppointmentRangeError: if the local time is not representable
    """
    return decompose(parse_timestamp(timestamp, zone), zone)


def _compose_local(
    *,
    year: int,
    month: int,
    date: int,
    hour: int,
    minute: int,
    second: int,
    microsecond: int,
    zone: tzinfo | None,
) -> datetime:
    """
    Build a UTC instant from possibly out-of-range local components.

    Month overflow carries into the year; date/hour/minute overflow carries
    through day arithmetic, so date=0 is the last day of the previous month.
    """
    year += month // 12
    month %= 12
    try:
        naive = datetime(year, month + 1, 1) + timedelta(
            days=date - 1,
            hours=hour,
            minutes=minute,
            seconds=second,
            microseconds=microsecond,
        )
        return _localize(naive, zone)
    except (OverflowError, OSError, ValueError) as e:
        raise AppointmentRangeError(str(e)) from e


def _set_component(
    point: datetime, field: str, value: int, zone: tzinfo | None
) -> datetime:
    local = _to_local(point, zone)
    parts = {
        "year": local.year,
        "month": local.month - 1,
        "date": local.day,
        "hour": local.hour,
        "minute": local.minute,
    }
    parts[field] = value
    return _compose_local(
        **parts,
        second=local.second,
        microsecond=local.microsecond,
        zone=zone,
    )


def _passes_guard(field: str, value: int, strict_bounds: bool) -> bool:
    if strict_bounds:
        low, high = STRICT_BOUNDS[field]
        return low <= value <= high
    # Historical inclusive-or check; admits every integer.
    return value > 0 or value <= _LEGACY_UPPER[field]


def update_appointment(
    timestamp: str,
    options: Mapping[str, Any],
    zone: tzinfo | None = None,
    *,
    strict_bounds: bool = False,
) -> AppointmentDetails:
    """
    Override local components of a timestamp and return the new details.

    Components are applied in the order year, month, date, hour, minute,
    each against the result of the previous step. Out-of-range values roll
    over into neighbouring components.

    Args:
        timestamp: ISO 8601 timestamp text
        options: Subset of year/month/date/hour/minute to override
        zone: Zone for local components (None = host local)
        strict_bounds: Reject values outside calendar bounds instead of
            rolling them over

    Raises:
        TimestampParseError: if the timestamp cannot be parsed
        InvalidUpdateError: for non-integer values, or out-of-bounds values
            when strict_bounds is set
        AppointmentRangeError: if the result is not representable
    """
    point = parse_timestamp(timestamp, zone)

    for field in DETAIL_FIELDS:
        if field not in options:
            continue
        value = options[field]
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidUpdateError(field, value, "expected an integer")
        if field != "year" and not _passes_guard(field, value, strict_bounds):
            low, high = STRICT_BOUNDS[field]
            raise InvalidUpdateError(field, value, f"expected {low}-{high}")
        point = _set_component(point, field, value, zone)

    return get_appointment_details(get_appointment_timestamp(point), zone)


def time_between(
    timestamp_a: str, timestamp_b: str, zone: tzinfo | None = None
) -> int:
    """
    Absolute seconds between two timestamps, rounded half up.

    Raises:
        TimestampParseError: if either timestamp cannot be parsed
    """
    delta = parse_timestamp(timestamp_a, zone) - parse_timestamp(timestamp_b, zone)
    micros = abs(delta // timedelta(microseconds=1))
    return (micros + 500_000) // 1_000_000


def is_valid(
    appointment_timestamp: str, current_timestamp: str, zone: tzinfo | None = None
) -> bool:
    """
    Check whether the appointment is strictly later than the current time.

    Raises:
        TimestampParseError: if either timestamp cannot be parsed
    """
    appointment = parse_timestamp(appointment_timestamp, zone)
    current = parse_timestamp(current_timestamp, zone)
    return appointment > current
