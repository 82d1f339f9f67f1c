"""Pickup slot resolution and display formatting.

A purchase request names a pickup slot (Today, Tomorrow or free text).
This module turns it into the stored ``pickup_day`` / ``pickup_custom``
pair plus the hold expiration, and renders stored values back into the
long-form string used on screens and in emails.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time, timedelta, timezone, tzinfo

from gearstore.domain.model.value_objects import PickupOption, PickupRequest

PLACEHOLDER = "-"
PICKUP_HOUR = 12

_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# Formats accepted for free-text pickup times in addition to ISO 8601.
_CUSTOM_FORMATS = (
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d %I:%M %p",
    "%Y-%m-%d %I%p",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y %I:%M %p",
    "%m/%d/%Y %I%p",
    "%m/%d/%Y",
    "%b %d, %Y, %I:%M %p",
    "%b %d, %Y %I:%M %p",
    "%B %d, %Y %I:%M %p",
    "%b %d %Y",
    "%B %d %Y",
    "%b %d, %Y",
    "%B %d, %Y",
)


@dataclass(frozen=True)
class PickupSlot:
    pickup_day: str
    pickup_custom: str
    expires_at: datetime


def parse_datetime(value: str | None, tz: tzinfo = timezone.utc) -> datetime | None:
    """Parse a stored or typed date/time; naive values are read in ``tz``.

    Returns None for anything that is not a recognisable date.
    """
    text = (value or "").strip()
    if not text:
        return None
    parsed: datetime | None = None
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        for fmt in _CUSTOM_FORMATS:
            try:
                parsed = datetime.strptime(text, fmt)
                break
            except ValueError:
                continue
    if parsed is None:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tz)
    return parsed


def to_iso(value: datetime) -> str:
    """UTC ISO-8601 with millisecond precision, as the record store writes it."""
    utc = value.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def format_date(value: str | datetime | None, tz: tzinfo = timezone.utc) -> str:
    """Render e.g. ``Mar 15, 2024, 2:30 PM`` or the placeholder."""
    moment = value if isinstance(value, datetime) else parse_datetime(value, tz)
    if moment is None:
        return PLACEHOLDER
    local = moment.astimezone(tz)
    hour = local.hour % 12 or 12
    meridiem = "PM" if local.hour >= 12 else "AM"
    return (
        f"{_MONTHS[local.month - 1]} {local.day}, {local.year}, "
        f"{hour}:{local.minute:02d} {meridiem}"
    )


def format_pickup_day(
    pickup_day: str | None, pickup_custom: str | None, tz: tzinfo = timezone.utc
) -> str:
    if parse_datetime(pickup_day, tz) is not None:
        return format_date(pickup_day, tz)
    if pickup_custom:
        return pickup_custom
    return pickup_day or PLACEHOLDER


def resolve_pickup(
    request: PickupRequest,
    now: datetime,
    hold_duration: timedelta,
    tz: tzinfo = timezone.utc,
) -> PickupSlot:
    """Work out what to store for a pickup request and when the hold lapses.

    Holds last ``hold_duration`` from ``now`` unless the customer typed a
    parseable date/time under "Other", in which case that time is the
    expiration.
    """
    default_expiry = now + hold_duration

    if request.option is PickupOption.OTHER:
        custom = parse_datetime(request.other_text, tz)
        if custom is not None:
            return PickupSlot(to_iso(custom), "", custom.astimezone(timezone.utc))
        return PickupSlot(request.option.value, request.other_text, default_expiry)

    day = now.astimezone(tz).date()
    if request.option is PickupOption.TOMORROW:
        day += timedelta(days=1)
    noon = datetime.combine(day, time(PICKUP_HOUR), tzinfo=tz)
    return PickupSlot(to_iso(noon), "", default_expiry)
