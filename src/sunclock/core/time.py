from __future__ import annotations
from datetime import date, datetime, timedelta, timezone

from .errors import EventDoesNotOccurError
from .types import SunEvent


def hours_to_hms(hours: float) -> str:
    """
    Decimal hours -> 'HH:MM:SS.ss' (rounded to the centisecond).

    A clock time below 24h never rounds up to '24:00'; a duration of exactly
    24h (polar day length) still prints as '24:00:00.00'.
    """
    cs = round(hours * 360000.0)
    if hours < 24.0:
        cs = min(cs, 24 * 360000 - 1)
    h, rem = divmod(cs, 360000)
    m, rem = divmod(rem, 6000)
    return f"{h:02d}:{m:02d}:{rem / 100.0:05.2f}"

def event_datetime(d: date, event: SunEvent) -> datetime:
    """
    Anchor an event's UTC hours on the UTC calendar day `d`.

    The almanac only yields a clock time. West of Greenwich an evening
    sunset often lands after 00h UTC, i.e. on the following UTC day;
    pass that day as `d` if you need the true instant.
    """
    if not event.occurs:
        raise EventDoesNotOccurError(f"{event.kind} on {d.isoformat()}: {event.status}")
    midnight = datetime(d.year, d.month, d.day, tzinfo=timezone.utc)
    return midnight + timedelta(hours=event.utc_hours)
