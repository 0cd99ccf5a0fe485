"""Display formatting helpers for result rows."""

from __future__ import annotations

from datetime import UTC, datetime


def format_time_marker(delay: int, now: datetime | None = None) -> str:
    """Format a unix timestamp as a short time marker.

    Examples: "Today 14:30", "Yesterday 09:15", "Monday 08:00", "Feb 12 16:45",
    "2025-11-03 10:00"
    """
    if not delay or delay < 0:
        return ""
    try:
        dt = datetime.fromtimestamp(delay, tz=UTC)
    except (OverflowError, OSError, ValueError):
        return ""

    now = now or datetime.now(tz=UTC)
    today = now.date()
    dt_date = dt.date()
    time_part = dt.strftime("%H:%M")

    if dt_date == today:
        return f"Today {time_part}"
    delta = (today - dt_date).days
    if delta == 1:
        return f"Yesterday {time_part}"
    if 1 < delta < 7:
        return f"{dt.strftime('%A')} {time_part}"
    if dt.year == now.year:
        return f"{dt.strftime('%b %d')} {time_part}"
    return f"{dt.strftime('%Y-%m-%d')} {time_part}"


def format_member_count(count: int) -> str:
    if count == 1:
        return "1 member"
    return f"{count} members"
