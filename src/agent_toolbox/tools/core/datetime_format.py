"""Current date/time rendering for the datetime tool.

All values in a result are computed from a single sampled instant. The
instant is converted once into the requested timezone and every format
mode, calendar field and message is derived from that converted value.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from agent_toolbox.tools.core.datetime_models import (
    DEFAULT_FORMAT,
    DEFAULT_TIMEZONE,
    DateTimeData,
    DateTimeFormat,
    DateTimeResult,
)

logger = logging.getLogger(__name__)

TIMEZONE_DISPLAY_NAMES: dict[str, str] = {
    "Asia/Tokyo": "JST",
    "UTC": "UTC",
    "America/New_York": "EST/EDT",
    "Europe/London": "GMT/BST",
    "Asia/Seoul": "KST",
    "Asia/Shanghai": "CST",
}

# Indexed like JavaScript's getDay(): 0 is Sunday.
JAPANESE_WEEKDAYS = (
    "日曜日",
    "月曜日",
    "火曜日",
    "水曜日",
    "木曜日",
    "金曜日",
    "土曜日",
)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_FORMAT_PATTERNS: dict[str, str] = {
    "iso": "%Y-%m-%d %H:%M:%S",
    "locale": "%m/%d/%Y, %H:%M:%S",
    "japanese": "%Y/%m/%d %H:%M:%S",
}


def timezone_display_name(tz_name: str) -> str:
    return TIMEZONE_DISPLAY_NAMES.get(tz_name, tz_name)


def resolve_timezone(tz_name: str) -> tzinfo:
    """Return the tzinfo for ``tz_name``, falling back to UTC when unknown."""
    if tz_name == "UTC":
        return timezone.utc
    # Directory names such as "America" and overlong keys fail with OSError.
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        logger.warning("Unknown timezone %r, falling back to UTC: %s", tz_name, exc)
        return timezone.utc


def day_of_week(moment: datetime) -> int:
    return moment.isoweekday() % 7


def epoch_millis(moment: datetime) -> int:
    return (moment - _EPOCH) // timedelta(milliseconds=1)


def to_iso_string(moment: datetime) -> str:
    utc = moment.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def format_japanese_long(moment: datetime) -> str:
    weekday = JAPANESE_WEEKDAYS[day_of_week(moment)]
    return (
        f"{moment.year}年{moment.month}月{moment.day}日 {weekday} "
        f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )


def format_datetime(moment: datetime, fmt: str) -> str:
    pattern = _FORMAT_PATTERNS.get(fmt, _FORMAT_PATTERNS[DEFAULT_FORMAT])
    try:
        return moment.strftime(pattern)
    except Exception:  # noqa: BLE001
        logger.exception("Failed to format %s as %r", moment, fmt)
        return moment.isoformat(sep=" ", timespec="seconds")


def get_current_datetime(
    timezone_name: str = DEFAULT_TIMEZONE,
    fmt: DateTimeFormat = DEFAULT_FORMAT,
    include_timezone: bool = True,
    now: datetime | None = None,
) -> DateTimeResult:
    """Build the datetime tool result for ``now`` (sampled when omitted).

    A naive ``now`` is taken to be UTC. Unknown timezones are rendered as
    UTC but keep their raw identifier in the ``timezone`` display field.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    display = timezone_display_name(timezone_name)
    tz_now = now.astimezone(resolve_timezone(timezone_name))
    formatted = format_datetime(tz_now, fmt)
    weekday = day_of_week(tz_now)

    data = DateTimeData(
        datetime=formatted,
        timezone=display,
        timestamp=epoch_millis(now),
        iso=to_iso_string(now),
        year=tz_now.year,
        month=tz_now.month,
        day=tz_now.day,
        hour=tz_now.hour,
        minute=tz_now.minute,
        second=tz_now.second,
        day_of_week=weekday,
        day_of_week_name=JAPANESE_WEEKDAYS[weekday],
        formatted_japanese=format_japanese_long(tz_now),
    )

    message = f"現在の日時: {formatted}"
    if include_timezone:
        message += f" ({display})"

    return DateTimeResult(success=True, data=data, message=message)
