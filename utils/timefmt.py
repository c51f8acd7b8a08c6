"""
utils/timefmt.py
-----------------
RFC3339 parsing and conversion of log timestamps into the display timezone.
"""

import re
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from utils.errors import ConfigurationError, TimestampParseFailure

RFC3339_RE = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})"
    r"(?:\.(\d+))?"
    r"(Z|[+-]\d{2}:\d{2})$"
)


def load_timezone(name):
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ConfigurationError(f"Failed to load TZ info for {name!r}: {e}") from e


def parse_rfc3339(text):
    """
    Parse `text` as an RFC3339 date-time. The offset is mandatory.
    Digits past microsecond precision are dropped.
    """
    if not isinstance(text, str):
        raise TimestampParseFailure(text)
    match = RFC3339_RE.match(text)
    if not match:
        raise TimestampParseFailure(text)

    year, month, day, hour, minute, second, fraction, offset = match.groups()
    microsecond = int((fraction or "0")[:6].ljust(6, "0"))

    if offset == "Z":
        tzinfo = timezone.utc
    else:
        hours, minutes = int(offset[1:3]), int(offset[4:6])
        if hours > 23 or minutes > 59:
            raise TimestampParseFailure(text)
        delta = timedelta(hours=hours, minutes=minutes)
        tzinfo = timezone(-delta if offset[0] == "-" else delta)

    try:
        return datetime(
            int(year), int(month), int(day),
            int(hour), int(minute), int(second),
            microsecond, tzinfo=tzinfo,
        )
    except ValueError as e:
        raise TimestampParseFailure(text) from e


def format_local(moment):
    # e.g. "2021-05-01 10:00:00 -0300 -03", fraction only when non-zero
    text = moment.strftime("%Y-%m-%d %H:%M:%S")
    if moment.microsecond:
        text += (".%06d" % moment.microsecond).rstrip("0")
    return text + moment.strftime(" %z %Z")


def localize_timestamp(text, tz):
    return format_local(parse_rfc3339(text).astimezone(tz))
