"""
utils/query.py
-----------------
Turns request parameters into a MongoDB filter plus a (limit, skip) window.
"""

import re
from collections import namedtuple

from utils.errors import InvalidParameter

DEFAULT_PAGE_SIZE = 20

# Search dimension -> stored field it matches against
DIMENSION_FIELDS = {
    "course": "course",
    "class": "class",
    "room": "room",
    "student": "email",
}

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# Signed 64-bit, the widest value MongoDB accepts for skip and limit
INT64_MIN = -2**63
INT64_MAX = 2**63 - 1


class Window(namedtuple("Window", ["limit", "skip"])):
    """A page of results. A limit of 0 means no limit."""

    def clamp(self, total):
        limit, skip = self.limit, self.skip
        if skip > total:
            skip = total
        elif skip < 0:
            skip = 0
        if limit < 0:
            limit = DEFAULT_PAGE_SIZE
        return Window(limit, skip)


LogQuery = namedtuple("LogQuery", ["filter", "window"])


def parse_int(name, value):
    if value is None or not _INTEGER_RE.fullmatch(value):
        raise InvalidParameter(name, value)
    number = int(value)
    if not INT64_MIN <= number <= INT64_MAX:
        raise InvalidParameter(name, value)
    return number


def parse_window(size, skip):
    return Window(parse_int("size", size), parse_int("skip", skip))


def dimension_filter(dimension, pattern=None):
    """
    Filter for a search dimension. "latest" (or None) matches everything;
    the others are a case-insensitive regex on their field.
    """
    if dimension in (None, "latest"):
        return {}
    try:
        field = DIMENSION_FIELDS[dimension]
    except KeyError:
        raise ValueError(f"unknown search dimension: {dimension!r}")
    return {field: {"$regex": pattern, "$options": "i"}}


def since_filter(timestamp):
    return {"timestamp": {"$gte": timestamp}}


def build_query(dimension, value, size, skip):
    return LogQuery(dimension_filter(dimension, value), parse_window(size, skip))


def export_query(timestamp):
    # Everything at or after `timestamp`, unpaginated
    return LogQuery(since_filter(timestamp), Window(0, 0))
