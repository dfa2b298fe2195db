"""
SPDX-FileCopyrightText: 2025 fraglog contributors
SPDX-License-Identifier: Apache-2.0
"""  # noqa: E501

from fraglog.errors import ParseError
from fraglog.timestamp import Date, Datetime, Time

TIME_WIDTH = 8
DATE_WIDTH = 10
DATETIME_WIDTH = 19

# Offset of the time inside a datetime. The character before it is the
# date/time separator and is never checked.
DATETIME_TIME_OFFSET = 11

_DATE_FIELDS = (
    ("year", 0, 4),
    ("month", 5, 7),
    ("day", 8, 10),
)

_TIME_FIELDS = (
    ("hour", 0, 2),
    ("minute", 3, 5),
    ("second", 6, 8),
)


def _check_width(s: str, width: int, kind: str):
    if len(s) < width:
        raise ParseError(
            f"Invalid {kind} format, length should contain "
            f"at least {width} chars: {s!r}",
            field="length",
        )


def _parse_field(s: str, name: str, start: int, stop: int) -> int:
    raw = s[start:stop]

    # int() would also accept signs, blanks and underscores
    if not (raw.isascii() and raw.isdigit()):
        raise ParseError(f"Invalid int value for {name}: {raw!r}", field=name)

    return int(raw)


def parse_time(s: str, offset: int = 0) -> Time:
    """
    Parse HH:MM:SS from the 8 characters starting at offset.
    Anything after them is ignored.
    """

    s = s[offset:]
    _check_width(s, TIME_WIDTH, "time")

    hour, minute, second = (
        _parse_field(s, *layout) for layout in _TIME_FIELDS
    )

    return Time(hour, minute, second)


def parse_date(s: str) -> Date:
    """
    Parse YYYY-MM-DD from the first 10 characters.
    """

    _check_width(s, DATE_WIDTH, "date")

    year, month, day = (_parse_field(s, *layout) for layout in _DATE_FIELDS)

    return Date(year, month, day)


def parse_datetime(s: str) -> Datetime:
    """
    Parse 'YYYY-MM-DD HH:MM:SS' from the first 19 characters.
    """

    _check_width(s, DATETIME_WIDTH, "datetime")

    return Datetime(
        date=parse_date(s),
        time=parse_time(s, DATETIME_TIME_OFFSET),
    )
