"""
SPDX-FileCopyrightText: 2025 fraglog contributors
SPDX-License-Identifier: Apache-2.0
"""  # noqa: E501

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable

from fraglog.errors import ConfigurationError
from fraglog.formats import (
    DATE_WIDTH,
    DATETIME_WIDTH,
    TIME_WIDTH,
    parse_date,
    parse_datetime,
    parse_time,
)
from fraglog.timestamp import Date, Datetime, Temporal, Time

logger = logging.getLogger(__name__)


class SearchMode(Enum):
    TimeOnly = auto()
    DateAndTime = auto()


@dataclass(frozen=True)
class TimeBoundary:
    """
    A boundary given as HH:MM:SS, matched against the time of day only.
    """

    time: Time

    kind = "time"
    date_is_present = False
    time_is_present = True

    def __str__(self):
        return str(self.time)


@dataclass(frozen=True)
class DateBoundary:
    """
    A boundary given as YYYY-MM-DD. It stands for 00:00:00 of that day.
    """

    date: Date

    kind = "date"
    date_is_present = True
    time_is_present = False

    def datetime(self) -> Datetime:
        return Datetime(self.date, Time())

    def __str__(self):
        return str(self.date)


@dataclass(frozen=True)
class DatetimeBoundary:
    value: Datetime

    kind = "datetime"
    date_is_present = True
    time_is_present = True

    def datetime(self) -> Datetime:
        return self.value

    def __str__(self):
        return str(self.value)


Boundary = TimeBoundary | DateBoundary | DatetimeBoundary


def detect_boundary(token: str) -> Boundary:
    """
    Classify a boundary token by its length and parse it.
    """

    match len(token):
        case 8:
            return TimeBoundary(parse_time(token))
        case 10:
            return DateBoundary(parse_date(token))
        case 19:
            return DatetimeBoundary(parse_datetime(token))
        case _:
            raise ConfigurationError(
                f"Invalid size for date or time: {token!r} "
                f"(expected {TIME_WIDTH}, {DATE_WIDTH} "
                f"or {DATETIME_WIDTH} chars)"
            )


@dataclass(frozen=True)
class SearchWindow:
    """
    The inclusive [start, end] period searched in a log file.

    Both ends share one search mode, which decides how log lines are
    parsed and what they are compared with.
    """

    start: Temporal
    end: Temporal
    mode: SearchMode

    @classmethod
    def fromboundaries(cls, start: Boundary, end: Boundary) -> "SearchWindow":
        match (start, end):
            case (TimeBoundary(), TimeBoundary()):
                return cls(start.time, end.time, SearchMode.TimeOnly)
            case (DateBoundary(), DateBoundary()) | (
                DatetimeBoundary(),
                DatetimeBoundary(),
            ):
                return cls(
                    start.datetime(), end.datetime(), SearchMode.DateAndTime
                )
            case _:
                raise ConfigurationError(
                    "Invalid parameters, <period_start> and <period_end> "
                    "should have the same format "
                    f"({start.kind} vs {end.kind})"
                )

    @classmethod
    def fromtokens(cls, start: str, end: str) -> "SearchWindow":
        start_boundary = detect_boundary(start)
        end_boundary = detect_boundary(end)
        window = cls.fromboundaries(start_boundary, end_boundary)

        if window.mode is SearchMode.TimeOnly:
            logger.info("Parameters contain only a time period")
        else:
            logger.info("Parameters contain a datetime period")

        if isinstance(end_boundary, DateBoundary):
            logger.info(
                "Note, <period_end> %s has no time and is read as %s",
                end_boundary,
                window.end,
            )

        return window

    @property
    def parse_line(self) -> Callable[[str], Temporal]:
        """
        The parser for the timestamp prefix of a log line in this mode.
        """

        match self.mode:
            case SearchMode.TimeOnly:
                return parse_time
            case SearchMode.DateAndTime:
                return parse_datetime

    def __str__(self):
        return f"[{self.start}, {self.end}]"
