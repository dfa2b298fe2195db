"""
SPDX-FileCopyrightText: 2025 fraglog contributors
SPDX-License-Identifier: Apache-2.0
"""  # noqa: E501

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering


class Ordering(Enum):
    LESS = -1
    EQUAL = 0
    GREATER = 1

    def __neg__(self) -> "Ordering":
        return Ordering(-self.value)


@total_ordering
@dataclass(frozen=True)
class Date:
    """
    A calendar date as written in a log line.
    Month and day ranges are not validated.
    """

    year: int
    month: int
    day: int

    def _as_ordered_tuple(self):
        return (
            self.year,
            self.month,
            self.day,
        )

    def __eq__(self, other: object):
        if not isinstance(other, Date):
            return False

        return self._as_ordered_tuple() == other._as_ordered_tuple()

    def __lt__(self, other: "Date"):
        return self._as_ordered_tuple() < other._as_ordered_tuple()

    def __hash__(self):
        return hash(self._as_ordered_tuple())

    def __str__(self):
        return f"{self.year:04}-{self.month:02}-{self.day:02}"


@total_ordering
@dataclass(frozen=True)
class Time:
    """
    A time of day. The hour range is not validated.
    """

    hour: int = 0
    minute: int = 0
    second: int = 0

    def _as_ordered_tuple(self):
        return (
            self.hour,
            self.minute,
            self.second,
        )

    def __eq__(self, other: object):
        if not isinstance(other, Time):
            return False

        return self._as_ordered_tuple() == other._as_ordered_tuple()

    def __lt__(self, other: "Time"):
        return self._as_ordered_tuple() < other._as_ordered_tuple()

    def __hash__(self):
        return hash(self._as_ordered_tuple())

    def __str__(self):
        return f"{self.hour:02}:{self.minute:02}:{self.second:02}"


@total_ordering
@dataclass(frozen=True)
class Datetime:
    """
    A date together with a time of day. Dates are compared first.
    """

    date: Date
    time: Time = Time()

    def _as_ordered_tuple(self):
        return (
            self.date,
            self.time,
        )

    def __eq__(self, other: object):
        if not isinstance(other, Datetime):
            return False

        return self._as_ordered_tuple() == other._as_ordered_tuple()

    def __lt__(self, other: "Datetime"):
        return self._as_ordered_tuple() < other._as_ordered_tuple()

    def __hash__(self):
        return hash(self._as_ordered_tuple())

    def __str__(self):
        return f"{self.date}T{self.time}"


Temporal = Date | Time | Datetime


def compare(a: Temporal, b: Temporal) -> Ordering:
    """
    Three-way chronological comparison of two values of the same kind.
    """

    if type(a) is not type(b):
        raise TypeError(
            f"cannot compare {type(a).__name__} with {type(b).__name__}"
        )

    if a < b:
        return Ordering.LESS
    elif b < a:
        return Ordering.GREATER
    else:
        return Ordering.EQUAL
