# Copyright (c) 2025 Ming Yu (yuming@oppo.com)
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Abstract syntax tree of a human time expression

Every node is a frozen dataclass; each family (HumanTime, Date, Time) is a
closed set of classes listed in the matching ``*_VARIANTS`` tuple so the
resolver can be checked for exhaustiveness.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union, get_args


class RelativeSpecifier(Enum):
    THIS = 0
    NEXT = 1
    LAST = -1


class Month(Enum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12


class Weekday(Enum):
    """Day of week, numbered like ``datetime.date.weekday()``"""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


class TimeUnit(Enum):
    YEAR = "year"
    MONTH = "month"
    WEEK = "week"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"


# Units allowed after this/next/last
CALENDAR_UNITS = (TimeUnit.YEAR, TimeUnit.MONTH, TimeUnit.WEEK, TimeUnit.DAY)


@dataclass(frozen=True)
class Quantifier:
    count: int
    unit: TimeUnit


@dataclass(frozen=True)
class Duration:
    """Non-empty sequence of quantifiers in input order"""

    quantifiers: Tuple[Quantifier, ...]

    def __post_init__(self):
        if not self.quantifiers:
            raise ValueError("duration needs at least one quantifier")


# Dates


@dataclass(frozen=True)
class Today:
    pass


@dataclass(frozen=True)
class Tomorrow:
    pass


@dataclass(frozen=True)
class Overmorrow:
    pass


@dataclass(frozen=True)
class Yesterday:
    pass


@dataclass(frozen=True)
class IsoDate:
    year: int
    month: int
    day: int


@dataclass(frozen=True)
class DayMonthYear:
    day: int
    month: Month
    year: int


@dataclass(frozen=True)
class DayMonth:
    day: int
    month: Month


@dataclass(frozen=True)
class RelativeWeekWeekday:
    """ "next week monday": weekday inside a Monday based week"""

    spec: RelativeSpecifier
    weekday: Weekday


@dataclass(frozen=True)
class RelativeWeekday:
    """ "last friday": weekday searched from today"""

    spec: RelativeSpecifier
    weekday: Weekday


@dataclass(frozen=True)
class RelativeTimeUnit:
    spec: RelativeSpecifier
    unit: TimeUnit


@dataclass(frozen=True)
class UpcomingWeekday:
    weekday: Weekday


Date = Union[
    Today,
    Tomorrow,
    Overmorrow,
    Yesterday,
    IsoDate,
    DayMonthYear,
    DayMonth,
    RelativeWeekWeekday,
    RelativeWeekday,
    RelativeTimeUnit,
    UpcomingWeekday,
]
DATE_VARIANTS = get_args(Date)


# Times


@dataclass(frozen=True)
class HourMinute:
    hour: int
    minute: int


@dataclass(frozen=True)
class HourMinuteSecond:
    hour: int
    minute: int
    second: int


Time = Union[HourMinute, HourMinuteSecond]
TIME_VARIANTS = get_args(Time)


# Root


@dataclass(frozen=True)
class DateTime:
    date: Date
    time: Time


@dataclass(frozen=True)
class In:
    duration: Duration


@dataclass(frozen=True)
class Ago:
    duration: Duration
    anchor: Optional["HumanTime"] = None


@dataclass(frozen=True)
class Now:
    pass


HumanTime = Union[DateTime, Date, Time, In, Ago, Now]
