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

import pytest

from human_time.ast_builder import AstBuilder
from human_time.ast_nodes import (
    Ago,
    DateTime,
    DayMonth,
    DayMonthYear,
    Duration,
    HourMinute,
    HourMinuteSecond,
    In,
    IsoDate,
    Month,
    Now,
    Quantifier,
    RelativeSpecifier,
    RelativeTimeUnit,
    RelativeWeekday,
    RelativeWeekWeekday,
    TimeUnit,
    Tomorrow,
    UpcomingWeekday,
    Weekday,
    Yesterday,
)
from human_time.core.token_parser import Token
from human_time.errors import InternalError, InvalidFormatError


def make_token(name, *fields):
    token = Token(name)
    for key, value in fields:
        token.append(key, value)
    return token


def ago(**units):
    fields = [(key, str(value)) for key, value in units.items()]
    return make_token("time_delta", *fields, ("offset_direction", "-1"))


def test_now():
    assert AstBuilder().build([make_token("time_now")]) == Now()


def test_day_words():
    builder = AstBuilder()

    assert builder.build([make_token("time_relative", ("offset_day", "1"))]) == Tomorrow()
    assert builder.build([make_token("time_relative", ("offset_day", "-1"))]) == Yesterday()


def test_relative_unit():
    token = make_token("time_relative", ("relative", "-1"), ("unit", "month"))

    assert AstBuilder().build([token]) == RelativeTimeUnit(RelativeSpecifier.LAST, TimeUnit.MONTH)


def test_calendar_dates():
    builder = AstBuilder()

    iso = make_token("time_date", ("year", "2022"), ("month", "11"), ("day", "07"))
    assert builder.build([iso]) == IsoDate(2022, 11, 7)

    day_month_year = make_token("time_date", ("day", "15"), ("month_name", "2"), ("year", "2017"))
    assert builder.build([day_month_year]) == DayMonthYear(15, Month.FEBRUARY, 2017)

    day_month = make_token("time_date", ("day", "13"), ("month_name", "11"))
    assert builder.build([day_month]) == DayMonth(13, Month.NOVEMBER)


def test_weekdays():
    builder = AstBuilder()

    week_weekday = make_token("time_weekday", ("offset_week", "1"), ("week_day", "0"))
    assert builder.build([week_weekday]) == RelativeWeekWeekday(RelativeSpecifier.NEXT, Weekday.MONDAY)

    relative = make_token("time_weekday", ("relative", "0"), ("week_day", "4"))
    assert builder.build([relative]) == RelativeWeekday(RelativeSpecifier.THIS, Weekday.FRIDAY)

    bare = make_token("time_weekday", ("week_day", "6"))
    assert builder.build([bare]) == UpcomingWeekday(Weekday.SUNDAY)


def test_clock():
    builder = AstBuilder()

    assert builder.build([make_token("time_clock", ("hour", "0"), ("minute", "20"))]) == HourMinute(0, 20)
    assert builder.build(
        [make_token("time_clock", ("hour", "15"), ("minute", "55"), ("second", "25"))]
    ) == HourMinuteSecond(15, 55, 25)


def test_date_time_either_order():
    date = make_token("time_relative", ("offset_day", "1"))
    clock = make_token("time_clock", ("hour", "18"), ("minute", "30"))
    expected = DateTime(Tomorrow(), HourMinute(18, 30))

    assert AstBuilder().build([date, clock]) == expected
    assert AstBuilder().build([clock, date]) == expected


def test_durations_keep_input_order():
    token = make_token(
        "time_delta",
        ("offset_direction", "1"),
        ("minute", "5"),
        ("second", "30"),
    )

    assert AstBuilder().build([token]) == In(
        Duration((Quantifier(5, TimeUnit.MINUTE), Quantifier(30, TimeUnit.SECOND)))
    )


def test_nested_ago():
    node = AstBuilder().build([ago(hour=12), ago(day=7)])

    assert node == Ago(
        Duration((Quantifier(12, TimeUnit.HOUR),)),
        Ago(Duration((Quantifier(7, TimeUnit.DAY),))),
    )


def test_ago_anchored_at_date():
    node = AstBuilder().build([ago(day=2), make_token("time_weekday", ("relative", "-1"), ("week_day", "4"))])

    assert node == Ago(
        Duration((Quantifier(2, TimeUnit.DAY),)),
        RelativeWeekday(RelativeSpecifier.LAST, Weekday.FRIDAY),
    )


def test_nesting_limit():
    builder = AstBuilder(max_nesting=2)

    builder.build([ago(day=1), ago(day=1), make_token("time_now")])
    with pytest.raises(InvalidFormatError):
        builder.build([ago(day=1), ago(day=1), ago(day=1), make_token("time_now")])


@pytest.mark.parametrize(
    "tokens",
    [
        [],
        [make_token("time_unknown")],
        [make_token("time_clock", ("hour", "1"))],
        [make_token("time_clock", ("hour", "x1"), ("minute", "00"))],
        [make_token("time_clock", ("hour", "١٢"), ("minute", "00"))],
        [make_token("time_relative", ("offset_day", "5"))],
        [make_token("time_relative", ("relative", "1"), ("unit", "hour"))],
        [make_token("time_date", ("day", "1"), ("month_name", "13"))],
        [make_token("time_weekday", ("week_day", "7"))],
        [make_token("time_delta", ("offset_direction", "1"))],
        [make_token("time_delta", ("offset_direction", "2"), ("day", "1"))],
        [make_token("time_delta", ("offset_direction", "1"), ("fortnight", "1"))],
        [make_token("time_clock", ("hour", "1"), ("minute", "00")), make_token("time_now")],
        [make_token("time_now"), make_token("time_now"), make_token("time_now")],
    ],
)
def test_unexpected_shapes(tokens):
    with pytest.raises(InternalError):
        AstBuilder().build(tokens)
