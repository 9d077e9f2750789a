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
End to end tests: text in, resolved value out
"""

from datetime import date, datetime, time, timedelta, timezone

import pytest

from human_time import (
    CalendarOverflowError,
    InvalidDateError,
    InvalidFormatError,
    InvalidTimeError,
    NestedTimeError,
    OutOfRangeError,
    ParseError,
    ProcessingError,
    ResultKind,
    from_human_time,
)

# (expression, expected value) with now = Friday 2010-01-01 00:00:00
EXPRESSIONS = [
    # date and time
    ("Today 18:30", datetime(2010, 1, 1, 18, 30)),
    ("15:20 Friday", datetime(2010, 1, 8, 15, 20)),
    ("2022-11-07 13:25", datetime(2022, 11, 7, 13, 25)),
    ("2022-11-07 13:25:30", datetime(2022, 11, 7, 13, 25, 30)),
    ("This Friday 17:00", datetime(2010, 1, 1, 17, 0)),
    ("13:25, Next Tuesday", datetime(2010, 1, 5, 13, 25)),
    ("Last Friday at 19:45", datetime(2009, 12, 25, 19, 45)),
    ("tomorrow,08:00", datetime(2010, 1, 2, 8, 0)),
    # dates
    ("Today", date(2010, 1, 1)),
    ("Tomorrow", date(2010, 1, 2)),
    ("Overmorrow", date(2010, 1, 3)),
    ("Yesterday", date(2009, 12, 31)),
    ("2024-03-03", date(2024, 3, 3)),
    ("15 Feb 2017", date(2017, 2, 15)),
    ("15 february 2017", date(2017, 2, 15)),
    ("13 November", date(2010, 11, 13)),
    ("1 sept", date(2010, 9, 1)),
    ("This Monday", date(2010, 1, 4)),
    ("Next Friday", date(2010, 1, 8)),
    ("this friday", date(2010, 1, 1)),
    ("last friday", date(2009, 12, 25)),
    ("Last Tuesday", date(2009, 12, 29)),
    ("Monday", date(2010, 1, 4)),
    ("fri", date(2010, 1, 8)),
    ("next tues", date(2010, 1, 5)),
    ("next week monday", date(2010, 1, 4)),
    ("this week monday", date(2009, 12, 28)),
    ("last week sun", date(2009, 12, 27)),
    ("next month", date(2010, 2, 1)),
    ("last year", date(2009, 1, 1)),
    ("this week", date(2010, 1, 1)),
    ("next day", date(2010, 1, 2)),
    # times
    ("0:20", time(0, 20)),
    ("12:30", time(12, 30)),
    ("22:25", time(22, 25)),
    ("15:55:25", time(15, 55, 25)),
    # in
    ("In 3 days", datetime(2010, 1, 4)),
    ("In 2 hours", datetime(2010, 1, 1, 2, 0)),
    ("In 5 minutes and 30 seconds", datetime(2010, 1, 1, 0, 5, 30)),
    ("in an hour", datetime(2010, 1, 1, 1, 0)),
    # ago
    ("10 seconds ago", datetime(2009, 12, 31, 23, 59, 50)),
    ("10 hours and 5 minutes ago", datetime(2009, 12, 31, 13, 55)),
    ("2 hours, 32 minutes and 7 seconds ago", datetime(2009, 12, 31, 21, 27, 53)),
    (
        "1 years, 2 months, 3 weeks, 5 days, 8 hours, 17 minutes and 45 seconds ago",
        datetime(2008, 10, 5, 15, 42, 15),
    ),
    (
        "1 year, 1 month, 1 week, 1 day, 1 hour, 1 minute and 1 second ago",
        datetime(2008, 11, 22, 22, 58, 59),
    ),
    ("A year ago", datetime(2009, 1, 1)),
    ("A month ago", datetime(2009, 12, 1)),
    ("A week ago", datetime(2009, 12, 25)),
    ("A day ago", datetime(2009, 12, 31)),
    ("An hour ago", datetime(2009, 12, 31, 23, 0)),
    ("A minute ago", datetime(2009, 12, 31, 23, 59)),
    ("A second ago", datetime(2009, 12, 31, 23, 59, 59)),
    # anchored
    ("12 hours ago at 7 days ago", datetime(2009, 12, 24, 12, 0)),
    ("2 hours ago at today", datetime(2009, 12, 31, 22, 0)),
    ("1 hour ago at 19:45", datetime(2010, 1, 1, 18, 45)),
    ("1 day ago at last friday at 19:45", datetime(2009, 12, 24, 19, 45)),
    ("1 day ago at 1 day ago at 1 day ago", datetime(2009, 12, 29)),
    ("3 days ago at in 3 days", datetime(2010, 1, 1)),
    # now
    ("now", datetime(2010, 1, 1)),
]


@pytest.mark.parametrize("text, expected", EXPRESSIONS)
def test_expressions(extractor, now, text, expected):
    result = extractor.extract(text, now)

    assert result.value == expected
    assert type(result.value) is type(expected)


def test_result_kinds(extractor, now):
    assert extractor.extract("next friday", now).kind is ResultKind.DATE
    assert extractor.extract("19:45", now).is_time
    assert extractor.extract("in 3 days", now).is_datetime
    assert extractor.extract("today 18:30", now).is_datetime


def test_result_text(extractor, now):
    assert str(extractor.extract("in 5 minutes and 30 seconds", now)) == "2010-01-01 00:05:30"
    assert str(extractor.extract("next friday", now)) == "2010-01-08"
    assert str(extractor.extract("19:45", now)) == "19:45:00"


def test_from_human_time(now):
    assert from_human_time("next friday", now).value == date(2010, 1, 8)


def test_now_is_exact():
    now = datetime(2021, 6, 5, 13, 14, 15, 161718, tzinfo=timezone(timedelta(hours=2)))

    assert from_human_time("now", now).value == now


def test_absolute_date_time_ignores_now(extractor):
    for now in (datetime(1999, 1, 1), datetime(2030, 7, 15, 12, 0)):
        assert extractor.extract("2022-11-07 13:25:30", now).value == datetime(2022, 11, 7, 13, 25, 30)


def test_timezone_is_kept(extractor):
    tz = timezone(timedelta(hours=-5))
    now = datetime(2010, 1, 1, 9, 0, tzinfo=tz)

    assert extractor.extract("tomorrow 18:30", now).value == datetime(2010, 1, 2, 18, 30, tzinfo=tz)
    assert extractor.extract("2 hours ago", now).value == datetime(2010, 1, 1, 7, 0, tzinfo=tz)


def test_whitespace_and_case_are_normalized(extractor, now):
    assert extractor.extract("  LAST   Friday \t at  19:45  ", now).value == datetime(2009, 12, 25, 19, 45)


def test_in_ago_round_trip(extractor):
    start = datetime(2023, 5, 17, 10, 20, 30)
    for text in ("2 years", "3 months", "1 week, 2 days", "5 hours and 6 seconds"):
        moved = extractor.extract(f"in {text}", start).value
        assert extractor.extract(f"{text} ago", moved).value == start


def test_this_weekday_on_matching_day(extractor):
    start = datetime(2024, 3, 4)
    names = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]
    for offset, name in enumerate(names):
        now = start + timedelta(days=offset)
        assert extractor.extract(f"this {name}", now).value == now.date()
        assert extractor.extract(name, now).value == now.date() + timedelta(days=7)
        assert extractor.extract(f"next {name}", now).value == now.date() + timedelta(days=7)
        assert extractor.extract(f"last {name}", now).value == now.date() - timedelta(days=7)


def processing_errors(extractor, text, now):
    with pytest.raises(ProcessingError) as info:
        extractor.extract(text, now)
    return [type(e) for e in info.value.errors]


def test_processing_errors(extractor, now):
    assert processing_errors(extractor, "2023-11-31", now) == [InvalidDateError]
    assert processing_errors(extractor, "30 february", now) == [InvalidDateError]
    assert processing_errors(extractor, "25:00", now) == [InvalidTimeError]
    assert processing_errors(extractor, "2023-11-31 25:00", now) == [InvalidDateError, InvalidTimeError]
    assert processing_errors(extractor, "1 month ago", datetime(2010, 3, 31)) == [CalendarOverflowError]
    assert processing_errors(extractor, "next month", datetime(2010, 1, 31)) == [CalendarOverflowError]
    assert processing_errors(extractor, "in 999999999 days", now) == [OutOfRangeError]
    assert processing_errors(extractor, "1 day ago at 2023-02-30", now) == [NestedTimeError]


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        "tomorow",
        "Tommorow",
        "07-11-2014",
        "02 03 2010",
        "3 days",
        "in",
        "ago",
        "next",
        "in -3 days",
        "in 3 days ago",
        "friday friday",
        "next hour",
        "12",
        "12:",
        "2022-1-07",
        "now ago",
        "a 3 days ago",
        "tomorrow at",
        "in 3 days at 12:00",
        "next week next week",
        "lastfriday",
    ],
)
def test_invalid_format(extractor, now, text):
    with pytest.raises(InvalidFormatError):
        extractor.extract(text, now)


def test_errors_are_value_errors(extractor, now):
    with pytest.raises(ValueError):
        extractor.extract("whenever", now)
    with pytest.raises(ParseError):
        extractor.extract("2023-11-31", now)


def test_now_must_be_a_datetime(extractor):
    with pytest.raises(TypeError):
        extractor.extract("today", date(2010, 1, 1))


def test_deep_nesting_is_rejected(extractor, now):
    text = " at ".join(["1 second ago"] * 40)
    with pytest.raises(InvalidFormatError):
        extractor.extract(text, now)

    text = " at ".join(["1 second ago"] * 20)
    assert extractor.extract(text, now).value == now - timedelta(seconds=20)
