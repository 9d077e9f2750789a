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

from typing import Callable, Dict, List

from .ast_nodes import (
    CALENDAR_UNITS,
    Ago,
    Date,
    DateTime,
    DayMonth,
    DayMonthYear,
    Duration,
    HourMinute,
    HourMinuteSecond,
    HumanTime,
    In,
    IsoDate,
    Month,
    Now,
    Overmorrow,
    Quantifier,
    RelativeSpecifier,
    RelativeTimeUnit,
    RelativeWeekday,
    RelativeWeekWeekday,
    Time,
    TimeUnit,
    Today,
    Tomorrow,
    UpcomingWeekday,
    Weekday,
    Yesterday,
)
from .core.logger import get_logger
from .core.token_parser import Token
from .errors import InternalError, InvalidFormatError

DAY_OFFSETS = {
    0: Today,
    1: Tomorrow,
    2: Overmorrow,
    -1: Yesterday,
}

DIRECTION_FORWARD = 1
DIRECTION_BACKWARD = -1


class AstBuilder:
    """
    Convert the grammar's token list into a HumanTime tree

    Token shapes and the node each one maps to:

    - [time_now]                          -> Now
    - [date]                              -> Date
    - [time_clock]                        -> Time
    - [date, time_clock] / [time_clock, date] -> DateTime
    - [time_delta(+1)]                    -> In
    - [time_delta(-1)]                    -> Ago
    - [time_delta(-1), rest...]           -> Ago anchored at build(rest)

    where ``date`` is one of time_relative, time_date, time_weekday.
    """

    DEFAULT_MAX_NESTING = 32

    def __init__(self, max_nesting: int = DEFAULT_MAX_NESTING):
        self.logger = get_logger(__name__)
        self.max_nesting = max_nesting
        self.date_builders: Dict[str, Callable[[Token], Date]] = {
            "time_relative": self._build_relative,
            "time_date": self._build_calendar_date,
            "time_weekday": self._build_weekday,
        }

    def build(self, tokens: List[Token]) -> HumanTime:
        """
        Build the AST for a full token list

        Args:
            tokens (List[Token]): tokens of one grammar match

        Returns:
            HumanTime: root node

        Raises:
            InvalidFormatError: if "ago ... at ..." nests deeper than max_nesting
            InternalError: if the token list has an unknown shape
        """
        if not tokens:
            raise InternalError("grammar produced no tokens")

        anchors = []
        index = 0
        while index < len(tokens) - 1 and self._is_ago(tokens[index]):
            anchors.append(self._build_duration(tokens[index]))
            index += 1

        if len(anchors) > self.max_nesting:
            raise InvalidFormatError(
                f"Expression nests more than {self.max_nesting} anchored 'ago' references"
            )

        node = self._build_base(tokens[index:])
        for duration in reversed(anchors):
            node = Ago(duration, node)

        self.logger.debug(f"AST: {node}")
        return node

    def _build_base(self, tokens: List[Token]) -> HumanTime:
        names = [token.name for token in tokens]

        if len(tokens) == 1:
            token = tokens[0]
            if token.name == "time_now":
                return Now()
            if token.name == "time_clock":
                return self._build_time(token)
            if token.name == "time_delta":
                duration = self._build_duration(token)
                if self._direction(token) == DIRECTION_FORWARD:
                    return In(duration)
                return Ago(duration)
            if token.name in self.date_builders:
                return self._build_date(token)

        if len(tokens) == 2:
            first, second = tokens
            if first.name in self.date_builders and second.name == "time_clock":
                return DateTime(self._build_date(first), self._build_time(second))
            if first.name == "time_clock" and second.name in self.date_builders:
                return DateTime(self._build_date(second), self._build_time(first))

        raise InternalError(f"unexpected token sequence {names}")

    def _build_date(self, token: Token) -> Date:
        return self.date_builders[token.name](token)

    def _build_relative(self, token: Token) -> Date:
        members = token.members
        if "offset_day" in members:
            offset = self._signed(token, "offset_day")
            if offset not in DAY_OFFSETS:
                raise InternalError(f"unknown day offset {offset}")
            return DAY_OFFSETS[offset]()

        if "relative" in members and "unit" in members:
            unit = self._enum(TimeUnit, members["unit"], token)
            if unit not in CALENDAR_UNITS:
                raise InternalError(f"unit {unit.value} cannot follow a relative specifier")
            return RelativeTimeUnit(self._specifier(token, "relative"), unit)

        raise InternalError(f"unexpected relative token {token.string()}")

    def _build_calendar_date(self, token: Token) -> Date:
        members = token.members
        if "month_name" in members:
            day = self._number(token, "day")
            month = self._enum(Month, self._number(token, "month_name"), token)
            if "year" in members:
                return DayMonthYear(day, month, self._number(token, "year"))
            return DayMonth(day, month)

        if {"year", "month", "day"} <= members.keys():
            return IsoDate(
                self._number(token, "year"),
                self._number(token, "month"),
                self._number(token, "day"),
            )

        raise InternalError(f"unexpected date token {token.string()}")

    def _build_weekday(self, token: Token) -> Date:
        members = token.members
        weekday = self._enum(Weekday, self._number(token, "week_day"), token)

        if "offset_week" in members:
            return RelativeWeekWeekday(self._specifier(token, "offset_week"), weekday)
        if "relative" in members:
            return RelativeWeekday(self._specifier(token, "relative"), weekday)
        return UpcomingWeekday(weekday)

    def _build_time(self, token: Token) -> Time:
        hour = self._number(token, "hour")
        minute = self._number(token, "minute")
        if "second" in token.members:
            return HourMinuteSecond(hour, minute, self._number(token, "second"))
        return HourMinute(hour, minute)

    def _build_duration(self, token: Token) -> Duration:
        quantifiers = []
        for key, value in token.fields:
            if key == "offset_direction":
                continue
            unit = self._enum(TimeUnit, key, token)
            quantifiers.append(Quantifier(self._to_int(value, key), unit))

        if not quantifiers:
            raise InternalError(f"duration without quantifiers: {token.string()}")
        return Duration(tuple(quantifiers))

    def _is_ago(self, token: Token) -> bool:
        return token.name == "time_delta" and self._direction(token) == DIRECTION_BACKWARD

    def _direction(self, token: Token) -> int:
        direction = self._signed(token, "offset_direction")
        if direction not in (DIRECTION_FORWARD, DIRECTION_BACKWARD):
            raise InternalError(f"unknown offset direction {direction}")
        return direction

    def _specifier(self, token: Token, key: str) -> RelativeSpecifier:
        return self._enum(RelativeSpecifier, self._signed(token, key), token)

    @staticmethod
    def _enum(enum_cls, value, token: Token):
        try:
            return enum_cls(value)
        except ValueError:
            raise InternalError(f"{value!r} is not a valid {enum_cls.__name__} in {token.string()}")

    @staticmethod
    def _field(token: Token, key: str) -> str:
        try:
            return token.members[key]
        except KeyError:
            raise InternalError(f"missing field {key} in {token.string()}")

    def _number(self, token: Token, key: str) -> int:
        return self._to_int(self._field(token, key), key)

    def _signed(self, token: Token, key: str) -> int:
        value = self._field(token, key)
        try:
            return int(value)
        except ValueError:
            raise InternalError(f"malformed number {value!r} in field {key}")

    @staticmethod
    def _to_int(value: str, key: str) -> int:
        if not (value.isascii() and value.isdigit()):
            raise InternalError(f"malformed number {value!r} in field {key}")
        return int(value)
