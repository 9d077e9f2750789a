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

from datetime import date

from ..ast_nodes import (
    DayMonth,
    DayMonthYear,
    Duration,
    IsoDate,
    Overmorrow,
    Quantifier,
    RelativeSpecifier,
    RelativeTimeUnit,
    RelativeWeekday,
    RelativeWeekWeekday,
    Today,
    Tomorrow,
    UpcomingWeekday,
    Yesterday,
)
from ..errors import InternalError, InvalidDateError
from .base_parser import BaseParser
from .delta_parser import DeltaParser


class DateParser(BaseParser):
    """
    Calendar date parser

    Handles:
    - today, tomorrow, overmorrow, yesterday
    - 2024-03-03, 15 february 2017, 13 november
    - friday, this/next/last friday
    - this/next/last week friday
    - this/next/last year/month/week/day
    """

    DAY_OFFSETS = {
        Today: 0,
        Tomorrow: 1,
        Overmorrow: 2,
        Yesterday: -1,
    }

    def __init__(self, delta_parser: DeltaParser = None):
        super().__init__()
        self.delta_parser = delta_parser or DeltaParser()
        self.handlers = {
            Today: self._parse_day_word,
            Tomorrow: self._parse_day_word,
            Overmorrow: self._parse_day_word,
            Yesterday: self._parse_day_word,
            IsoDate: self._parse_iso_date,
            DayMonthYear: self._parse_day_month_year,
            DayMonth: self._parse_day_month,
            RelativeWeekWeekday: self._parse_week_weekday,
            RelativeWeekday: self._parse_relative_weekday,
            RelativeTimeUnit: self._parse_relative_unit,
            UpcomingWeekday: self._parse_upcoming_weekday,
        }

    def parse(self, node, base_time):
        """
        Resolve a Date node

        Args:
            node (Date): date node
            base_time (datetime): reference instant

        Returns:
            date: resolved calendar date

        Raises:
            InternalError: if the node is not a Date variant
        """
        handler = self.handlers.get(type(node))
        if handler is None:
            raise InternalError(f"no date resolver for {type(node).__name__}")
        return handler(node, base_time.date())

    def _parse_day_word(self, node, base_date: date) -> date:
        return self._shift_days(base_date, self.DAY_OFFSETS[type(node)])

    def _parse_iso_date(self, node: IsoDate, base_date: date) -> date:
        return self._construct(node.year, node.month, node.day)

    def _parse_day_month_year(self, node: DayMonthYear, base_date: date) -> date:
        return self._construct(node.year, node.month.value, node.day)

    def _parse_day_month(self, node: DayMonth, base_date: date) -> date:
        return self._construct(base_date.year, node.month.value, node.day)

    def _parse_week_weekday(self, node: RelativeWeekWeekday, base_date: date) -> date:
        """
        Weekday inside a Monday based week: this week, next week (+7 days) or
        last week (-7 days). No search is involved, so "next week monday" on a
        Sunday is the very next day.
        """
        monday = self._shift_days(base_date, -base_date.weekday())
        return self._shift_days(monday, node.spec.value * 7 + node.weekday.value)

    def _parse_relative_weekday(self, node: RelativeWeekday, base_date: date) -> date:
        if node.spec is RelativeSpecifier.LAST:
            return self._shift_days(base_date, -self._days_backward(base_date, node.weekday))
        if node.spec is RelativeSpecifier.THIS and base_date.weekday() == node.weekday.value:
            return base_date
        return self._shift_days(base_date, self._days_forward(base_date, node.weekday))

    def _parse_upcoming_weekday(self, node: UpcomingWeekday, base_date: date) -> date:
        return self._parse_relative_weekday(
            RelativeWeekday(RelativeSpecifier.NEXT, node.weekday), base_date
        )

    def _parse_relative_unit(self, node: RelativeTimeUnit, base_date: date) -> date:
        if node.spec is RelativeSpecifier.THIS:
            return base_date
        duration = Duration((Quantifier(1, node.unit),))
        return self.delta_parser.apply_duration(duration, base_date, node.spec.value)

    @staticmethod
    def _construct(year: int, month: int, day: int) -> date:
        try:
            return date(year, month, day)
        except (ValueError, OverflowError):
            raise InvalidDateError(year, month, day)
