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

from abc import ABC, abstractmethod
from datetime import date, timedelta

from ..ast_nodes import Weekday
from ..core.logger import get_logger
from ..errors import OutOfRangeError


class BaseParser(ABC):
    """
    Base class of the AST resolvers

    Every resolver turns one family of AST nodes into a ``datetime`` value
    relative to a reference instant and raises ResolutionError subclasses on
    failure.
    """

    def __init__(self):
        self.logger = get_logger(self.__class__.__module__)

    @abstractmethod
    def parse(self, node, base_time):
        """
        Resolve one AST node

        Args:
            node: AST node of the family handled by this parser
            base_time (datetime): reference instant

        Returns:
            the resolved ``date``, ``time`` or ``datetime``
        """

    @staticmethod
    def _shift_days(base_date: date, days: int) -> date:
        """
        Move ``base_date`` by a signed number of days

        Raises:
            OutOfRangeError: if the result is not representable
        """
        try:
            return base_date + timedelta(days=days)
        except OverflowError:
            raise OutOfRangeError(f"{days:+d} day(s) from {base_date.isoformat()}")

    @staticmethod
    def _days_forward(base_date: date, weekday: Weekday) -> int:
        """Days until the next ``weekday`` strictly after ``base_date`` (1-7)"""
        return (weekday.value - base_date.weekday() - 1) % 7 + 1

    @staticmethod
    def _days_backward(base_date: date, weekday: Weekday) -> int:
        """Days since the last ``weekday`` strictly before ``base_date`` (1-7)"""
        return (base_date.weekday() - weekday.value - 1) % 7 + 1
