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

from datetime import datetime

from .ast_nodes import (
    DATE_VARIANTS,
    TIME_VARIANTS,
    Ago,
    DateTime,
    HumanTime,
    In,
    Now,
)
from .core.logger import get_logger
from .errors import InternalError, NestedTimeError, ProcessingError, ResolutionError
from .parser import ClockParser, DateParser, DeltaParser
from .result import ParseResult, ResultKind


class TimeParser:
    """Resolve a HumanTime tree against a reference instant"""

    def __init__(self):
        self.logger = get_logger(__name__)
        self.delta_parser = DeltaParser()
        self.date_parser = DateParser(self.delta_parser)
        self.clock_parser = ClockParser()

    def resolve(self, ast: HumanTime, now: datetime) -> ParseResult:
        """
        Resolve ``ast`` relative to ``now``

        Args:
            ast (HumanTime): root node
            now (datetime): reference instant, threaded unchanged through the
                whole tree except where an "ago ... at ..." anchor replaces it

        Returns:
            ParseResult: datetime, date or time result

        Raises:
            ProcessingError: with every ResolutionError found
        """
        try:
            result = self._evaluate(ast, now)
        except ResolutionError as e:
            raise ProcessingError([e]) from e

        self.logger.debug(f"Resolved {ast} at {now.isoformat()}: {result}")
        return result

    def _evaluate(self, node: HumanTime, now: datetime) -> ParseResult:
        if isinstance(node, Now):
            return ParseResult.from_datetime(now)

        if isinstance(node, TIME_VARIANTS):
            return ParseResult.from_time(self.clock_parser.parse(node))

        if isinstance(node, DATE_VARIANTS):
            return ParseResult.from_date(self.date_parser.parse(node, now))

        if isinstance(node, DateTime):
            return ParseResult.from_datetime(self._evaluate_date_time(node, now))

        if isinstance(node, In):
            return ParseResult.from_datetime(self.delta_parser.parse(node, now))

        if isinstance(node, Ago):
            anchor = now if node.anchor is None else self._evaluate_anchor(node.anchor, now)
            return ParseResult.from_datetime(self.delta_parser.parse(node, anchor))

        raise InternalError(f"not a HumanTime node: {node!r}")

    def _evaluate_date_time(self, node: DateTime, now: datetime) -> datetime:
        """Resolve both halves, reporting the failures of both together"""
        errors = []
        resolved_date = resolved_time = None

        try:
            resolved_date = self.date_parser.parse(node.date, now)
        except ResolutionError as e:
            errors.append(e)

        try:
            resolved_time = self.clock_parser.parse(node.time)
        except ResolutionError as e:
            errors.append(e)

        if errors:
            raise ProcessingError(errors)

        return datetime.combine(resolved_date, resolved_time, tzinfo=now.tzinfo)

    def _evaluate_anchor(self, node: HumanTime, now: datetime) -> datetime:
        """Resolve the inner expression of "<duration> ago at <expression>" to an instant"""
        try:
            anchor = self._evaluate(node, now)
        except ProcessingError as e:
            raise NestedTimeError(e.errors) from e
        except ResolutionError as e:
            raise NestedTimeError([e]) from e

        return self.combine(anchor, now)

    @staticmethod
    def combine(result: ParseResult, now: datetime) -> datetime:
        """
        Turn any result into an instant, filling the missing half from ``now``

        A date keeps ``now``'s time of day, a time keeps ``now``'s date.
        """
        if result.kind is ResultKind.DATE:
            return datetime.combine(result.value, now.timetz())
        if result.kind is ResultKind.TIME:
            return datetime.combine(now.date(), result.value, tzinfo=now.tzinfo)
        return result.value

