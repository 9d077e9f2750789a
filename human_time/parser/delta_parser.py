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

from datetime import timedelta

from dateutil.relativedelta import relativedelta

from ..ast_nodes import Duration, In, Quantifier, TimeUnit
from ..errors import CalendarOverflowError, OutOfRangeError
from .base_parser import BaseParser

FORWARD = 1
BACKWARD = -1


class DeltaParser(BaseParser):
    """
    Duration offsets

    Handles:
    - in 3 days
    - 10 hours and 5 minutes ago
    - a year ago
    """

    def parse(self, node, base_time):
        """
        Resolve an In node, or an Ago node relative to ``base_time``

        Args:
            node (In | Ago): offset node; an Ago anchor must already be
                resolved into ``base_time`` by the caller
            base_time (datetime): instant the duration is applied to

        Returns:
            datetime: shifted instant
        """
        direction = FORWARD if isinstance(node, In) else BACKWARD
        return self.apply_duration(node.duration, base_time, direction)

    def apply_duration(self, duration: Duration, base_time, direction: int):
        """
        Apply every quantifier of ``duration`` in input order

        Args:
            duration (Duration): quantifiers to apply
            base_time (date | datetime): starting point
            direction (int): 1 to move forward, -1 to move backward

        Returns:
            date | datetime: same type as ``base_time``

        Raises:
            CalendarOverflowError: a year/month step lands on a missing day
            OutOfRangeError: the result leaves the supported range
        """
        result_time = base_time
        for quantifier in duration.quantifiers:
            result_time = self._apply_quantifier(result_time, quantifier, direction)
        self.logger.debug(f"Applied {duration} ({direction:+d}) to {base_time}: {result_time}")
        return result_time

    def _apply_quantifier(self, base_time, quantifier: Quantifier, direction: int):
        count = quantifier.count * direction
        unit = quantifier.unit

        try:
            if unit is TimeUnit.YEAR:
                result_time = base_time + relativedelta(years=count)
            elif unit is TimeUnit.MONTH:
                result_time = base_time + relativedelta(months=count)
            else:
                result_time = base_time + timedelta(**{f"{unit.value}s": count})
        except (OverflowError, ValueError):
            raise OutOfRangeError(
                f"{count:+d} {unit.value}(s) from {base_time.isoformat()}"
            )

        # relativedelta clamps the day of month (Mar 31 - 1 month -> Feb 28)
        if unit in (TimeUnit.YEAR, TimeUnit.MONTH) and result_time.day != base_time.day:
            raise CalendarOverflowError(unit.value, count, base_time)

        return result_time
