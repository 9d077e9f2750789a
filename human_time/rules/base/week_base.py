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

from pynini import string_file
from pynini.lib import pynutil

from ...core.utils import delete_space, get_abs_path, insert_field
from .relative_base import RelativeBaseRule

delete = pynutil.delete


class WeekBaseRule:
    """Weekday rules for English"""

    def __init__(self):
        weekday_full = string_file(get_abs_path("../../data/week/weekdays_full.tsv"))
        weekday_abbr = string_file(get_abs_path("../../data/week/weekdays_abbr.tsv"))
        # Monday -> 0 ... Sunday -> 6
        self.weekday = (weekday_full | weekday_abbr).optimize()
        self.relative = RelativeBaseRule()

    def build_weekday(self):
        return insert_field("week_day", self.weekday)

    def build_rules(self):
        """
        Build weekday rules

        - "next week monday" -> offset_week: "1" week_day: "0"
        - "last friday"      -> relative: "-1" week_day: "4"
        - "friday"           -> week_day: "4"
        """
        weekday = self.build_weekday()

        week_weekday = (
            self.relative.build_specifier("offset_week")
            + delete_space
            + delete("week")
            + delete_space
            + weekday
        )
        relative_weekday = self.relative.build_specifier() + delete_space + weekday

        return (week_weekday | relative_weekday | weekday).optimize()
