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

from ...core.utils import get_abs_path, insert_field


class RelativeBaseRule:
    """Relative vocabulary shared by the date and weekday rules"""

    def __init__(self):
        # this -> 0, next -> 1, last -> -1
        self.specifier = string_file(get_abs_path("../../data/relative/specifiers.tsv"))
        # today -> 0, tomorrow -> 1, overmorrow -> 2, yesterday -> -1
        self.day_words = string_file(get_abs_path("../../data/relative/day_words.tsv"))
        self.calendar_units = string_file(get_abs_path("../../data/relative/calendar_units.tsv"))
        self.now_expressions = string_file(get_abs_path("../../data/relative/now_expressions.tsv"))

    def build_day_word_rules(self):
        """today / tomorrow / overmorrow / yesterday -> offset_day: "1" """
        return insert_field("offset_day", self.day_words)

    def build_specifier(self, key: str = "relative"):
        """this / next / last -> relative: "0" / "1" / "-1" """
        return insert_field(key, self.specifier)

    def build_unit_rules(self):
        """Calendar unit usable after a specifier: year, month, week, day"""
        return insert_field("unit", self.calendar_units)
