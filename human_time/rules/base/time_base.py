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

from pynini import string_file, union
from pynini.lib import pynutil

from ...core.utils import NUMBER, delete_comma, delete_space, get_abs_path, insert_field

delete = pynutil.delete
insert = pynutil.insert

# Unit key -> accepted words
DURATION_UNITS = {
    "year": ("year", "years"),
    "month": ("month", "months"),
    "week": ("week", "weeks"),
    "day": ("day", "days"),
    "hour": ("hour", "hours"),
    "minute": ("minute", "minutes"),
    "second": ("second", "seconds"),
}


class TimeBaseRule:
    """Clock time and duration rules for English"""

    def __init__(self):
        self.article = string_file(get_abs_path("../../data/delta/indefinite_articles.tsv"))

    def build_time_rules(self):
        """
        Clock time HH:MM[:SS]
        e.g. "19:45" -> hour: "19" minute: "45"
        e.g. "13:22:32" -> hour: "13" minute: "22" second: "32"
        """
        hour_minute = insert_field("hour", NUMBER) + delete(":") + insert_field("minute", NUMBER)
        second = delete(":") + insert_field("second", NUMBER)

        return hour_minute + second.ques

    def build_time_cnt_rules(self):
        """
        Build duration rules, one field per quantifier in input order
        e.g. "2 hours, 32 minutes and 7 seconds" -> hour: "2" minute: "32" second: "7"
        e.g. "an hour" -> hour: "1"
        """
        quantifier = union(
            *[
                insert_field(unit, NUMBER) + delete_space + delete(union(*words))
                for unit, words in DURATION_UNITS.items()
            ]
        ).optimize()

        # ", " / " and " / ", and "
        separator = delete_comma | (delete_space + delete("and") + delete_space)
        separator |= delete(",") + delete_space + delete("and") + delete_space

        quantifier_list = quantifier + (separator + quantifier).star

        single_unit = union(
            *[
                delete(self.article) + delete_space + insert_field(unit, insert("1")) + delete(unit)
                for unit in DURATION_UNITS
            ]
        )

        return (quantifier_list | single_unit).optimize()
