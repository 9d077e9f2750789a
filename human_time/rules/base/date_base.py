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

import pynini
from pynini import string_file
from pynini.lib import pynutil

from ...core.utils import NEMO_DIGIT, NUMBER, delete_space, get_abs_path, insert_field

delete = pynutil.delete


class DateBaseRule:
    """Calendar date rules for English"""

    def __init__(self):
        month_full = string_file(get_abs_path("../../data/date/months.tsv"))
        month_abbr = string_file(get_abs_path("../../data/date/month_abbr.tsv"))
        # january -> 1 ... december -> 12
        self.month = (month_full | month_abbr).optimize()

    def build_iso_rules(self):
        """
        YYYY-MM-DD
        e.g. "2022-11-07" -> year: "2022" month: "11" day: "07"
        """
        year = pynini.closure(NEMO_DIGIT, 4, 4)
        two_digits = pynini.closure(NEMO_DIGIT, 2, 2)

        return (
            insert_field("year", year)
            + delete("-")
            + insert_field("month", two_digits)
            + delete("-")
            + insert_field("day", two_digits)
        )

    def build_day_month_rules(self):
        """
        Day, month name and optional year
        e.g. "15 feb 2017" -> day: "15" month_name: "2" year: "2017"
        e.g. "13 november" -> day: "13" month_name: "11"
        """
        day_month = insert_field("day", NUMBER) + delete_space + insert_field("month_name", self.month)
        year = delete_space + insert_field("year", NUMBER)

        return day_month + year.ques
