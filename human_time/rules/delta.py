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

from ..core.processor import Processor
from ..core.utils import delete_space, get_abs_path, insert_field
from .base import TimeBaseRule


class DeltaRule(Processor):
    """Duration offsets from now

    - "in 3 days" -> offset_direction: "1" day: "3"
    - "10 hours and 5 minutes ago" -> hour: "10" minute: "5" offset_direction: "-1"
    - "an hour ago" -> hour: "1" offset_direction: "-1"
    """

    def __init__(self):
        super().__init__(name="time_delta")
        self.time_cnt = TimeBaseRule().build_time_cnt_rules()
        self.after_prefix = insert_field(
            "offset_direction", string_file(get_abs_path("../data/delta/after_prefix.tsv"))
        )
        self.before_suffix = insert_field(
            "offset_direction", string_file(get_abs_path("../data/delta/before_suffix.tsv"))
        )
        self.build_tagger()

    def build_tagger(self):
        # "in <duration>"
        after = self.after_prefix + delete_space + self.time_cnt
        # "<duration> ago"
        before = self.time_cnt + delete_space + self.before_suffix

        self.in_tagger = self.add_tokens(after)
        self.ago_tagger = self.add_tokens(before)
        self.tagger = (self.in_tagger | self.ago_tagger).optimize()
