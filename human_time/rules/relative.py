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

from ..core.processor import Processor
from ..core.utils import delete_space
from .base import RelativeBaseRule


class RelativeRule(Processor):
    """
    Relative dates

    - "yesterday" -> offset_day: "-1"
    - "next month" -> relative: "1" unit: "month"
    """

    def __init__(self):
        super().__init__(name="time_relative")
        self.relative = RelativeBaseRule()
        self.build_tagger()

    def build_tagger(self):
        day_words = self.relative.build_day_word_rules()
        relative_unit = self.relative.build_specifier() + delete_space + self.relative.build_unit_rules()
        self.tagger = self.add_tokens(day_words | relative_unit)
