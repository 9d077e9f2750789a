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
from .base import WeekBaseRule


class WeekRule(Processor):
    """Week rule processor, handles "friday", "last friday" and "next week monday" """

    def __init__(self):
        super().__init__(name="time_weekday")
        self.weekday = WeekBaseRule().build_rules()
        self.build_tagger()

    def build_tagger(self):
        self.tagger = self.add_tokens(self.weekday)
