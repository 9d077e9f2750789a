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

from typing import Optional

from pynini.lib.pynutil import delete

from .core.processor import Processor
from .core.utils import delete_comma, delete_space
from .rules import ClockRule, DateRule, DeltaRule, NowRule, RelativeRule, WeekRule


class Normalizer(Processor):
    """
    Text front end and top-level grammar for human time expressions

    The grammar accepts exactly one expression covering the whole input:

        HumanTime := (Ago " at ")* Base
        Base      := DateTime | Date | Time | In | Ago | Now

    and emits one tagged token per matched rule, e.g.
    "12 hours ago at 7 days ago" ->
    ``time_delta { hour: "12" offset_direction: "-1" } time_delta { day: "7" offset_direction: "-1" }``
    """

    def __init__(self, cache_dir: Optional[str] = None, overwrite_cache: bool = False):
        """
        Args:
            cache_dir: directory to cache the compiled grammar in, None to
                build it in memory only
            overwrite_cache: rebuild the cached grammar even when present
        """
        super().__init__(name="human_time")
        self.build_fst("human_time", cache_dir, overwrite_cache)

    @staticmethod
    def preprocess(text: str) -> str:
        """
        Lowercase, trim and collapse whitespace runs to a single space

        Args:
            text (str): raw input

        Returns:
            str: normalized text
        """
        if not text:
            return ""
        return " ".join(text.lower().split())

    def tag(self, text: str) -> Optional[str]:
        """
        Normalize ``text`` and tag it with the grammar

        Returns:
            Optional[str]: tagged text, None when the input is not a supported
            expression
        """
        text = self.preprocess(text)
        if not text:
            return None
        return super().tag(text)

    def build_tagger(self):
        """Build the HumanTime grammar out of the rule taggers"""
        delete_at = delete_space + delete("at") + delete_space

        date = (RelativeRule().tagger | DateRule().tagger | WeekRule().tagger).optimize()
        clock = ClockRule().tagger
        delta = DeltaRule()
        now = NowRule().tagger

        # Date and time in either order: "today 18:30", "13:25, next tuesday",
        # "last friday at 19:45"
        separator = delete_space | delete_comma | delete_at
        date_time = date + separator + clock | clock + separator + date

        base = date_time | date | clock | delta.tagger | now

        # "<duration> ago at <HumanTime>" nests to the right, so the chain of
        # anchors is a plain repetition in front of the innermost expression
        anchored = delta.ago_tagger + delete_at

        self.tagger = (anchored.star + base).optimize()
