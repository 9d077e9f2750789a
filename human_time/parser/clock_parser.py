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

from datetime import time

from ..ast_nodes import HourMinuteSecond
from ..errors import InvalidTimeError
from .base_parser import BaseParser


class ClockParser(BaseParser):
    """Time of day parser: 19:45, 15:55:25"""

    def parse(self, node, base_time=None):
        """
        Resolve a Time node; the reference instant is not needed

        Returns:
            time: naive time of day

        Raises:
            InvalidTimeError: hour not in 0-23 or minute/second not in 0-59
        """
        second = node.second if isinstance(node, HourMinuteSecond) else None
        try:
            return time(node.hour, node.minute, second or 0)
        except (ValueError, OverflowError):
            raise InvalidTimeError(node.hour, node.minute, second)
