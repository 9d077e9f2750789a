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

"""
human_time: turn human time expressions into dates and times

    >>> from datetime import datetime
    >>> from human_time import from_human_time
    >>> str(from_human_time("12 hours ago at 7 days ago", datetime(2010, 1, 1)))
    '2009-12-24 12:00:00'
"""

from .errors import (
    CalendarOverflowError,
    InternalError,
    InvalidDateError,
    InvalidFormatError,
    InvalidTimeError,
    NestedTimeError,
    OutOfRangeError,
    ParseError,
    ProcessingError,
    ResolutionError,
)
from .extractor import HumanTimeExtractor, from_human_time
from .result import ParseResult, ResultKind

__version__ = "0.1.0"

__all__ = [
    "from_human_time",
    "HumanTimeExtractor",
    "ParseResult",
    "ResultKind",
    "ParseError",
    "InvalidFormatError",
    "ProcessingError",
    "InternalError",
    "ResolutionError",
    "InvalidTimeError",
    "InvalidDateError",
    "CalendarOverflowError",
    "OutOfRangeError",
    "NestedTimeError",
]
