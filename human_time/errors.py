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
Errors raised while parsing and resolving human time expressions

``from_human_time`` only raises ParseError subclasses:

- InvalidFormatError: the text is not a supported expression
- ProcessingError: the text parsed but could not be resolved; carries every
  ResolutionError found
- InternalError: the grammar produced a shape the AST builder does not know,
  which is a bug in this library
"""

from datetime import date
from typing import List, Optional, Sequence


class ResolutionError(ValueError):
    """A single semantic failure while resolving an expression"""


class InvalidTimeError(ResolutionError):
    def __init__(self, hour: int, minute: int, second: Optional[int] = None):
        self.hour = hour
        self.minute = minute
        self.second = second
        fields = f"hour={hour}, minute={minute}"
        if second is not None:
            fields += f", second={second}"
        super().__init__(f"Failed to construct time from {fields}")


class InvalidDateError(ResolutionError):
    def __init__(self, year: int, month: int, day: int):
        self.year = year
        self.month = month
        self.day = day
        super().__init__(f"Failed to construct date from year={year}, month={month}, day={day}")


class CalendarOverflowError(ResolutionError):
    """Adding or subtracting months/years landed on a day the target month lacks"""

    def __init__(self, unit: str, count: int, start: date):
        self.unit = unit
        self.count = count
        self.date = start
        super().__init__(
            f"Applying {count} {unit}(s) to {start.isoformat()} gives a date that does not exist"
        )


class OutOfRangeError(ResolutionError):
    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Result is outside the supported date range: {detail}")


class NestedTimeError(ResolutionError):
    """The anchor of "<duration> ago at <expression>" failed to resolve"""

    def __init__(self, errors: Sequence[ResolutionError]):
        self.errors: List[ResolutionError] = list(errors)
        details = "; ".join(str(e) for e in self.errors)
        super().__init__(f"Failed to resolve the anchor expression: {details}")


class ParseError(ValueError):
    """Base class of everything ``from_human_time`` raises"""


class InvalidFormatError(ParseError):
    def __init__(self, message: str = "Input does not match any supported time format"):
        super().__init__(message)


class ProcessingError(ParseError):
    def __init__(self, errors: Sequence[ResolutionError]):
        self.errors: List[ResolutionError] = list(errors)
        details = "\n".join(f"  - {e}" for e in self.errors)
        super().__init__(f"Failed to resolve the time expression:\n{details}")


class InternalError(ParseError):
    """The parse tree has a shape the AST builder cannot map"""

    def __init__(self, message: str):
        super().__init__(f"Internal error: {message}")
