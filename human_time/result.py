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

from dataclasses import dataclass
from datetime import date, datetime, time
from enum import Enum
from typing import Union


class ResultKind(Enum):
    DATETIME = "datetime"
    DATE = "date"
    TIME = "time"


@dataclass(frozen=True)
class ParseResult:
    """
    Resolved expression

    ``kind`` tells whether the user gave a full point in time, only a date or
    only a time of day; ``value`` is the matching ``datetime`` object.
    """

    kind: ResultKind
    value: Union[datetime, date, time]

    @classmethod
    def from_datetime(cls, value: datetime) -> "ParseResult":
        return cls(ResultKind.DATETIME, value)

    @classmethod
    def from_date(cls, value: date) -> "ParseResult":
        return cls(ResultKind.DATE, value)

    @classmethod
    def from_time(cls, value: time) -> "ParseResult":
        return cls(ResultKind.TIME, value)

    @property
    def is_datetime(self) -> bool:
        return self.kind is ResultKind.DATETIME

    @property
    def is_date(self) -> bool:
        return self.kind is ResultKind.DATE

    @property
    def is_time(self) -> bool:
        return self.kind is ResultKind.TIME

    def __str__(self) -> str:
        if self.is_datetime:
            return self.value.isoformat(sep=" ")
        return self.value.isoformat()
