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

from datetime import datetime
from typing import Optional

from .ast_builder import AstBuilder
from .ast_nodes import HumanTime
from .core.logger import get_logger
from .core.token_parser import TokenParser
from .errors import InternalError, InvalidFormatError
from .normalizer import Normalizer
from .result import ParseResult
from .time_parser import TimeParser


class HumanTimeExtractor:
    """Grammar matching, AST building and resolution in one object"""

    def __init__(
        self,
        cache_dir: Optional[str] = None,
        overwrite_cache: bool = False,
        max_nesting: int = AstBuilder.DEFAULT_MAX_NESTING,
    ):
        """
        Args:
            cache_dir (str, optional): directory to cache the compiled grammar in
            overwrite_cache (bool): rebuild the cached grammar
            max_nesting (int): deepest "<duration> ago at ..." chain accepted
        """
        self.logger = get_logger(__name__)
        self.normalizer = Normalizer(cache_dir=cache_dir, overwrite_cache=overwrite_cache)
        self.ast_builder = AstBuilder(max_nesting=max_nesting)
        self.time_parser = TimeParser()

    def build_ast(self, text: str) -> HumanTime:
        """
        Match ``text`` against the grammar and build its AST

        Raises:
            InvalidFormatError: the text is not a supported expression
            InternalError: the grammar and the AST builder disagree
        """
        query_tag = self.normalizer.tag(text)

        if query_tag is None:
            self.logger.debug(f"No grammar match for {text!r}")
            raise InvalidFormatError()
        self.logger.debug(f"Tag: {query_tag}")

        try:
            tokens = TokenParser().parse(query_tag)
        except ValueError as e:
            raise InternalError(f"cannot read grammar output {query_tag!r}: {e}")

        return self.ast_builder.build(tokens)

    def resolve(self, ast: HumanTime, now: datetime) -> ParseResult:
        """
        Resolve an AST against ``now``

        Raises:
            ProcessingError: the expression cannot be resolved
        """
        return self.time_parser.resolve(ast, now)

    def extract(self, text: str, now: datetime) -> ParseResult:
        """
        Parse ``text`` and resolve it relative to ``now``

        Args:
            text (str): human time expression, e.g. "last friday at 19:45"
            now (datetime): reference instant

        Returns:
            ParseResult: the resolved date, time or point in time

        Raises:
            ParseError: InvalidFormatError, ProcessingError or InternalError
        """
        if not isinstance(now, datetime):
            raise TypeError(f"now must be a datetime, got {type(now).__name__}")
        return self.resolve(self.build_ast(text), now)


_default_extractor: Optional[HumanTimeExtractor] = None


def get_default_extractor() -> HumanTimeExtractor:
    """Shared extractor, built on first use"""
    global _default_extractor
    if _default_extractor is None:
        _default_extractor = HumanTimeExtractor()
    return _default_extractor


def from_human_time(text: str, now: datetime) -> ParseResult:
    """
    Convert a human time expression into a date, time or point in time

    Args:
        text (str): e.g. "in 3 days", "last friday at 19:45", "2 hours ago"
        now (datetime): reference instant all relative expressions use

    Returns:
        ParseResult: resolved value

    Raises:
        ParseError: InvalidFormatError, ProcessingError or InternalError

    Example:
        >>> from_human_time("next friday", datetime(2010, 1, 1)).value
        datetime.date(2010, 1, 8)
    """
    return get_default_extractor().extract(text, now)
