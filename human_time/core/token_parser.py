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
Token parser

Turns the tagged text produced by the grammar, e.g.
``time_delta { offset_direction: "-1" hour: "12" } time_relative { offset_day: "0" }``
into an ordered list of Token objects.
"""

import string
from typing import Dict, List, Tuple


EOS = "<EOS>"


class Token:
    """
    One tagged span of the input.

    Fields keep their input order and may repeat (a duration can mention the
    same unit twice), so they are stored as a list of pairs; ``members`` is a
    dict view for single-valued lookups.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.fields: List[Tuple[str, str]] = []

    def append(self, key: str, value: str) -> None:
        self.fields.append((key, value))

    @property
    def members(self) -> Dict[str, str]:
        return dict(self.fields)

    def string(self) -> str:
        """
        Format the token back into tagged text.

        Returns:
            str: e.g. ``time_clock { hour: "19" minute: "45" }``
        """
        output = self.name + " {"
        for key, value in self.fields:
            output += f' {key}: "{value}"'
        return output + " }"

    def __repr__(self) -> str:
        return f"Token({self.string()})"


class TokenParser:
    """
    Character level reader for tagged text.

    Grammar of the input:
        tokens := (ws name " { " (ws key ": " value)* ws "}")* ws
        value  := '"' chars '"' | digits
    """

    def __init__(self) -> None:
        self.index: int = 0
        self.text: str = ""
        self.char: str = ""
        self.tokens: List[Token] = []

    def load(self, input_text: str) -> None:
        """
        Load the text to parse.

        Raises:
            ValueError: if the text is empty
        """
        if not input_text:
            raise ValueError("input text must not be empty")

        self.index = 0
        self.text = input_text
        self.char = input_text[0]
        self.tokens = []

    def read(self) -> bool:
        """Advance one character; returns False once the end is reached."""
        if self.index < len(self.text) - 1:
            self.index += 1
            self.char = self.text[self.index]
            return True
        self.char = EOS
        return False

    def parse_ws(self) -> bool:
        """Skip spaces; returns False at end of text."""
        not_eos = self.char != EOS
        while not_eos and self.char == " ":
            not_eos = self.read()
        return not_eos

    def parse_char(self, expected_char: str) -> bool:
        if self.char == expected_char:
            self.read()
            return True
        return False

    def parse_chars(self, expected_chars: str) -> bool:
        """Match ``expected_chars`` in order."""
        for expected_char in expected_chars:
            if not self.parse_char(expected_char):
                return False
        return True

    def parse_key(self) -> str:
        """
        Parse a name made of letters, digits and underscores.

        Raises:
            ValueError: on end of text or an invalid first character
        """
        if self.char == EOS:
            raise ValueError("unexpected end of text")
        if self.char in string.whitespace:
            raise ValueError(f"key must not start with whitespace: '{self.char}'")

        key = ""
        valid_chars = string.ascii_letters + "_" + string.digits

        while self.char in valid_chars:
            key += self.char
            if not self.read():
                break

        if not key:
            raise ValueError(f"invalid key character: '{self.char}'")

        return key

    def parse_value(self) -> str:
        """
        Parse a quoted value, or a bare signed digit run.

        Raises:
            ValueError: on end of text or an unterminated quote
        """
        if self.char == EOS:
            raise ValueError("unexpected end of text")

        value = ""

        if self.char in string.digits + "-":
            while self.char in string.digits + "-":
                value += self.char
                if not self.read():
                    break
            return value

        if self.char != '"':
            raise ValueError(f"value must start with a quote: '{self.char}'")

        self.read()

        escape = False
        while self.char != '"':
            if self.char == EOS:
                raise ValueError("unterminated quote")

            if escape:
                escape = False
                value += self.char
            elif self.char == "\\":
                escape = True
            else:
                value += self.char

            if not self.read():
                break

        if self.char == '"':
            self.read()

        return value.strip()

    def parse(self, input_text: str) -> List[Token]:
        """
        Parse tagged text into tokens.

        Args:
            input_text: tagged text

        Returns:
            List[Token]: tokens in input order

        Raises:
            ValueError: if the text is not well formed
        """
        try:
            self.load(input_text)

            while self.parse_ws():
                name = self.parse_key()

                if not self.parse_chars(" {"):
                    raise ValueError(f"expected ' {{' but found: '{self.char}'")

                token = Token(name)

                while self.parse_ws():
                    if self.char == "}":
                        self.parse_char("}")
                        break

                    key = self.parse_key()

                    if not self.parse_chars(": "):
                        raise ValueError(f"expected ': ' but found: '{self.char}'")

                    token.append(key, self.parse_value())
                else:
                    raise ValueError("unterminated token")

                self.tokens.append(token)

            return self.tokens

        except ValueError as e:
            raise ValueError(f"parse error at position {self.index}: {e}")
