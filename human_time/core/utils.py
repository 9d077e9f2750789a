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
Helpers shared by the grammar rules: path lookup, character classes and
field insertion.
"""

import inspect
import os

import pynini
from pynini.lib import byte, pynutil

NEMO_DIGIT = byte.DIGIT
NEMO_SPACE = " "

# Unsigned decimal digit sequence, copied through unchanged
NUMBER = pynini.closure(NEMO_DIGIT, 1).optimize()

delete_space = pynutil.delete(NEMO_SPACE)
delete_zero_or_one_space = pynutil.delete(pynini.closure(pynini.accep(NEMO_SPACE), 0, 1))

# "," with optional spaces around it
delete_comma = (
    delete_zero_or_one_space + pynutil.delete(",") + delete_zero_or_one_space
).optimize()


def insert_field(key: str, graph: "pynini.FstLike") -> "pynini.Fst":
    """
    Wrap ``graph`` output as a token field, e.g. ``day: "7" ``

    Args:
        key: field name
        graph: fst producing the field value

    Returns:
        Fst: fst producing ``key: "<value>" ``
    """
    return pynutil.insert(f'{key}: "') + graph + pynutil.insert('" ')


def get_abs_path(rel_path: str) -> str:
    """
    Resolve a path relative to the file of the caller.

    Args:
        rel_path: path relative to the calling module

    Returns:
        str: absolute path

    Raises:
        ValueError: if the caller frame cannot be inspected

    Example:
        >>> # called from /path/to/rules/week.py
        >>> get_abs_path("../data/week/weekdays.tsv")
        '/path/to/rules/../data/week/weekdays.tsv'
    """
    try:
        caller_frame = inspect.currentframe().f_back
        if caller_frame is None:
            raise ValueError("cannot inspect caller frame")

        caller_file = caller_frame.f_globals["__file__"]
        caller_dir = os.path.dirname(os.path.abspath(caller_file))
        return os.path.join(caller_dir, rel_path)

    except (KeyError, AttributeError) as e:
        raise ValueError(f"cannot determine caller file: {e}")
