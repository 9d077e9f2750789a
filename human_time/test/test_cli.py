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

import argparse
import io
from datetime import datetime, timezone

import pytest

from human_time.cli import batch, build_parser, interactive, main, parse_now


def test_parse_now():
    assert parse_now("2010-01-01T00:00:00") == datetime(2010, 1, 1)
    assert parse_now("2025-01-21T08:00:00Z") == datetime(2025, 1, 21, 8, 0, tzinfo=timezone.utc)
    with pytest.raises(argparse.ArgumentTypeError):
        parse_now("yesterday-ish")


def test_interactive(extractor):
    args = build_parser().parse_args(["--now", "2010-01-01T00:00:00"])
    lines = []

    interactive(extractor, args, stdin=io.StringIO("next friday\n\nwhenever\nin 2 hours\n"), writer=lines.append)

    assert lines == [
        "Time now: 2010-01-01 00:00:00",
        "Calculated: 2010-01-08\n",
        "Input does not match any supported time format",
        "Time now: 2010-01-01 00:00:00",
        "Calculated: 2010-01-01 02:00:00\n",
    ]


def test_batch(extractor, tmp_path):
    queries = tmp_path / "queries.txt"
    queries.write_text("last friday at 19:45\n2023-11-31\n", encoding="utf-8")
    args = build_parser().parse_args(["--file", str(queries), "--now", "2010-01-01T00:00:00"])
    lines = []

    assert batch(extractor, str(queries), args, writer=lines.append) == 1
    assert lines[0] == "Line 1: last friday at 19:45 -> 2009-12-25 19:45:00"
    assert lines[1].startswith("Line 2: 2023-11-31 -> error: ")
    assert lines[-1] == "Total: 2, errors: 1"


def test_main_text(capsys):
    assert main(["--text", "next friday", "--now", "2010-01-01T00:00:00"]) == 0
    assert "Result: 2010-01-08" in capsys.readouterr().out


def test_main_rejects_conflicting_arguments():
    with pytest.raises(SystemExit):
        main(["--text", "today", "--file", "queries.txt"])
    with pytest.raises(SystemExit):
        main(["--text", "today", "--output", "out.txt"])
