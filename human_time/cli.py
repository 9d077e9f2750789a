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
import os
import sys
from datetime import datetime

from .errors import ParseError
from .extractor import HumanTimeExtractor


def parse_now(value):
    """argparse type for --now: an ISO 8601 instant"""
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an ISO 8601 datetime: {value!r}")


def current_time(args):
    return args.now if args.now is not None else datetime.now().astimezone()


def convert(extractor, query, now):
    """Resolve one query, returning the printable result or error message"""
    try:
        return str(extractor.extract(query, now)), True
    except ParseError as e:
        return str(e), False


def batch(extractor, input_file, args, writer=print):
    total_cases = 0
    error_cases = 0

    with open(input_file, encoding="utf-8") as fin:
        for line_num, line in enumerate(fin, 1):
            query = line.strip()
            if not query:
                continue
            total_cases += 1
            result, ok = convert(extractor, query, current_time(args))
            if ok:
                writer(f"Line {line_num}: {query} -> {result}")
            else:
                error_cases += 1
                writer(f"Line {line_num}: {query} -> error: {result}")

    writer("=" * 80)
    writer(f"Total: {total_cases}, errors: {error_cases}")
    return 0 if error_cases == 0 else 1


def interactive(extractor, args, stdin=None, writer=print):
    """Read one expression per line until end of input"""
    for line in stdin or sys.stdin:
        query = line.strip()
        if not query:
            continue
        now = current_time(args)
        result, ok = convert(extractor, query, now)
        if not ok:
            writer(result)
            continue
        writer(f"Time now: {now.isoformat(sep=' ')}")
        writer(f"Calculated: {result}\n")
    return 0


def build_parser():
    parser = argparse.ArgumentParser(
        prog="human-time",
        description="Convert human time expressions into dates and times",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  human-time --text "last friday at 19:45"
  human-time --text "12 hours ago at 7 days ago" --now 2010-01-01T00:00:00
  human-time --file queries.txt --output results.txt
  echo "in 3 days" | human-time
        """,
    )
    parser.add_argument("--text", help="Single expression to convert")
    parser.add_argument("--file", help="File with one expression per line")
    parser.add_argument("--output", help="Path to save --file results to")
    parser.add_argument(
        "--now",
        type=parse_now,
        default=None,
        help="Reference instant (ISO 8601), defaults to the current local time",
    )
    parser.add_argument("--cache_dir", default=None, help="Directory to cache the compiled grammar in")
    parser.add_argument(
        "--overwrite_cache",
        action="store_true",
        help="Force rebuild and overwrite the cached grammar",
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.text and args.file:
        parser.error("--text and --file cannot be used together")
    if args.output and not args.file:
        parser.error("--output can only be used with --file")
    if args.file and not os.path.exists(args.file):
        parser.error(f"file does not exist: {args.file}")

    extractor = HumanTimeExtractor(cache_dir=args.cache_dir, overwrite_cache=args.overwrite_cache)

    if args.text:
        now = current_time(args)
        result, ok = convert(extractor, args.text, now)
        print(f"Query: {args.text}")
        print(f"Time now: {now.isoformat(sep=' ')}")
        print(f"Result: {result}" if ok else f"Error: {result}")
        return 0 if ok else 1

    if args.file:
        if args.output:
            with open(args.output, "w", encoding="utf-8") as f:

                def writer(msg):
                    try:
                        print(msg)
                    except BrokenPipeError:
                        pass
                    f.write(msg + "\n")

                return batch(extractor, args.file, args, writer=writer)
        return batch(extractor, args.file, args)

    return interactive(extractor, args)


if __name__ == "__main__":
    sys.exit(main())
