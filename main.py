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
import json
import os
import sys
import time
from datetime import date

from fst_date_parsers import DateParser, ParseError
from fst_date_parsers.core.logger import auto_setup, get_logger

logger = get_logger(__name__)

DEFAULT_RECOGNIZER = "versatile"


def parse_reference(value):
    """argparse type for ISO dates"""
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an ISO date (YYYY-MM-DD): {value!r}")


def run_case(parser, recognizer, text, reference):
    """
    Parse one text.

    Returns:
        tuple: (match or None, error or None)
    """
    try:
        return parser.parse(recognizer, text, reference), None
    except ParseError as e:
        return None, e


def compare_results(match, expected, expected_consumed=None):
    """Compare one parse result with the ground truth"""
    if expected is None:
        return match is None
    if match is None or match.date.isoformat() != expected:
        return False
    if expected_consumed is not None and match.consumed != expected_consumed:
        return False
    return True


def benchmark(parser, input_file, recognizer, reference, show_all_cases=True, writer=print):
    """
    Run every case of a JSONL file and report mismatches.

    Each line holds ``query`` and ``expected`` (ISO date, or null when the
    query must be rejected), and optionally ``reference``, ``recognizer`` and
    ``consumed``, which override the command line values for that case.
    """
    total_cases = 0
    success_cases = 0
    error_cases = 0
    total_cost = 0.0

    with open(input_file, encoding="utf-8") as fin:
        for line_num, line in enumerate(fin, 1):
            line = line.strip()
            if not line:
                continue
            total_cases += 1
            data = json.loads(line)
            query = data["query"]
            case_reference = date.fromisoformat(data["reference"]) if "reference" in data else reference
            case_recognizer = data.get("recognizer", recognizer)

            _wall_start = time.time()
            match, error = run_case(parser, case_recognizer, query, case_reference)
            _wall_cost = time.time() - _wall_start
            total_cost += _wall_cost

            result = match.date.isoformat() if match else f"{error.kind}"
            if compare_results(match, data.get("expected"), data.get("consumed")):
                success_cases += 1
                if show_all_cases:
                    writer(f"Line {line_num}: ✓ Success | total={_wall_cost:.6f}s")
                    writer(f"  Query: {query}")
                    writer(f"  Recognizer: {case_recognizer}")
                    writer(f"  Result: {result}")
            else:
                error_cases += 1
                writer(f"Line {line_num}: ✗ Mismatch | total={_wall_cost:.6f}s")
                writer(f"  Query: {query}")
                writer(f"  Recognizer: {case_recognizer}")
                writer(f"  Reference: {case_reference.isoformat()}")
                writer(f"  Calculated: {result}")
                if error is not None:
                    writer(f"  Error: {error}")
                writer(f"  Ground Truth: {data.get('expected')}")

    writer("\n" + "=" * 80)
    writer("BENCHMARK SUMMARY")
    writer("=" * 80)
    writer(f"Total test cases: {total_cases}")
    if total_cases:
        writer(f"Success cases: {success_cases} ({success_cases/total_cases*100:.2f}%)")
        writer(f"Error cases: {error_cases} ({error_cases/total_cases*100:.2f}%)")
        writer(f"Average time per case: {total_cost/total_cases:.6f}s")
    return error_cases


def print_result(recognizer, text, reference, match, error):
    print(f"Recognizer: {recognizer}")
    print(f"Query: {text}")
    print(f"Reference: {reference.isoformat()}")
    if match is not None:
        print(f"Result: {match.date.isoformat()} ({match.date.strftime('%A')})")
        print(f"Consumed: {match.consumed} {text[:match.consumed]!r}")
        if match.consumed < len(text):
            print(f"Rest: {text[match.consumed:]!r}")
    else:
        print(f"Error: {error}")
        for member, member_error in getattr(error, "failures", []):
            print(f"  {member}: {member_error}")


def interactive(parser, recognizer, reference):
    """Parse lines from stdin until EOF."""
    if sys.stdin.isatty():
        print(f"Reading from stdin with {recognizer} (reference {reference.isoformat()}), Ctrl-D to quit")
    for line in sys.stdin:
        text = line.rstrip("\n")
        if not text:
            continue
        match, error = run_case(parser, recognizer, text, reference)
        print_result(recognizer, text, reference, match, error)
        print()


def print_usage_examples():
    """Print usage examples"""
    examples = """
Examples:

1. Parse a single text with the default recognizer (quick offsets, then English dd/mm):
   python main.py --text "tomorrow"

2. Pick a recognizer and a reference date:
   python main.py --text "пт." --recognizer ru.bundle --reference 2024-03-15

3. List the registered recognizers:
   python main.py --list

4. Run a benchmark file and save the report:
   python main.py --file fst_date_parsers/english/test/groundtruth.jsonl --output result.txt

5. Read texts from stdin:
   echo "13.06.2024" | python main.py --recognizer en.bundle_dmy
"""
    print(examples)


def main():  # noqa: C901
    """Command line entry: single text, JSONL benchmark or stdin."""
    auto_setup()
    # Whether --file prints passing cases too
    SHOW_ALL_CASES = False

    parser = argparse.ArgumentParser(
        description="FST-based date parsing tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --text "the day after tomorrow"
  python main.py --text "13/06" --recognizer en.bundle_mdy
  python main.py --file cases.jsonl --output result.txt
        """,
    )
    parser.add_argument("--text", help="Input text to parse")
    parser.add_argument("--file", help="Path to a JSONL benchmark file")
    parser.add_argument("--output", help="Path to output file for saving --file results")
    parser.add_argument(
        "--reference",
        type=parse_reference,
        default=None,
        help="Reference date for relative expressions (YYYY-MM-DD, default today)",
    )
    parser.add_argument(
        "--recognizer",
        default=DEFAULT_RECOGNIZER,
        help=f"Registered recognizer name (default {DEFAULT_RECOGNIZER})",
    )
    parser.add_argument("--list", action="store_true", help="List registered recognizers and exit")
    args = parser.parse_args()

    if args.text and args.file:
        print("Error: --text and --file cannot be used together\n")
        parser.print_help()
        print_usage_examples()
        return 1

    if args.output and not args.file:
        print("Error: --output can only be used with --file\n")
        parser.print_help()
        print_usage_examples()
        return 1

    if args.file and not os.path.exists(args.file):
        print(f"Error: file not found: {args.file}\n")
        return 1

    date_parser = DateParser()

    if args.list:
        for name in date_parser.names():
            print(f"{name:40s} {date_parser.parsers[name].pattern}")
        return 0

    if args.recognizer not in date_parser.parsers:
        print(f"Error: unknown recognizer {args.recognizer!r}, see --list\n")
        return 1

    reference = args.reference or date.today()

    start_time = time.time()
    if args.text:
        match, error = run_case(date_parser, args.recognizer, args.text, reference)
        print_result(args.recognizer, args.text, reference, match, error)
        status = 0 if match is not None else 2
    elif args.file:
        if args.output:
            with open(args.output, "w", encoding="utf-8") as f:

                def writer(msg):
                    try:
                        print(msg)
                    except BrokenPipeError:
                        pass
                    f.write(msg + "\n")

                errors = benchmark(
                    date_parser,
                    args.file,
                    args.recognizer,
                    reference,
                    show_all_cases=SHOW_ALL_CASES,
                    writer=writer,
                )
        else:
            errors = benchmark(
                date_parser, args.file, args.recognizer, reference, show_all_cases=SHOW_ALL_CASES
            )
        status = 0 if errors == 0 else 2
    else:
        interactive(date_parser, args.recognizer, reference)
        return 0

    logger.info(f"Total time: {time.time() - start_time}")
    return status


if __name__ == "__main__":
    sys.exit(main())
