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
FST Date Parsers - prefix date recognizers built on finite state transducers

Recognizers read a date from the start of a text, relative to an explicit
reference date, and report how many characters they consumed.

Usage:
    from datetime import date
    from fst_date_parsers import parse

    parse("en.bundle_dmy", "tomorrow", date(2024, 3, 15))
    # Match(date=datetime.date(2024, 3, 16), consumed=8)
"""

from .core.errors import (
    ParseError,
    LexicalMismatch,
    OutOfRange,
    CalendarInvalid,
    DayMismatch,
    NoAlternativeMatched,
)
from .core.types import Bundle, Match, standalone
from .date_parser import DateParser, parse, versatile

__version__ = "1.0.0"
__author__ = "Ming Yu (yuming@oppo.com)"

__all__ = [
    "DateParser",
    "parse",
    "versatile",
    "Bundle",
    "Match",
    "standalone",
    "ParseError",
    "LexicalMismatch",
    "OutOfRange",
    "CalendarInvalid",
    "DayMismatch",
    "NoAlternativeMatched",
]
