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
Core of the date parsers: the FST rule base class, the recognizer contract,
errors, calendar helpers and logging.
"""

from .processor import Processor
from .errors import (
    ParseError,
    LexicalMismatch,
    OutOfRange,
    CalendarInvalid,
    DayMismatch,
    NoAlternativeMatched,
)
from .types import Bundle, Match, recognizer, standalone
from .logger import get_logger, setup_logging, auto_setup

__all__ = [
    "Processor",
    "ParseError",
    "LexicalMismatch",
    "OutOfRange",
    "CalendarInvalid",
    "DayMismatch",
    "NoAlternativeMatched",
    "Bundle",
    "Match",
    "recognizer",
    "standalone",
    "get_logger",
    "setup_logging",
    "auto_setup",
]
