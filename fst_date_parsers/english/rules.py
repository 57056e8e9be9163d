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
English lexical rules. Weekday matchers return ``(weekday index, consumed)``.
"""

from typing import Tuple

from ..rules import LexiconRule, with_period
from . import lexicon

FULL_NAMED_WEEKDAY = LexiconRule("en_full_named_weekday", [lexicon.WEEKDAYS_FULL])
SHORT_NAMED_WEEKDAY = LexiconRule("en_short_named_weekday", [lexicon.WEEKDAYS_SHORT])
SHORT_NAMED_WEEKDAY_DOT = LexiconRule(
    "en_short_named_weekday_dot", [with_period(lexicon.WEEKDAYS_SHORT)]
)
# Priority: full name, short name with period, short name
NAMED_WEEKDAY = LexiconRule(
    "en_named_weekday",
    [lexicon.WEEKDAYS_FULL, with_period(lexicon.WEEKDAYS_SHORT), lexicon.WEEKDAYS_SHORT],
)

DAY_BEFORE_YESTERDAY = LexiconRule("en_day_before_yesterday", [lexicon.DAY_BEFORE_YESTERDAY])
YESTERDAY = LexiconRule("en_yesterday", [lexicon.YESTERDAY])
TODAY = LexiconRule("en_today", [lexicon.TODAY])
TOMORROW = LexiconRule("en_tomorrow", [lexicon.TOMORROW])
DAY_AFTER_TOMORROW = LexiconRule("en_day_after_tomorrow", [lexicon.DAY_AFTER_TOMORROW])
RELATIVE_DAY = LexiconRule(
    "en_relative_day",
    [
        lexicon.DAY_BEFORE_YESTERDAY,
        lexicon.YESTERDAY,
        lexicon.TODAY,
        lexicon.TOMORROW,
        lexicon.DAY_AFTER_TOMORROW,
    ],
)


def full_named_weekday(text: str) -> Tuple[int, int]:
    """monday .. sunday"""
    return FULL_NAMED_WEEKDAY.match(text)


def short_named_weekday(text: str) -> Tuple[int, int]:
    """mon, tue | tues, wed, thu | thur | thurs, fri, sat, sun"""
    return SHORT_NAMED_WEEKDAY.match(text)


def short_named_weekday_dot(text: str) -> Tuple[int, int]:
    """A short name followed by a period: "mon.", "tues." ..."""
    return SHORT_NAMED_WEEKDAY_DOT.match(text)


def weekday_name(text: str) -> Tuple[int, int]:
    """Any of the full, dotted short or short weekday names."""
    return NAMED_WEEKDAY.match(text)
