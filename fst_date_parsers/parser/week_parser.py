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

from datetime import date

from ..core.date_utils import next_weekday, weekday_of_week
from ..core.errors import DayMismatch
from .base_parser import BaseParser

# How a matched weekday name is turned into a date
NEXT_OCCURRENCE = "next_occurrence"
REFERENCE_ONLY = "reference_only"
CURRENT_WEEK = "current_week"

WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


class WeekParser(BaseParser):
    """
    Weekday name parser.

    Modes:
    - NEXT_OCCURRENCE: the nearest date on or after the reference date that
      falls on the weekday
    - REFERENCE_ONLY: the reference date itself, and only if it falls on the
      weekday; DayMismatch otherwise
    - CURRENT_WEEK: the weekday inside the reference date's Monday-Sunday week
    """

    def __init__(self, name: str, rule, mode: str = NEXT_OCCURRENCE, pattern: str = None):
        if mode not in (NEXT_OCCURRENCE, REFERENCE_ONLY, CURRENT_WEEK):
            raise ValueError(f"unknown weekday mode {mode!r}")
        super().__init__(name, rule, pattern)
        self.mode = mode

    def parse(self, value, reference: date) -> date:
        if self.mode == NEXT_OCCURRENCE:
            return next_weekday(reference, value)
        if self.mode == CURRENT_WEEK:
            return weekday_of_week(reference, value)

        if reference.weekday() != value:
            raise DayMismatch(
                f"{reference.isoformat()} is a {WEEKDAY_NAMES[reference.weekday()]}, "
                f"not a {WEEKDAY_NAMES[value]}"
            )
        return reference
