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
English token tables. Tokens are lowercase; matching is case-insensitive.

Weekday values follow ``date.weekday()`` (Monday = 0). Relative day values
are day offsets from the reference date. Unit values are lengths in days.
"""

WEEKDAYS_FULL = (
    ("monday", 0),
    ("tuesday", 1),
    ("wednesday", 2),
    ("thursday", 3),
    ("friday", 4),
    ("saturday", 5),
    ("sunday", 6),
)

WEEKDAYS_SHORT = (
    ("mon", 0),
    ("tue", 1),
    ("tues", 1),
    ("wed", 2),
    ("thu", 3),
    ("thur", 3),
    ("thurs", 3),
    ("fri", 4),
    ("sat", 5),
    ("sun", 6),
)

DAY_BEFORE_YESTERDAY = (("day before yesterday", -2), ("the day before yesterday", -2))
YESTERDAY = (("yesterday", -1),)
TODAY = (("today", 0),)
TOMORROW = (("tomorrow", 1),)
DAY_AFTER_TOMORROW = (("day after tomorrow", 2), ("the day after tomorrow", 2))

UNITS = (
    ("day", 1),
    ("days", 1),
    ("week", 7),
    ("weeks", 7),
)
