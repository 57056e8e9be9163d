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
English weekday and relative day recognizers.
"""

from ..parser import CURRENT_WEEK, NEXT_OCCURRENCE, REFERENCE_ONLY, RelativeParser, WeekParser
from . import rules

named_weekday = WeekParser(
    "en.named_weekday", rules.NAMED_WEEKDAY, NEXT_OCCURRENCE, pattern="friday | fri. | fri"
)
current_named_weekday_only = WeekParser(
    "en.current_named_weekday_only", rules.NAMED_WEEKDAY, REFERENCE_ONLY, pattern="friday | fri. | fri"
)
weekday_of_current_week = WeekParser(
    "en.weekday_of_current_week", rules.NAMED_WEEKDAY, CURRENT_WEEK, pattern="friday | fri. | fri"
)

day_before_yesterday = RelativeParser(
    "en.day_before_yesterday", rules.DAY_BEFORE_YESTERDAY, pattern="[the] day before yesterday"
)
yesterday = RelativeParser("en.yesterday", rules.YESTERDAY, pattern="yesterday")
today = RelativeParser("en.today", rules.TODAY, pattern="today")
tomorrow = RelativeParser("en.tomorrow", rules.TOMORROW, pattern="tomorrow")
day_after_tomorrow = RelativeParser(
    "en.day_after_tomorrow", rules.DAY_AFTER_TOMORROW, pattern="[the] day after tomorrow"
)
relative_day = RelativeParser(
    "en.relative_day", rules.RELATIVE_DAY, pattern="yesterday | today | tomorrow | ..."
)
