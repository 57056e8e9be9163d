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

from ..parser import CURRENT_WEEK, NEXT_OCCURRENCE, REFERENCE_ONLY, RelativeParser, WeekParser
from . import rules

named_weekday = WeekParser(
    "ru.named_weekday", rules.NAMED_WEEKDAY, NEXT_OCCURRENCE, pattern="пятница | пт. | пт"
)
current_named_weekday_only = WeekParser(
    "ru.current_named_weekday_only", rules.NAMED_WEEKDAY, REFERENCE_ONLY, pattern="пятница | пт. | пт"
)
weekday_of_current_week = WeekParser(
    "ru.weekday_of_current_week", rules.NAMED_WEEKDAY, CURRENT_WEEK, pattern="пятница | пт. | пт"
)

day_before_yesterday = RelativeParser(
    "ru.day_before_yesterday", rules.DAY_BEFORE_YESTERDAY, pattern="позавчера"
)
yesterday = RelativeParser("ru.yesterday", rules.YESTERDAY, pattern="вчера")
today = RelativeParser("ru.today", rules.TODAY, pattern="сегодня")
tomorrow = RelativeParser("ru.tomorrow", rules.TOMORROW, pattern="завтра")
day_after_tomorrow = RelativeParser(
    "ru.day_after_tomorrow", rules.DAY_AFTER_TOMORROW, pattern="послезавтра"
)
relative_day = RelativeParser(
    "ru.relative_day", rules.RELATIVE_DAY, pattern="позавчера | вчера | сегодня | завтра | послезавтра"
)
