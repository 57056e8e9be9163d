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
Russian token tables (lowercase, nominative forms).
"""

WEEKDAYS_FULL = (
    ("понедельник", 0),
    ("вторник", 1),
    ("среда", 2),
    ("четверг", 3),
    ("пятница", 4),
    ("суббота", 5),
    ("воскресенье", 6),
)

WEEKDAYS_SHORT = (
    ("пн", 0),
    ("вт", 1),
    ("ср", 2),
    ("чт", 3),
    ("пт", 4),
    ("сб", 5),
    ("вс", 6),
)

DAY_BEFORE_YESTERDAY = (("позавчера", -2),)
YESTERDAY = (("вчера", -1),)
TODAY = (("сегодня", 0),)
TOMORROW = (("завтра", 1),)
DAY_AFTER_TOMORROW = (("послезавтра", 2),)

UNITS = (
    ("день", 1),
    ("дня", 1),
    ("дней", 1),
    ("сутки", 1),
    ("неделя", 7),
    ("неделю", 7),
    ("недели", 7),
    ("недель", 7),
    ("нед", 7),
)
