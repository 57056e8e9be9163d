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
English dates: weekday names, relative day words and the dmy/mdy bundles.
"""

from .rules import full_named_weekday, short_named_weekday, short_named_weekday_dot, weekday_name
from .parser import (
    named_weekday,
    current_named_weekday_only,
    weekday_of_current_week,
    day_before_yesterday,
    yesterday,
    today,
    tomorrow,
    day_after_tomorrow,
    relative_day,
)
from .bundle import bundle_dmy, bundle_mdy

RECOGNIZERS = (
    named_weekday,
    current_named_weekday_only,
    weekday_of_current_week,
    day_before_yesterday,
    yesterday,
    today,
    tomorrow,
    day_after_tomorrow,
    relative_day,
    bundle_dmy,
    bundle_mdy,
    bundle_dmy.standalone(),
    bundle_mdy.standalone(),
)

__all__ = [
    "full_named_weekday",
    "short_named_weekday",
    "short_named_weekday_dot",
    "weekday_name",
    "named_weekday",
    "current_named_weekday_only",
    "weekday_of_current_week",
    "day_before_yesterday",
    "yesterday",
    "today",
    "tomorrow",
    "day_after_tomorrow",
    "relative_day",
    "bundle_dmy",
    "bundle_mdy",
    "RECOGNIZERS",
]
