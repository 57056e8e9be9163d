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
Russian bundle, day-month order:
    dd_mm_y4, dd_mm_only, dd_only, day_before_yesterday, yesterday, today,
    tomorrow, day_after_tomorrow, named_weekday

Weekday names resolve forward like the English bundles (named_weekday), not
to the current week (weekday_of_current_week).
"""

from ..core.types import Bundle
from ..numeric import dd_mm_only, dd_mm_y4, dd_only
from .parser import (
    day_after_tomorrow,
    day_before_yesterday,
    named_weekday,
    today,
    tomorrow,
    yesterday,
)

bundle = Bundle(
    "ru.bundle",
    [
        dd_mm_y4,
        dd_mm_only,
        dd_only,
        day_before_yesterday,
        yesterday,
        today,
        tomorrow,
        day_after_tomorrow,
        named_weekday,
    ],
)
