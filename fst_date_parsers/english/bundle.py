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
English bundles.

bundle_dmy tries, in this order:
    dd_mm_y4, dd_mm_only, dd_only, day_before_yesterday, yesterday, today,
    tomorrow, day_after_tomorrow, named_weekday

bundle_mdy uses the month-day numeric layouts instead:
    mm_dd_y4, mm_dd_only, dd_only, day_before_yesterday, yesterday, today,
    tomorrow, day_after_tomorrow, named_weekday

The order is part of the contract. Weekday names resolve forward
(named_weekday): a typed weekday is read as the next one to come, not as the
day of the current week that weekday_of_current_week would give. Without the
standalone variant "31-02-2024" is answered by dd_only ("31" of the reference
month), because the longer layouts fail calendar validation first.
"""

from ..core.types import Bundle
from ..numeric import dd_mm_only, dd_mm_y4, dd_only, mm_dd_only, mm_dd_y4
from .parser import (
    day_after_tomorrow,
    day_before_yesterday,
    named_weekday,
    today,
    tomorrow,
    yesterday,
)

_LANGUAGE_MEMBERS = (
    day_before_yesterday,
    yesterday,
    today,
    tomorrow,
    day_after_tomorrow,
    named_weekday,
)

bundle_dmy = Bundle("en.bundle_dmy", (dd_mm_y4, dd_mm_only, dd_only) + _LANGUAGE_MEMBERS)
bundle_mdy = Bundle("en.bundle_mdy", (mm_dd_y4, mm_dd_only, dd_only) + _LANGUAGE_MEMBERS)
