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
Numeric dates: field matchers and the six layout recognizers.
"""

from .rules import dd, mm, y4, dd_mm, mm_dd, numeric_date_parts_separator
from .parser import (
    RECOGNIZERS,
    dd_only,
    dd_mm_only,
    mm_dd_only,
    dd_mm_y4,
    mm_dd_y4,
    y4_mm_dd,
)

__all__ = [
    "dd",
    "mm",
    "y4",
    "dd_mm",
    "mm_dd",
    "numeric_date_parts_separator",
    "dd_only",
    "dd_mm_only",
    "mm_dd_only",
    "dd_mm_y4",
    "mm_dd_y4",
    "y4_mm_dd",
    "RECOGNIZERS",
]
