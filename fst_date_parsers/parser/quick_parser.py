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

from ..core.date_utils import shift_days
from .base_parser import BaseParser


class QuickOffsetParser(BaseParser):
    """``+N`` / ``-N`` days (or weeks) from the reference date."""

    def match(self, text: str):
        offset = self.rule.match(text)
        return offset, offset.consumed

    def parse(self, value, reference: date) -> date:
        return shift_days(reference, value.sign * value.days)
