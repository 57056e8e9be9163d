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
Quick offsets from the reference date: "+3", "- 2 days", "+1 неделя".

The sign is mandatory and picks the direction. Unit words from every
language are accepted; without one the amount counts days.
"""

from ..core.types import Bundle
from ..english.lexicon import UNITS as EN_UNITS
from ..parser import QuickOffsetParser
from ..rules import QuickOffsetRule
from ..russian.lexicon import UNITS as RU_UNITS

UNITS = EN_UNITS + RU_UNITS

FORWARD = QuickOffsetRule("quick_forward", ["+"], UNITS)
BACKWARD = QuickOffsetRule("quick_backward", ["-"], UNITS)

forward_from_now = QuickOffsetParser("quick.forward_from_now", FORWARD, pattern="+N [days | weeks]")
backward_from_now = QuickOffsetParser("quick.backward_from_now", BACKWARD, pattern="-N [days | weeks]")

bundle = Bundle("quick.bundle", [forward_from_now, backward_from_now])
