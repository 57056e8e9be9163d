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

from typing import NamedTuple, Sequence

from pynini import string_map, union

from ..core.processor import Processor
from .lexicon import LexiconEntry


class QuickOffset(NamedTuple):
    sign: int
    days: int
    consumed: int


class QuickOffsetRule(Processor):
    """
    ``<sign> <amount> [unit]`` such as "+ 42", "-3 days" or "+2 недели".

    Blanks are allowed after the sign and before the unit. The unit table maps
    words to their length in days; without a unit the amount counts days.
    """

    def __init__(self, name: str, signs: Sequence[str], units: Sequence[LexiconEntry]):
        super().__init__(name=name, lowercase=True)
        self.signs = tuple(signs)
        self.units = tuple(units)
        self.build_tagger()

    def build_tagger(self):
        sign = self.field("sign", union(*self.signs))
        amount = self.field("amount", self.DIGIT.plus)
        unit = self.field("unit", string_map([(token, str(days)) for token, days in self.units]))
        graph = sign + self.DELETE_BLANKS + amount + (self.DELETE_BLANKS + unit).ques
        self.tagger = self.add_tokens(graph)

    def match(self, text: str) -> QuickOffset:
        """
        Raises:
            LexicalMismatch: if there is no sign followed by an integer
        """
        token, consumed = self.tag_prefix(text)
        sign = -1 if token["sign"] == "-" else 1
        days = int(token["amount"]) * int(token.get("unit", "1"))
        return QuickOffset(sign, days, consumed)
