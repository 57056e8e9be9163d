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

from typing import Optional, Tuple

from pynini import closure
from pynini.lib.pynutil import delete

from ..core.errors import OutOfRange
from ..core.processor import Processor


class FieldRule(Processor):
    """
    A bounded-width unsigned integer such as the day, month or year of a date.

    The longest run of ASCII digits up to ``max_width`` is consumed and then
    range checked. There is no backtracking to a shorter run: "42" is an
    out-of-range day, not day 4 followed by "2". Calendar validity is not
    checked here.
    """

    def __init__(
        self,
        name: str,
        max_width: int,
        min_value: Optional[int] = None,
        max_value: Optional[int] = None,
        exact_width: bool = False,
    ):
        super().__init__(name=name)
        self.max_width = max_width
        self.min_width = max_width if exact_width else 1
        self.min_value = min_value
        self.max_value = max_value
        self.build_tagger()

    def build_tagger(self):
        digits = closure(self.DIGIT, self.min_width, self.max_width)
        self.tagger = self.add_tokens(self.field("value", digits))

    def match(self, text: str) -> Tuple[int, int]:
        """
        Returns:
            Tuple[int, int]: the field value and the number of digits consumed

        Raises:
            LexicalMismatch: if ``text`` does not start with enough digits
            OutOfRange: if the value is outside [min_value, max_value]
        """
        token, consumed = self.tag_prefix(text)
        value = int(token["value"])
        if (self.min_value is not None and value < self.min_value) or (
            self.max_value is not None and value > self.max_value
        ):
            raise OutOfRange(
                f"{self.name} {value} is outside {self.min_value}..{self.max_value}",
                text=text,
                recognizer=self.name,
            )
        return value, consumed


class SeparatorRule(Processor):
    """Zero or more of ``/ - .`` space and tab between two numeric date parts."""

    def __init__(self, name: str = "separator"):
        super().__init__(name=name)
        self.build_tagger()

    def build_tagger(self):
        self.tagger = self.add_tokens(delete(self.SEPARATOR.star))

    def match(self, text: str) -> int:
        _, consumed = self.tag_prefix(text)
        return consumed
