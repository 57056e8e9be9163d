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

from typing import Sequence, Tuple

from pynini import string_map

from ..core.processor import Processor
from ..core.utils import priority_union

LexiconEntry = Tuple[str, int]


class LexiconRule(Processor):
    """
    Exact-token matcher over one or more static token tables.

    Tables are tried as ordered alternatives: the longest matching token
    wins, and between tokens of equal length the earlier table wins. Input is
    lowercased first, so tables hold lowercase tokens only.

    Args:
        name: rule name
        tables: sequence of ``(token, value)`` tables, highest priority first
    """

    def __init__(self, name: str, tables: Sequence[Sequence[LexiconEntry]]):
        super().__init__(name=name, lowercase=True)
        self.tables = tuple(tuple(table) for table in tables)
        self.build_tagger()

    def build_tagger(self):
        alternatives = [
            string_map([(token, str(value)) for token, value in table]) for table in self.tables
        ]
        graph = priority_union(*alternatives) if len(alternatives) > 1 else alternatives[0]
        self.tagger = self.add_tokens(self.field("value", graph))

    def match(self, text: str) -> Tuple[int, int]:
        """
        Returns:
            Tuple[int, int]: the token's value and the number of characters consumed

        Raises:
            LexicalMismatch: if ``text`` does not start with a known token
        """
        token, consumed = self.tag_prefix(text)
        return int(token["value"]), consumed


def with_period(table: Sequence[LexiconEntry]) -> Tuple[LexiconEntry, ...]:
    """The same tokens followed by a period ("mon." for "mon"), as their own entries."""
    return tuple((f"{token}.", value) for token, value in table)
