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
FST rule base class.

A rule owns a pynini tagger that recognizes one lexical shape and rewrites it
into a tagged string such as ``weekday { value: "0" }``. Rules match at the
start of the input only: ``tag_prefix`` composes the input with the tagger
followed by a weighted copy of the rest, takes the shortest path and reads
the consumed length back from the copied remainder.
"""

import re
from typing import Any, Dict, List, Optional, Tuple

from pynini import Fst, escape, shortestpath
from pynini.lib.pynutil import delete, insert

from .errors import LexicalMismatch
from .logger import get_logger
from .utils import (
    DATE_SEPARATOR,
    NEMO_BLANK,
    NEMO_DIGIT,
    REST_MARK,
    lower_preserving_length,
    matchable_prefix,
    rest_graph,
)


class Processor:
    """
    Base class for FST rules.

    Attributes:
        name (str): rule name, also the tag wrapped around the tagger output
        tagger (Optional[Fst]): FST built by ``build_tagger``
        lowercase (bool): whether input is lowercased before matching
    """

    def __init__(self, name: str, lowercase: bool = False) -> None:
        self.DIGIT = NEMO_DIGIT
        self.BLANK = NEMO_BLANK
        self.SEPARATOR = DATE_SEPARATOR
        self.DELETE_BLANKS = delete(self.BLANK).star

        self.name = name
        self.lowercase = lowercase
        self.tagger: Optional[Fst] = None
        self._prefix_tagger: Optional[Fst] = None
        self.logger = get_logger(__name__)

    def build_tagger(self) -> None:
        """Build ``self.tagger``. Subclasses must implement this."""
        raise NotImplementedError("subclasses must implement build_tagger")

    def add_tokens(self, tagger: Fst) -> Fst:
        """Wrap the tagger output as ``<name> { ... }``."""
        tagger = insert(f"{self.name} {{ ") + tagger + insert(" } ")
        return tagger.optimize()

    def field(self, key: str, graph) -> Fst:
        """Emit ``key: "<graph output>"``."""
        return insert(f'{key}: "') + graph + insert('" ')

    @property
    def prefix_tagger(self) -> Fst:
        if self._prefix_tagger is None:
            if self.tagger is None:
                raise ValueError(f"tagger {self.name} has not been built")
            self._prefix_tagger = self.tagger + insert(REST_MARK) + rest_graph()
            self.logger.debug(f"built prefix tagger for {self.name}")
        return self._prefix_tagger

    def tag_prefix(self, text: str) -> Tuple[Dict[str, Any], int]:
        """
        Tag the longest prefix of ``text`` this rule recognizes.

        Returns:
            Tuple[Dict[str, Any], int]: the token dictionary and the number of
            characters consumed

        Raises:
            LexicalMismatch: if no prefix of ``text`` is recognized
        """
        normalized = lower_preserving_length(text) if self.lowercase else text
        matchable = matchable_prefix(normalized)
        lattice = escape(matchable) @ self.prefix_tagger
        best = shortestpath(lattice, nshortest=1)
        if best.num_states() == 0:
            raise LexicalMismatch(f"no {self.name} at the start of {text!r}", text=text, recognizer=self.name)

        tagged_text = best.string()
        head, _, rest = tagged_text.partition(REST_MARK)
        tokens = self.parse_tags(head)
        if not tokens:
            raise LexicalMismatch(f"no {self.name} at the start of {text!r}", text=text, recognizer=self.name)
        return tokens[0], len(matchable) - len(rest)

    @staticmethod
    def parse_tags(tagged_text: str) -> List[Dict[str, Any]]:
        """
        Parse tagged text into token dictionaries.

        Example:
            input:  'weekday { value: "1" }'
            output: [{'type': 'weekday', 'value': '1'}]
        """
        tokens = []
        pattern = r"(\w+)\s*\{(.*?)\}"
        for token_type, content in re.findall(pattern, tagged_text):
            token_data = {"type": token_type}
            kv_pattern = r'(\w+)\s*:\s*(?:"([^"]*)"|(\S+))'
            for match in re.finditer(kv_pattern, content):
                key = match.group(1).strip()
                value = match.group(2) if match.group(2) is not None else match.group(3)
                token_data[key] = value.strip()
            tokens.append(token_data)
        return tokens
