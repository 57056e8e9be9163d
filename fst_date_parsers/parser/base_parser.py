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

from abc import ABC, abstractmethod
from datetime import date

from ..core.errors import ParseError
from ..core.types import Match


class BaseParser(ABC):
    """
    Base class for recognizers backed by a single lexical rule.

    ``__call__`` matches the rule at the start of the text and hands the
    matched value to ``parse``, which computes the date from the reference
    date. Subclasses hold no state besides their rule.
    """

    def __init__(self, name: str, rule, pattern: str = None):
        self.name = name
        self.rule = rule
        self.pattern = pattern or name

    def __call__(self, text: str, reference: date) -> Match:
        try:
            value, consumed = self.match(text)
            return Match(self.parse(value, reference), consumed)
        except ParseError as e:
            e.text = text
            e.recognizer = self.name
            raise

    def match(self, text: str):
        """Run the rule; returns the matched value and the consumed length."""
        return self.rule.match(text)

    @abstractmethod
    def parse(self, value, reference: date) -> date:
        """
        Resolve the matched value against the reference date.

        Args:
            value: what the rule matched (weekday index, day offset, ...)
            reference (date): the caller's "today"

        Returns:
            date: the resolved date
        """
        pass

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r})"
