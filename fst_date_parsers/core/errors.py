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
Parse failures.

Every recognizer either returns a ``Match`` or raises one of the classes
below. Bundles treat any ``ParseError`` raised by a member as "try the next
member"; other exceptions are programming errors and propagate.
"""

from typing import List, Optional, Tuple


class ParseError(ValueError):
    """Base class of every recognizer failure."""

    kind = "ParseError"

    def __init__(self, message: str, text: Optional[str] = None, recognizer: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.text = text
        self.recognizer = recognizer

    def __str__(self):
        if self.recognizer:
            return f"{self.kind} [{self.recognizer}]: {self.message}"
        return f"{self.kind}: {self.message}"


class LexicalMismatch(ParseError):
    """The input does not have the expected token or digit shape."""

    kind = "LexicalMismatch"


class OutOfRange(ParseError):
    """Digits were matched but violate the field's lexical range, e.g. month 13."""

    kind = "OutOfRange"


class CalendarInvalid(ParseError):
    """The resolved (year, month, day) triple is not a real calendar day."""

    kind = "CalendarInvalid"


class DayMismatch(ParseError):
    """The reference date does not fall on the requested weekday."""

    kind = "DayMismatch"


class NoAlternativeMatched(ParseError):
    """Every member of a bundle failed."""

    kind = "NoAlternativeMatched"

    def __init__(
        self,
        message: str,
        text: Optional[str] = None,
        recognizer: Optional[str] = None,
        failures: Optional[List[Tuple[str, ParseError]]] = None,
    ):
        super().__init__(message, text=text, recognizer=recognizer)
        self.failures = failures or []
