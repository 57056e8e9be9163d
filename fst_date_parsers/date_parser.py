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
from typing import Dict, Iterable, Optional, Union

from . import english, numeric, quick, russian
from .core.errors import ParseError
from .core.logger import get_logger
from .core.types import Bundle, Match, Recognizer
from .core.utils import load_features

FAMILIES = {
    "numeric": numeric.RECOGNIZERS,
    "quick": quick.RECOGNIZERS,
    "en": english.RECOGNIZERS,
    "ru": russian.RECOGNIZERS,
}

# Quick offsets first, otherwise "+10" never gets past dd_only
versatile = Bundle("versatile", [quick.bundle, english.bundle_dmy])


class DateParser:
    """Name lookup over every recognizer of the enabled feature families."""

    def __init__(self, features: Optional[Iterable[str]] = None):
        self.logger = get_logger(__name__)
        self.features = list(features) if features is not None else load_features()
        unknown = [feature for feature in self.features if feature not in FAMILIES]
        if unknown:
            raise ValueError(f"unknown features {unknown}, expected a subset of {list(FAMILIES)}")

        self.parsers: Dict[str, Recognizer] = {}
        for feature in self.features:
            for member in FAMILIES[feature]:
                self.parsers[member.name] = member
        if "quick" in self.features and "en" in self.features:
            self.parsers[versatile.name] = versatile

        self.logger.info(f"Enabled features: {', '.join(self.features)} ({len(self.parsers)} recognizers)")

    def get(self, name: str) -> Recognizer:
        """
        Raises:
            KeyError: if no recognizer is registered under ``name``
        """
        try:
            return self.parsers[name]
        except KeyError:
            raise KeyError(f"unknown recognizer {name!r}") from None

    def parse(self, recognizer: Union[str, Recognizer], text: str, reference: date) -> Match:
        """
        Run a recognizer, given either directly or by its registered name.

        Args:
            recognizer: a recognizer or a name such as "en.bundle_dmy"
            text (str): input text
            reference (date): the date relative expressions resolve against

        Returns:
            Match: the resolved date and the number of characters consumed

        Raises:
            ParseError: if the recognizer rejects the input
            KeyError: if the name is not registered
        """
        if isinstance(recognizer, str):
            recognizer = self.get(recognizer)
        return recognizer(text, reference)

    def try_parse(self, recognizer: Union[str, Recognizer], text: str, reference: date) -> Optional[Match]:
        """Like ``parse`` but returns None when the input is rejected."""
        try:
            return self.parse(recognizer, text, reference)
        except ParseError as e:
            self.logger.debug(f"Parse failed: {e}, text content: {text}")
            return None

    def names(self):
        return sorted(self.parsers)


_default_parser: Optional[DateParser] = None


def get_default_parser() -> DateParser:
    global _default_parser
    if _default_parser is None:
        _default_parser = DateParser()
    return _default_parser


def parse(recognizer: Union[str, Recognizer], text: str, reference: date) -> Match:
    """Parse with the default, configuration driven ``DateParser``."""
    return get_default_parser().parse(recognizer, text, reference)
