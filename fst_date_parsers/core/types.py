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
Recognizer contract and the combinators that work on whole recognizers.

A recognizer is any callable ``(text, reference) -> Match`` with ``name`` and
``pattern`` attributes. Numeric composers are plain functions marked with
``@recognizer``; language parsers are ``BaseParser`` instances; bundles are
``Bundle`` instances.
"""

from datetime import date
from typing import Callable, List, NamedTuple, Optional, Sequence

from .errors import LexicalMismatch, NoAlternativeMatched, ParseError
from .logger import get_logger

logger = get_logger(__name__)


class Match(NamedTuple):
    """A resolved date and the number of input characters it was read from."""

    date: date
    consumed: int


Recognizer = Callable[[str, date], Match]


def recognizer(name: str, pattern: str):
    """Attach a lookup name and a human readable pattern to a recognizer function."""

    def decorate(func):
        func.name = name
        func.pattern = pattern
        return func

    return decorate


def recognizer_name(member) -> str:
    return getattr(member, "name", getattr(member, "__name__", repr(member)))


def require_full(member, text: str, reference: date) -> Match:
    """Run ``member`` and fail unless it consumed all of ``text``."""
    match = member(text, reference)
    if match.consumed != len(text):
        raise LexicalMismatch(
            f"unexpected trailing input {text[match.consumed:]!r}",
            text=text,
            recognizer=recognizer_name(member),
        )
    return match


class Bundle:
    """
    Ordered alternation over recognizers.

    Members are tried in the order given; the first one that returns a
    ``Match`` wins. The order is part of each bundle's contract: earlier,
    more specific members must not be shadowed by looser ones.

    With ``standalone=True`` a member that leaves input unconsumed counts as
    failed, so "31-02-2024" is rejected instead of being read as day 31.
    """

    def __init__(self, name: str, members: Sequence[Recognizer], standalone: bool = False):
        if not members:
            raise ValueError(f"bundle {name} needs at least one member")
        self.name = name
        self.members = tuple(members)
        self.is_standalone = standalone
        self.pattern = " | ".join(getattr(m, "pattern", recognizer_name(m)) for m in self.members)

    @property
    def member_names(self) -> List[str]:
        return [recognizer_name(member) for member in self.members]

    def standalone(self) -> "Bundle":
        """Same members and order, each required to consume the whole input."""
        return Bundle(f"{self.name}.standalone", self.members, standalone=True)

    def __call__(self, text: str, reference: date) -> Match:
        failures = []
        for member in self.members:
            try:
                if self.is_standalone:
                    return require_full(member, text, reference)
                return member(text, reference)
            except ParseError as e:
                logger.debug(f"{self.name}: {recognizer_name(member)} rejected {text!r}: {e}")
                failures.append((recognizer_name(member), e))

        raise NoAlternativeMatched(
            f"none of {len(self.members)} alternatives matched {text!r}",
            text=text,
            recognizer=self.name,
            failures=failures,
        )

    def __repr__(self):
        return f"Bundle({self.name!r}, {self.member_names})"


def standalone(member: Recognizer, name: Optional[str] = None) -> Recognizer:
    """Wrap a single recognizer so that it must consume the whole input."""

    def run(text: str, reference: date) -> Match:
        return require_full(member, text, reference)

    run.name = name or f"{recognizer_name(member)}.standalone"
    run.pattern = getattr(member, "pattern", run.name)
    return run
