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
Tests for quick offsets ("+3", "- 2 weeks", "+1 неделя")
"""

from datetime import date

import pytest

from fst_date_parsers.core.errors import CalendarInvalid, LexicalMismatch, NoAlternativeMatched
from fst_date_parsers.quick import backward_from_now, bundle, forward_from_now

REFERENCE = date(2024, 3, 15)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("+ 1", date(2024, 3, 16)),
        ("+1", date(2024, 3, 16)),
        ("+42", date(2024, 4, 26)),
        ("+ 42", date(2024, 4, 26)),
        ("+0", date(2024, 3, 15)),
    ],
)
def test_forward_from_now(text, expected):
    assert forward_from_now(text, REFERENCE) == (expected, len(text))


@pytest.mark.parametrize(
    "text, expected",
    [
        ("- 1", date(2024, 3, 14)),
        ("-123", date(2023, 11, 13)),
    ],
)
def test_backward_from_now(text, expected):
    assert backward_from_now(text, REFERENCE) == (expected, len(text))


@pytest.mark.parametrize(
    "text, expected",
    [
        ("-   1", date(2024, 3, 14)),
        ("-123", date(2023, 11, 13)),
        ("+\t42", date(2024, 4, 26)),
    ],
)
def test_bundle(text, expected):
    assert bundle(text, REFERENCE) == (expected, len(text))


@pytest.mark.parametrize(
    "text, expected",
    [
        ("+3 days", date(2024, 3, 18)),
        ("+1 day", date(2024, 3, 16)),
        ("+2 weeks", date(2024, 3, 29)),
        ("-1 week", date(2024, 3, 8)),
        ("+1DAY", date(2024, 3, 16)),
        ("+2 недели", date(2024, 3, 29)),
        ("- 3 дня", date(2024, 3, 12)),
        ("+5 дней", date(2024, 3, 20)),
        ("+1 сутки", date(2024, 3, 16)),
        ("-1 нед", date(2024, 3, 8)),
    ],
)
def test_units(text, expected):
    assert bundle(text, REFERENCE) == (expected, len(text))


def test_unit_is_optional_and_whole_word_prefix():
    assert forward_from_now("+3 d", REFERENCE) == (date(2024, 3, 18), 2)
    assert forward_from_now("+3 dayss", REFERENCE) == (date(2024, 3, 18), 7)
    assert forward_from_now("+3 undays", REFERENCE) == (date(2024, 3, 18), 2)


@pytest.mark.parametrize("text", ["+", "+abc", "-1", "", "1"])
def test_forward_requires_plus_and_digits(text):
    with pytest.raises(LexicalMismatch):
        forward_from_now(text, REFERENCE)


def test_backward_requires_minus():
    with pytest.raises(LexicalMismatch):
        backward_from_now("+1", REFERENCE)


def test_bundle_without_sign():
    with pytest.raises(NoAlternativeMatched) as excinfo:
        bundle("10", REFERENCE)
    names = [name for name, _ in excinfo.value.failures]
    assert names == ["quick.forward_from_now", "quick.backward_from_now"]


def test_out_of_supported_range():
    with pytest.raises(CalendarInvalid):
        forward_from_now("+5", date(9999, 12, 30))
    with pytest.raises(CalendarInvalid):
        backward_from_now("-1", date(1, 1, 1))
