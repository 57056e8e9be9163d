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
Tests for Russian weekday names, relative days and the bundle
"""

from datetime import date

import pytest

from fst_date_parsers.core.errors import DayMismatch, LexicalMismatch, NoAlternativeMatched
from fst_date_parsers.russian import (
    bundle,
    current_named_weekday_only,
    day_after_tomorrow,
    day_before_yesterday,
    full_named_weekday,
    named_weekday,
    relative_day,
    short_named_weekday,
    short_named_weekday_dot,
    today,
    tomorrow,
    weekday_name,
    weekday_of_current_week,
    yesterday,
)

# Пятница
REFERENCE = date(2024, 3, 15)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("понедельник", (0, 11)),
        ("Понедельник", (0, 11)),
        ("пн", (0, 2)),
        ("пн.", (0, 3)),
        ("вторник", (1, 7)),
        ("среда", (2, 5)),
        ("ЧТ", (3, 2)),
        ("пятница", (4, 7)),
        ("сб.", (5, 3)),
        ("воскресенье", (6, 11)),
    ],
)
def test_weekday_name(text, expected):
    assert weekday_name(text) == expected


def test_weekday_name_variants():
    assert full_named_weekday("суббота") == (5, 7)
    assert short_named_weekday("вс") == (6, 2)
    assert short_named_weekday_dot("вс.") == (6, 3)
    with pytest.raises(LexicalMismatch):
        short_named_weekday_dot("вс")
    with pytest.raises(LexicalMismatch):
        weekday_name("monday")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("пятница", date(2024, 3, 15)),
        ("сб", date(2024, 3, 16)),
        ("вс.", date(2024, 3, 17)),
        ("понедельник", date(2024, 3, 18)),
        ("четверг", date(2024, 3, 21)),
    ],
)
def test_named_weekday(text, expected):
    assert named_weekday(text, REFERENCE) == (expected, len(text))


def test_current_named_weekday_only():
    assert current_named_weekday_only("пт", REFERENCE) == (REFERENCE, 2)
    with pytest.raises(DayMismatch):
        current_named_weekday_only("пн", REFERENCE)


def test_weekday_of_current_week():
    assert weekday_of_current_week("пн", REFERENCE).date == date(2024, 3, 11)
    assert weekday_of_current_week("воскресенье", REFERENCE).date == date(2024, 3, 17)


@pytest.mark.parametrize(
    "recognizer, text, expected",
    [
        (day_before_yesterday, "Позавчера", date(2024, 3, 13)),
        (yesterday, "вчера", date(2024, 3, 14)),
        (today, "СЕГОДНЯ", date(2024, 3, 15)),
        (tomorrow, "завтра", date(2024, 3, 16)),
        (day_after_tomorrow, "послезавтра", date(2024, 3, 17)),
        (relative_day, "позавчера", date(2024, 3, 13)),
        (relative_day, "послезавтра", date(2024, 3, 17)),
    ],
)
def test_relative_days(recognizer, text, expected):
    assert recognizer(text, REFERENCE) == (expected, len(text))


def test_errors_name_the_recognizer():
    with pytest.raises(LexicalMismatch) as excinfo:
        yesterday("сегодня", REFERENCE)
    assert excinfo.value.recognizer == "ru.yesterday"


def test_tomorrow_is_not_a_prefix_of_day_after_tomorrow():
    with pytest.raises(LexicalMismatch):
        tomorrow("послезавтра", REFERENCE)


@pytest.mark.parametrize(
    "text, expected, consumed",
    [
        ("01.02.2024", date(2024, 2, 1), 10),
        ("01.02", date(2024, 2, 1), 5),
        ("15 марта", date(2024, 3, 15), 2),
        ("завтра", date(2024, 3, 16), 6),
        ("позавчера", date(2024, 3, 13), 9),
        ("пятница", date(2024, 3, 15), 7),
        ("Вт", date(2024, 3, 19), 2),
    ],
)
def test_bundle(text, expected, consumed):
    assert bundle(text, REFERENCE) == (expected, consumed)


def test_bundle_rejects_unknown_words():
    with pytest.raises(NoAlternativeMatched) as excinfo:
        bundle("через неделю", REFERENCE)
    assert [name for name, _ in excinfo.value.failures] == bundle.member_names


def test_standalone_bundle():
    with pytest.raises(NoAlternativeMatched):
        bundle.standalone()("15 марта", REFERENCE)
