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

# !/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Tests for English weekday names, relative days and bundles
"""

from datetime import date, timedelta

import pytest

from fst_date_parsers.core.errors import DayMismatch, LexicalMismatch, NoAlternativeMatched
from fst_date_parsers.english import (
    bundle_dmy,
    bundle_mdy,
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

# Friday
REFERENCE = date(2024, 3, 15)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Monday", (0, 6)),
        ("mon", (0, 3)),
        ("Mon.", (0, 4)),
        ("tue", (1, 3)),
        ("Tues", (1, 4)),
        ("tuesday", (1, 7)),
        ("WED", (2, 3)),
        ("thu", (3, 3)),
        ("thur", (3, 4)),
        ("thurs.", (3, 6)),
        ("thursday", (3, 8)),
        ("fri, 15", (4, 3)),
        ("saturday", (5, 8)),
        ("sunny", (6, 3)),
    ],
)
def test_weekday_name(text, expected):
    assert weekday_name(text) == expected


def test_weekday_name_variants():
    assert full_named_weekday("Wednesday") == (2, 9)
    assert short_named_weekday("monday") == (0, 3)
    assert short_named_weekday_dot("sat.") == (5, 4)

    with pytest.raises(LexicalMismatch):
        full_named_weekday("mon")
    with pytest.raises(LexicalMismatch):
        short_named_weekday_dot("sat")


@pytest.mark.parametrize("text", ["", "mo", "weekday", "понедельник"])
def test_weekday_name_mismatch(text):
    with pytest.raises(LexicalMismatch):
        weekday_name(text)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("friday", date(2024, 3, 15)),
        ("saturday", date(2024, 3, 16)),
        ("sun.", date(2024, 3, 17)),
        ("Mon", date(2024, 3, 18)),
        ("thursday", date(2024, 3, 21)),
    ],
)
def test_named_weekday(text, expected):
    assert named_weekday(text, REFERENCE) == (expected, len(text))


@pytest.mark.parametrize("offset", range(7))
def test_named_weekday_is_within_a_week(offset):
    reference = REFERENCE + timedelta(days=offset)
    for text in ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]:
        result = named_weekday(text, reference).date
        assert 0 <= (result - reference).days <= 6
        assert result.strftime("%A").lower() == text


def test_current_named_weekday_only():
    assert current_named_weekday_only("Fri", REFERENCE) == (REFERENCE, 3)
    with pytest.raises(DayMismatch) as excinfo:
        current_named_weekday_only("monday", REFERENCE)
    assert excinfo.value.recognizer == "en.current_named_weekday_only"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("monday", date(2024, 3, 11)),
        ("friday", date(2024, 3, 15)),
        ("sunday", date(2024, 3, 17)),
    ],
)
def test_weekday_of_current_week(text, expected):
    assert weekday_of_current_week(text, REFERENCE).date == expected


@pytest.mark.parametrize(
    "recognizer, text, expected",
    [
        (day_before_yesterday, "day before yesterday", date(2024, 3, 13)),
        (day_before_yesterday, "The day before yesterday", date(2024, 3, 13)),
        (yesterday, "Yesterday", date(2024, 3, 14)),
        (today, "TODAY", date(2024, 3, 15)),
        (tomorrow, "tomorrow", date(2024, 3, 16)),
        (day_after_tomorrow, "the day after tomorrow", date(2024, 3, 17)),
        (relative_day, "day after tomorrow", date(2024, 3, 17)),
        (relative_day, "yesterday", date(2024, 3, 14)),
    ],
)
def test_relative_days(recognizer, text, expected):
    assert recognizer(text, REFERENCE) == (expected, len(text))


def test_relative_day_prefix():
    assert tomorrow("tomorrowland", REFERENCE) == (date(2024, 3, 16), 8)
    with pytest.raises(LexicalMismatch) as excinfo:
        yesterday("today", REFERENCE)
    assert excinfo.value.recognizer == "en.yesterday"
    assert excinfo.value.text == "today"


@pytest.mark.parametrize(
    "text, expected, consumed",
    [
        ("13.06.2024", date(2024, 6, 13), 10),
        ("01/02", date(2024, 2, 1), 5),
        ("12/11", date(2024, 11, 12), 5),
        ("9", date(2024, 3, 9), 1),
        ("tomorrow", date(2024, 3, 16), 8),
        ("the day before yesterday", date(2024, 3, 13), 24),
        ("Monday", date(2024, 3, 18), 6),
        ("31-02-2024", date(2024, 3, 31), 2),
    ],
)
def test_bundle_dmy(text, expected, consumed):
    assert bundle_dmy(text, REFERENCE) == (expected, consumed)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("06-13-2024", date(2024, 6, 13)),
        ("02/01", date(2024, 2, 1)),
        ("12/11", date(2024, 12, 11)),
        ("yesterday", date(2024, 3, 14)),
    ],
)
def test_bundle_mdy(text, expected):
    assert bundle_mdy(text, REFERENCE).date == expected


def test_bundle_order():
    assert bundle_dmy.member_names == [
        "numeric.dd_mm_y4",
        "numeric.dd_mm_only",
        "numeric.dd_only",
        "en.day_before_yesterday",
        "en.yesterday",
        "en.today",
        "en.tomorrow",
        "en.day_after_tomorrow",
        "en.named_weekday",
    ]
    assert bundle_mdy.member_names[:3] == ["numeric.mm_dd_y4", "numeric.mm_dd_only", "numeric.dd_only"]
    assert bundle_mdy.member_names[3:] == bundle_dmy.member_names[3:]


def test_bundle_failure_lists_every_member():
    with pytest.raises(NoAlternativeMatched) as excinfo:
        bundle_dmy("someday", REFERENCE)
    assert len(excinfo.value.failures) == len(bundle_dmy.members)
    assert excinfo.value.recognizer == "en.bundle_dmy"


def test_standalone_bundle():
    strict = bundle_dmy.standalone()
    assert strict.name == "en.bundle_dmy.standalone"
    assert strict("13.06.2024", REFERENCE) == (date(2024, 6, 13), 10)
    assert strict("friday", REFERENCE) == (date(2024, 3, 15), 6)
    with pytest.raises(NoAlternativeMatched):
        strict("31-02-2024", REFERENCE)
    with pytest.raises(NoAlternativeMatched):
        strict("tomorrow morning", REFERENCE)


def test_nul_ends_the_match():
    assert yesterday("yesterday\x00\x00x", REFERENCE) == (date(2024, 3, 14), 9)
    assert bundle_dmy("mon\x00", REFERENCE) == (date(2024, 3, 18), 3)
    with pytest.raises(NoAlternativeMatched):
        bundle_dmy.standalone()("mon\x00", REFERENCE)


def test_bundle_rejects_lone_surrogate():
    with pytest.raises(NoAlternativeMatched) as excinfo:
        bundle_dmy("\ud800", REFERENCE)
    assert [name for name, _ in excinfo.value.failures] == bundle_dmy.member_names
