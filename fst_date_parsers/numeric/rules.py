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
Numeric date parts: ``dd``, ``mm``, ``yyyy`` and the separator between them.

Each function matches at the start of the text and returns the parsed value
together with the number of characters consumed.
"""

from typing import Tuple

from ..rules import FieldRule, SeparatorRule

DAY = FieldRule("day", max_width=2, min_value=1, max_value=31)
MONTH = FieldRule("month", max_width=2, min_value=1, max_value=12)
YEAR = FieldRule("year", max_width=4, exact_width=True)
SEPARATOR = SeparatorRule()


def dd(text: str) -> Tuple[int, int]:
    """One or two digits of a day, 1..31; raises OutOfRange otherwise."""
    return DAY.match(text)


def mm(text: str) -> Tuple[int, int]:
    """One or two digits of a month, 1..12; raises OutOfRange otherwise."""
    return MONTH.match(text)


def y4(text: str) -> Tuple[int, int]:
    """Exactly four digits of a year, 0000..9999 lexically."""
    return YEAR.match(text)


def numeric_date_parts_separator(text: str) -> int:
    """Length of the separator run at the start of ``text``; may be 0."""
    return SEPARATOR.match(text)


def read_fields(text: str, *fields: FieldRule) -> Tuple[dict, int]:
    """
    Read ``fields`` in order with a separator run between consecutive ones.

    No separator is read after the last field.

    Returns:
        Tuple[dict, int]: field name -> value, and the consumed length
    """
    values = {}
    pos = 0
    for index, field in enumerate(fields):
        if index:
            pos += SEPARATOR.match(text[pos:])
        value, consumed = field.match(text[pos:])
        values[field.name] = value
        pos += consumed
    return values, pos


def dd_mm(text: str) -> Tuple[Tuple[int, int], int]:
    """Day and month separated by a separator run: ((day, month), consumed)."""
    values, consumed = read_fields(text, DAY, MONTH)
    return (values["day"], values["month"]), consumed


def mm_dd(text: str) -> Tuple[Tuple[int, int], int]:
    """Month and day separated by a separator run: ((month, day), consumed)."""
    values, consumed = read_fields(text, MONTH, DAY)
    return (values["month"], values["day"]), consumed
