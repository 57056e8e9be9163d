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
Numeric date recognizers, one per layout.

Every composer reads its fields through ``read_fields`` and resolves them
with ``resolve_date``, which takes absent fields from the reference date:

=============  ==============  ===============================
recognizer     pattern         example (reference 2024-03-15)
=============  ==============  ===============================
dd_only        dd              "9"          -> 2024-03-09
dd_mm_only     dd*mm           "01/02"      -> 2024-02-01
mm_dd_only     mm*dd           "02/01"      -> 2024-02-01
dd_mm_y4       dd*mm*yyyy      "13.06.2024" -> 2024-06-13
mm_dd_y4       mm*dd*yyyy      "06-13-2024" -> 2024-06-13
y4_mm_dd       yyyy*mm*dd      "2024/06/13" -> 2024-06-13
=============  ==============  ===============================

``*`` is any run of ``/ - .`` space or tab, possibly empty, and may differ
between the two positions of one date.
"""

from datetime import date

from ..core.date_utils import resolve_date
from ..core.errors import ParseError
from ..core.types import Match, recognizer
from .rules import DAY, MONTH, YEAR, read_fields


def _resolve(member, text: str, reference: date, *fields) -> Match:
    try:
        values, consumed = read_fields(text, *fields)
        return Match(resolve_date(reference, **values), consumed)
    except ParseError as e:
        e.text, e.recognizer = text, member.name
        e.message = f"{e.message} (expected {member.pattern})"
        raise


@recognizer("numeric.dd_only", "dd")
def dd_only(text: str, reference: date) -> Match:
    """Day only; month and year come from the reference date."""
    return _resolve(dd_only, text, reference, DAY)


@recognizer("numeric.dd_mm_only", "dd*mm")
def dd_mm_only(text: str, reference: date) -> Match:
    """Day and month; the year comes from the reference date."""
    return _resolve(dd_mm_only, text, reference, DAY, MONTH)


@recognizer("numeric.mm_dd_only", "mm*dd")
def mm_dd_only(text: str, reference: date) -> Match:
    """Month and day; the year comes from the reference date."""
    return _resolve(mm_dd_only, text, reference, MONTH, DAY)


@recognizer("numeric.dd_mm_y4", "dd*mm*yyyy")
def dd_mm_y4(text: str, reference: date) -> Match:
    return _resolve(dd_mm_y4, text, reference, DAY, MONTH, YEAR)


@recognizer("numeric.mm_dd_y4", "mm*dd*yyyy")
def mm_dd_y4(text: str, reference: date) -> Match:
    return _resolve(mm_dd_y4, text, reference, MONTH, DAY, YEAR)


@recognizer("numeric.y4_mm_dd", "yyyy*mm*dd")
def y4_mm_dd(text: str, reference: date) -> Match:
    return _resolve(y4_mm_dd, text, reference, YEAR, MONTH, DAY)


RECOGNIZERS = (dd_only, dd_mm_only, mm_dd_only, dd_mm_y4, mm_dd_y4, y4_mm_dd)
