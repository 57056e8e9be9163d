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
Date arithmetic against a caller-supplied reference date.

Nothing here reads the clock: every function takes the reference date as an
argument and returns a new ``datetime.date``.
"""

from datetime import date, timedelta
from typing import Optional

from dateutil.relativedelta import FR, MO, SA, SU, TH, TU, WE, relativedelta

from .errors import CalendarInvalid

# Monday = 0, matching date.weekday()
WEEKDAYS = (MO, TU, WE, TH, FR, SA, SU)

# named_weekday returns the reference date itself when it already falls on the
# requested weekday. Set to False to jump to the following week instead.
NAMED_WEEKDAY_INCLUDES_REFERENCE = True


def resolve_date(
    reference: date,
    year: Optional[int] = None,
    month: Optional[int] = None,
    day: Optional[int] = None,
) -> date:
    """
    Fill absent fields from ``reference`` and build the calendar date.

    This is the only place where numeric input is checked against the
    calendar: field matchers accept day 31 for any month.

    Raises:
        CalendarInvalid: if the resulting triple is not a real day
    """
    year = reference.year if year is None else year
    month = reference.month if month is None else month
    day = reference.day if day is None else day
    try:
        return date(year, month, day)
    except ValueError as e:
        raise CalendarInvalid(f"{year:04d}-{month:02d}-{day:02d} is not a valid date ({e})")


def shift_days(reference: date, days: int) -> date:
    """
    Add a signed number of days.

    Raises:
        CalendarInvalid: if the result falls outside the supported years
    """
    try:
        return reference + timedelta(days=days)
    except OverflowError:
        raise CalendarInvalid(f"{reference.isoformat()} {days:+d} days is out of range")


def next_weekday(reference: date, weekday: int) -> date:
    """
    The nearest date on or after ``reference`` falling on ``weekday``.

    With NAMED_WEEKDAY_INCLUDES_REFERENCE the distance is 0-6 days, otherwise
    1-7 days.
    """
    start = reference if NAMED_WEEKDAY_INCLUDES_REFERENCE else shift_days(reference, 1)
    try:
        return start + relativedelta(weekday=WEEKDAYS[weekday](+1))
    except (OverflowError, ValueError):
        raise CalendarInvalid(f"no {WEEKDAYS[weekday]} on or after {reference.isoformat()}")


def weekday_of_week(reference: date, weekday: int) -> date:
    """The date of ``weekday`` in the Monday-Sunday week containing ``reference``."""
    return shift_days(reference, weekday - reference.weekday())
