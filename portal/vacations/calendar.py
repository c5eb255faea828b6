"""Business-day arithmetic and proportional entitlement rounding.

Only Saturdays and Sundays are non-working days; public holidays are not
modelled.
"""

from __future__ import annotations

import logging
import math
from datetime import date, timedelta
from typing import Iterator, Optional

from portal.common.constants import MONTHS_PER_YEAR

logger = logging.getLogger(__name__)

# date.weekday(): Monday=0 … Sunday=6
WEEKEND_DAYS = frozenset({5, 6})


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every date in [start, end]; nothing when end < start."""
    for offset in range((end - start).days + 1):
        yield start + timedelta(days=offset)


def business_days_between(start: date, end: date) -> int:
    """Count weekdays in [start, end] inclusive.

    Whole weeks contribute five days each; only the trailing partial week
    (at most six days) is walked, by weekday number rather than by date.

    An inverted range counts as 0 rather than raising, callers read 0 as
    "nothing requested".
    """
    if end < start:
        logger.debug("Inverted range %s..%s counts as 0 business days", start, end)
        return 0
    weeks, remainder = divmod((end - start).days + 1, 7)
    first = start.weekday()
    return weeks * 5 + sum(
        1 for offset in range(remainder)
        if (first + offset) % 7 not in WEEKEND_DAYS
    )


def ranges_overlap(a_start: date, a_end: date, b_start: date, b_end: date) -> bool:
    """Inclusive interval intersection."""
    return a_start <= b_end and a_end >= b_start


def proportional_annual_entitlement(
    employment_start_date: date,
    annual_days: int,
    today: Optional[date] = None,
) -> int:
    """Vacation days for the current year given the employment start date.

    Employees hired in an earlier year get the full grant. Hires in the
    current year get annual_days / 12 for every month left, counting the
    start month, rounded up (Art. 155¹ KP forbids rounding down).
    """
    current_year = (today or date.today()).year
    if employment_start_date.year < current_year:
        return annual_days

    months_remaining = MONTHS_PER_YEAR - employment_start_date.month + 1
    result = math.ceil(annual_days * months_remaining / MONTHS_PER_YEAR)
    logger.debug(
        "Proportional entitlement: %d days for start %s (%d months)",
        result, employment_start_date, months_remaining,
    )
    return result
