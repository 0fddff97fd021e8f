"""Semi-monthly pay period resolution."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta

# Day of month on which the second period starts.
SECOND_HALF_START_DAY = 16
# Each window spans start + 14 days, inclusive.
PERIOD_SPAN = timedelta(days=14)


@dataclass(frozen=True)
class PayPeriodWindow:
    """A half-month window identified by its start and end dates."""

    start_date: date
    end_date: date


def resolve_pay_period(day: date) -> PayPeriodWindow:
    """Map a calendar date to the semi-monthly pay period it belongs to.

    Days 1-15 map to [1st, 15th]. Days 16 onwards map to [16th, 16th + 14 days].
    The second window always ends on the 30th day counted from the 16th, so it
    runs into March for February and does not reach the 31st of long months.
    """
    month_start = day.replace(day=1)
    if day.day < SECOND_HALF_START_DAY:
        start = month_start
    else:
        start = month_start + timedelta(days=SECOND_HALF_START_DAY - 1)
    return PayPeriodWindow(start_date=start, end_date=start + PERIOD_SPAN)
