"""Business day adjustment and date advancing.

Type definitions live in core/types.py. This module provides functions.
"""

from __future__ import annotations

import calendar as _cal
from datetime import date, timedelta
from typing import assert_never

from dateutil.relativedelta import relativedelta

from optexercise.core.types import (
    WEEKENDS_ONLY,
    BusinessCalendar,
    BusinessDayConvention,
    PeriodUnit,
)

# ---------------------------------------------------------------------------
# Business day helpers
# ---------------------------------------------------------------------------


def is_business_day(d: date, calendar: BusinessCalendar = WEEKENDS_ONLY) -> bool:
    return d.weekday() not in calendar.weekend and d not in calendar.holidays


def _roll(d: date, step: int, calendar: BusinessCalendar) -> date:
    result = d
    while not is_business_day(result, calendar):
        result += timedelta(days=step)
    return result


def adjust_date(
    d: date,
    convention: BusinessDayConvention,
    calendar: BusinessCalendar = WEEKENDS_ONLY,
) -> date:
    """Adjust a date according to a business day convention.

    FOLLOWING: move to next business day.
    MOD_FOLLOWING: move to next business day, unless that crosses a month
                   boundary, in which case move to previous business day.
    PRECEDING: move to previous business day.
    MOD_PRECEDING: move to previous business day, unless that crosses a
                   month boundary, in which case move to next business day.
    NONE: no adjustment.
    """
    match convention:
        case "NONE":
            return d
        case "FOLLOWING":
            return _roll(d, 1, calendar)
        case "PRECEDING":
            return _roll(d, -1, calendar)
        case "MOD_FOLLOWING":
            result = _roll(d, 1, calendar)
            if result.month != d.month:
                result = _roll(d, -1, calendar)
            return result
        case "MOD_PRECEDING":
            result = _roll(d, -1, calendar)
            if result.month != d.month:
                result = _roll(d, 1, calendar)
            return result
        case _never:
            assert_never(_never)


def add_business_days(
    start: date, days: int, calendar: BusinessCalendar = WEEKENDS_ONLY,
) -> date:
    """Move `days` business days from start (backwards when negative).

    start itself need not be a business day. Zero returns start unchanged.
    """
    step = 1 if days >= 0 else -1
    current = start
    remaining = abs(days)
    while remaining > 0:
        current += timedelta(days=step)
        if is_business_day(current, calendar):
            remaining -= 1
    return current


def end_of_month(d: date, calendar: BusinessCalendar = WEEKENDS_ONLY) -> date:
    """Last business day of d's month."""
    last = date(d.year, d.month, _cal.monthrange(d.year, d.month)[1])
    return adjust_date(last, "PRECEDING", calendar)


def is_end_of_month(d: date, calendar: BusinessCalendar = WEEKENDS_ONLY) -> bool:
    """True when the next business day falls in another month.

    Non-business days after the month's last business day also count.
    """
    return d.month != adjust_date(d + timedelta(days=1), "FOLLOWING", calendar).month


# ---------------------------------------------------------------------------
# Advancing by a period
# ---------------------------------------------------------------------------


def advance(
    d: date,
    n: int,
    unit: PeriodUnit,
    convention: BusinessDayConvention = "FOLLOWING",
    calendar: BusinessCalendar = WEEKENDS_ONLY,
    end_of_month_rule: bool = False,
) -> date:
    """Advance d by n units on the given calendar.

    "D": n business days. n == 0 adjusts d with the convention; otherwise
         the convention is not applied, since each step already lands on a
         business day.
    "W": 7n calendar days, then adjusted.
    "M"/"Y": calendar month/year shift, then adjusted. With
         end_of_month_rule, a start at month end (see is_end_of_month)
         lands on the last business day of the target month.
    """
    match unit:
        case "D":
            if n == 0:
                return adjust_date(d, convention, calendar)
            return add_business_days(d, n, calendar)
        case "W":
            return adjust_date(d + timedelta(weeks=n), convention, calendar)
        case "M" | "Y":
            shift = relativedelta(months=n) if unit == "M" else relativedelta(years=n)
            target = d + shift
            if end_of_month_rule and is_end_of_month(d, calendar):
                return end_of_month(target, calendar)
            return adjust_date(target, convention, calendar)
        case _never:
            assert_never(_never)
