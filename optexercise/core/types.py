"""Core types: UtcDatetime, PeriodUnit, BusinessDayConvention, BusinessCalendar.

Date arithmetic over these types lives in core/calendar.py.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Final, Literal, final, get_args

from optexercise.core.result import Err, Ok


@final
@dataclass(frozen=True, slots=True)
class UtcDatetime:
    """Timezone-aware UTC datetime. Naive datetimes are rejected."""

    value: datetime

    def __post_init__(self) -> None:
        if self.value.tzinfo is None:
            raise TypeError("UtcDatetime requires timezone-aware datetime, got naive")

    @staticmethod
    def now() -> UtcDatetime:
        return UtcDatetime(value=datetime.now(tz=UTC))


# ---------------------------------------------------------------------------
# Date offsets and adjustment conventions
# ---------------------------------------------------------------------------

type PeriodUnit = Literal["D", "W", "M", "Y"]

type BusinessDayConvention = Literal[
    "MOD_FOLLOWING", "FOLLOWING", "MOD_PRECEDING", "PRECEDING", "NONE",
]

BUSINESS_DAY_CONVENTIONS: Final[tuple[str, ...]] = get_args(BusinessDayConvention.__value__)


def parse_convention(raw: str) -> Ok[BusinessDayConvention] | Err[str]:
    """Validate a business day convention name (case-insensitive)."""
    name = raw.strip().upper() if isinstance(raw, str) else raw
    if name not in BUSINESS_DAY_CONVENTIONS:
        return Err(
            f"Unknown business day convention {raw!r}, "
            f"expected one of {', '.join(BUSINESS_DAY_CONVENTIONS)}"
        )
    return Ok(name)


# ---------------------------------------------------------------------------
# Business calendars
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class BusinessCalendar:
    """A set of non-business weekdays plus explicit holidays.

    weekend holds date.weekday() numbers (Mon=0 .. Sun=6). No market
    holiday rules are generated; holidays must be listed explicitly.
    """

    name: str
    weekend: frozenset[int] = frozenset({5, 6})
    holidays: frozenset[date] = frozenset()

    def __post_init__(self) -> None:
        if not self.name:
            raise TypeError("BusinessCalendar requires a non-empty name")
        bad = sorted(d for d in self.weekend if not isinstance(d, int) or not 0 <= d <= 6)
        if bad:
            raise TypeError(f"BusinessCalendar.weekend days must be in 0..6, got {bad}")
        if len(self.weekend) == 7:
            raise TypeError("BusinessCalendar.weekend cannot cover every weekday")

    @staticmethod
    def with_holidays(
        name: str,
        holidays: Iterable[date],
        weekend: frozenset[int] = frozenset({5, 6}),
    ) -> BusinessCalendar:
        return BusinessCalendar(name=name, weekend=weekend, holidays=frozenset(holidays))


# Every day is a business day.
NULL_CALENDAR: Final = BusinessCalendar(name="Null", weekend=frozenset())
WEEKENDS_ONLY: Final = BusinessCalendar(name="WeekendsOnly")
