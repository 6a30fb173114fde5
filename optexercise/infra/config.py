"""Rebate settlement defaults.

Pure configuration data. Defaults match the conventional rebate terms:
no rebate, paid on the exercise date itself (0 settlement days), every
day a business day, Following adjustment.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Final, final

from optexercise.core.money import parse_amount
from optexercise.core.result import Err, Ok
from optexercise.core.types import (
    NULL_CALENDAR,
    WEEKENDS_ONLY,
    BusinessCalendar,
    BusinessDayConvention,
    parse_convention,
)

# Calendars addressable by name from configuration mappings.
NAMED_CALENDARS: Final[dict[str, BusinessCalendar]] = {
    "null": NULL_CALENDAR,
    "weekends_only": WEEKENDS_ONLY,
}


@final
@dataclass(frozen=True, slots=True)
class RebateDefaults:
    """Rebate amount and payment-date parameters applied when none are given."""

    rebate: Decimal
    settlement_days: int
    payment_calendar: BusinessCalendar
    payment_convention: BusinessDayConvention

    def __post_init__(self) -> None:
        if not isinstance(self.rebate, Decimal) or not self.rebate.is_finite():
            raise TypeError(f"RebateDefaults.rebate must be finite Decimal, got {self.rebate!r}")
        if (
            not isinstance(self.settlement_days, int)
            or isinstance(self.settlement_days, bool)
            or self.settlement_days < 0
        ):
            raise TypeError(
                f"RebateDefaults.settlement_days must be int >= 0, got {self.settlement_days!r}"
            )


DEFAULT_REBATE_TERMS: Final = RebateDefaults(
    rebate=Decimal("0"),
    settlement_days=0,
    payment_calendar=NULL_CALENDAR,
    payment_convention="FOLLOWING",
)


def rebate_defaults_from_mapping(raw: Mapping[str, object]) -> Ok[RebateDefaults] | Err[str]:
    """Read rebate defaults from a mapping (e.g. a parsed TOML/JSON section).

    Recognised keys: rebate, settlement_days, calendar, convention. Missing
    keys fall back to DEFAULT_REBATE_TERMS; unknown keys are rejected.
    """
    unknown = sorted(set(raw) - {"rebate", "settlement_days", "calendar", "convention"})
    if unknown:
        return Err(f"Unknown rebate config keys: {', '.join(unknown)}")

    rebate = DEFAULT_REBATE_TERMS.rebate
    if "rebate" in raw:
        match parse_amount(raw["rebate"]):  # type: ignore[arg-type]
            case Err(e):
                return Err(f"rebate: {e}")
            case Ok(rebate):
                pass

    days = raw.get("settlement_days", DEFAULT_REBATE_TERMS.settlement_days)
    if not isinstance(days, int) or isinstance(days, bool) or days < 0:
        return Err(f"settlement_days: must be int >= 0, got {days!r}")

    calendar = DEFAULT_REBATE_TERMS.payment_calendar
    if "calendar" in raw:
        name = str(raw["calendar"]).strip().lower()
        if name not in NAMED_CALENDARS:
            return Err(
                f"calendar: unknown calendar {raw['calendar']!r}, "
                f"expected one of {', '.join(sorted(NAMED_CALENDARS))}"
            )
        calendar = NAMED_CALENDARS[name]

    convention = DEFAULT_REBATE_TERMS.payment_convention
    if "convention" in raw:
        match parse_convention(raw["convention"]):  # type: ignore[arg-type]
            case Err(e):
                return Err(f"convention: {e}")
            case Ok(convention):
                pass

    return Ok(RebateDefaults(
        rebate=rebate,
        settlement_days=days,
        payment_calendar=calendar,
        payment_convention=convention,
    ))
