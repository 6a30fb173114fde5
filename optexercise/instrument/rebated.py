"""Rebated exercise — an exercise plus a rebate paid or received on exercise.

A positive rebate is received by the holder on exercise, a negative one is
paid. The rebate is settled `settlement_days` business days after the
exercise date on `payment_calendar`.

For American exercise the payment date cannot be fixed in advance: the
exercise can happen on any day of the window. rebate_payment_date()
returns Err(UnsupportedOperationError) in that case and the caller must
advance from the actual exercise date itself.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import final

from optexercise.core.calendar import advance
from optexercise.core.errors import (
    ConstructionError,
    IndexOutOfRangeError,
    UnsupportedOperationError,
    construction_error,
    index_out_of_range,
)
from optexercise.core.money import AmountLike, parse_amount
from optexercise.core.result import Err, Ok, sequence
from optexercise.core.types import (
    BUSINESS_DAY_CONVENTIONS,
    BusinessCalendar,
    BusinessDayConvention,
    UtcDatetime,
)
from optexercise.infra.config import DEFAULT_REBATE_TERMS, RebateDefaults
from optexercise.instrument.exercise import (
    AmericanExercise,
    BermudanExercise,
    EuropeanExercise,
    Exercise,
    ExerciseType,
    exercise_date,
    exercise_dates,
    exercise_type,
    is_valid_index,
)
from optexercise.instrument.exercise import last_date as _last_date
from optexercise.instrument.exercise import payoff_at_expiry as _payoff_at_expiry

logger = logging.getLogger(__name__)

_EXERCISE_TYPES = (AmericanExercise, BermudanExercise, EuropeanExercise)
_AMOUNT_CONSTRAINT = "must be a finite Decimal, int or numeric str"


@final
@dataclass(frozen=True, slots=True)
class RebatedExercise:
    """An owned Exercise value with one rebate per exercise date.

    Use RebatedExercise.uniform() or RebatedExercise.create(); direct
    construction raises TypeError on invalid input.
    """

    exercise: Exercise
    rebates: tuple[Decimal, ...]
    settlement_days: int = DEFAULT_REBATE_TERMS.settlement_days
    payment_calendar: BusinessCalendar = DEFAULT_REBATE_TERMS.payment_calendar
    payment_convention: BusinessDayConvention = DEFAULT_REBATE_TERMS.payment_convention

    def __post_init__(self) -> None:
        if not isinstance(self.exercise, _EXERCISE_TYPES):
            raise TypeError(
                "RebatedExercise.exercise must be an exercise, "
                f"got {type(self.exercise).__name__}"
            )
        if not isinstance(self.rebates, tuple):
            raise TypeError(
                f"RebatedExercise.rebates must be a tuple, got {type(self.rebates).__name__}"
            )
        n_dates = len(exercise_dates(self.exercise))
        if len(self.rebates) != n_dates:
            raise TypeError(
                f"RebatedExercise: {len(self.rebates)} rebates given "
                f"for {n_dates} exercise dates"
            )
        for i, r in enumerate(self.rebates):
            if not isinstance(r, Decimal) or not r.is_finite():
                raise TypeError(f"RebatedExercise.rebates[{i}] must be finite Decimal, got {r!r}")
        if (
            not isinstance(self.settlement_days, int)
            or isinstance(self.settlement_days, bool)
            or self.settlement_days < 0
        ):
            raise TypeError(
                f"RebatedExercise.settlement_days must be int >= 0, got {self.settlement_days!r}"
            )
        if not isinstance(self.payment_calendar, BusinessCalendar):
            raise TypeError(
                "RebatedExercise.payment_calendar must be a BusinessCalendar, "
                f"got {type(self.payment_calendar).__name__}"
            )
        if self.payment_convention not in BUSINESS_DAY_CONVENTIONS:
            raise TypeError(
                "RebatedExercise.payment_convention must be one of "
                f"{BUSINESS_DAY_CONVENTIONS}, got {self.payment_convention!r}"
            )

    # --- smart constructors ---

    @staticmethod
    def uniform(
        exercise: Exercise,
        rebate: AmountLike = DEFAULT_REBATE_TERMS.rebate,
        settlement_days: int = DEFAULT_REBATE_TERMS.settlement_days,
        payment_calendar: BusinessCalendar = DEFAULT_REBATE_TERMS.payment_calendar,
        payment_convention: BusinessDayConvention = DEFAULT_REBATE_TERMS.payment_convention,
    ) -> Ok[RebatedExercise] | Err[ConstructionError]:
        """Same rebate on every exercise date."""
        _src = "instrument.rebated.RebatedExercise.uniform"
        if not isinstance(exercise, _EXERCISE_TYPES):
            return _rejected(construction_error(
                _src, "INVALID_EXERCISE", "RebatedExercise.exercise",
                "must be an American, Bermudan or European exercise", exercise,
            ))
        n_dates = len(exercise_dates(exercise))
        match parse_amount(rebate).map(lambda amount: (amount,) * n_dates):
            case Err(_):
                return _rejected(construction_error(
                    _src, "INVALID_REBATE", "RebatedExercise.rebate", _AMOUNT_CONSTRAINT, rebate,
                ))
            case Ok(rebates):
                pass
        return _build(
            _src, exercise, rebates, settlement_days, payment_calendar, payment_convention,
        )

    @staticmethod
    def create(
        exercise: Exercise,
        rebates: Iterable[AmountLike],
        settlement_days: int = DEFAULT_REBATE_TERMS.settlement_days,
        payment_calendar: BusinessCalendar = DEFAULT_REBATE_TERMS.payment_calendar,
        payment_convention: BusinessDayConvention = DEFAULT_REBATE_TERMS.payment_convention,
    ) -> Ok[RebatedExercise] | Err[ConstructionError]:
        """One rebate per exercise date; the count must match the date count."""
        _src = "instrument.rebated.RebatedExercise.create"
        if not isinstance(exercise, _EXERCISE_TYPES):
            return _rejected(construction_error(
                _src, "INVALID_EXERCISE", "RebatedExercise.exercise",
                "must be an American, Bermudan or European exercise", exercise,
            ))
        # A str is iterable but is one amount, not a list of them.
        if isinstance(rebates, str | bytes):
            return _rejected(construction_error(
                _src, "INVALID_REBATE", "RebatedExercise.rebates",
                "must be a collection of amounts, not a single string", rebates,
            ))
        try:
            raw_rebates = tuple(rebates)
        except TypeError:
            return _rejected(construction_error(
                _src, "INVALID_REBATE", "RebatedExercise.rebates",
                "must be an iterable of amounts", rebates,
            ))
        n_dates = len(exercise_dates(exercise))
        if len(raw_rebates) != n_dates:
            return _rejected(construction_error(
                _src, "REBATE_COUNT_MISMATCH", "RebatedExercise.rebates",
                f"length must equal number of exercise dates ({n_dates})", len(raw_rebates),
            ))
        match sequence(
            parse_amount(raw).map_err(lambda _msg, i=i, raw=raw: (i, raw))
            for i, raw in enumerate(raw_rebates)
        ):
            case Err((i, raw)):
                return _rejected(construction_error(
                    _src, "INVALID_REBATE", f"RebatedExercise.rebates[{i}]",
                    _AMOUNT_CONSTRAINT, raw,
                ))
            case Ok(amounts):
                pass
        return _build(
            _src, exercise, amounts, settlement_days, payment_calendar, payment_convention,
        )

    @staticmethod
    def from_terms(
        exercise: Exercise,
        terms: RebateDefaults,
        rebates: Iterable[AmountLike] | None = None,
    ) -> Ok[RebatedExercise] | Err[ConstructionError]:
        """Apply configured terms; without per-date rebates, terms.rebate is broadcast."""
        if rebates is None:
            return RebatedExercise.uniform(
                exercise, terms.rebate, terms.settlement_days,
                terms.payment_calendar, terms.payment_convention,
            )
        return RebatedExercise.create(
            exercise, rebates, terms.settlement_days,
            terms.payment_calendar, terms.payment_convention,
        )

    # --- rebate inspectors ---

    def rebate(self, index: int) -> Ok[Decimal] | Err[IndexOutOfRangeError]:
        if not is_valid_index(index, len(self.rebates)):
            return Err(index_out_of_range(
                "instrument.rebated.RebatedExercise.rebate", "rebate", index, len(self.rebates),
            ))
        return Ok(self.rebates[index])

    def rebate_payment_date(
        self, index: int,
    ) -> Ok[date] | Err[UnsupportedOperationError | IndexOutOfRangeError]:
        """Date the rebate for exercise date `index` is paid.

        European/Bermudan: dates[index] advanced by settlement_days business
        days on payment_calendar. American: always Err, whatever the index.
        """
        _src = "instrument.rebated.RebatedExercise.rebate_payment_date"
        style = exercise_type(self.exercise)
        if style is ExerciseType.AMERICAN:
            logger.debug("rebate payment date refused for %s exercise", style.value)
            return Err(UnsupportedOperationError(
                message=(
                    "for American-style exercise the rebate payment date "
                    "has to be computed by the caller from the actual exercise date"
                ),
                code="UNSUPPORTED_OPERATION",
                timestamp=UtcDatetime.now(),
                source=_src,
                operation="rebate_payment_date",
                exercise_type=style.value,
            ))
        match exercise_date(self.exercise, index):
            case Err(e):
                return Err(e)
            case Ok(exercised_on):
                return Ok(advance(
                    exercised_on,
                    self.settlement_days,
                    "D",
                    self.payment_convention,
                    self.payment_calendar,
                ))

    # --- delegated exercise inspectors ---

    @property
    def style(self) -> ExerciseType:
        return exercise_type(self.exercise)

    @property
    def dates(self) -> tuple[date, ...]:
        return exercise_dates(self.exercise)

    @property
    def last_date(self) -> date:
        return _last_date(self.exercise)

    @property
    def payoff_at_expiry(self) -> bool:
        return _payoff_at_expiry(self.exercise)

    def date(self, index: int) -> Ok[date] | Err[IndexOutOfRangeError]:
        return exercise_date(self.exercise, index)


def _rejected(error: ConstructionError) -> Err[ConstructionError]:
    logger.debug("%s rejected: %s (%s)", error.source, error.message, error.code)
    return Err(error)


def _build(
    source: str,
    exercise: Exercise,
    rebates: tuple[Decimal, ...],
    settlement_days: int,
    payment_calendar: BusinessCalendar,
    payment_convention: BusinessDayConvention,
) -> Ok[RebatedExercise] | Err[ConstructionError]:
    if (
        not isinstance(settlement_days, int)
        or isinstance(settlement_days, bool)
        or settlement_days < 0
    ):
        return _rejected(construction_error(
            source, "INVALID_SETTLEMENT_DAYS", "RebatedExercise.settlement_days",
            "must be an int >= 0", settlement_days,
        ))
    if not isinstance(payment_calendar, BusinessCalendar):
        return _rejected(construction_error(
            source, "INVALID_CALENDAR", "RebatedExercise.payment_calendar",
            "must be a BusinessCalendar", payment_calendar,
        ))
    if payment_convention not in BUSINESS_DAY_CONVENTIONS:
        return _rejected(construction_error(
            source, "INVALID_CONVENTION", "RebatedExercise.payment_convention",
            f"must be one of {', '.join(BUSINESS_DAY_CONVENTIONS)}", payment_convention,
        ))
    return Ok(RebatedExercise(
        exercise=exercise,
        rebates=rebates,
        settlement_days=settlement_days,
        payment_calendar=payment_calendar,
        payment_convention=payment_convention,
    ))
