"""Exercise styles — American, Bermudan, European.

An exercise is one of three @final frozen dataclasses. Shared inspectors
(style, dates, date, last_date) are plain functions that match over the
union; the dataclasses expose them as properties/methods through a
slot-less mixin so both call styles work.

Smart constructors return Ok | Err[ConstructionError]; raw construction
validates in __post_init__ and raises TypeError.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Final, assert_never, final

from optexercise.core.errors import (
    ConstructionError,
    IndexOutOfRangeError,
    construction_error,
    index_out_of_range,
)
from optexercise.core.result import Err, Ok

# Earliest representable date: "exercisable from contract inception".
MIN_DATE: Final = date.min


class ExerciseType(Enum):
    AMERICAN = "American"
    BERMUDAN = "Bermudan"
    EUROPEAN = "European"


def _is_plain_date(value: object) -> bool:
    return isinstance(value, date) and not isinstance(value, datetime)


def _require_date(source: str, path: str, value: object) -> Ok[date] | Err[ConstructionError]:
    if not _is_plain_date(value):
        return Err(construction_error(
            source, "INVALID_DATE", path, "must be a datetime.date", value,
        ))
    return Ok(value)  # type: ignore[arg-type]


def _require_flag(source: str, path: str, value: object) -> Ok[bool] | Err[ConstructionError]:
    if not isinstance(value, bool):
        return Err(construction_error(source, "INVALID_FLAG", path, "must be a bool", value))
    return Ok(value)


class _ExerciseInspectors:
    """Attribute-style access to the shared inspectors below."""

    __slots__ = ()

    @property
    def style(self) -> ExerciseType:
        return exercise_type(self)  # type: ignore[arg-type]

    @property
    def dates(self) -> tuple[date, ...]:
        return exercise_dates(self)  # type: ignore[arg-type]

    @property
    def last_date(self) -> date:
        return last_date(self)  # type: ignore[arg-type]

    def date(self, index: int) -> Ok[date] | Err[IndexOutOfRangeError]:
        return exercise_date(self, index)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class AmericanExercise(_ExerciseInspectors):
    """Exercisable at any time in [earliest_date, latest_date].

    earliest_date may be MIN_DATE, meaning any time up to latest_date.
    earliest_date <= latest_date is the caller's responsibility and is not
    checked here; see is_chronological().
    """

    earliest_date: date
    latest_date: date
    payoff_at_expiry: bool = False

    def __post_init__(self) -> None:
        for name in ("earliest_date", "latest_date"):
            value = getattr(self, name)
            if not _is_plain_date(value):
                raise TypeError(f"AmericanExercise.{name} must be a date, got {value!r}")
        if not isinstance(self.payoff_at_expiry, bool):
            raise TypeError(
                f"AmericanExercise.payoff_at_expiry must be bool, got {self.payoff_at_expiry!r}"
            )

    @staticmethod
    def create(
        earliest_date: date,
        latest_date: date,
        payoff_at_expiry: bool = False,
    ) -> Ok[AmericanExercise] | Err[ConstructionError]:
        _src = "instrument.exercise.AmericanExercise.create"
        match _require_date(_src, "AmericanExercise.earliest_date", earliest_date):
            case Err(e):
                return Err(e)
            case Ok(earliest):
                pass
        match _require_date(_src, "AmericanExercise.latest_date", latest_date):
            case Err(e):
                return Err(e)
            case Ok(latest):
                pass
        match _require_flag(_src, "AmericanExercise.payoff_at_expiry", payoff_at_expiry):
            case Err(e):
                return Err(e)
            case Ok(flag):
                pass
        return Ok(AmericanExercise(
            earliest_date=earliest, latest_date=latest, payoff_at_expiry=flag,
        ))

    @staticmethod
    def until(
        latest_date: date, payoff_at_expiry: bool = False,
    ) -> Ok[AmericanExercise] | Err[ConstructionError]:
        """Exercisable from inception up to latest_date."""
        return AmericanExercise.create(MIN_DATE, latest_date, payoff_at_expiry)


@final
@dataclass(frozen=True, slots=True)
class BermudanExercise(_ExerciseInspectors):
    """Exercisable only on a fixed, ordered set of dates (e.g. monthly calls)."""

    exercise_dates: tuple[date, ...]
    payoff_at_expiry: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.exercise_dates, tuple):
            raise TypeError(
                "BermudanExercise.exercise_dates must be a tuple, "
                f"got {type(self.exercise_dates).__name__}"
            )
        if not self.exercise_dates:
            raise TypeError("BermudanExercise.exercise_dates must be non-empty")
        for i, d in enumerate(self.exercise_dates):
            if not _is_plain_date(d):
                raise TypeError(f"BermudanExercise.exercise_dates[{i}] must be a date, got {d!r}")
        for i in range(1, len(self.exercise_dates)):
            if self.exercise_dates[i] < self.exercise_dates[i - 1]:
                raise TypeError(
                    "BermudanExercise.exercise_dates must be in ascending order, "
                    f"but date[{i}]={self.exercise_dates[i]} "
                    f"< date[{i - 1}]={self.exercise_dates[i - 1]}"
                )
        if not isinstance(self.payoff_at_expiry, bool):
            raise TypeError(
                f"BermudanExercise.payoff_at_expiry must be bool, got {self.payoff_at_expiry!r}"
            )

    @staticmethod
    def create(
        dates: Iterable[date], payoff_at_expiry: bool = False,
    ) -> Ok[BermudanExercise] | Err[ConstructionError]:
        """Build from any iterable of dates; order is kept as given, not sorted."""
        _src = "instrument.exercise.BermudanExercise.create"
        try:
            schedule = tuple(dates)
        except TypeError:
            return Err(construction_error(
                _src, "INVALID_DATE", "BermudanExercise.exercise_dates",
                "must be an iterable of dates", dates,
            ))
        if not schedule:
            return Err(construction_error(
                _src, "EMPTY_SCHEDULE", "BermudanExercise.exercise_dates",
                "must contain at least one date", schedule,
            ))
        for i, d in enumerate(schedule):
            match _require_date(_src, f"BermudanExercise.exercise_dates[{i}]", d):
                case Err(e):
                    return Err(e)
                case Ok(_):
                    pass
        for i in range(1, len(schedule)):
            if schedule[i] < schedule[i - 1]:
                return Err(construction_error(
                    _src, "UNORDERED_SCHEDULE", f"BermudanExercise.exercise_dates[{i}]",
                    f"must not precede exercise_dates[{i - 1}] ({schedule[i - 1]})",
                    schedule[i],
                ))
        match _require_flag(_src, "BermudanExercise.payoff_at_expiry", payoff_at_expiry):
            case Err(e):
                return Err(e)
            case Ok(flag):
                pass
        return Ok(BermudanExercise(exercise_dates=schedule, payoff_at_expiry=flag))


@final
@dataclass(frozen=True, slots=True)
class EuropeanExercise(_ExerciseInspectors):
    """Exercisable on the expiry date only."""

    expiry_date: date

    def __post_init__(self) -> None:
        if not _is_plain_date(self.expiry_date):
            raise TypeError(f"EuropeanExercise.expiry_date must be a date, got {self.expiry_date!r}")

    @staticmethod
    def create(expiry_date: date) -> Ok[EuropeanExercise] | Err[ConstructionError]:
        match _require_date(
            "instrument.exercise.EuropeanExercise.create",
            "EuropeanExercise.expiry_date", expiry_date,
        ):
            case Err(e):
                return Err(e)
            case Ok(d):
                return Ok(EuropeanExercise(expiry_date=d))


type Exercise = AmericanExercise | BermudanExercise | EuropeanExercise
type EarlyExercise = AmericanExercise | BermudanExercise


# ---------------------------------------------------------------------------
# Shared inspectors
# ---------------------------------------------------------------------------


def exercise_type(exercise: Exercise) -> ExerciseType:
    match exercise:
        case AmericanExercise():
            return ExerciseType.AMERICAN
        case BermudanExercise():
            return ExerciseType.BERMUDAN
        case EuropeanExercise():
            return ExerciseType.EUROPEAN
        case _never:
            assert_never(_never)


def exercise_dates(exercise: Exercise) -> tuple[date, ...]:
    """All exercise dates in order. American: (earliest, latest)."""
    match exercise:
        case AmericanExercise(earliest_date=earliest, latest_date=latest):
            return (earliest, latest)
        case BermudanExercise(exercise_dates=schedule):
            return schedule
        case EuropeanExercise(expiry_date=expiry):
            return (expiry,)
        case _never:
            assert_never(_never)


def is_valid_index(index: object, size: int) -> bool:
    """True for an int (not bool) in [0, size). Negative indices do not wrap."""
    return isinstance(index, int) and not isinstance(index, bool) and 0 <= index < size


def exercise_date(exercise: Exercise, index: int) -> Ok[date] | Err[IndexOutOfRangeError]:
    dates = exercise_dates(exercise)
    if not is_valid_index(index, len(dates)):
        return Err(index_out_of_range(
            "instrument.exercise.exercise_date", "date", index, len(dates),
        ))
    return Ok(dates[index])


def last_date(exercise: Exercise) -> date:
    """Expiry, or latest exercisable date, whatever the style."""
    return exercise_dates(exercise)[-1]


def payoff_at_expiry(exercise: Exercise) -> bool:
    """True when an early exercise settles as of expiry. Always False for European."""
    match exercise:
        case AmericanExercise(payoff_at_expiry=flag) | BermudanExercise(payoff_at_expiry=flag):
            return flag
        case EuropeanExercise():
            return False
        case _never:
            assert_never(_never)


def is_early_exercise(exercise: Exercise) -> bool:
    return isinstance(exercise, AmericanExercise | BermudanExercise)


def is_chronological(exercise: Exercise) -> bool:
    dates = exercise_dates(exercise)
    return all(a <= b for a, b in zip(dates, dates[1:], strict=False))
