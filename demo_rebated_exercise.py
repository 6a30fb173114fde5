"""
demo_rebated_exercise.py -- A walkthrough of optexercise's exercise rights model.

We build the three exercise styles, then wrap each in a RebatedExercise
and ask for the rebate payment dates. The American case shows why the
payment date is returned as a Result rather than a plain date: it cannot
be known until the holder actually exercises.

Run this:  .venv/bin/python demo_rebated_exercise.py
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from optexercise.core.calendar import advance
from optexercise.core.result import Err, Ok, unwrap
from optexercise.core.types import BusinessCalendar
from optexercise.instrument.exercise import (
    AmericanExercise,
    BermudanExercise,
    EuropeanExercise,
    Exercise,
)
from optexercise.instrument.rebated import RebatedExercise


def sep(title: str) -> None:
    print(f"\n{'=' * 72}")
    print(f"  {title}")
    print(f"{'=' * 72}\n")


# A calendar with weekends and the 2024 Easter holidays.
calendar = BusinessCalendar.with_holidays(
    "Demo2024", [date(2024, 3, 29), date(2024, 4, 1), date(2024, 12, 25)],
)

# =========================================================================
sep("STEP 1: Exercise styles")
# =========================================================================

# Each smart constructor returns Ok | Err. unwrap() is fine here because
# the inputs are known-good; production code would match on the result.
european = unwrap(EuropeanExercise.create(date(2024, 3, 28)))
bermudan = unwrap(BermudanExercise.create(
    [date(2024, 3, 28), date(2024, 6, 28), date(2024, 9, 27), date(2024, 12, 24)],
))
american = unwrap(AmericanExercise.until(date(2024, 12, 20)))

exercises: list[Exercise] = [european, bermudan, american]
for ex in exercises:
    print(f"  {ex.style.value:9s} dates={[d.isoformat() for d in ex.dates]}")
    print(f"  {'':9s} last_date={ex.last_date}")

# Out-of-range access is a value, not an exception.
match european.date(3):
    case Err(e):
        print(f"\n  european.date(3) -> {e.code}: {e.message}")
    case Ok(d):
        print(f"\n  european.date(3) -> {d}")

# =========================================================================
sep("STEP 2: Rebates")
# =========================================================================

# Holder receives 5.00 on exercise, paid 2 business days later.
for ex in exercises:
    rex = unwrap(RebatedExercise.uniform(ex, Decimal("5.00"), 2, calendar, "FOLLOWING"))
    print(f"  {rex.style.value}")
    for i, exercised_on in enumerate(rex.dates):
        match rex.rebate_payment_date(i):
            case Ok(paid_on):
                print(f"    exercise {exercised_on} -> rebate {unwrap(rex.rebate(i))} paid {paid_on}")
            case Err(e):
                print(f"    exercise date {i}: {e.code}")

# Per-date rebates must match the number of exercise dates.
match RebatedExercise.create(bermudan, [Decimal("4"), Decimal("3")]):
    case Err(e):
        print(f"\n  per-date rebates (2 for 4 dates) -> {e.code}: {e.message}")
    case Ok(_):
        print("\n  unexpectedly built")

# =========================================================================
sep("STEP 3: American rebates are settled by the caller")
# =========================================================================

# Once the holder exercises, the caller advances from the actual date.
actual_exercise = date(2024, 3, 28)
paid_on = advance(actual_exercise, 2, "D", "FOLLOWING", calendar)
print(f"  American exercised {actual_exercise} -> rebate paid {paid_on}")

print("\nDone.")
