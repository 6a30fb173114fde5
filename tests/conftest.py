"""Hypothesis profiles and pytest fixtures for optexercise.

Strategies live in tests/strategies.py.
"""

from __future__ import annotations

from datetime import date

import pytest
from hypothesis import HealthCheck, settings

from optexercise.core.result import unwrap
from optexercise.core.types import BusinessCalendar
from optexercise.instrument.exercise import BermudanExercise

# ---------------------------------------------------------------------------
# Hypothesis global settings
# ---------------------------------------------------------------------------

settings.register_profile(
    "ci",
    max_examples=200,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.register_profile(
    "dev",
    max_examples=50,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.load_profile("dev")


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def quarterly_bermudan() -> BermudanExercise:
    return unwrap(BermudanExercise.create([
        date(2024, 3, 1), date(2024, 6, 1), date(2024, 9, 1), date(2024, 12, 1),
    ]))


@pytest.fixture
def target_calendar() -> BusinessCalendar:
    """Weekends plus a handful of fixed 2024 holidays."""
    return BusinessCalendar.with_holidays(
        "Target2024",
        [date(2024, 1, 1), date(2024, 3, 29), date(2024, 4, 1),
         date(2024, 5, 1), date(2024, 12, 25), date(2024, 12, 26)],
    )
