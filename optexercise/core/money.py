"""Decimal context and monetary amount parsing for rebates.

Rebate amounts are plain Decimals (positive: holder receives, negative:
holder pays). Floats are refused so no binary rounding leaks in.
"""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN as _ROUND_HALF_EVEN
from decimal import (
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
    localcontext,
)
from typing import Final

from optexercise.core.result import Err, Ok

EXERCISE_DECIMAL_CONTEXT: Final = Context(
    prec=28,
    rounding=_ROUND_HALF_EVEN,
    Emin=-999999,
    Emax=999999,
    capitals=1,
    clamp=0,
    flags=[],
    traps=[InvalidOperation, DivisionByZero, Overflow],
)

type AmountLike = Decimal | int | str


def parse_amount(raw: AmountLike) -> Ok[Decimal] | Err[str]:
    """Convert raw input to a finite Decimal under EXERCISE_DECIMAL_CONTEXT."""
    if isinstance(raw, bool) or not isinstance(raw, Decimal | int | str):
        return Err(f"amount must be Decimal, int or str, got {type(raw).__name__}")
    try:
        with localcontext(EXERCISE_DECIMAL_CONTEXT):
            value = Decimal(raw.strip() if isinstance(raw, str) else raw)
    except InvalidOperation:
        return Err(f"amount is not a number: {raw!r}")
    if not value.is_finite():
        return Err(f"amount must be finite, got {value}")
    return Ok(value)
