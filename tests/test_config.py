"""Tests for optexercise.infra.config and optexercise.core.money."""

from __future__ import annotations

import dataclasses
from decimal import Decimal

import pytest

from optexercise.core.money import parse_amount
from optexercise.core.result import Err, Ok, unwrap
from optexercise.core.types import NULL_CALENDAR, WEEKENDS_ONLY
from optexercise.infra.config import (
    DEFAULT_REBATE_TERMS,
    RebateDefaults,
    rebate_defaults_from_mapping,
)


class TestDefaults:
    def test_default_terms(self) -> None:
        assert DEFAULT_REBATE_TERMS.rebate == Decimal("0")
        assert DEFAULT_REBATE_TERMS.settlement_days == 0
        assert DEFAULT_REBATE_TERMS.payment_calendar is NULL_CALENDAR
        assert DEFAULT_REBATE_TERMS.payment_convention == "FOLLOWING"

    def test_is_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_REBATE_TERMS.settlement_days = 2  # type: ignore[misc]

    def test_rejects_negative_days(self) -> None:
        with pytest.raises(TypeError, match="settlement_days"):
            RebateDefaults(
                rebate=Decimal(0), settlement_days=-1,
                payment_calendar=NULL_CALENDAR, payment_convention="FOLLOWING",
            )


class TestFromMapping:
    def test_empty_mapping_gives_defaults(self) -> None:
        assert rebate_defaults_from_mapping({}) == Ok(DEFAULT_REBATE_TERMS)

    def test_all_keys(self) -> None:
        terms = unwrap(rebate_defaults_from_mapping({
            "rebate": "2.5",
            "settlement_days": 2,
            "calendar": "weekends_only",
            "convention": "mod_following",
        }))
        assert terms.rebate == Decimal("2.5")
        assert terms.settlement_days == 2
        assert terms.payment_calendar is WEEKENDS_ONLY
        assert terms.payment_convention == "MOD_FOLLOWING"

    def test_unknown_key(self) -> None:
        result = rebate_defaults_from_mapping({"rebates": 1})
        assert isinstance(result, Err)
        assert "rebates" in result.error

    def test_bad_calendar(self) -> None:
        assert isinstance(rebate_defaults_from_mapping({"calendar": "TARGET"}), Err)

    def test_bad_days(self) -> None:
        assert isinstance(rebate_defaults_from_mapping({"settlement_days": "2"}), Err)

    def test_bad_convention(self) -> None:
        result = rebate_defaults_from_mapping({"convention": "nearest"})
        assert isinstance(result, Err)
        assert result.error.startswith("convention:")

    def test_bad_rebate(self) -> None:
        assert isinstance(rebate_defaults_from_mapping({"rebate": 1.5}), Err)


class TestParseAmount:
    def test_decimal(self) -> None:
        assert parse_amount(Decimal("1.25")) == Ok(Decimal("1.25"))

    def test_int_and_str(self) -> None:
        assert parse_amount(7) == Ok(Decimal(7))
        assert parse_amount(" -3.5 ") == Ok(Decimal("-3.5"))

    def test_rejects_float_and_bool(self) -> None:
        assert isinstance(parse_amount(1.5), Err)  # type: ignore[arg-type]
        assert isinstance(parse_amount(True), Err)

    def test_rejects_non_finite(self) -> None:
        assert isinstance(parse_amount(Decimal("Infinity")), Err)
        assert isinstance(parse_amount("NaN"), Err)

    def test_rejects_garbage(self) -> None:
        assert isinstance(parse_amount("five"), Err)
