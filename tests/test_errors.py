"""Tests for optexercise.core.errors — error value hierarchy."""

from __future__ import annotations

import dataclasses
import json

import pytest

from optexercise.core.errors import (
    ConstructionError,
    ExerciseError,
    FieldViolation,
    IndexOutOfRangeError,
    UnsupportedOperationError,
    construction_error,
    index_out_of_range,
)
from optexercise.core.types import UtcDatetime


def _base() -> ExerciseError:
    return ExerciseError(
        message="base error", code="E001", timestamp=UtcDatetime.now(), source="test.fn",
    )


class TestExerciseError:
    def test_is_frozen(self) -> None:
        err = _base()
        with pytest.raises(dataclasses.FrozenInstanceError):
            err.message = "changed"  # type: ignore[misc]

    def test_to_dict_keys(self) -> None:
        assert set(_base().to_dict()) == {"message", "code", "timestamp", "source"}

    def test_to_dict_json_serializable(self) -> None:
        json.dumps(_base().to_dict())

    def test_with_context(self) -> None:
        err = _base().with_context("trade T-1")
        assert err.message == "trade T-1: base error"
        assert err.code == "E001"


class TestConstructionError:
    def test_builder_fills_field_violation(self) -> None:
        err = construction_error(
            "test.fn", "REBATE_COUNT_MISMATCH", "RebatedExercise.rebates",
            "length must equal number of exercise dates (3)", 2,
        )
        assert isinstance(err, ConstructionError)
        assert err.fields == (FieldViolation(
            path="RebatedExercise.rebates",
            constraint="length must equal number of exercise dates (3)",
            actual_value="2",
        ),)
        assert "RebatedExercise.rebates" in err.message

    def test_to_dict_includes_fields(self) -> None:
        err = construction_error("test.fn", "INVALID_DATE", "x", "must be a date", "abc")
        d = err.to_dict()
        assert d["fields"] == [{"path": "x", "constraint": "must be a date", "actual_value": "'abc'"}]
        json.dumps(d)

    def test_with_context_keeps_subclass(self) -> None:
        err = construction_error("test.fn", "INVALID_DATE", "x", "must be a date", 1)
        assert isinstance(err.with_context("ctx"), ConstructionError)


class TestIndexOutOfRange:
    def test_message_names_index_and_range(self) -> None:
        err = index_out_of_range("test.fn", "date", 5, 3)
        assert err.message == "date with index 5 does not exist, valid range is [0, 3)"
        assert err.code == "INDEX_OUT_OF_RANGE"

    def test_to_dict(self) -> None:
        d = index_out_of_range("test.fn", "rebate", 2, 1).to_dict()
        assert d["index"] == 2
        assert d["size"] == 1


class TestUnsupportedOperation:
    def test_to_dict(self) -> None:
        err = UnsupportedOperationError(
            message="no", code="UNSUPPORTED_OPERATION", timestamp=UtcDatetime.now(),
            source="test.fn", operation="rebate_payment_date", exercise_type="American",
        )
        d = err.to_dict()
        assert d["operation"] == "rebate_payment_date"
        assert d["exercise_type"] == "American"

    def test_subclasses_share_base(self) -> None:
        for cls in (ConstructionError, IndexOutOfRangeError, UnsupportedOperationError):
            assert issubclass(cls, ExerciseError)
