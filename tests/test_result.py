"""Tests for optexercise.core.result — Ok / Err values."""

from __future__ import annotations

import dataclasses

import pytest
from hypothesis import given
from hypothesis import strategies as st

from optexercise.core.result import Err, Ok, sequence, unwrap


class TestOkErr:
    def test_ok_is_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            Ok(42).value = 99  # type: ignore[misc]

    def test_err_is_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            Err("fail").error = "other"  # type: ignore[misc]

    def test_pattern_match(self) -> None:
        match Ok(42):
            case Ok(v):
                assert v == 42
            case _:
                pytest.fail("Should match Ok")
        match Err("fail"):
            case Err(e):
                assert e == "fail"
            case _:
                pytest.fail("Should match Err")

    def test_map(self) -> None:
        assert Ok(5).map(lambda x: x * 2) == Ok(10)
        assert Err("fail").map(lambda x: x * 2) == Err("fail")

    def test_unwrap(self) -> None:
        assert Ok(1).unwrap() == 1
        with pytest.raises(RuntimeError, match="Called unwrap on Err"):
            Err("fail").unwrap()

    def test_map_err(self) -> None:
        assert Err("fail").map_err(str.upper) == Err("FAIL")
        assert Ok(1).map_err(str.upper) == Ok(1)


class TestFreeFunctions:
    def test_unwrap_err_raises(self) -> None:
        with pytest.raises(RuntimeError, match="unwrap on Err"):
            unwrap(Err("x"))

    def test_unwrap_rejects_non_result(self) -> None:
        with pytest.raises(TypeError):
            unwrap(42)  # type: ignore[arg-type]

    def test_sequence_all_ok(self) -> None:
        assert sequence([Ok(1), Ok(2)]) == Ok((1, 2))

    def test_sequence_first_err(self) -> None:
        assert sequence([Ok(1), Err("a"), Err("b")]) == Err("a")

    @given(st.lists(st.integers()))
    def test_sequence_preserves_order(self, xs: list[int]) -> None:
        assert sequence(Ok(x) for x in xs) == Ok(tuple(xs))
