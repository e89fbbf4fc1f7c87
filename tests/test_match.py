"""Tests for the Eager and Lazy case handlers."""

import pytest

from sealed_enum import Eager, Lazy, Match


class TestEager:
    def test_returns_value(self) -> None:
        assert Eager(3).get() == 3

    def test_repeatable(self) -> None:
        payload = object()
        match = Eager(payload)
        assert match.get() is payload
        assert match.get() is payload

    def test_is_match(self) -> None:
        assert isinstance(Eager(None), Match)


class TestLazy:
    def test_invokes_thunk(self) -> None:
        assert Lazy(lambda: "x").get() == "x"

    def test_not_memoized(self) -> None:
        calls: list[int] = []
        match = Lazy(lambda: calls.append(1) or len(calls))
        assert match.get() == 1
        assert match.get() == 2

    def test_not_invoked_on_construction(self) -> None:
        calls: list[int] = []
        Lazy(lambda: calls.append(1))
        assert calls == []

    def test_rejects_non_callable(self) -> None:
        with pytest.raises(TypeError) as exc_info:
            Lazy(42)
        assert "int given" in str(exc_info.value)

    def test_base_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            Match()
