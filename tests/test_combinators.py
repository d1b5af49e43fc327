"""Tests for combinators: zip_with, traverse, collect, condition, tee, when, unless."""

from hypothesis import given
from hypothesis import strategies as st

from fnkit import (
    Error,
    Fail,
    Nothing,
    Ok,
    Some,
    collect,
    condition,
    tee,
    traverse,
    unit,
    unless,
    when,
    zip_with,
)


def _positive(x: int):
    return Ok(x) if x > 0 else Fail("neg")


class TestZipWith:
    """Tests for zip_with."""

    def test_both_present(self):
        assert zip_with(Some(2), Some(3), lambda a, b: a + b) == Some(5)

    def test_one_absent(self):
        assert zip_with(Some(2), Nothing, lambda a, b: a + b) is Nothing
        assert zip_with(Nothing, Some(3), lambda a, b: a + b) is Nothing

    def test_both_absent(self):
        assert zip_with(Nothing, Nothing, lambda a, b: a + b) is Nothing

    def test_combine_not_called_when_absent(self):
        calls = []
        zip_with(Nothing, Some(3), lambda a, b: calls.append((a, b)))
        assert calls == []


class TestTraverse:
    """Tests for traverse."""

    def test_all_ok(self):
        assert traverse([1, 2, 3], lambda x: Ok(x * 2)) == Ok([2, 4, 6])

    def test_first_failure_wins(self):
        assert traverse([1, -1, 3], _positive) == Fail("neg")

    def test_first_of_several_failures(self):
        def check(x: int):
            return Ok(x) if x > 0 else Fail(Error(f"bad {x}"))

        assert traverse([1, -2, -3], check) == Fail(Error("bad -2"))

    def test_empty(self):
        assert traverse([], _positive) == Ok([])

    def test_short_circuits(self):
        """The function is not called after the first failure."""
        seen = []

        def f(x: int):
            seen.append(x)
            return _positive(x)

        traverse([1, -1, 3, 4], f)
        assert seen == [1, -1]

    def test_consumes_generators(self):
        assert traverse((x for x in range(1, 4)), lambda x: Ok(str(x))) == Ok(["1", "2", "3"])

    @given(st.lists(st.integers(min_value=1)))
    def test_preserves_order(self, xs):
        assert traverse(xs, Ok) == Ok(xs)


class TestCollect:
    """Tests for collect."""

    def test_all_ok(self):
        assert collect([Ok(1), Ok(2), Ok(3)]) == Ok([1, 2, 3])

    def test_first_fail(self):
        assert collect([Ok(1), Fail("a"), Fail("b")]) == Fail("a")


class TestCondition:
    """Tests for condition."""

    def test_callable_true(self):
        assert condition(lambda: True, Error("no")) == Ok(unit)

    def test_callable_false(self):
        assert condition(lambda: False, Error("no")) == Fail(Error("no"))

    def test_plain_bool(self):
        assert condition(True, "no") == Ok(unit)  # noqa: FBT003
        assert condition(False, "no") == Fail("no")  # noqa: FBT003

    def test_guard_chain(self):
        def validate(name: str, age: int):
            return (
                condition(lambda: len(name) > 0, Error("name required"))
                .bind(lambda _: condition(age >= 0, Error("age must be non-negative")))
                .map(lambda _: {"name": name, "age": age})
            )

        assert validate("Alice", 30) == Ok({"name": "Alice", "age": 30})
        assert validate("", 30) == Fail(Error("name required"))
        assert validate("Bob", -1) == Fail(Error("age must be non-negative"))


class TestTee:
    """Tests for tee."""

    def test_runs_action_and_succeeds(self):
        effects = []
        assert tee(lambda: effects.append("ran")) == Ok(unit)
        assert effects == ["ran"]

    def test_inside_chain(self):
        effects = []
        result = Ok(3).bind(lambda x: tee(lambda: effects.append(x)).map(lambda _: x))
        assert result == Ok(3)
        assert effects == [3]


class TestWhenUnless:
    """Tests for when and unless."""

    def test_when(self):
        assert when(True, Some(unit)) == Some(unit)  # noqa: FBT003
        assert when(False, Some(unit)) is Nothing  # noqa: FBT003

    def test_unless(self):
        assert unless(False, Some(unit)) == Some(unit)  # noqa: FBT003
        assert unless(True, Some(unit)) is Nothing  # noqa: FBT003
