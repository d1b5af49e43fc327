"""Tests for Result type (Ok and Fail)."""

import pytest
from hypothesis import given

from fnkit import (
    Error,
    ExceptionError,
    Fail,
    Nothing,
    NullValueError,
    Ok,
    Result,
    ResultCastError,
    ResultStateError,
    Some,
    unit,
)
from tests.strategies import errors, exceptions, values


class TestOkCreation:
    """Tests for Ok instantiation and basic properties."""

    def test_ok_creation(self):
        """Ok wraps a value."""
        ok = Ok(42)
        assert ok.value == 42

    def test_ok_with_none_raises(self):
        """Ok(None) is a contract violation."""
        with pytest.raises(NullValueError):
            Ok(None)

    def test_ok_with_unit(self):
        """Ok(unit) stands for a success without a value."""
        assert Ok(unit).value is unit

    def test_ok_is_frozen(self):
        """Ok instances are immutable."""
        ok = Ok(42)
        with pytest.raises(AttributeError):
            ok.value = 100  # type: ignore[misc]


class TestFailCreation:
    """Tests for Fail instantiation and basic properties."""

    def test_fail_creation(self):
        """Fail wraps an error value."""
        fail = Fail(Error("error message"))
        assert fail.error == Error("error message")

    def test_fail_with_custom_error_type(self):
        """Fail accepts any error type (Result[T, E])."""
        assert Fail("plain string").error == "plain string"

    def test_fail_with_none_raises(self):
        """Fail(None) is a contract violation."""
        with pytest.raises(NullValueError, match="error must not be None"):
            Fail(None)

    def test_fail_from_exception(self):
        """Fail.from_exception wraps the exception in an Error."""
        exc = ValueError("bad input")
        fail = Fail.from_exception(exc)
        assert isinstance(fail.error, ExceptionError)
        assert isinstance(fail.error, Error)
        assert fail.error.exception is exc
        assert fail.error.message == "bad input"

    def test_fail_is_frozen(self):
        """Fail instances are immutable."""
        fail = Fail(Error("error"))
        with pytest.raises(AttributeError):
            fail.error = Error("new error")  # type: ignore[misc]


class TestErrorAccessor:
    """Tests for the asymmetric error accessor."""

    def test_fail_error(self, sample_fail):
        assert sample_fail.error == Error("test error")

    def test_ok_error_raises(self, sample_ok):
        """Reading the error of a success is an invalid state."""
        with pytest.raises(ResultStateError):
            sample_ok.error  # noqa: B018

    def test_result_state_error_is_runtime_error(self, sample_ok):
        with pytest.raises(RuntimeError):
            sample_ok.error  # noqa: B018


class TestResultEquality:
    """Tests for Result equality and hashing."""

    def test_ok_equality(self):
        assert Ok(42) == Ok(42)
        assert Ok(42) != Ok(43)

    def test_fail_equality(self):
        assert Fail(Error("error")) == Fail(Error("error"))
        assert Fail(Error("error1")) != Fail(Error("error2"))

    def test_ok_not_equal_to_fail(self):
        assert Ok("x") != Fail("x")

    def test_hashable(self):
        assert {Ok(42): "value"}[Ok(42)] == "value"
        assert {Fail(Error("e")): "value"}[Fail(Error("e"))] == "value"


class TestResultQuerying:
    """Tests for is_ok, is_fail and bool conversion."""

    def test_ok_queries(self, sample_ok):
        assert sample_ok.is_ok() is True
        assert sample_ok.is_fail() is False

    def test_fail_queries(self, sample_fail):
        assert sample_fail.is_ok() is False
        assert sample_fail.is_fail() is True

    def test_bool_conversion(self):
        assert bool(Ok(0)) is True
        assert bool(Fail(Error("e"))) is False


class TestResultUnwrap:
    """Tests for the explicit unsafe cast."""

    def test_ok_unwrap(self):
        assert Ok(42).unwrap() == 42

    def test_fail_unwrap_raises_with_error(self):
        """The raised exception carries the original error."""
        error = Error("not found")
        with pytest.raises(ResultCastError, match="Called unwrap on Fail") as exc_info:
            Fail(error).unwrap()
        assert exc_info.value.error is error

    def test_fail_unwrap_chains_wrapped_exception(self):
        """An exception inside the error becomes the cause."""
        exc = KeyError("id")
        with pytest.raises(ResultCastError) as exc_info:
            Fail.from_exception(exc).unwrap()
        assert exc_info.value.__cause__ is exc

    def test_fail_unwrap_chains_bare_exception(self):
        exc = ValueError("boom")
        with pytest.raises(ResultCastError) as exc_info:
            Fail(exc).unwrap()
        assert exc_info.value.__cause__ is exc
        assert exc_info.value.error is exc

    def test_fail_unwrap_without_exception_has_no_cause(self):
        with pytest.raises(ResultCastError) as exc_info:
            Fail(Error("plain")).unwrap()
        assert exc_info.value.__cause__ is None

    def test_ok_expect(self):
        assert Ok(42).expect("should not fail") == 42

    def test_fail_expect_raises(self):
        with pytest.raises(ResultCastError, match="custom message"):
            Fail(Error("error")).expect("custom message")


class TestResultMap:
    """Tests for map, map_err and bimap."""

    def test_ok_map(self):
        assert Ok(5).map(lambda x: x * 2) == Ok(10)

    def test_ok_map_chain(self):
        assert Ok(5).map(lambda x: x * 2).map(str) == Ok("10")

    def test_fail_map(self):
        fail: Result[int] = Fail(Error("error"))
        assert fail.map(lambda x: x * 2) is fail

    def test_ok_map_err(self):
        assert Ok(42).map_err(str.upper) == Ok(42)

    def test_fail_map_err(self):
        assert Fail("error").map_err(str.upper) == Fail("ERROR")

    def test_ok_bimap(self):
        assert Ok(2).bimap(lambda x: x + 1, str.upper) == Ok(3)

    def test_fail_bimap(self):
        assert Fail("error").bimap(lambda x: x + 1, str.upper) == Fail("ERROR")


class TestResultBind:
    """Tests for bind and or_else."""

    def test_ok_bind_returns_ok(self):
        assert Ok(5).bind(lambda x: Ok(x * 2)) == Ok(10)

    def test_ok_bind_returns_fail(self):
        assert Ok(5).bind(lambda _: Fail(Error("failed"))) == Fail(Error("failed"))

    def test_fail_bind_short_circuits(self):
        """Fail.bind never calls the function and keeps the error."""
        called = False

        def f(x):
            nonlocal called
            called = True
            return Ok(x)

        fail = Fail(Error("first"))
        assert fail.bind(f) is fail
        assert called is False

    def test_chain_stops_at_first_failure(self):
        calls = []

        def step(name, ok):
            def run(_):
                calls.append(name)
                return Ok(name) if ok else Fail(Error(name))

            return run

        result = Ok(0).bind(step("a", True)).bind(step("b", False)).bind(step("c", True))
        assert result == Fail(Error("b"))
        assert calls == ["a", "b"]

    def test_or_else(self):
        assert Ok(1).or_else(lambda _: Ok(2)) == Ok(1)
        assert Fail("e").or_else(lambda e: Ok(len(e))) == Ok(1)


class TestResultMatch:
    """Tests for match."""

    def test_ok_match(self):
        assert Ok(3).match(lambda x: x * 2, lambda e: -1) == 6

    def test_fail_match(self):
        assert Fail(Error("boom")).match(lambda x: x, lambda e: f"error: {e}") == "error: boom"

    @given(values)
    def test_ok_match_property(self, value):
        assert Ok(value).match(lambda v: ("ok", v), lambda e: ("fail", e)) == ("ok", value)

    @given(errors)
    def test_fail_match_property(self, error):
        assert Fail(error).match(lambda v: ("ok", v), lambda e: ("fail", e)) == ("fail", error)


class TestResultConversion:
    """Tests for to_option, to_iterable and as_tuple."""

    def test_ok_to_option(self):
        assert Ok(5).to_option() == Some(5)

    def test_fail_to_option(self):
        assert Fail(Error("e")).to_option() is Nothing

    @given(errors)
    def test_fail_to_option_discards_any_error(self, error):
        assert Fail(error).to_option() is Nothing

    def test_ok_to_iterable(self):
        assert list(Ok(5).to_iterable()) == [5]

    def test_fail_to_iterable(self):
        assert list(Fail(Error("e")).to_iterable()) == []

    def test_iteration_is_restartable(self):
        ok = Ok(5)
        iterable = ok.to_iterable()
        assert list(iterable) == list(iterable) == [5]
        assert list(ok) == list(ok) == [5]
        fail = Fail(Error("e"))
        assert list(fail) == list(fail) == []

    def test_as_tuple(self):
        assert Ok(5).as_tuple() == (True, 5, None)
        assert Fail("e").as_tuple() == (False, None, "e")


class TestResultPatternMatching:
    """Tests for pattern matching support."""

    def test_match_statement(self):
        def describe(result: Result[int, str]) -> str:
            match result:
                case Ok(value):
                    return f"ok {value}"
                case Fail(error):
                    return f"fail {error}"

        assert describe(Ok(1)) == "ok 1"
        assert describe(Fail("x")) == "fail x"


class TestErrorType:
    """Tests for the Error payload."""

    def test_error_str(self):
        assert str(Error("broken")) == "broken"

    def test_from_exception_message(self):
        error = Error.from_exception(ValueError("bad"))
        assert error.message == "bad"

    def test_from_exception_without_message_uses_type_name(self):
        error = Error.from_exception(ValueError())
        assert error.message == "ValueError"

    @given(exceptions)
    def test_from_exception_keeps_exception(self, exc):
        assert Error.from_exception(exc).exception is exc

    def test_error_subclass(self):
        """Domain failures can subclass Error."""

        class NotFound(Error, frozen=True):
            key: str = ""

        fail: Result[int] = Fail(NotFound("missing", key="id"))
        assert isinstance(fail.error, Error)
        assert fail.error.key == "id"


class TestResultMonadLaws:
    """Property-based tests for monad laws."""

    @given(values)
    def test_left_identity(self, value):
        """Left identity: Ok(a).bind(f) == f(a)."""

        def f(x):
            return Ok((x, x))

        assert Ok(value).bind(f) == f(value)

    @given(values)
    def test_right_identity(self, value):
        """Right identity: m.bind(Ok) == m."""
        m = Ok(value)
        assert m.bind(Ok) == m

    @given(values)
    def test_map_identity(self, value):
        """Identity: m.map(id) == m."""
        assert Ok(value).map(lambda x: x) == Ok(value)
