"""Option boundary tests: presence, unwrapping, filtering, Result projection."""

from __future__ import annotations

import pytest

from fallible import Error, Failure, Nothing, Ok, Some, UnwrapError

pytestmark = pytest.mark.unit


def test_some_holds_value() -> None:
    opt = Some(1)

    assert opt.is_some() is True
    assert opt.is_none() is False
    assert opt.value == 1


def test_nothing_holds_no_value() -> None:
    opt = Nothing()

    assert opt.is_some() is False
    assert opt.is_none() is True
    assert opt.value is None


def test_nothing_instances_are_equal() -> None:
    assert Nothing() == Nothing()
    assert Nothing() != Some(None)


def test_unwrap() -> None:
    assert Some(1).unwrap() == 1

    with pytest.raises(UnwrapError) as exc_info:
        Nothing().unwrap()

    assert str(exc_info.value) == "called `Option.unwrap()` on a `Nothing` value"
    assert exc_info.value.hint is not None


def test_expect_uses_caller_message() -> None:
    assert Some("x").expect("needed x") == "x"

    with pytest.raises(UnwrapError, match="^config key missing$"):
        Nothing().expect("config key missing")


def test_unwrap_or_family() -> None:
    assert Some(1).unwrap_or(2) == 1
    assert Nothing().unwrap_or(2) == 2
    assert Some(1).unwrap_or_default() == 1
    assert Nothing().unwrap_or_default() is None


def test_unwrap_or_else_is_lazy(counter) -> None:
    fallback = counter(return_value=2)

    assert Some(1).unwrap_or_else(fallback) == 1
    assert fallback.count == 0

    assert Nothing().unwrap_or_else(fallback) == 2
    assert fallback.count == 1


def test_inspect_calls_only_when_present(counter) -> None:
    seen = counter()
    some = Some(1)
    nothing = Nothing()

    assert some.inspect(seen) is some
    assert nothing.inspect(seen) is nothing
    assert seen.calls == [(1,)]


def test_ok_or() -> None:
    assert Some(1).ok_or("missing") == Ok(1)
    assert Nothing().ok_or("missing") == Error("missing")

    exc = LookupError("missing")
    assert Nothing().ok_or(exc).error is exc


def test_ok_or_normalizes_non_exception_descriptors() -> None:
    result = Nothing().ok_or(404)

    assert isinstance(result.error, Failure)
    assert str(result.error) == "404"


def test_ok_or_else_is_lazy(counter) -> None:
    make_error = counter(return_value=ValueError("computed"))

    assert Some(1).ok_or_else(make_error) == Ok(1)
    assert make_error.count == 0

    result = Nothing().ok_or_else(make_error)
    assert make_error.count == 1
    assert result.is_error()
    assert result.error is make_error.return_value


def test_filter_keeps_matching_value() -> None:
    opt = Some(5)

    assert opt.filter(lambda x: x == 5) is opt
    assert opt.filter(lambda x: x == 6) == Nothing()


def test_filter_on_string_length() -> None:
    assert Some("key").filter(lambda s: len(s) == 3) == Some("key")


def test_filter_never_calls_predicate_on_nothing(counter) -> None:
    predicate = counter(return_value=True)

    assert Nothing().filter(predicate) == Nothing()
    assert predicate.count == 0


def test_round_trip_through_result() -> None:
    assert Some("v").ok_or("e").option() == Some("v")
    assert Nothing().ok_or("e").option() == Nothing()
