import pytest

from trycontinue.result import (
    Success,
    Failure,
    is_success,
    is_failure,
    is_failure_type,
    unwrap,
)


def test_success_unwrap():
    assert Success(1).unwrap() == 1
    assert unwrap(Success("a")) == "a"


def test_success_map():
    assert Success(2).map(str) == Success("2")


def test_failure_map_is_identity():
    failure = Failure("bad")
    assert failure.map(str) is failure


def test_failure_unwrap_raises_exception():
    error = ValueError("bad")

    with pytest.raises(ValueError) as exc_info:
        unwrap(Failure(error))
    assert exc_info.value is error


def test_failure_unwrap_non_exception():
    with pytest.raises(ValueError) as exc_info:
        Failure("bad").unwrap()
    assert "Error: 'bad'" in exc_info.value.__notes__


def test_predicates():
    assert is_success(Success(None))
    assert not is_failure(Success(None))
    assert is_failure(Failure(None))
    assert not is_success(Failure(None))


def test_is_failure_type():
    assert is_failure_type(Failure(KeyError("a")), LookupError)
    assert not is_failure_type(Failure(KeyError("a")), ValueError)
    assert not is_failure_type(Success(KeyError("a")), KeyError)


def test_equality():
    assert Failure("three") == Failure("three")
    assert Failure("three") != Failure("four")
    assert Success(1) != Failure(1)


def test_str_and_repr():
    assert str(Success(1)) == "1"
    assert repr(Success("1")) == "Success('1')"
    assert str(Failure("bad")) == "bad"
    assert repr(Failure("bad")) == "Failure('bad')"
