import pytest

from saba.errors import (
    InvalidUIError,
    NetworkError,
    OtherError,
    SabaError,
    UnexpectedInputError,
)


@pytest.mark.parametrize(
    "kind",
    [NetworkError, UnexpectedInputError, InvalidUIError, OtherError],
)
def test_error_kind_keeps_message_and_is_a_saba_error(kind):
    error = kind("something went wrong")
    assert error.message == "something went wrong"
    assert str(error) == "something went wrong"
    assert isinstance(error, SabaError)
    assert isinstance(error, kind)


@pytest.mark.parametrize(
    "kind",
    [NetworkError, UnexpectedInputError, InvalidUIError, OtherError],
)
def test_error_kind_is_caught_by_saba_error_handler(kind):
    with pytest.raises(SabaError) as excinfo:
        raise kind("something went wrong")
    assert type(excinfo.value) is kind
    assert excinfo.value.message == "something went wrong"
    assert excinfo.value == kind("something went wrong")


def test_str_is_the_message():
    assert str(NetworkError("broken")) == "broken"
    assert str(UnexpectedInputError("broken")) == "broken"
    assert str(InvalidUIError("broken")) == "broken"
    assert str(OtherError("broken")) == "broken"


def test_equal_when_same_kind_and_message():
    first = NetworkError("down")
    second = NetworkError("down")
    assert first.message == "down"
    assert (first == second) is True
    assert hash(first) == hash(second)


def test_different_kind_is_not_equal():
    assert (NetworkError("down") == OtherError("down")) is False


def test_different_message_is_not_equal():
    assert (InvalidUIError("a") == InvalidUIError("b")) is False


def test_repr_names_the_kind():
    assert repr(UnexpectedInputError("bad")) == "UnexpectedInputError('bad')"