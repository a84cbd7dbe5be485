import pytest

from sigtalk.validation import (
    UsageError,
    is_within_int_limits,
    parse_client_args,
    validate_pid,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2147483647", True),
        ("2147483648", False),
        ("-2147483648", True),
        ("-2147483649", False),
        ("  +12", True),
        ("", True),
    ],
)
def test_int_limits(text, expected):
    assert is_within_int_limits(text) is expected


def test_validate_pid_returns_number():
    assert validate_pid("123") == 123


@pytest.mark.parametrize("text", ["12a", "-5", "+5", " 5", "99999999999"])
def test_validate_pid_rejects(text):
    with pytest.raises(UsageError):
        validate_pid(text)


def test_validate_pid_accepts_empty_as_zero():
    assert validate_pid("") == 0


def test_parse_client_args():
    assert parse_client_args(["42", "hello world"]) == (42, "hello world")


@pytest.mark.parametrize("argv", [[], ["42"], ["42", "a", "b"]])
def test_parse_client_args_wrong_count(argv):
    with pytest.raises(UsageError) as excinfo:
        parse_client_args(argv)
    assert "Correct usage is: ./client <PID> <message>" in str(excinfo.value)


def test_parse_client_args_bad_pid():
    with pytest.raises(UsageError):
        parse_client_args(["abc", "hello"])