import pytest

from pushswap.parsing import InputError, parse_arguments, parse_int


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("-7", -7),
        ("0", 0),
        ("-0", 0),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
    ],
)
def test_parse_int_accepts_valid_numbers(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize(
    "text",
    ["", "+5", "1a", " 1", "1 ", "--1", "01", "00", "2147483648", "-2147483649", "99999999999999999999"],
)
def test_parse_int_rejects_invalid_text(text):
    with pytest.raises(InputError):
        parse_int(text)


def test_negative_with_leading_zero_is_accepted():
    assert parse_int("-01") == -1


def test_lone_minus_reads_as_zero():
    assert parse_int("-") == 0


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_int("x")


def test_parse_arguments_keeps_order():
    assert parse_arguments(["3", "-1", "10"]) == [3, -1, 10]


def test_parse_arguments_empty():
    assert parse_arguments([]) == []


def test_parse_arguments_rejects_duplicates():
    with pytest.raises(InputError):
        parse_arguments(["1", "2", "1"])


def test_parse_arguments_rejects_zero_and_negative_zero():
    with pytest.raises(InputError):
        parse_arguments(["0", "-0"])


def test_parse_arguments_rejects_any_bad_item():
    with pytest.raises(InputError):
        parse_arguments(["1", "two", "3"])