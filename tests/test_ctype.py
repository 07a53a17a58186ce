import string

import pytest

from minitalk.ctype import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

CODES = range(-5, 300)


@pytest.mark.parametrize("code", CODES)
def test_is_alpha_matches_ascii_letters(code):
    expected = 0 <= code < 0x110000 and chr(code) in string.ascii_letters
    assert is_alpha(code) is expected


@pytest.mark.parametrize("code", CODES)
def test_is_digit_matches_ascii_digits(code):
    expected = 0 <= code < 0x110000 and chr(code) in string.digits
    assert is_digit(code) is expected


@pytest.mark.parametrize("code", CODES)
def test_is_alnum_is_union_of_alpha_and_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_is_print_bounds():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(31) is False
    assert is_print(127) is False


def test_examples_from_source():
    assert is_alpha("f") is True
    assert is_alpha("F") is True
    assert is_alpha("1") is False
    assert is_digit("2") is True
    assert is_alnum("F") is True
    assert is_print("1") is True


def test_to_upper_and_lower_keep_kind():
    assert to_upper("a") == "A"
    assert to_lower("C") == "c"
    assert to_upper(ord("z")) == ord("Z")
    assert to_upper("%") == "%"
    assert to_lower("%") == "%"


@pytest.mark.parametrize("letter", string.ascii_letters)
def test_case_round_trip(letter):
    assert to_lower(to_upper(letter)) == letter.lower()
    assert to_upper(to_lower(letter)) == letter.upper()


def test_non_ascii_untouched():
    assert to_upper("é") == "é"
    assert to_lower(200) == 200
    assert is_alpha("é") is False


def test_bad_input_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(TypeError):
        is_digit(1.5)