import io

import pytest

from minitalk.printf import format_message, printf


def test_plain_text_passes_through():
    assert format_message("Hello, world!") == "Hello, world!"


def test_string_conversion():
    assert format_message("String: %s", "Hello, world!") == "String: Hello, world!"


def test_null_string():
    assert format_message(" NULL %s NULL ", None) == " NULL (null) NULL "


def test_null_pointer():
    assert format_message("%p", None) == "(nil)"
    assert format_message("%p", 0) == "(nil)"


def test_pointer_is_hex_with_prefix():
    result = format_message("%p", 4096)
    assert result.startswith("0x")
    assert int(result, 16) == 4096


def test_percent_sign():
    assert format_message("Double percent sign: %%") == "Double percent sign: %"


def test_int_min():
    assert format_message(" %d ", -(2**31)) == f" {-(2**31)} "


@pytest.mark.parametrize("value", [0, 7, -5678, 123456, 2**31 - 1])
def test_signed_round_trip(value):
    assert int(format_message("%d", value)) == value
    assert format_message("%i", value) == format_message("%d", value)


def test_signed_wraps_to_32_bits():
    assert int(format_message("%d", 2**31)) == -(2**31)


@pytest.mark.parametrize("value", [0, 429496, 2**32 - 1])
def test_unsigned_round_trip(value):
    assert int(format_message("%u", value)) == value


def test_unsigned_of_negative():
    assert int(format_message("%u", -1)) == 2**32 - 1


@pytest.mark.parametrize("value", [0, 45201, 255, 2**32 - 1])
def test_hex_round_trip(value):
    lower = format_message("%x", value)
    upper = format_message("%X", value)
    assert int(lower, 16) == value
    assert lower == lower.lower()
    assert upper == lower.upper()


def test_hex_truncates_to_unsigned_int():
    assert int(format_message("%x", 2**63 - 1), 16) == 2**32 - 1


def test_char_from_str_and_int():
    assert format_message("%c%c", "a", ord("b")) == "ab"


def test_char_nul_is_written():
    assert format_message("%c", 0) == "\0"


def test_unknown_conversion_prints_nothing():
    assert format_message("a%qb") == "ab"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_message("%d")


def test_wrong_argument_type_raises():
    with pytest.raises(TypeError):
        format_message("%d", "12")


def test_printf_writes_and_counts():
    stream = io.StringIO()
    count = printf("Server PID: %d\n", 42, stream=stream)
    assert stream.getvalue() == "Server PID: 42\n"
    assert count == len(stream.getvalue())


def test_printf_count_with_nul_char():
    stream = io.StringIO()
    count = printf("%c", 0, stream=stream)
    assert count == 1
    assert stream.getvalue() == "\0"