import io

import pytest

from minishell.printf import format, printf


def test_plain_text_passes_through():
    assert format("hello world\n") == "hello world\n"


def test_percent_literal():
    assert format("100%%") == "100%"


def test_string_conversion():
    assert format("%s\n", "/tmp") == "/tmp\n"


def test_null_string():
    assert format("%s", None) == "(null)"


def test_null_pointer():
    assert format("%p", None) == "(nil)"
    assert format("%p", 0) == "(nil)"


def test_pointer_is_prefixed_hex():
    text = format("%p", 0xDEADBEEF)
    assert text.startswith("0x")
    assert int(text, 16) == 0xDEADBEEF
    assert text == text.lower()


def test_char_from_str_and_int():
    assert format("%c%c", "j", ord("k")) == "jk"


def test_char_wraps_to_byte():
    assert format("%c", 256 + ord("A")) == "A"


def test_decimal_and_integer():
    assert format("%d", -12) == "-12"
    assert format("%i", 42) == "42"


def test_int_minimum():
    assert format("%d", -2147483648) == "-2147483648"


def test_signed_wraps_32_bits():
    assert format("%d", 2**31) == str(-(2**31))


def test_unsigned_wraps_negative():
    assert int(format("%u", -1)) == 0xFFFFFFFF


@pytest.mark.parametrize("value", [0, 1, 15, 16, 255, 25467, 0xFFFFFFFF])
def test_hex_round_trip(value):
    lower = format("%x", value)
    upper = format("%X", value)
    assert int(lower, 16) == value
    assert upper == lower.upper()
    assert lower == lower.lower()


def test_hex_example():
    assert format("%X", 25467) == "637B"


def test_extra_arguments_are_ignored():
    assert format("%d", 1, 2, 3) == "1"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format("%d %d", 1)


def test_trailing_percent_raises():
    with pytest.raises(ValueError):
        format("50%")


def test_unknown_conversion_raises():
    with pytest.raises(ValueError):
        format("%q", 1)


def test_wrong_type_raises():
    with pytest.raises(TypeError):
        format("%d", "12")
    with pytest.raises(TypeError):
        format("%s", 12)


def test_printf_writes_and_counts():
    stream = io.StringIO()
    count = printf("%s=%d%c", "x", -7, "\n", stream=stream)
    assert stream.getvalue() == "x=-7\n"
    assert count == len(stream.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("exit\n")
    assert capsys.readouterr().out == "exit\n"
    assert count == 5