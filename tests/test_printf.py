import io

import pytest

from solong.printf import cformat, cprintf


def test_plain_text_passes_through():
    assert cformat("Number of steps: ") == "Number of steps: "


def test_decimal_and_integer():
    assert cformat("Number of steps: %d\n", 42) == "Number of steps: 42\n"
    assert cformat("%i", -7) == "-7"


def test_int_min():
    assert cformat("%d", -2147483648) == "-2147483648"


def test_decimal_wraps_to_32_bits():
    assert cformat("%d", 2**31) == str(-(2**31))


def test_unsigned_wraps_negative():
    assert int(cformat("%u", -1)) == 2**32 - 1


def test_string_and_null():
    assert cformat("%s!", "Error") == "Error!"
    assert cformat("%s", None) == "(null)"


def test_char_from_int_and_str():
    assert cformat("%c%c", ord("z"), "q") == "zq"


def test_char_rejects_long_string():
    with pytest.raises(ValueError):
        cformat("%c", "ab")


@pytest.mark.parametrize("value", [0, 1, 9, 10, 15, 16, 255, 4096, 2**32 - 1])
def test_hex_round_trip(value):
    lower = cformat("%x", value)
    upper = cformat("%X", value)
    assert int(lower, 16) == value
    assert lower.upper() == upper
    assert lower == lower.lower()


def test_hex_letters():
    assert cformat("%x %X", 255, 255) == "ff FF"


@pytest.mark.parametrize("value", [0, 1, 0xDEADBEEF, 2**64 - 1])
def test_pointer_round_trip(value):
    text = cformat("%p", value)
    assert text.startswith("0x")
    assert int(text[2:], 16) == value


def test_percent_literal():
    assert cformat("100%%") == "100%"


def test_unknown_conversion_is_dropped():
    assert cformat("a%qb", 5) == "ab"


def test_trailing_percent_is_ignored():
    assert cformat("abc%") == "abc"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        cformat("%d %d", 1)


def test_cprintf_writes_and_counts():
    stream = io.StringIO()
    count = cprintf("Error\n%s\n", "map is not rectangular", stream=stream)
    assert stream.getvalue() == "Error\nmap is not rectangular\n"
    assert count == len(stream.getvalue())


def test_cprintf_defaults_to_stdout(capsys):
    count = cprintf("%d-%s", 3, "x")
    assert capsys.readouterr().out == "3-x"
    assert count == 3