import pytest

from solong_game.cformat import c_format, c_printf


def test_plain_text_is_unchanged():
    assert c_format("INVALID_MAP\nMap not closed!\n") == "INVALID_MAP\nMap not closed!\n"


def test_percent_literal():
    assert c_format("100%%") == "100%"


def test_string_conversion():
    assert c_format("%s and %s", "left", "right") == "left and right"


def test_null_string():
    assert c_format("%s", None) == "(null)"


def test_char_from_str_and_int():
    assert c_format("%c%c", "a", ord("b")) == "ab"


def test_char_rejects_long_string():
    with pytest.raises(TypeError):
        c_format("%c", "ab")


@pytest.mark.parametrize("value", [0, 7, 42, -1, -123456, 2147483647])
def test_decimal_round_trip(value):
    assert int(c_format("%d", value)) == value
    assert c_format("%i", value) == c_format("%d", value)


def test_int_min():
    assert c_format("%d", -2147483648) == "-2147483648"


def test_decimal_wraps_to_32_bits():
    assert int(c_format("%d", 2**31)) == -(2**31)


def test_moves_message():
    assert c_format("PLAYER MOVES : %d\n", 5) == "PLAYER MOVES : 5\n"


def test_unsigned_wraps_negative():
    assert int(c_format("%u", -1)) == 2**32 - 1


@pytest.mark.parametrize("value", [0, 1, 15, 16, 255, 48879, 2**32 - 1])
def test_hex_round_trip(value):
    lower = c_format("%x", value)
    upper = c_format("%X", value)
    assert int(lower, 16) == value
    assert lower == lower.lower()
    assert upper == lower.upper()


def test_hex_of_negative_is_unsigned():
    assert int(c_format("%x", -42), 16) == 2**32 - 42


def test_pointer_nil():
    assert c_format("%p", None) == "(nil)"
    assert c_format("%p", 0) == "(nil)"


def test_pointer_address():
    result = c_format("%p", 4096)
    assert result.startswith("0x")
    assert int(result[2:], 16) == 4096


def test_unknown_conversion_outputs_nothing():
    assert c_format("a%qb") == "ab"


def test_space_after_percent_stops_output():
    assert c_format("abc% def") == "abc"


def test_trailing_percent_ends_output():
    assert c_format("abc%") == "abc"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        c_format("%d")


def test_decimal_rejects_string():
    with pytest.raises(TypeError):
        c_format("%d", "5")


def test_string_rejects_int():
    with pytest.raises(TypeError):
        c_format("%s", 5)


def test_printf_writes_and_counts(capsys):
    count = c_printf("Moves: %d %s\n", -17, "ok")
    out = capsys.readouterr().out
    assert out == "Moves: -17 ok\n"
    assert count == len(out)


def test_printf_null_counts_six(capsys):
    assert c_printf("%s", None) == 6
    assert capsys.readouterr().out == "(null)"


def test_printf_abort_returns_zero_but_writes_prefix(capsys):
    assert c_printf("keep% drop") == 0
    assert capsys.readouterr().out == "keep"


def test_printf_matches_format(capsys):
    fmt = "%c|%s|%d|%u|%x|%X|%%"
    args = ("z", "text", -5, 5, 3054, 3054)
    count = c_printf(fmt, *args)
    out = capsys.readouterr().out
    assert out == c_format(fmt, *args)
    assert count == len(out)