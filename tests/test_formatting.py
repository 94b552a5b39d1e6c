import pytest

from bootdesk.formatting import sprintf, vsprintf


def test_plain_text_passes_through():
    assert sprintf("hello world") == "hello world"


def test_percent_escape():
    assert sprintf("100%%") == "100%"


@pytest.mark.parametrize("n", [1, 7, 42, 1000, 2147483647, -1, -42, -99999])
def test_decimal_round_trip(n):
    assert int(sprintf("%d", n)) == n


def test_decimal_zero_produces_no_digits():
    assert sprintf("[%d]", 0) == "[]"


@pytest.mark.parametrize("n", [1, 15, 255, 4096, 0xDEADBEEF])
def test_hex_round_trip(n):
    assert int(sprintf("%x", n), 16) == n
    assert int(sprintf("%X", n), 16) == n


def test_hex_case():
    lower = sprintf("%x", 0xABCDEF)
    upper = sprintf("%X", 0xABCDEF)
    assert lower == lower.lower()
    assert upper == upper.upper()
    assert lower.upper() == upper


def test_hex_negative_wraps_to_32_bits():
    assert int(sprintf("%x", -1), 16) == 0xFFFFFFFF


def test_decimal_wraps_to_signed_32_bits():
    assert int(sprintf("%d", 0xFFFFFFFF)) == -1


def test_pointer_prefix_and_uppercase():
    result = sprintf("%p", 0xBEEF)
    assert result.startswith("0x")
    assert int(result[2:], 16) == 0xBEEF
    assert result[2:] == result[2:].upper()


@pytest.mark.parametrize("n", [1, 12, 345, -6])
def test_width_pads_with_spaces(n):
    result = sprintf("%8d", n)
    assert len(result) == 8
    assert result.lstrip(" ") == str(n)


@pytest.mark.parametrize("n", [1, 12, 345])
def test_zero_pad(n):
    result = sprintf("%06d", n)
    assert len(result) == 6
    assert result.lstrip("0") == str(n)


def test_zero_pad_goes_before_sign():
    assert sprintf("%05d", -42) == "00-42"


def test_width_shorter_than_number_is_ignored():
    assert sprintf("%2d", 123456) == "123456"


def test_string_conversion():
    assert sprintf("<%s|%s>", "abc", "de") == "<abc|de>"


def test_null_string():
    assert sprintf("%s", None) == "<null>"


def test_char_conversion():
    assert sprintf("%c%c", ord("O"), ord("K")) == "OK"


def test_unknown_conversion_is_dropped():
    assert sprintf("a%qb") == "ab"


def test_vsprintf_matches_sprintf():
    args = [10, "x", 255]
    assert vsprintf("%d %s %x", args) == sprintf("%d %s %x", *args)


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        sprintf("%d")


def test_non_integer_for_number_raises():
    with pytest.raises(TypeError):
        sprintf("%d", "abc")