import pytest

from bootdesk.strings import strcmp, strncmp


def test_equal_strings():
    assert strcmp("kernel", "kernel") == 0


def test_empty_strings():
    assert strcmp("", "") == 0


def test_difference_of_first_mismatch():
    assert strcmp("abc", "abd") == ord("c") - ord("d")


def test_prefix_sorts_first():
    assert strcmp("abc", "abcd") == -ord("d")
    assert strcmp("abcd", "abc") == ord("d")


@pytest.mark.parametrize("a,b", [("a", "b"), ("apple", "banana"), ("x", "xy"), ("Z", "a")])
def test_antisymmetry(a, b):
    assert strcmp(a, b) == -strcmp(b, a)
    assert strcmp(a, b) < 0


def test_embedded_nul_terminates():
    assert strcmp("abc\0xyz", "abc") == 0


def test_bytes_are_signed():
    assert strcmp(b"\x80", b"a") < 0


def test_bytes_equal():
    assert strcmp(b"hello", b"hello") == 0


def test_strncmp_limits_comparison():
    assert strncmp("abcdef", "abcxyz", 3) == 0
    assert strncmp("abcdef", "abcxyz", 4) == ord("d") - ord("x")


def test_strncmp_zero_length():
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_stops_at_nul():
    assert strncmp("ab", "ab", 10) == 0


def test_strncmp_shorter_string():
    assert strncmp("ab", "abc", 3) == -ord("c")


def test_strncmp_negative_length_raises():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_invalid_type_raises():
    with pytest.raises(TypeError):
        strcmp(123, "abc")