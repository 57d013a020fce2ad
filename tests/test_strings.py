import pytest

from drillbook.strings import (
    INT_MAX,
    INT_MIN,
    InvalidHexStringError,
    first_unique_char,
    hex_to_bytes,
    length_of_longest_substring,
    length_of_longest_substring_brute,
    my_atoi,
    my_atoi_scanning,
    roman_to_int,
)

SUBSTRING_INPUTS = ["abcabcbb", "bbbbb", "pwwkew", "au", " ", "", "dvdf", "abba", "tmmzuxt"]


# first_unique_char


@pytest.mark.parametrize("text", ["leetcode", "loveleetcode", "abcabd", "z", "xxyzz"])
def test_first_unique_char_points_at_earliest_single(text):
    index = first_unique_char(text)
    assert text.count(text[index]) == 1
    assert all(text.count(char) > 1 for char in text[:index])


@pytest.mark.parametrize("text", ["aabb", "", "abab"])
def test_first_unique_char_none(text):
    assert first_unique_char(text) == -1


def test_first_unique_char_leading():
    assert first_unique_char("leetcode") == 0


# hex_to_bytes


def test_hex_to_bytes_two_digit_values():
    assert hex_to_bytes("0xf1, 0x12, 0xa3") == bytes([0xF1, 0x12, 0xA3])


def test_hex_to_bytes_single_digit_and_uppercase():
    assert hex_to_bytes("0xf1, 0x01, 0xC, 0x02") == bytes([0xF1, 0x01, 0x0C, 0x02])


def test_hex_to_bytes_without_leading_zero():
    assert hex_to_bytes("0xf1, 0x12, x10, xA") == bytes([0xF1, 0x12, 0x10, 0x0A])


@pytest.mark.parametrize("text", ["0xf1, 0x12, 0x", "0xg1", "x x1"])
def test_hex_to_bytes_invalid(text):
    with pytest.raises(InvalidHexStringError):
        hex_to_bytes(text)


def test_hex_to_bytes_error_is_value_error():
    with pytest.raises(ValueError):
        hex_to_bytes("0x")


@pytest.mark.parametrize("data", [b"", b"\x00", bytes(range(256)), b"\xde\xad"])
def test_hex_to_bytes_round_trip(data):
    text = ", ".join(f"0x{byte:02x}" for byte in data)
    assert hex_to_bytes(text) == data


def test_hex_to_bytes_ignores_text_without_markers():
    assert hex_to_bytes("no markers here 12 ab") == b""


# longest substring


def test_longest_substring_example():
    assert length_of_longest_substring("abcabcbb") == 3


@pytest.mark.parametrize("text", SUBSTRING_INPUTS)
def test_longest_substring_methods_agree(text):
    assert length_of_longest_substring(text) == length_of_longest_substring_brute(text)


@pytest.mark.parametrize("text", SUBSTRING_INPUTS)
def test_longest_substring_bounds(text):
    result = length_of_longest_substring(text)
    assert result <= len(set(text))
    assert (result == 0) == (text == "")


@pytest.mark.parametrize("text", ["au", " ", "", "abcdef"])
def test_longest_substring_all_distinct_is_whole_length(text):
    assert length_of_longest_substring(text) == len(text)
    assert length_of_longest_substring_brute(text) == len(text)


def test_longest_substring_repeated_char():
    assert length_of_longest_substring("bbbbb") == 1
    assert length_of_longest_substring_brute("bbbbb") == 1


# roman_to_int


@pytest.mark.parametrize(
    "numeral, value",
    [("I", 1), ("V", 5), ("X", 10), ("L", 50), ("C", 100), ("D", 500), ("M", 1000)],
)
def test_roman_single_symbols(numeral, value):
    assert roman_to_int(numeral) == value


def test_roman_additive_is_sum_of_symbols():
    assert roman_to_int("MDCLXVI") == sum(roman_to_int(char) for char in "MDCLXVI")


def test_roman_subtractive():
    assert roman_to_int("MCMXCIV") == 1994


def test_roman_subtractive_pair_less_than_sum():
    assert roman_to_int("IX") < roman_to_int("XI")
    assert roman_to_int("IX") + roman_to_int("I") == roman_to_int("X")


def test_roman_empty():
    assert roman_to_int("") == 0


def test_roman_invalid_symbol():
    with pytest.raises(ValueError):
        roman_to_int("XQ")


# atoi


@pytest.mark.parametrize("text", ["42", "   -42", "+7", "0", "-0012"])
def test_atoi_plain_numbers(text):
    assert my_atoi(text) == int(text)
    assert my_atoi_scanning(text) == int(text)


def test_atoi_stops_at_words():
    assert my_atoi("4193 with words") == 4193
    assert my_atoi_scanning("4193 with words") == 4193


@pytest.mark.parametrize("text", ["words and 987", "", "   ", "+-12", "-", "- 5"])
def test_atoi_no_number(text):
    assert my_atoi(text) == 0
    assert my_atoi_scanning(text) == 0


def test_atoi_limits():
    assert my_atoi(str(INT_MAX)) == INT_MAX
    assert my_atoi(str(INT_MIN)) == INT_MIN
    assert my_atoi_scanning(str(INT_MAX)) == INT_MAX
    assert my_atoi_scanning(str(INT_MIN)) == INT_MIN


def test_atoi_clamps():
    assert my_atoi(str(INT_MAX + 1)) == INT_MAX
    assert my_atoi(str(INT_MIN - 1)) == INT_MIN
    assert my_atoi("99999999999999999999") == INT_MAX
    assert my_atoi("-99999999999999999999") == INT_MIN
    assert my_atoi_scanning(str(INT_MAX + 1)) == INT_MAX
    assert my_atoi_scanning(str(INT_MIN - 1)) == INT_MIN
    assert my_atoi_scanning("99999999999999999999") == INT_MAX
    assert my_atoi_scanning("-99999999999999999999") == INT_MIN


@pytest.mark.parametrize(
    "text", ["  123abc", "-91283472332", "3.14159", "+", "00000000000001", "  +0 1"]
)
def test_atoi_versions_agree(text):
    assert my_atoi(text) == my_atoi_scanning(text)