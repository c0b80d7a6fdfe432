from collections import Counter

import pytest

from pushswap.numeric import (
    atoi,
    atoi_base,
    bits,
    fizzbuzz,
    is_power_of_2,
    itoa,
    range_exclusive,
    range_inclusive,
    reverse_bits,
    sort_int_tab,
    swap_bits,
    to_hex,
)


def test_fizzbuzz_default_has_hundred_lines():
    assert len(fizzbuzz()) == 100


def test_fizzbuzz_words_at_multiples():
    lines = fizzbuzz()
    assert lines[14] == "fizzbuzz"
    assert lines[2] == "fizz"
    assert lines[4] == "buzz"


def test_fizzbuzz_plain_numbers_are_their_position():
    for position, line in enumerate(fizzbuzz(30), start=1):
        if line not in {"fizz", "buzz", "fizzbuzz"}:
            assert int(line) == position
            assert position % 3 and position % 5


def test_fizzbuzz_empty_limit():
    assert fizzbuzz(0) == []


def test_atoi_source_example():
    assert atoi("    \t-123") == -123


@pytest.mark.parametrize("text", ["", "abc", "-", "+-5", "--5", "x12"])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


def test_atoi_stops_at_non_digit():
    assert atoi("  +42abc") == 42


@pytest.mark.parametrize("n", [0, 7, -7, -12345, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_source_example():
    assert itoa(-12345) == "-12345"


def test_atoi_base_source_examples():
    assert atoi_base("ff", 16) == 255
    assert atoi_base("-ff", 16) == -255
    assert atoi_base("FF", 16) == atoi_base("ff", 16)


def test_atoi_base_binary_and_octal():
    assert atoi_base("10", 2) == 2
    assert atoi_base("10", 8) == 8


def test_atoi_base_stops_at_digit_too_big():
    assert atoi_base("19", 8) == atoi_base("1", 8)
    assert atoi_base("1g", 16) == atoi_base("1", 16)


@pytest.mark.parametrize("n", [0, 1, 16, 255, 4096, 123456789])
def test_to_hex_atoi_base_round_trip(n):
    assert atoi_base(to_hex(n), 16) == n


def test_to_hex_source_examples():
    assert to_hex(255) == "ff"
    assert to_hex(16) == "10"
    assert to_hex(0) == "0"


@pytest.mark.parametrize("n", [1, 2, 32, 1024, 2**31])
def test_is_power_of_2_true(n):
    assert is_power_of_2(n) is True


@pytest.mark.parametrize("n", [0, 3, 6, 100, 2**32 - 1])
def test_is_power_of_2_false(n):
    assert is_power_of_2(n) is False


@pytest.mark.parametrize("octet", [0, 2, 5, 255, 128, 77])
def test_bits_round_trip(octet):
    text = bits(octet)
    assert len(text) == 8
    assert int(text, 2) == octet


@pytest.mark.parametrize("octet", range(0, 256, 17))
def test_reverse_bits_reverses_bit_string(octet):
    assert bits(reverse_bits(octet)) == bits(octet)[::-1]
    assert reverse_bits(reverse_bits(octet)) == octet


@pytest.mark.parametrize("octet", range(0, 256, 13))
def test_swap_bits_exchanges_halves(octet):
    text = bits(octet)
    assert bits(swap_bits(octet)) == text[4:] + text[:4]
    assert swap_bits(swap_bits(octet)) == octet


def test_range_exclusive_contents():
    values = range_exclusive(1, 100)
    assert len(values) == 99
    assert values[0] == 1
    assert values[-1] == 99


def test_range_exclusive_empty_when_not_increasing():
    assert range_exclusive(5, 5) == []
    assert range_exclusive(6, 5) == []


def test_range_inclusive_source_example():
    values = range_inclusive(-1, 5)
    assert len(values) == 7
    assert values[0] == -1
    assert values[-1] == 5
    assert all(b - a == 1 for a, b in zip(values, values[1:]))


def test_range_inclusive_single_and_empty():
    assert range_inclusive(4, 4) == [4]
    assert range_inclusive(3, 2) == []


def test_sort_int_tab_source_example():
    values = [5, 3, 8, 1, 9, 2]
    result = sort_int_tab(values)
    assert all(a <= b for a, b in zip(result, result[1:]))
    assert Counter(result) == Counter(values)


def test_sort_int_tab_keeps_duplicates():
    values = [3, -1, 3, 0, -1]
    result = sort_int_tab(values)
    assert result[0] == -1
    assert result[-1] == 3
    assert Counter(result) == Counter(values)