"""Small numeric helpers: parsing, formatting, bit tricks, ranges and sorting."""

from __future__ import annotations

import re
import string
from collections.abc import Iterable

_UINT_MOD = 2**32
_BYTE_MASK = 0xFF
_WHITESPACE = " \t\n\v\f\r"
_DECIMAL = re.compile(r"([+-]?)([0-9]*)")
_HEX_DIGITS = "0123456789abcdef"


def fizzbuzz(limit: int = 100) -> list[str]:
    """Return the fizzbuzz lines for 1 to ``limit`` inclusive."""
    lines = []
    for number in range(1, limit + 1):
        if number % 15 == 0:
            lines.append("fizzbuzz")
        elif number % 3 == 0:
            lines.append("fizz")
        elif number % 5 == 0:
            lines.append("buzz")
        else:
            lines.append(str(number))
    return lines


def _split_sign(text: str) -> tuple[int, str]:
    body = text.lstrip(_WHITESPACE)
    if body[:1] == "-":
        return -1, body[1:]
    if body[:1] == "+":
        return 1, body[1:]
    return 1, body


def atoi(text: str) -> int:
    """Parse leading blanks, an optional sign and decimal digits; 0 if none."""
    sign, body = _split_sign(text)
    match = _DECIMAL.match(body)
    digits = match.group(2) if match and not match.group(1) else ""
    return sign * int(digits) if digits else 0


def atoi_base(text: str, base: int) -> int:
    """Parse a signed number in ``base`` (up to 16), stopping at the first invalid digit."""
    sign, body = _split_sign(text)
    result = 0
    for char in body:
        if char not in string.hexdigits:
            break
        digit = int(char, 16)
        if digit >= base:
            break
        result = result * base + digit
    return sign * result


def is_power_of_2(n: int) -> bool:
    """Return True if ``n``, taken as a 32-bit unsigned integer, is a power of two."""
    n %= _UINT_MOD
    return n != 0 and n & (n - 1) == 0


def bits(octet: int) -> str:
    """Return the eight bits of a byte, most significant first."""
    octet &= _BYTE_MASK
    return "".join("1" if octet & (1 << shift) else "0" for shift in range(7, -1, -1))


def reverse_bits(octet: int) -> int:
    """Return the byte with its eight bits in reverse order."""
    octet &= _BYTE_MASK
    result = 0
    for _ in range(8):
        result = (result << 1) | (octet & 1)
        octet >>= 1
    return result


def swap_bits(octet: int) -> int:
    """Return the byte with its two halves exchanged."""
    octet &= _BYTE_MASK
    return ((octet >> 4) | (octet << 4)) & _BYTE_MASK


def range_exclusive(start: int, stop: int) -> list[int]:
    """Return the integers from ``start`` up to but not including ``stop``."""
    if start >= stop:
        return []
    return list(range(start, stop))


def range_inclusive(start: int, stop: int) -> list[int]:
    """Return the integers from ``start`` to ``stop``, both included."""
    if start > stop:
        return []
    return list(range(start, stop + 1))


def to_hex(n: int) -> str:
    """Return ``n``, taken as a 32-bit unsigned integer, in lower-case hexadecimal."""
    n %= _UINT_MOD
    digits = []
    while True:
        n, digit = divmod(n, 16)
        digits.append(_HEX_DIGITS[digit])
        if n == 0:
            break
    return "".join(reversed(digits))


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    sign = "-" if n < 0 else ""
    magnitude = -n if n < 0 else n
    digits = []
    while True:
        magnitude, digit = divmod(magnitude, 10)
        digits.append(str(digit))
        if magnitude == 0:
            break
    return sign + "".join(reversed(digits))


def sort_int_tab(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order."""
    return sorted(values)