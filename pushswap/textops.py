"""Small text transformations over ASCII letters and blank-separated words."""

from __future__ import annotations

import string

_LOWER = string.ascii_lowercase
_UPPER = string.ascii_uppercase

_ROT13 = str.maketrans(
    _LOWER + _UPPER,
    _LOWER[13:] + _LOWER[:13] + _UPPER[13:] + _UPPER[:13],
)
_ROTONE = str.maketrans(
    _LOWER + _UPPER,
    _LOWER[1:] + _LOWER[:1] + _UPPER[1:] + _UPPER[:1],
)
_MIRROR = str.maketrans(_LOWER + _UPPER, _LOWER[::-1] + _UPPER[::-1])
_SWAPCASE = str.maketrans(_LOWER + _UPPER, _UPPER + _LOWER)

_BLANKS = " \t"
_SPLIT_BLANKS = " \t\n"


def first_word(text: str) -> str:
    """Return the first word of ``text``, words being separated by spaces or tabs."""
    stripped = text.lstrip(_BLANKS)
    for pos, char in enumerate(stripped):
        if char in _BLANKS:
            return stripped[:pos]
    return stripped


def repeat_alpha(text: str) -> str:
    """Repeat each letter as many times as its place in the alphabet."""
    parts = []
    for char in text:
        if char in _LOWER:
            parts.append(char * (_LOWER.index(char) + 1))
        elif char in _UPPER:
            parts.append(char * (_UPPER.index(char) + 1))
        else:
            parts.append(char)
    return "".join(parts)


def rev_print(text: str) -> str:
    """Return ``text`` reversed."""
    return text[::-1]


def rot13(text: str) -> str:
    """Rotate every ASCII letter by 13 places."""
    return text.translate(_ROT13)


def rotone(text: str) -> str:
    """Replace every ASCII letter by the next one, ``z`` wrapping to ``a``."""
    return text.translate(_ROTONE)


def search_and_replace(text: str, old: str, new: str) -> str:
    """Replace each ``old`` character in ``text`` by ``new``.

    Both ``old`` and ``new`` must be at most one character long; otherwise
    the result is empty. An empty ``old`` matches nothing; an empty ``new``
    stands for the NUL character.
    """
    if max(len(old), len(new)) > 1:
        return ""
    if not old:
        return text
    return text.replace(old, new or "\0")


def ulstr(text: str) -> str:
    """Swap the case of every ASCII letter."""
    return text.translate(_SWAPCASE)


def alpha_mirror(text: str) -> str:
    """Replace each ASCII letter by its mirror in the alphabet (a<->z, b<->y...)."""
    return text.translate(_MIRROR)


def strcmp(s1: str, s2: str) -> int:
    """Return the code difference at the first differing character, or 0.

    The end of a string counts as a character of code 0.
    """
    for c1, c2 in zip(s1, s2):
        if c1 != c2:
            return ord(c1) - ord(c2)
    if len(s1) == len(s2):
        return 0
    if len(s1) > len(s2):
        return ord(s1[len(s2)])
    return -ord(s2[len(s1)])


def inter(first: str, second: str) -> str:
    """Return the characters of ``first`` also found in ``second``, once each, in order."""
    present = set(second)
    return "".join(dict.fromkeys(char for char in first if char in present))


def union(first: str, second: str) -> str:
    """Return the characters of both strings, once each, in order of appearance."""
    return "".join(dict.fromkeys(first + second))


def wdmatch(word: str, text: str) -> str:
    """Return ``word`` if its characters appear in ``text`` in order, else ``""``."""
    remaining = iter(text)
    if all(char in remaining for char in word):
        return word
    return ""


def str_capitalizer(text: str) -> str:
    """Upper-case the first character of each word and lower-case the rest.

    Words are separated by spaces or tabs; only ASCII letters change.
    """
    parts = []
    new_word = True
    for char in text:
        if char in _BLANKS:
            new_word = True
        elif new_word:
            char = char.upper() if char in _LOWER else char
            new_word = False
        elif char in _UPPER:
            char = char.lower()
        parts.append(char)
    return "".join(parts)


def split(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces, tabs or newlines."""
    words = []
    current: list[str] = []
    for char in text:
        if char in _SPLIT_BLANKS:
            if current:
                words.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        words.append("".join(current))
    return words