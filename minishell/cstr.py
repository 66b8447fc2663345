"""String helpers with the exact semantics the shell relies on.

Positions are returned as indices into the given string, or ``None`` when
nothing is found.
"""

from __future__ import annotations

__all__ = [
    "atoi",
    "itoa",
    "split",
    "strtrim",
    "strnstr",
    "strncmp",
    "strcmp",
    "substr",
    "strchr",
    "strrchr",
]

_NUL = "\0"


def _is_space(c: str) -> bool:
    return c == " " or 7 <= ord(c) <= 13


def _single_char(char: str) -> str:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def atoi(text: str) -> int:
    """Parse a leading decimal integer the lenient way: junk after it is ignored.

    Leading whitespace (codes 7 to 13 and space) is skipped, one optional
    sign is accepted, and parsing stops at the first non-digit. Text with
    no digits yields 0.
    """
    pos = 0
    while pos < len(text) and _is_space(text[pos]):
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    end = pos
    while end < len(text) and "0" <= text[end] <= "9":
        end += 1
    digits = text[pos:end]
    return sign * int(digits) if digits else 0


def itoa(n: int) -> str:
    """Render an integer in decimal, with a leading '-' when negative."""
    return str(int(n))


def split(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty pieces."""
    sep = _single_char(sep)
    return [piece for piece in text.split(sep) if piece]


def strtrim(text: str, charset: str) -> str:
    """Remove every leading and trailing character that appears in ``charset``."""
    return text.strip(charset) if charset else text


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` entirely inside the first ``length`` characters.

    An empty needle matches at position 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def _code_at(text: str, index: int) -> int:
    return ord(text[index]) if index < len(text) else 0


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the character codes at the first mismatch
    (a missing character counts as code 0), or 0 when they agree.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    limit = min(n, max(len(a), len(b)))
    for index in range(limit):
        left, right = _code_at(a, index), _code_at(b, index)
        if left != right:
            return left - right
    return 0


def strcmp(a: str, b: str) -> int:
    """Compare two whole strings; the sign of the result orders them."""
    return strncmp(a, b, max(len(a), len(b)))


def substr(text: str, start: int, length: int) -> str:
    """Return up to ``length`` characters starting at ``start``.

    A start past the end yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strchr(text: str, char: str) -> int | None:
    """Index of the first ``char`` in ``text``.

    Searching for the NUL character finds the end of the string.
    """
    char = _single_char(char)
    if char == _NUL and _NUL not in text:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, char: str) -> int | None:
    """Index of the last ``char`` in ``text``.

    Searching for the NUL character finds the end of the string.
    """
    char = _single_char(char)
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index