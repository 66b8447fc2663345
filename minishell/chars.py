"""ASCII character classification and case mapping.

Every function takes either a one-character string or an integer character
code. Only the ASCII ranges count: accented letters and other non-ASCII
characters are never letters or digits here, and case mapping leaves them
unchanged.
"""

from __future__ import annotations

from typing import Union

__all__ = [
    "LOWER_HEX_DIGITS",
    "UPPER_HEX_DIGITS",
    "isalpha",
    "isalnum",
    "isdigit",
    "isprint",
    "isascii",
    "tolower",
    "toupper",
]

LOWER_HEX_DIGITS = "0123456789abcdef"
UPPER_HEX_DIGITS = "0123456789ABCDEF"

_CASE_OFFSET = ord("a") - ord("A")

CharLike = Union[str, int]


def _code(c: CharLike) -> int:
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, got bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def _is_digit(code: int) -> bool:
    return ord("0") <= code <= ord("9")


def isalpha(c: CharLike) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def isalnum(c: CharLike) -> bool:
    """True for ASCII letters and the digits 0-9."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code) or _is_digit(code)


def isdigit(c: CharLike) -> bool:
    """True for the digits 0-9."""
    return _is_digit(_code(c))


def isprint(c: CharLike) -> bool:
    """True for printable ASCII, codes 32 to 126."""
    return 32 <= _code(c) <= 126


def isascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def _map(c: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(c, str) else code


def tolower(c: CharLike) -> CharLike:
    """Map A-Z to a-z; anything else comes back unchanged, in the type given."""
    code = _code(c)
    if _is_upper(code):
        code += _CASE_OFFSET
    return _map(c, code)


def toupper(c: CharLike) -> CharLike:
    """Map a-z to A-Z; anything else comes back unchanged, in the type given."""
    code = _code(c)
    if _is_lower(code):
        code -= _CASE_OFFSET
    return _map(c, code)