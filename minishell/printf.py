"""A small formatter for the conversions the shell prints with.

Supported conversions are ``%c``, ``%s``, ``%p``, ``%d``, ``%i``, ``%u``,
``%x``, ``%X`` and ``%%``. There are no flags, widths or precisions.
Integers wrap the way their fixed-size machine types do: ``%d`` and ``%i``
take a signed 32-bit value, ``%u``, ``%x`` and ``%X`` an unsigned 32-bit
value, and ``%p`` an unsigned 64-bit address.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

from .chars import LOWER_HEX_DIGITS, UPPER_HEX_DIGITS

__all__ = ["format", "printf"]

_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF
_BYTE = 0xFF


def _require_int(value: Any, conversion: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"%{conversion} expects an integer, got {type(value).__name__}"
        )
    return value


def _to_int32(value: int) -> int:
    value &= _UINT32
    return value - (1 << 32) if value & 0x80000000 else value


def _hex(value: int, digits: str) -> str:
    if value == 0:
        return digits[0]
    out = []
    while value:
        value, rest = divmod(value, 16)
        out.append(digits[rest])
    return "".join(reversed(out))


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & _BYTE)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string or None, got {type(value).__name__}")
    return value


def _pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = _require_int(value, "p") & _UINT64
    if address == 0:
        return "(nil)"
    return "0x" + _hex(address, LOWER_HEX_DIGITS)


def _signed(conversion: str) -> Callable[[Any], str]:
    def render(value: Any) -> str:
        return str(_to_int32(_require_int(value, conversion)))

    return render


def _unsigned(value: Any) -> str:
    return str(_require_int(value, "u") & _UINT32)


def _hex_lower(value: Any) -> str:
    return _hex(_require_int(value, "x") & _UINT32, LOWER_HEX_DIGITS)


def _hex_upper(value: Any) -> str:
    return _hex(_require_int(value, "X") & _UINT32, UPPER_HEX_DIGITS)


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": _signed("d"),
    "i": _signed("i"),
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
}


def _pieces(template: str, args: tuple[Any, ...]) -> Iterator[str]:
    remaining = iter(args)
    chars = iter(template)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        conversion = next(chars, None)
        if conversion is None:
            raise ValueError("incomplete conversion at end of template")
        if conversion == "%":
            yield "%"
            continue
        render = _CONVERSIONS.get(conversion)
        if render is None:
            raise ValueError(f"unsupported conversion %{conversion}")
        try:
            value = next(remaining)
        except StopIteration:
            raise TypeError(
                f"not enough arguments for conversion %{conversion}"
            ) from None
        yield render(value)


def format(template: str, *args: Any) -> str:
    """Render ``template`` with ``args``; extra arguments are ignored."""
    return "".join(_pieces(template, args))


def printf(template: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the rendered template to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = format(template, *args)
    (stream if stream is not None else sys.stdout).write(text)
    return len(text)