"""A small printf-style formatter supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, Callable, TextIO

_INT_BITS = 32
_POINTER_BITS = 64


def _signed32(value: int) -> int:
    value &= (1 << _INT_BITS) - 1
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def _unsigned32(value: int) -> int:
    return value & ((1 << _INT_BITS) - 1)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(value)


def _format_string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _format_pointer(value: int) -> str:
    return "0x" + format(value & ((1 << _POINTER_BITS) - 1), "x")


def _format_decimal(value: int) -> str:
    return str(_signed32(value))


def _format_unsigned(value: int) -> str:
    return str(_unsigned32(value))


def _format_hex(value: int) -> str:
    return format(_unsigned32(value), "x")


def _format_upper_hex(value: int) -> str:
    return format(_unsigned32(value), "X")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_string,
    "p": _format_pointer,
    "d": _format_decimal,
    "i": _format_decimal,
    "u": _format_unsigned,
    "x": _format_hex,
    "X": _format_upper_hex,
}


def cformat(template: str, *args: Any) -> str:
    """Format ``template`` with ``args``.

    Integers are treated as 32-bit C ints (pointers as 64-bit). An unknown
    conversion character is dropped together with its ``%`` and consumes no
    argument; a lone trailing ``%`` is ignored.
    """
    values = iter(args)
    pieces: list[str] = []
    chars = iter(template)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError(f"not enough arguments for conversion '%{spec}'") from None
        pieces.append(convert(value))
    return "".join(pieces)


def cprintf(template: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default) and return its length."""
    text = cformat(template, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)