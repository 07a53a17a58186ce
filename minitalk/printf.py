"""A small formatted-output routine with a fixed set of conversions.

Supported conversions are ``%c``, ``%s``, ``%p``, ``%d``, ``%i``, ``%u``,
``%x``, ``%X`` and ``%%``. Integer conversions treat their argument as a
32-bit C value: ``%d`` and ``%i`` as signed, ``%u``, ``%x`` and ``%X`` as
unsigned. An unknown conversion character is consumed and prints nothing.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

from minitalk.text import strdup

_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_UINT32_MASK = 0xFFFFFFFF
_INT32_MAX = 2**31 - 1


def _require_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _to_int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - 2**32 if value > _INT32_MAX else value


def _to_hex(value: int, digits: str) -> str:
    if value == 0:
        return "0"
    out = []
    while value:
        value, rest = divmod(value, 16)
        out.append(digits[rest])
    return "".join(reversed(out))


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _format_string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str, got {type(value).__name__}")
    return strdup(value)


def _format_pointer(value: Any) -> str:
    if value is None or value == 0:
        return "(nil)"
    address = value if isinstance(value, int) and not isinstance(value, bool) else id(value)
    return "0x" + _to_hex(address, _HEX_LOWER)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for conversion %{spec}") from None
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return _format_string(value)
    if spec == "p":
        return _format_pointer(value)
    number = _require_int(value, spec)
    if spec in "di":
        return str(_to_int32(number))
    unsigned = number & _UINT32_MASK
    if spec == "u":
        return str(unsigned)
    return _to_hex(unsigned, _HEX_UPPER if spec == "X" else _HEX_LOWER)


def _pieces(fmt: str, args: Iterator[Any]) -> Iterator[str]:
    chars = iter(strdup(fmt))
    for char in chars:
        if char != "%":
            yield char
            continue
        spec = next(chars, None)
        if spec is not None:
            yield _convert(spec, args)


def format_message(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``."""
    return "".join(_pieces(fmt, iter(args)))


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_message(fmt, *args)
    target = sys.stdout if stream is None else stream
    target.write(text)
    return len(text)