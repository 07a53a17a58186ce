"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

from minitalk.convert import itoa
from minitalk.text import strdup


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def putchar_fd(char: Union[str, int], stream: Optional[TextIO] = None) -> None:
    """Write one character (or character code) to ``stream``."""
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        value = char
    elif isinstance(char, int) and not isinstance(char, bool):
        value = chr(char & 0xFF)
    else:
        raise TypeError(f"expected an int or a one-character str, got {type(char).__name__}")
    _target(stream).write(value)


def putstr_fd(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` up to its first NUL; ``None`` writes nothing."""
    if text is None:
        return
    _target(stream).write(strdup(text))


def putendl_fd(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline; ``None`` writes nothing."""
    if text is None:
        return
    _target(stream).write(strdup(text) + "\n")


def putnbr_fd(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal form of a 32-bit signed integer."""
    _target(stream).write(itoa(n))