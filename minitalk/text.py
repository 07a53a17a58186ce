"""String helpers with C string semantics.

Text functions take ``str`` values and stop at the first NUL character,
just as a C string ends at its terminator. Searches return an index into
the text, or ``None`` when nothing is found. ``strlcpy`` and ``strlcat``
work on ``bytearray`` buffers that hold NUL-terminated data.
"""

from __future__ import annotations

from typing import Optional, Union

CharLike = Union[int, str]
BytesLike = Union[bytes, bytearray, memoryview, str]

_NUL = "\0"


def _cstr(text: str) -> str:
    """Return ``text`` up to, but not including, its first NUL."""
    end = text.find(_NUL)
    return text if end < 0 else text[:end]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _cbytes(data: BytesLike) -> bytes:
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    end = raw.find(0)
    return raw if end < 0 else raw[:end]


def _check_size(dest: bytearray, size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size > len(dest):
        raise IndexError(f"size {size} exceeds buffer of size {len(dest)}")


def strlen(text: str) -> int:
    """Return the number of characters before the first NUL."""
    return len(_cstr(text))


def strchr(text: str, char: CharLike) -> Optional[int]:
    """Return the index of the first ``char`` in ``text``.

    Searching for NUL yields the index of the terminator, i.e. the length.
    """
    target = _char(char)
    body = _cstr(text)
    if target == _NUL:
        return len(body)
    index = body.find(target)
    return None if index < 0 else index


def strrchr(text: str, char: CharLike) -> Optional[int]:
    """Return the index of the last ``char`` in ``text``.

    Searching for NUL yields the index of the terminator, i.e. the length.
    """
    target = _char(char)
    body = _cstr(text)
    if target == _NUL:
        return len(body)
    index = body.rfind(target)
    return None if index < 0 else index


def strdup(text: str) -> str:
    """Return a copy of ``text`` up to its first NUL."""
    return _cstr(text)


def strjoin(first: str, second: str) -> str:
    """Return the concatenation of two strings."""
    return _cstr(first) + _cstr(second)


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns 0 when equal, otherwise the difference of the first differing
    character codes, the terminator counting as 0.
    """
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    a = _cstr(first)[:n]
    b = _cstr(second)[:n]
    for x, y in zip(a, b):
        if x != y:
            return ord(x) - ord(y)
    if len(a) == len(b):
        return 0
    return (ord(a[len(b)]) if len(a) > len(b) else 0) - (ord(b[len(a)]) if len(b) > len(a) else 0)


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` entirely within the first ``length`` characters of ``haystack``.

    An empty needle matches at index 0.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    little = _cstr(needle)
    if not little:
        return 0
    index = _cstr(haystack)[:length].find(little)
    return None if index < 0 else index


def strlcpy(dest: bytearray, src: BytesLike, size: int) -> int:
    """Copy ``src`` into ``dest``, writing at most ``size`` bytes including a NUL.

    Returns the length of ``src``; a result of ``size`` or more means the
    copy was truncated.
    """
    _check_size(dest, size)
    data = _cbytes(src)
    if size == 0:
        return len(data)
    copied = data[: size - 1]
    dest[: len(copied)] = copied
    dest[len(copied)] = 0
    return len(data)


def strlcat(dest: bytearray, src: BytesLike, size: int) -> int:
    """Append ``src`` to the NUL-terminated text in ``dest`` within ``size`` bytes.

    Returns the length the combined text would have had; when no NUL is
    found in the first ``size`` bytes, returns ``size`` plus the length of
    ``src`` and leaves ``dest`` untouched.
    """
    _check_size(dest, size)
    data = _cbytes(src)
    terminator = dest.find(0, 0, size)
    dest_len = size if terminator < 0 else terminator
    if size <= dest_len:
        return size + len(data)
    copied = data[: size - 1 - dest_len]
    dest[dest_len : dest_len + len(copied)] = copied
    dest[dest_len + len(copied)] = 0
    return dest_len + len(data)