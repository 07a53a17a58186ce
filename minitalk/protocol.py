"""Bit-level framing of messages carried by two signals.

Each byte travels as eight bits, most significant bit first. A one bit is
sent as SIGUSR2 and a zero bit as SIGUSR1. A message ends with a NUL byte.
"""

from __future__ import annotations

from typing import Iterator, Optional, Union

BITS_PER_BYTE = 8

ByteLike = Union[int, str, bytes, bytearray]
MessageLike = Union[str, bytes, bytearray]


def _byte_value(value: ByteLike) -> int:
    if isinstance(value, (bytes, bytearray)):
        if len(value) != 1:
            raise ValueError(f"expected a single byte, got {value!r}")
        return value[0]
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        value = ord(value)
    elif isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, a byte or a character, got {type(value).__name__}")
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    return value


def encode_byte(value: ByteLike) -> tuple[int, ...]:
    """Return the eight bits of ``value``, most significant first."""
    code = _byte_value(value)
    return tuple((code >> shift) & 1 for shift in range(BITS_PER_BYTE - 1, -1, -1))


def _payload(message: MessageLike) -> bytes:
    raw = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    end = raw.find(0)
    body = raw if end < 0 else raw[:end]
    return body + b"\0"


def encode_message(message: MessageLike) -> Iterator[int]:
    """Yield the bits of ``message`` followed by those of its NUL terminator.

    Text is encoded as UTF-8; anything from a NUL on is not sent.
    """
    for byte in _payload(message):
        yield from encode_byte(byte)


class Decoder:
    """Reassemble bytes from a stream of bits, most significant bit first."""

    def __init__(self) -> None:
        self._count = 0
        self._value = 0

    def reset(self) -> None:
        """Discard any partially received byte."""
        self._count = 0
        self._value = 0

    def feed(self, bit: Union[int, bool]) -> Optional[int]:
        """Add one bit; return the byte once eight bits have arrived, else None."""
        self._value |= (1 if bit else 0) << (BITS_PER_BYTE - 1 - self._count)
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        value = self._value
        self.reset()
        return value