# minitalk

A bit-level framing protocol for carrying text over two signals, and a set
of small helpers for strings, numbers, linked lists and formatted output.

In the protocol each byte travels as eight bits, most significant bit first.
A 1 bit stands for `SIGUSR2` and a 0 bit for `SIGUSR1`. A message ends with a
zero byte.

## Installation

```
pip install .
```

The package has no dependencies outside the standard library.

## The protocol

```python
from minitalk.protocol import encode_byte, encode_message, Decoder

encode_byte("A")                 # (0, 1, 0, 0, 0, 0, 0, 1)
bits = list(encode_message("hi"))  # 8 bits per byte, then 8 zero bits

decoder = Decoder()
received = [decoder.feed(bit) for bit in bits]
# every eighth feed returns the completed byte value; the others return None
```

- `encode_byte(value)` accepts an int in 0..255, a one-character `str`, or a
  one-byte `bytes`/`bytearray`, and returns its eight bits as a tuple.
- `encode_message(message)` yields the bits of the message followed by those
  of a terminating zero byte. Text is encoded as UTF-8; anything from an
  embedded NUL onward is not sent.
- `Decoder.feed(bit)` collects bits and returns a byte once eight have
  arrived; `Decoder.reset()` drops a partially received byte.

## Helpers

- `minitalk.ctype`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_upper`, `to_lower` for ASCII character codes or
  one-character strings.
- `minitalk.text`: `strlen`, `strchr`, `strrchr`, `strdup`, `strjoin`,
  `strncmp`, `strnstr` with C string semantics (text stops at the first NUL,
  searches return an index or `None`), and `strlcpy`, `strlcat` on
  `bytearray` buffers.
- `minitalk.convert`: `atoi` parses a leading decimal integer, wrapping to
  32 bits; `itoa` formats a 32-bit signed integer and raises `OverflowError`
  outside that range.
- `minitalk.output`: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`
  write to a text stream, standard output by default.
- `minitalk.printf`: `format_message(fmt, *args)` and
  `printf(fmt, *args, stream=None)` for the conversions
  `%c %s %p %d %i %u %x %X %%`. `printf` returns the number of characters
  written. `%s` of `None` gives `(null)`, `%p` of `None` gives `(nil)`.
- `minitalk.linkedlist`: `LinkedList` of `Node`s with `push_front`,
  `append`, `last`, `clear`, `for_each`, `map`, `len()` and iteration.

## What this package does not do

It does not send or receive real signals, and it has no server or client
commands. The protocol module only turns messages into bits and bits back
into bytes; delivering those bits between processes is left to the caller.

## Running the tests

```
pip install .[test]
pytest
```