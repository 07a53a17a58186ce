"""Bit framing for two-signal text messaging, with string, number, list and formatting helpers."""

__version__ = "0.1.0"

__all__ = [
    "convert",
    "ctype",
    "linkedlist",
    "output",
    "printf",
    "protocol",
    "text",
]