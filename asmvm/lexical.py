"""Recognisers for the textual forms of operands."""

from __future__ import annotations

from .config import AVAILABLE_FLAGS

# Characters treated as blank when trimming source lines.
WHITESPACE = " \t\n\v\f\r"

_DIGITS = frozenset("0123456789")


def is_digits(text: str) -> bool:
    """True if every character is an ASCII digit (vacuously true when empty)."""
    return all(char in _DIGITS for char in text)


def is_register(text: str) -> bool:
    """True for ``r`` followed by digits, e.g. ``r3``."""
    return text[:1] == "r" and is_digits(text[1:])


def is_register_value(text: str) -> bool:
    """True for a register in brackets, e.g. ``[r3]``."""
    if len(text) < 2 or not (text.startswith("[") and text.endswith("]")):
        return False
    return is_register(text[1:-1])


def is_flag(text: str) -> bool:
    """True for one of the branch condition symbols."""
    return text in AVAILABLE_FLAGS