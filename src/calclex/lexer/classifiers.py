"""Character sets and single-character classifiers.

All sets are frozensets for:
- O(1) membership testing
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Only ASCII ranges are recognized. Unicode digits and letters, tabs and
newlines are not members of any class and fall through to "unrecognized".

Usage:
    from calclex.lexer.classifiers import is_digit

    if is_digit(char):  # O(1) lookup
        ...
"""

from __future__ import annotations

DIGITS: frozenset[str] = frozenset("0123456789")

LETTERS: frozenset[str] = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
)

# Plain space only
WHITESPACE: frozenset[str] = frozenset(" ")


def is_digit(char: str) -> bool:
    """Check if character is an ASCII digit ('0'..'9')."""
    return char in DIGITS


def is_letter(char: str) -> bool:
    """Check if character is an ASCII letter ('A'..'Z' or 'a'..'z')."""
    return char in LETTERS


def is_whitespace(char: str) -> bool:
    """Check if character is the plain space character."""
    return char in WHITESPACE


__all__ = [
    "DIGITS",
    "LETTERS",
    "WHITESPACE",
    "is_digit",
    "is_letter",
    "is_whitespace",
]
