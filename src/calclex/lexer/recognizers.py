"""Recognizers: one greedy matcher per lexical class.

A recognizer receives the source and the start of its unconsumed suffix and
returns either None (no match) or a RecognitionResult. Recognizers never
backtrack: each commits to the longest run satisfying its own rule (maximal
munch).

The suffix is addressed by offset rather than sliced, so a scan over the
whole source stays O(n).

Recognizers are pure functions with no shared state and are safe to call
from any thread.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType

from calclex.lexer.classifiers import is_digit, is_letter
from calclex.result import RecognitionResult
from calclex.tokens import Token, TokenKind

Recognizer = Callable[[str, int], RecognitionResult | None]

# Single-character lookup tables, built once at import
OPERATORS: Mapping[str, TokenKind] = MappingProxyType(
    {
        "+": TokenKind.PLUS,
        "-": TokenKind.MINUS,
        "*": TokenKind.MULTIPLY,
        "/": TokenKind.DIVIDE,
    }
)

PARENTHESES: Mapping[str, TokenKind] = MappingProxyType(
    {
        "(": TokenKind.LPAREN,
        ")": TokenKind.RPAREN,
    }
)


def _scan_run(text: str, start: int, predicate: Callable[[str], bool]) -> int:
    """Length of the run of characters satisfying predicate at start."""
    end = start
    text_len = len(text)
    while end < text_len and predicate(text[end]):
        end += 1
    return end - start


def recognize_number(text: str, start: int = 0) -> RecognitionResult | None:
    """Match a maximal run of digits.

    Args:
        text: Source text
        start: Offset where the unconsumed suffix begins

    Returns:
        NUMBER token carrying the digit text as-is, or None.
    """
    consumed = _scan_run(text, start, is_digit)
    if consumed == 0:
        return None
    return RecognitionResult(
        Token(TokenKind.NUMBER, text[start : start + consumed]), consumed
    )


def _recognize_single(
    text: str, start: int, table: Mapping[str, TokenKind]
) -> RecognitionResult | None:
    if start >= len(text):
        return None
    char = text[start]
    kind = table.get(char)
    if kind is None:
        return None
    return RecognitionResult(Token(kind, char), 1)


def recognize_operator(text: str, start: int = 0) -> RecognitionResult | None:
    """Match one of ``+ - * /``. Consumes exactly one character."""
    return _recognize_single(text, start, OPERATORS)


def recognize_parenthesis(text: str, start: int = 0) -> RecognitionResult | None:
    """Match ``(`` or ``)``. Consumes exactly one character."""
    return _recognize_single(text, start, PARENTHESES)


def recognize_letter(text: str, start: int = 0) -> RecognitionResult | None:
    """Match a maximal run of ASCII letters.

    Letter runs are tagged NUMBER. There is no identifier kind in the
    token set, and callers rely on this tagging.

    Args:
        text: Source text
        start: Offset where the unconsumed suffix begins

    Returns:
        NUMBER token carrying the letter text as-is, or None.
    """
    consumed = _scan_run(text, start, is_letter)
    if consumed == 0:
        return None
    return RecognitionResult(
        Token(TokenKind.NUMBER, text[start : start + consumed]), consumed
    )


__all__ = [
    "OPERATORS",
    "PARENTHESES",
    "Recognizer",
    "recognize_letter",
    "recognize_number",
    "recognize_operator",
    "recognize_parenthesis",
]
