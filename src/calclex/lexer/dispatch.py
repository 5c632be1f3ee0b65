"""Recognizer dispatch in a fixed priority order.

RECOGNIZERS is the dispatch table: an ordered, immutable tuple of recognizer
functions. The character classes of this grammar are disjoint, so at most one
recognizer can match, but the order is fixed to keep dispatch deterministic.
"""

from __future__ import annotations

from collections.abc import Sequence

from calclex.lexer.recognizers import (
    Recognizer,
    recognize_letter,
    recognize_number,
    recognize_operator,
    recognize_parenthesis,
)
from calclex.result import RecognitionResult

RECOGNIZERS: tuple[Recognizer, ...] = (
    recognize_number,
    recognize_operator,
    recognize_parenthesis,
    recognize_letter,
)


def try_recognizers(
    recognizers: Sequence[Recognizer], text: str, start: int = 0
) -> RecognitionResult | None:
    """Try each recognizer against the suffix of text at start, in order.

    Args:
        recognizers: Recognizers in priority order
        text: Source text
        start: Offset where the unconsumed suffix begins

    Returns:
        The first non-None result, or None if nothing matched.
    """
    for recognize in recognizers:
        result = recognize(text, start)
        if result is not None:
            return result
    return None


__all__ = ["RECOGNIZERS", "try_recognizers"]
