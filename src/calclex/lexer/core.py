"""Scan loop for the calclex lexer.

Advances a cursor over the source, skipping spaces and handing the
unconsumed suffix (source plus cursor offset) to the recognizer dispatcher. The first character no
recognizer matches aborts the whole scan: the result carries the error and
an empty token sequence.

Every recognition consumes at least one character, so the loop always
terminates after at most len(source) iterations.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from calclex.config import LexConfig, get_lex_config
from calclex.lexer.classifiers import is_whitespace
from calclex.lexer.dispatch import RECOGNIZERS, try_recognizers
from calclex.result import LexError, LexResult
from calclex.tokens import Token, TokenKind
from calclex.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer:
    """Single-pass lexer over an arithmetic expression.

    Usage:
            >>> lexer = Lexer("34 + 6")
            >>> lexer.tokenize().tokens
        (Token(NUMBER, '34'), Token(PLUS, '+'), Token(NUMBER, '6'))

    Thread Safety:
        Lexer instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source)
        "_pos",
        "_tokens",
        "_config",
        "_done",
    )

    def __init__(self, source: str, *, config: LexConfig | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Expression text; may be empty
            config: Configuration override. Defaults to the context config.
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._tokens: list[Token] = []
        self._config = config if config is not None else get_lex_config()
        self._done = False

    def tokenize(self) -> LexResult:
        """Tokenize the whole source.

        Returns:
            LexResult with tokens in scan order, or an empty token sequence
            and the first LexError.

        Raises:
            RuntimeError: If this lexer has already been run.
        """
        if self._done:
            raise RuntimeError("Lexer instances are single-use; create a new one")
        self._done = True

        source = self._source
        source_len = self._source_len
        while self._pos < source_len:
            char = source[self._pos]

            if is_whitespace(char):
                self._pos += 1
                continue

            result = try_recognizers(RECOGNIZERS, source, self._pos)
            if result is None:
                error = LexError(position=self._pos + 1, character=char)
                logger.debug("Tokenization failed: %s", error)
                self._tokens.clear()
                return LexResult(tokens=(), error=error)

            self._tokens.append(result.token)
            self._pos += result.consumed

        if self._config.emit_eof:
            self._tokens.append(Token(TokenKind.EOF, ""))

        logger.debug("Tokenized %d chars into %d tokens", source_len, len(self._tokens))
        return LexResult(tokens=tuple(self._tokens))


def tokenize(source: str, *, config: LexConfig | None = None) -> LexResult:
    """Tokenize an arithmetic expression.

    Never raises for bad input: check ``result.error`` (or call
    ``result.raise_for_error()``) before trusting ``result.tokens``.

    Args:
        source: Expression text; may be empty
        config: Configuration override. Defaults to the context config.

    Returns:
        LexResult for the whole source.

    Example:
        >>> tokenize("12@3").error
        LexError(position=3, character='@')
    """
    return Lexer(source, config=config).tokenize()
