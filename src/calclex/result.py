"""Result types for the calclex lexer.

LexResult is the public output contract of ``tokenize``: either an ordered
token sequence, or an empty sequence plus the first LexError.

RecognitionResult is transient. A recognizer produces it and the scan loop
consumes it immediately; it is never stored.

Thread Safety:
All types are frozen dataclasses and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from calclex.errors import UnrecognizedCharacterError
from calclex.tokens import Token


@dataclass(frozen=True, slots=True)
class RecognitionResult:
    """A successful match by one recognizer.

    Attributes:
        token: The recognized token
        consumed: Number of source characters the token covers (always >= 1)

    """

    token: Token
    consumed: int

    def __post_init__(self) -> None:
        # Zero-width matches would stall the scan loop
        if self.consumed < 1:
            raise ValueError(f"consumed must be >= 1, got {self.consumed}")


@dataclass(frozen=True, slots=True)
class LexError:
    """The first character no recognizer could match.

    Attributes:
        position: Position of the character in source (1-indexed)
        character: The offending character

    Examples:
            >>> err = LexError(position=3, character="@")
            >>> str(err)
            "Unrecognized token at position 3: '@'"

    """

    position: int
    character: str

    @property
    def message(self) -> str:
        """Human-readable description of the error."""
        return f"Unrecognized token at position {self.position}: '{self.character}'"

    def __str__(self) -> str:
        return self.message

    def to_exception(self) -> UnrecognizedCharacterError:
        """Build the equivalent exception for callers that raise."""
        return UnrecognizedCharacterError(self.position, self.character)


@dataclass(frozen=True, slots=True)
class LexResult:
    """Output of a tokenization.

    If ``error`` is set, ``tokens`` is always empty: a failed scan never
    returns the tokens recognized before the bad character.

    Attributes:
        tokens: Tokens in left-to-right scan order
        error: The first unrecognized character, or None on success

    """

    tokens: tuple[Token, ...] = ()
    error: LexError | None = None

    def __post_init__(self) -> None:
        if self.error is not None and self.tokens:
            raise ValueError("a failed LexResult cannot carry tokens")

    @property
    def ok(self) -> bool:
        """True when tokenization succeeded."""
        return self.error is None

    def raise_for_error(self) -> tuple[Token, ...]:
        """Return the tokens, or raise if tokenization failed.

        Raises:
            UnrecognizedCharacterError: If ``error`` is set.
        """
        if self.error is not None:
            raise self.error.to_exception()
        return self.tokens

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)
