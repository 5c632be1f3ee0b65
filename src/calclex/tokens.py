"""Token and TokenKind definitions for the calclex lexer.

The lexer produces an ordered sequence of Token objects. Each Token pairs a
kind with the exact lexeme it was read from.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Token kinds produced by the lexer.

    The set is closed. EOF is reserved: the scan loop only emits it when
    ``LexConfig.emit_eof`` is enabled.

    """

    # Literals
    NUMBER = "NUMBER"

    # Binary operators
    PLUS = "PLUS"  # +
    MINUS = "MINUS"  # -
    MULTIPLY = "MULTIPLY"  # *
    DIVIDE = "DIVIDE"  # /

    # Grouping
    LPAREN = "LPAREN"  # (
    RPAREN = "RPAREN"  # )

    # End of input
    EOF = "EOF"


@dataclass(frozen=True, slots=True)
class Token:
    """A classified unit of lexical text.

    Attributes:
        kind: The token kind (from TokenKind enum)
        text: The exact lexeme consumed from source, never transformed.
            A number's text is its literal digit run, not a parsed integer.

    """

    kind: TokenKind
    text: str

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        text = self.text
        if len(text) > 20:
            text = text[:17] + "..."
        return f"Token({self.kind.name}, {text!r})"
