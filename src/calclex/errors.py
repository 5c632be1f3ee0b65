"""Exception classes for calclex.

Lexing itself never raises: failures are returned as data on LexResult.
These exceptions serve callers that opt into raising, plus serialization.
"""

from __future__ import annotations


class CalclexError(Exception):
    """Base exception for all calclex errors.

    Subclass this for specific error categories.
    """

    pass


class UnrecognizedCharacterError(CalclexError):
    """No recognizer matched the character at a scan position.

    Raised by ``LexResult.raise_for_error()``; ``tokenize`` itself only
    returns the equivalent ``LexError`` value.
    """

    def __init__(self, position: int, character: str) -> None:
        """Initialize with the offending location.

        Args:
            position: Position of the character in source (1-indexed)
            character: The unrecognized character
        """
        self.position = position
        self.character = character
        super().__init__(f"Unrecognized token at position {position}: '{character}'")


class SerializationError(CalclexError):
    """Malformed data passed to ``from_dict`` or ``from_json``."""

    pass
