"""
calclex — Lexer for arithmetic expressions

Turns a string into numbers, the four binary operators and parentheses,
or reports the first character it cannot recognize. Zero runtime
dependencies; every call is a pure function of its input.

Quick Start:
    >>> from calclex import tokenize
    >>> result = tokenize("(1-2)*3/4")
    >>> result.ok
    True
    >>> [t.text for t in result]
    ['(', '1', '-', '2', ')', '*', '3', '/', '4']

    >>> bad = tokenize("12@3")
    >>> bad.tokens, str(bad.error)
    ((), "Unrecognized token at position 3: '@'")

Raising instead of checking:
    >>> tokenize("1+@").raise_for_error()
    Traceback (most recent call last):
    ...
    calclex.errors.UnrecognizedCharacterError: Unrecognized token at position 3: '@'
"""

from calclex.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from calclex.errors import CalclexError, SerializationError, UnrecognizedCharacterError
from calclex.lexer import Lexer, tokenize
from calclex.result import LexError, LexResult, RecognitionResult
from calclex.serialization import from_dict, from_json, to_dict, to_json
from calclex.tokens import Token, TokenKind

__version__ = "0.1.0"

__all__ = [
    # Core API
    "tokenize",
    "Lexer",
    # Data model
    "Token",
    "TokenKind",
    "LexResult",
    "LexError",
    "RecognitionResult",
    # Configuration
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
    # Serialization
    "to_dict",
    "to_json",
    "from_dict",
    "from_json",
    # Errors
    "CalclexError",
    "UnrecognizedCharacterError",
    "SerializationError",
]
