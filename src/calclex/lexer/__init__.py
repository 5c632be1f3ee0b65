"""Recognizer-chain lexer for arithmetic expressions.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, tokenize
├── core.py              # Lexer class (scan loop) and tokenize()
├── dispatch.py          # RECOGNIZERS table, try_recognizers
├── recognizers.py       # Number, operator, parenthesis, letter recognizers
└── classifiers.py       # Character sets and predicates

Usage:
    >>> from calclex.lexer import tokenize
    >>> for token in tokenize("(1-2)*3"):
    ...     print(token)
Token(LPAREN, '(')
Token(NUMBER, '1')
Token(MINUS, '-')
Token(NUMBER, '2')
Token(RPAREN, ')')
Token(MULTIPLY, '*')
Token(NUMBER, '3')

"""

from calclex.lexer.core import Lexer, tokenize

__all__ = ["Lexer", "tokenize"]
