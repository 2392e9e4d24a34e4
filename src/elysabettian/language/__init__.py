"""
Elysabettian Language Front End
===============================

The lexical layer of the Elysabettian toolchain: token categories, the
Token record, and the Scanner that turns source text into tokens.

Pipeline
--------
    Source → Scanner → Tokens → Parser (separate component)

Usage
-----
>>> from elysabettian.language import scan
>>> [token.type.name for token in scan("1+2")]
['NUMBER', 'PLUS', 'NUMBER', 'EOF']
"""

from elysabettian.language.errors import (
    LexicalError,
    UnterminatedStringError,
    UnexpectedCharacterError,
)
from elysabettian.language.scanner import Scanner, scan, check_tokens
from elysabettian.language.tokens import KEYWORDS, Token, TokenType

__all__ = [
    # Errors
    "LexicalError",
    "UnterminatedStringError",
    "UnexpectedCharacterError",
    # Scanner
    "Scanner",
    "scan",
    "check_tokens",
    # Tokens
    "KEYWORDS",
    "Token",
    "TokenType",
]
