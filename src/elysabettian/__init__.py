"""
Elysabettian - Scripting Language Toolchain
===========================================

This package provides the front end of the Elysabettian scripting
language toolchain. Source text is converted into an ordered stream of
typed tokens which a parser then consumes.

Main Components
---------------
- **language**: Token categories, tokens and the scanner
- **cli**: Command-line tools (elylex token dump)

Quick Start
-----------
    >>> from elysabettian import Scanner
    >>> scanner = Scanner("print 42;")
    >>> token = scanner.next_token()
    >>> token.type.name, token.text, token.line
    ('PRINT', 'print', 1)

Or from the command line:
    $ elylex hello.ely
"""

__version__ = "1.0.0"
__author__ = "Elysabettian Contributors"

# =============================================================================
# Public API Exports
# =============================================================================

from elysabettian.errors import ElysabettianError, SourceLocation
from elysabettian.language import (
    KEYWORDS,
    LexicalError,
    Scanner,
    Token,
    TokenType,
    UnexpectedCharacterError,
    UnterminatedStringError,
    check_tokens,
    scan,
)

__all__ = [
    "__version__",
    # Errors
    "ElysabettianError",
    "SourceLocation",
    "LexicalError",
    "UnterminatedStringError",
    "UnexpectedCharacterError",
    # Scanner
    "Scanner",
    "Token",
    "TokenType",
    "KEYWORDS",
    "scan",
    "check_tokens",
]
