"""
Elysabettian Tokens
===================

Token categories and the immutable Token record produced by the scanner.

Token Categories
----------------
- Punctuation: ( ) [ ] { } , . - + ; / *
- One/two character operators: ! != = == > >= >> < <= <<
- Bitwise operators: & | ^ ~
- Literals: identifiers, numbers, strings
- Keywords: class else false func for if null print return super
  this true var while
- Logical operators: && (AND) and || (OR)
- Sentinels: ERROR, EOF

A token stores the exact lexeme it matched (ERROR tokens store their
message instead) and the line on which the scanner finished it.
"""

from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType
from typing import Mapping

from elysabettian.errors import SourceLocation


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """
    Lexical categories of the Elysabettian language.

    No category carries data; the lexeme lives on the Token.
    """

    # === Single-character Tokens ===
    OPEN_PAREN = auto()         # (
    CLOSE_PAREN = auto()        # )
    OPEN_SQUARE = auto()        # [
    CLOSE_SQUARE = auto()       # ]
    OPEN_CURLY = auto()         # {
    CLOSE_CURLY = auto()        # }
    COMMA = auto()              # ,
    DOT = auto()                # .
    MINUS = auto()              # -
    PLUS = auto()               # +
    SEMICOLON = auto()          # ;
    SLASH = auto()              # /
    STAR = auto()               # *

    # === One or Two Character Tokens ===
    EXCL = auto()               # !
    EXCL_EQUAL = auto()         # !=
    EQUAL = auto()              # =
    EQUAL_EQUAL = auto()        # ==
    GREATER = auto()            # >
    GREATER_EQUAL = auto()      # >=
    GREATER_GREATER = auto()    # >>
    LESS = auto()               # <
    LESS_EQUAL = auto()         # <=
    LESS_LESS = auto()          # <<

    # === Bitwise Operators ===
    BW_AND = auto()             # &
    BW_OR = auto()              # |
    BW_XOR = auto()             # ^
    BW_NOT = auto()             # ~

    # === Literals ===
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # === Keywords (AND and OR are spelled only as && and ||) ===
    AND = auto()                # &&
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUNC = auto()
    FOR = auto()
    IF = auto()
    NULL = auto()
    OR = auto()                 # ||
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # === Sentinels ===
    ERROR = auto()
    EOF = auto()


# =============================================================================
# Keyword Mapping
# =============================================================================

# Reserved words spelled in source. AND and OR are only produced by the
# && and || operators, so they have no spelling here.
KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "func": TokenType.FUNC,
    "if": TokenType.IF,
    "null": TokenType.NULL,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
})


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified lexeme.

    Attributes:
        type: The TokenType classification
        text: The exact source slice matched (the message for ERROR tokens,
              empty for EOF)
        line: Line the scanner was on when the token was finished (1-indexed).
              For a string spanning several lines this is its last line.
    """
    type: TokenType
    text: str
    line: int

    def __repr__(self) -> str:
        """Format token for debugging output."""
        return f"Token({self.type.name}, {self.text!r}, {self.line})"

    @property
    def is_error(self) -> bool:
        """Return True if this token reports a lexical failure."""
        return self.type is TokenType.ERROR

    @property
    def is_eof(self) -> bool:
        """Return True if this token marks the end of input."""
        return self.type is TokenType.EOF

    def location(self, filename: str = "<input>") -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(filename, self.line)
