"""
Elysabettian Scanner
====================

This module implements the lexical analyzer for the Elysabettian
scripting language. It converts source text into a stream of tokens
for the parser, one token per call to Scanner.next_token().

Recognition
-----------
- Whitespace: space, tab and carriage return are skipped; newlines are
  skipped and counted
- Comments: // to end of line
- Numbers: 123 or 3.14 (one fractional part, no sign, no exponent)
- Identifiers: ASCII letters, digits and underscore
- Keywords: resolved from identifiers by first-character dispatch
- Strings: "..." or '...', may span lines, no escape sequences
- Operators: greedy one/two character resolution (<= before <<, ...)

Errors
------
The scanner never raises. An unterminated string or a character outside
the language produces an ERROR token whose text is the message and whose
line is the line the scanner stopped on. Scanning may continue after an
ERROR token; check_tokens() converts the first one into a LexicalError
for drivers that want exceptions.

Example Usage
-------------
>>> from elysabettian.language.scanner import Scanner
>>> scanner = Scanner("var x = 10;")
>>> for token in scanner.tokenize():
...     print(token)
Token(VAR, 'var', 1)
Token(IDENTIFIER, 'x', 1)
Token(EQUAL, '=', 1)
Token(NUMBER, '10', 1)
Token(SEMICOLON, ';', 1)
Token(EOF, '', 1)
"""

import logging
import string
from typing import Iterable, Iterator, Optional

from elysabettian.errors import SourceLocation
from elysabettian.language.errors import (
    LexicalError,
    UnexpectedCharacterError,
    UnterminatedStringError,
    UNEXPECTED_CHARACTER_MESSAGE,
    UNTERMINATED_STRING_MESSAGE,
)
from elysabettian.language.tokens import Token, TokenType

logger = logging.getLogger(__name__)


# =============================================================================
# Scanner Implementation
# =============================================================================

class Scanner:
    """
    Tokenizes Elysabettian source code.

    The scanner keeps three cursors over an immutable source string: the
    start of the current lexeme, the scan position, and the current line.
    Each call to next_token() skips insignificant input, marks the lexeme
    start and recognizes exactly one token. Lookahead is limited to two
    characters and nothing is ever pushed back.

    A scanner is single-use: once EOF has been returned every further
    call returns EOF again. Scan a new source with a new Scanner.

    Usage:
        scanner = Scanner(source_text, filename)
        tokens = list(scanner.tokenize())

    Attributes:
        source: The source code being tokenized
        filename: Name of the source file (for diagnostics)
    """

    # Characters that start a number
    DIGITS = frozenset(string.digits)

    # Characters that start or continue an identifier
    IDENT_CHARS = frozenset(string.ascii_letters + string.digits + "_")

    # Characters that open (and close) a string literal
    STRING_DELIMITERS = frozenset("\"'")

    def __init__(self, source: str, filename: str = "<input>"):
        """
        Initialize the scanner with source code.

        Args:
            source: The source code to tokenize
            filename: Name of the source file (for error messages)
        """
        self.source = source
        self.filename = filename

        self._start = 0
        self._current = 0
        self._line = 1

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()

    @property
    def line(self) -> int:
        """Line the scanner is currently on (1-indexed)."""
        return self._line

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens until end of input.

        ERROR tokens are yielded like any other token; the EOF token is
        always the last one yielded.

        Yields:
            Token objects representing each lexical element
        """
        count = 0
        errors = 0
        while True:
            token = self.next_token()
            count += 1
            if token.is_error:
                errors += 1
            yield token
            if token.is_eof:
                logger.debug(
                    f"Scanned {self.filename}: {count} tokens, {errors} errors, "
                    f"{self._line} lines"
                )
                return

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Returns:
            The next Token; EOF once the source is exhausted
        """
        self._skip_whitespace()
        self._start = self._current

        if self._at_end():
            return self._make_token(TokenType.EOF)

        char = self._advance()

        if char in self.DIGITS:
            return self._number()
        if char in self.IDENT_CHARS:
            return self._identifier()

        if char == "(":
            return self._make_token(TokenType.OPEN_PAREN)
        if char == ")":
            return self._make_token(TokenType.CLOSE_PAREN)
        if char == "[":
            return self._make_token(TokenType.OPEN_SQUARE)
        if char == "]":
            return self._make_token(TokenType.CLOSE_SQUARE)
        if char == "{":
            return self._make_token(TokenType.OPEN_CURLY)
        if char == "}":
            return self._make_token(TokenType.CLOSE_CURLY)
        if char == ";":
            return self._make_token(TokenType.SEMICOLON)
        if char == ",":
            return self._make_token(TokenType.COMMA)
        if char == ".":
            return self._make_token(TokenType.DOT)
        if char == "-":
            return self._make_token(TokenType.MINUS)
        if char == "+":
            return self._make_token(TokenType.PLUS)
        if char == "/":
            return self._make_token(TokenType.SLASH)
        if char == "*":
            return self._make_token(TokenType.STAR)
        if char == "^":
            return self._make_token(TokenType.BW_XOR)
        if char == "~":
            return self._make_token(TokenType.BW_NOT)

        # Two character operators
        if char == "&":
            if self._match_token("&"):
                return self._make_token(TokenType.AND)
            return self._make_token(TokenType.BW_AND)

        if char == "|":
            if self._match_token("|"):
                return self._make_token(TokenType.OR)
            return self._make_token(TokenType.BW_OR)

        if char == "!":
            if self._match_token("="):
                return self._make_token(TokenType.EXCL_EQUAL)
            return self._make_token(TokenType.EXCL)

        if char == "=":
            if self._match_token("="):
                return self._make_token(TokenType.EQUAL_EQUAL)
            return self._make_token(TokenType.EQUAL)

        if char == "<":
            if self._match_token("="):
                return self._make_token(TokenType.LESS_EQUAL)
            if self._match_token("<"):
                return self._make_token(TokenType.LESS_LESS)
            return self._make_token(TokenType.LESS)

        if char == ">":
            if self._match_token("="):
                return self._make_token(TokenType.GREATER_EQUAL)
            if self._match_token(">"):
                return self._make_token(TokenType.GREATER_GREATER)
            return self._make_token(TokenType.GREATER)

        if char in self.STRING_DELIMITERS:
            return self._string(char)

        return self._error_token(UNEXPECTED_CHARACTER_MESSAGE)

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        """Check if we've reached the end of source."""
        return self._current >= len(self.source)

    def _advance(self) -> str:
        """Consume and return the current character."""
        self._current += 1
        return self.source[self._current - 1]

    def _peek(self) -> str:
        """Current character, or empty string at end of source."""
        if self._at_end():
            return ""
        return self.source[self._current]

    def _peek_next(self) -> str:
        """Character after the current one, or empty string past the end."""
        if self._current + 1 >= len(self.source):
            return ""
        return self.source[self._current + 1]

    def _match_token(self, expected: str) -> bool:
        """
        Consume the current character if it matches expected.

        Returns:
            True if matched and consumed, False otherwise
        """
        if self._peek() != expected:
            return False
        self._current += 1
        return True

    # =========================================================================
    # Token Creation
    # =========================================================================

    def _make_token(self, token_type: TokenType) -> Token:
        """Create a token from the current lexeme and line."""
        return Token(token_type, self.source[self._start:self._current], self._line)

    def _error_token(self, message: str) -> Token:
        """Create an ERROR token carrying message instead of a lexeme."""
        logger.debug(f"{self.filename}:{self._line}: {message}")
        return Token(TokenType.ERROR, message, self._line)

    # =========================================================================
    # Whitespace and Comment Handling
    # =========================================================================

    def _skip_whitespace(self) -> None:
        """Skip whitespace, newlines and // comments."""
        while True:
            char = self._peek()

            if char in (" ", "\r", "\t"):
                self._advance()
            elif char == "\n":
                self._line += 1
                self._advance()
            elif char == "/" and self._peek_next() == "/":
                # The newline ending the comment is left for the next pass
                while self._peek() != "\n" and not self._at_end():
                    self._advance()
            else:
                return

    # =========================================================================
    # Identifiers and Keywords
    # =========================================================================

    def _check_keyword(
        self,
        pos: int,
        length: int,
        rest: str,
        token_type: TokenType,
    ) -> TokenType:
        """
        Return token_type if the lexeme is exactly its first pos characters
        followed by rest, IDENTIFIER otherwise.
        """
        begin = self._start + pos
        if (
            self._current - self._start == pos + length
            and self.source[begin:begin + length] == rest
        ):
            return token_type
        return TokenType.IDENTIFIER

    def _identifier_type(self) -> TokenType:
        """Classify the current lexeme as a keyword or an identifier."""
        first = self.source[self._start]

        if first == "c":
            return self._check_keyword(1, 4, "lass", TokenType.CLASS)
        if first == "e":
            return self._check_keyword(1, 3, "lse", TokenType.ELSE)
        if first == "f" and self._current - self._start > 1:
            second = self.source[self._start + 1]
            if second == "a":
                return self._check_keyword(2, 3, "lse", TokenType.FALSE)
            if second == "o":
                return self._check_keyword(2, 1, "r", TokenType.FOR)
            if second == "u":
                return self._check_keyword(2, 2, "nc", TokenType.FUNC)
        if first == "i":
            return self._check_keyword(1, 1, "f", TokenType.IF)
        if first == "n":
            return self._check_keyword(1, 3, "ull", TokenType.NULL)
        if first == "p":
            return self._check_keyword(1, 4, "rint", TokenType.PRINT)
        if first == "r":
            return self._check_keyword(1, 5, "eturn", TokenType.RETURN)
        if first == "s":
            return self._check_keyword(1, 4, "uper", TokenType.SUPER)
        if first == "t" and self._current - self._start > 1:
            second = self.source[self._start + 1]
            if second == "h":
                return self._check_keyword(2, 2, "is", TokenType.THIS)
            if second == "r":
                return self._check_keyword(2, 2, "ue", TokenType.TRUE)
        if first == "v":
            return self._check_keyword(1, 2, "ar", TokenType.VAR)
        if first == "w":
            return self._check_keyword(1, 4, "hile", TokenType.WHILE)

        return TokenType.IDENTIFIER

    def _identifier(self) -> Token:
        """Scan the rest of an identifier or keyword."""
        while self._peek() in self.IDENT_CHARS:
            self._advance()
        return self._make_token(self._identifier_type())

    # =========================================================================
    # Literals
    # =========================================================================

    def _number(self) -> Token:
        """Scan the rest of a number: digits, optionally '.' and more digits."""
        while self._peek() in self.DIGITS:
            self._advance()

        if self._peek() == "." and self._peek_next() in self.DIGITS:
            self._advance()  # consume .
            while self._peek() in self.DIGITS:
                self._advance()

        return self._make_token(TokenType.NUMBER)

    def _string(self, open_char: str) -> Token:
        """
        Scan the rest of a string literal opened by open_char.

        Newlines inside the string are counted but do not end it, so the
        token is reported on the line of its closing delimiter.
        """
        while self._peek() != open_char and not self._at_end():
            if self._peek() == "\n":
                self._line += 1
            self._advance()

        if self._at_end():
            return self._error_token(UNTERMINATED_STRING_MESSAGE)

        self._advance()  # consume closing delimiter
        return self._make_token(TokenType.STRING)


# =============================================================================
# Convenience Functions
# =============================================================================

def scan(source: str, filename: str = "<input>") -> list[Token]:
    """
    Scan source completely and return all tokens, EOF included.

    Args:
        source: The source code to tokenize
        filename: Name of the source file (for diagnostics)

    Returns:
        List of tokens ending with the EOF token
    """
    return list(Scanner(source, filename).tokenize())


def _source_line(source: str, line: int) -> Optional[str]:
    """Return the text of a 1-indexed source line, or None if out of range."""
    lines = source.split("\n")
    if 1 <= line <= len(lines):
        return lines[line - 1]
    return None


def check_tokens(
    tokens: Iterable[Token],
    source: str,
    filename: str = "<input>",
) -> list[Token]:
    """
    Raise the first ERROR token in tokens as a LexicalError.

    Args:
        tokens: Tokens produced by scanning source
        source: The scanned source (for the offending line's text)
        filename: Name of the source file (for the error location)

    Returns:
        The tokens as a list, if none of them is an ERROR token

    Raises:
        UnterminatedStringError: For an unterminated string literal
        UnexpectedCharacterError: For a character outside the language
        LexicalError: For any other ERROR token
    """
    tokens = list(tokens)
    for token in tokens:
        if not token.is_error:
            continue

        location = SourceLocation(filename, token.line)
        source_line = _source_line(source, token.line)

        if token.text == UNTERMINATED_STRING_MESSAGE:
            raise UnterminatedStringError(location, source_line)
        if token.text == UNEXPECTED_CHARACTER_MESSAGE:
            raise UnexpectedCharacterError(location, source_line)
        raise LexicalError(token.text, location, source_line=source_line)

    return tokens
