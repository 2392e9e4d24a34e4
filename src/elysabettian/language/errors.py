"""
Lexical Error Hierarchy
=======================

Exceptions describing lexical failures. The scanner reports failures
in-band as ERROR tokens; these classes are what a driver raises when it
decides an ERROR token should abort processing.

Exception Hierarchy
-------------------
LexicalError (base for all lexical errors)
├── UnterminatedStringError - missing closing quote
└── UnexpectedCharacterError - character not part of the language

Example:
    hello.ely:3: error: Unterminated string literal!
        print "Hello;
    hint: close the string with the quote character that opened it
"""

from typing import Optional

from elysabettian.errors import ElysabettianError, SourceLocation


# Messages carried by ERROR tokens
UNTERMINATED_STRING_MESSAGE = "Unterminated string literal!"
UNEXPECTED_CHARACTER_MESSAGE = "Unexpected character."


class LexicalError(ElysabettianError):
    """
    Base exception for all lexical errors.

    Attributes:
        message: The error description
        location: Where in the source the error occurred
        hint: A suggestion for fixing the error
        source_line: The source text of the offending line
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

            hello.ely:3: error: Unterminated string literal!
                print "Hello;
            hint: close the string with the quote character that opened it
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None:
            parts.append(f"    {self.source_line}")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class UnterminatedStringError(LexicalError):
    """
    String literal reached end of input before its closing delimiter.

    Example:
        print "hello    // Missing closing quote
    """

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            UNTERMINATED_STRING_MESSAGE,
            location=location,
            hint="close the string with the quote character that opened it",
            source_line=source_line,
        )


class UnexpectedCharacterError(LexicalError):
    """Character that starts no token of the language."""

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            UNEXPECTED_CHARACTER_MESSAGE,
            location=location,
            source_line=source_line,
        )
