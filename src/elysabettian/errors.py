"""
Elysabettian Error Hierarchy
============================

This module defines the root of the exception hierarchy for the
Elysabettian toolchain. All exceptions inherit from ElysabettianError,
allowing callers to catch every toolchain error with a single except
clause if desired.

Exception Hierarchy
-------------------
ElysabettianError (base)
└── LexicalError (elysabettian.language.errors)
    ├── UnterminatedStringError - string literal never closed
    └── UnexpectedCharacterError - character outside the language

The scanner itself never raises these: lexical failures travel in-band
as ERROR tokens. Drivers that prefer exceptions convert those tokens with
elysabettian.language.scanner.check_tokens().

Error messages follow this format:
    filename:line: error: description
        source_line_text
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass


# =============================================================================
# Base Exception Class
# =============================================================================

class ElysabettianError(Exception):
    """
    Base exception for all Elysabettian toolchain errors.

        try:
            check_tokens(scan(source), source)
        except ElysabettianError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Tokens only record the line they were recognized on, so a location
    is a filename plus a 1-based line number.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
    """
    filename: str
    line: int

    def __str__(self) -> str:
        """Format as 'filename:line' for error messages."""
        return f"{self.filename}:{self.line}"
