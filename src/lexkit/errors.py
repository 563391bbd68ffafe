"""
lexkit Error Hierarchy
======================

This module defines the exception hierarchy for the scanner. All
exceptions inherit from LexkitError, allowing callers to catch every
lexkit error with a single except clause if desired.

Exception Hierarchy
-------------------
LexkitError (base)
└── LexError - position-tagged lexical error
    ├── UnsupportedCharacterError - character no rule can classify
    ├── UnterminatedStringError - string literal missing its closing quote
    └── LexErrorGroup - several errors collected during one scan

Error Message Format
--------------------
Every lexical error carries the location where it occurred. Lines are
0-based; columns count characters consumed since the start of the
source, so they are not reset at line breaks:

    example.src:2:17: error: unsupported character '@' (0x40)
        total = a @ b
                  ^
    hint: remove the character or place it inside a string literal

The scanner never prints these messages itself. Rendering them is up to
the caller.
"""

from dataclasses import dataclass
from typing import List, Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class LexkitError(Exception):
    """
    Base exception for all lexkit errors.

        try:
            tokens = lex(source)
        except LexkitError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source text for error reporting.

    Attributes:
        filename: Name of the source (or "<input>" for string input)
        line: Line number (0-based)
        column: Characters consumed from the start of the source (1-based)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Lexical Errors
# =============================================================================

class LexError(LexkitError):
    """
    Base exception for lexical errors.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The source text of the line holding the error (optional)
        caret: Offset of the offending character within source_line (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
        caret: Optional[int] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        self.caret = caret
        super().__init__(self._format_message())

    @property
    def line(self) -> Optional[int]:
        """Line of the error, or None when no location is known."""
        return self.location.line if self.location else None

    @property
    def column(self) -> Optional[int]:
        """Column of the error, or None when no location is known."""
        return self.location.column if self.location else None

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            <input>:0:5: error: unterminated string literal
                x = "abc
                    ^
            hint: add closing '"' to complete the string
        """
        parts = []

        # Location prefix
        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Source context with caret pointer
        if self.source_line is not None:
            parts.append(f"    {self.source_line}")
            if self.caret is not None and self.caret >= 0:
                padding = " " * (4 + self.caret)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class UnsupportedCharacterError(LexError):
    """
    Character that does not start any token.

    Raised when the scanner meets a character outside the punctuation,
    operator, quote, digit, letter and whitespace sets. With the
    COLLECT error policy the scanner records it and resumes after the
    offending character.
    """

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
        caret: Optional[int] = None,
    ):
        self.char = char
        super().__init__(
            f"unsupported character {char!r} (0x{ord(char):02X})",
            location=location,
            hint="remove the character or place it inside a string literal",
            source_line=source_line,
            caret=caret,
        )


class UnterminatedStringError(LexError):
    """
    Unterminated string literal.

    Raised when the input ends before the closing quote of a string.
    Strings may span lines, so this only happens at end of input. The
    location points at the opening quote.

    Example:
        greeting = "hello
    """

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
        caret: Optional[int] = None,
    ):
        super().__init__(
            "unterminated string literal",
            location=location,
            hint="add closing '\"' to complete the string",
            source_line=source_line,
            caret=caret,
        )


class LexErrorGroup(LexError):
    """
    Aggregate of the errors collected during one scan.

    The message is the collector's formatted report and is passed
    through as-is. The tokens scanned before and between the errors are
    kept so callers can still inspect them.
    """

    def __init__(self, errors: List[LexError], tokens: Optional[list] = None, report: str = ""):
        self.errors = list(errors)
        self.tokens = list(tokens or [])
        super().__init__(report or f"{len(self.errors)} lexical errors")

    def _format_message(self) -> str:
        """Return message as-is - it's already a formatted report."""
        return self.message


# =============================================================================
# Error Collection (for multi-error reporting)
# =============================================================================

class LexErrorCollector:
    """
    Collects lexical errors for batch reporting.

    The scanner uses this under the COLLECT error policy to keep going
    after an error, so that every problem in a source is reported in
    one run.

    Example:
        collector = LexErrorCollector(max_errors=100)
        collector.add(UnsupportedCharacterError("@", location))
        if collector.should_stop():
            ...
        collector.raise_if_errors(tokens)
    """

    def __init__(self, max_errors: int = 100):
        """
        Initialize the error collector.

        Args:
            max_errors: Number of errors after which scanning should stop
        """
        self.errors: List[LexError] = []
        self.max_errors = max_errors

    def add(self, error: LexError) -> None:
        """Add an error to the collection."""
        self.errors.append(error)

    def has_errors(self) -> bool:
        """Return True if any errors have been collected."""
        return len(self.errors) > 0

    def should_stop(self) -> bool:
        """Return True if max_errors has been reached."""
        return len(self.errors) >= self.max_errors

    def error_count(self) -> int:
        """Return the number of collected errors."""
        return len(self.errors)

    def report(self) -> str:
        """Format all errors for display."""
        lines = []

        for error in self.errors:
            lines.append(str(error))
            lines.append("")  # Blank line between errors

        error_word = "error" if len(self.errors) == 1 else "errors"
        lines.append(f"{len(self.errors)} {error_word}")

        return "\n".join(lines)

    def clear(self) -> None:
        """Clear all collected errors."""
        self.errors.clear()

    def raise_if_errors(self, tokens: Optional[list] = None) -> None:
        """Raise a LexErrorGroup if any errors were collected."""
        if self.has_errors():
            raise LexErrorGroup(self.errors, tokens, self.report())
