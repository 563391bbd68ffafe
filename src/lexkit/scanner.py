"""
Scanner
=======

This module implements the single-pass scanner that turns source text
into a list of tokens.

Each character is consumed once and classified by its first character;
the only lookahead is a single peeked character, used to recognize
two-character operators, line comments, and the end of numbers and
identifiers.

Dispatch Rules
--------------
| First character        | Result                                      |
|------------------------|---------------------------------------------|
| ( ) { } , . ; + - *    | single-character token                      |
| /                      | line comment when followed by /, else SLASH |
| = < > !                | two-character token when followed by =      |
| "                      | string literal (may span lines)             |
| 0-9                    | number                                      |
| a-z A-Z _              | identifier (or keyword)                     |
| space, tab, CR, LF ... | skipped; LF starts a new line               |
| anything else          | UnsupportedCharacterError                   |

Example Usage
-------------
>>> from lexkit import lex
>>> for token in lex('x = 12; // answer'):
...     print(repr(token))
Token(IDENTIFIER, 'x', 0:1)
Token(EQUAL, 0:3)
Token(NUMBER, '12', 0:5)
Token(SEMICOLON, 0:7)
Token(EOF, 0:17)
"""

from dataclasses import dataclass, field
from typing import List, Optional
import logging
import string

from lexkit.errors import (
    LexError,
    LexErrorCollector,
    SourceLocation,
    UnsupportedCharacterError,
    UnterminatedStringError,
)
from lexkit.keywords import is_keyword
from lexkit.options import ScannerOptions, resolve_options
from lexkit.tokens import OPERATOR_PAIRS, SINGLE_CHAR_TOKENS, Token, TokenType


logger = logging.getLogger(__name__)


@dataclass
class ScanResult:
    """
    Outcome of one scan.

    Attributes:
        tokens: Tokens scanned, in source order
        errors: Errors recorded under the COLLECT policy (always empty
            with FAIL_FAST, which raises instead)
    """
    tokens: List[Token] = field(default_factory=list)
    errors: List[LexError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0


class Scanner:
    """
    Scans one source string into tokens.

    The scanner owns all of its state (cursor, line, column and output
    buffer); nothing is shared between instances. Calling scan() again
    rescans the source from the start.

    Usage:
        scanner = Scanner(source_text, ScannerOptions(filename="main.src"))
        result = scanner.scan()

    Attributes:
        source: The source text being scanned
        options: The scanner configuration
        errors: Collector holding errors recorded under COLLECT
    """

    DIGITS = string.digits

    # Characters that can start an identifier
    IDENT_START = string.ascii_letters + "_"

    # Characters that can continue an identifier
    IDENT_CHARS = string.ascii_letters + string.digits + "_"

    WHITESPACE = " \t\r\n\v\f"

    def __init__(self, source: str, options: Optional[ScannerOptions] = None):
        """
        Initialize the scanner with source text.

        Args:
            source: The complete source text to scan
            options: Scanner configuration (uses defaults if None)
        """
        self.source = source
        self.options = resolve_options(options)
        self.errors = LexErrorCollector(self.options.max_errors)
        self._reset()

    def _reset(self) -> None:
        self._pos = 0
        self._line = 0
        self._column = 0

        # Offset of the first character of the current line
        self._line_start_pos = 0

        self._tokens: List[Token] = []
        self._stopped = False
        self.errors.clear()

    def scan(self) -> ScanResult:
        """
        Scan the whole source.

        Returns:
            ScanResult holding the tokens and any collected errors

        Raises:
            LexError: On the first lexical error under FAIL_FAST
        """
        self._reset()
        logger.debug(
            f"Scanning {self.options.filename} "
            f"({len(self.source)} characters, policy {self.options.error_policy.value})"
        )

        while not self._at_end() and not self._stopped:
            self._scan_token()

        if self.options.emit_eof:
            self._add_token(TokenType.EOF, None, self._line, self._column)

        logger.debug(
            f"Scanned {len(self._tokens)} tokens from {self.options.filename} "
            f"with {self.errors.error_count()} errors"
        )
        return ScanResult(tokens=list(self._tokens), errors=list(self.errors.errors))

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        """Check if we've reached the end of source."""
        return self._pos >= len(self.source)

    def _peek(self) -> str:
        """
        Look at the next character without consuming it.

        Returns empty string if past end of source.
        """
        if self._at_end():
            return ""
        return self.source[self._pos]

    def _advance(self) -> str:
        """
        Consume and return the next character.

        Every consumed character increments the column; a newline also
        starts a new line.
        """
        char = self.source[self._pos]
        self._pos += 1
        self._column += 1

        if char == "\n":
            self._line += 1
            self._line_start_pos = self._pos

        return char

    def _match(self, expected: str) -> bool:
        """Consume the next character if it is expected."""
        if self._peek() == expected:
            self._advance()
            return True
        return False

    # =========================================================================
    # Token and Error Creation
    # =========================================================================

    def _add_token(
        self,
        token_type: TokenType,
        literal: Optional[str],
        line: int,
        column: int,
    ) -> None:
        self._tokens.append(
            Token(
                type=token_type,
                literal=literal,
                line=line,
                column=column,
                filename=self.options.filename,
            )
        )

    def _report(self, error: LexError) -> None:
        """
        Raise or record a lexical error, according to the error policy.
        """
        if not self.options.collect_errors:
            raise error

        self.errors.add(error)
        logger.debug(f"Recorded lexical error at {error.location}: {error.message}")

        if self.errors.should_stop():
            logger.warning(
                f"Stopping scan of {self.options.filename} after "
                f"{self.errors.error_count()} errors"
            )
            self._stopped = True

    def _error_context(self, line_start_pos: int, column: int) -> tuple[str, int]:
        """
        Return the source line starting at line_start_pos and the caret
        offset of the character consumed at column.
        """
        line_end = self.source.find("\n", line_start_pos)
        if line_end == -1:
            line_end = len(self.source)
        source_line = self.source[line_start_pos:line_end]
        return source_line, column - 1 - line_start_pos

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_token(self) -> None:
        """Consume one character and dispatch on it."""
        start_line = self._line
        line_start_pos = self._line_start_pos

        char = self._advance()
        start_column = self._column

        if char in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[char], None, start_line, start_column)

        elif char == "/":
            if self._match("/"):
                self._skip_line_comment()
            else:
                self._add_token(TokenType.SLASH, None, start_line, start_column)

        elif char in OPERATOR_PAIRS:
            single, double = OPERATOR_PAIRS[char]
            token_type = double if self._match("=") else single
            self._add_token(token_type, None, start_line, start_column)

        elif char == '"':
            self._scan_string(start_line, start_column, line_start_pos)

        elif char in self.DIGITS:
            self._scan_number(char, start_line, start_column)

        elif char in self.IDENT_START:
            self._scan_identifier(char, start_line, start_column)

        elif char in self.WHITESPACE:
            pass

        else:
            source_line, caret = self._error_context(line_start_pos, start_column)
            self._report(
                UnsupportedCharacterError(
                    char,
                    SourceLocation(self.options.filename, start_line, start_column),
                    source_line,
                    caret,
                )
            )

    def _skip_line_comment(self) -> None:
        """Skip the rest of a // comment, including its newline."""
        while not self._at_end() and self._peek() != "\n":
            self._advance()

        # Comment may run to end of input without a newline
        if not self._at_end():
            self._advance()

    def _scan_string(self, start_line: int, start_column: int, line_start_pos: int) -> None:
        """
        Scan a string literal after its opening quote.

        The literal is taken verbatim; newlines are part of it and no
        escape sequences are processed.
        """
        chars = []
        while not self._at_end():
            char = self._advance()
            if char == '"':
                self._add_token(TokenType.STR, "".join(chars), start_line, start_column)
                return
            chars.append(char)

        source_line, caret = self._error_context(line_start_pos, start_column)
        self._report(
            UnterminatedStringError(
                SourceLocation(self.options.filename, start_line, start_column),
                source_line,
                caret,
            )
        )

    def _scan_number(self, first: str, start_line: int, start_column: int) -> None:
        """Scan a run of decimal digits, leaving the first non-digit."""
        chars = [first]
        while self._peek() and self._peek() in self.DIGITS:
            chars.append(self._advance())

        self._add_token(TokenType.NUMBER, "".join(chars), start_line, start_column)

    def _scan_identifier(self, first: str, start_line: int, start_column: int) -> None:
        """
        Scan an identifier or keyword.

        Identifiers start with a letter or underscore and continue with
        letters, digits and underscores. The first other character is
        left for the next token.
        """
        chars = [first]
        while self._peek() and self._peek() in self.IDENT_CHARS:
            chars.append(self._advance())

        name = "".join(chars)

        if is_keyword(name, self.options.keywords):
            self._add_token(TokenType.KEYWORD, name, start_line, start_column)
        else:
            self._add_token(TokenType.IDENTIFIER, name, start_line, start_column)


# =============================================================================
# Convenience Functions
# =============================================================================

def lex(source: str, options: Optional[ScannerOptions] = None) -> list[Token]:
    """
    Scan source text into a list of tokens.

    Args:
        source: The complete source text
        options: Scanner configuration (uses defaults if None)

    Returns:
        The tokens in source order, ending with EOF unless disabled

    Raises:
        LexError: The first error under FAIL_FAST
        LexErrorGroup: Every collected error under COLLECT
    """
    scanner = Scanner(source, options)
    result = scanner.scan()
    scanner.errors.raise_if_errors(result.tokens)
    return result.tokens
