"""
lexkit - Lexical Scanner
========================

This package provides the lexical scanner for a small C-family language:
it converts a complete source string into an ordered list of classified
tokens, the first stage of a language front end.

Main Components
---------------
- **scanner**: the single-pass Scanner and the ``lex`` convenience function
- **tokens**: TokenType and the immutable Token record
- **keywords**: keyword table and the IDENTIFIER to KEYWORD mapping
- **options**: ScannerOptions (error policy, EOF emission, keywords)
- **errors**: position-tagged lexical errors and error collection

Quick Start
-----------
    >>> from lexkit import lex, TokenType
    >>> [t.type.name for t in lex("a >= 10")]
    ['IDENTIFIER', 'GREATER_EQUAL', 'NUMBER', 'EOF']

Collect every error instead of stopping at the first:
    >>> from lexkit import Scanner, ScannerOptions, ErrorPolicy
    >>> result = Scanner("a @ b # c", ScannerOptions(error_policy=ErrorPolicy.COLLECT)).scan()
    >>> len(result.errors)
    2
"""

__version__ = "1.0.0"
__author__ = "lexkit Contributors"

# =============================================================================
# Public API Exports
# =============================================================================

from lexkit.errors import (
    LexkitError,
    SourceLocation,
    LexError,
    UnsupportedCharacterError,
    UnterminatedStringError,
    LexErrorGroup,
    LexErrorCollector,
)
from lexkit.tokens import Token, TokenType
from lexkit.keywords import KEYWORDS, classify_keywords, is_keyword
from lexkit.options import ErrorPolicy, ScannerOptions
from lexkit.scanner import Scanner, ScanResult, lex

__all__ = [
    # Version info
    "__version__",
    "__author__",
    # Scanner
    "Scanner",
    "ScanResult",
    "lex",
    # Tokens
    "Token",
    "TokenType",
    # Keywords
    "KEYWORDS",
    "classify_keywords",
    "is_keyword",
    # Configuration
    "ErrorPolicy",
    "ScannerOptions",
    # Exception hierarchy
    "LexkitError",
    "SourceLocation",
    "LexError",
    "UnsupportedCharacterError",
    "UnterminatedStringError",
    "LexErrorGroup",
    "LexErrorCollector",
]
