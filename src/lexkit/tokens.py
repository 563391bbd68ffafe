"""
Token Model
===========

Token types and the immutable Token record produced by the scanner.

Token Categories
----------------
- Literals: numbers, "strings", identifiers
- Punctuation: ( ) { } , . ;
- Arithmetic operators: + - * /
- Relational/equality operators: > >= < <= = == ! !=
- Keywords: identifiers re-tagged through a keyword table
- EOF: end of input marker

Positions
---------
``line`` is 0-based. ``column`` counts the characters consumed since
the start of the source and is not reset at line breaks, so the first
character of the source is at column 1 and the first character after
``"ab\\n"`` is at column 4.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from lexkit.errors import SourceLocation


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """
    Lexical categories recognized by the scanner.

    The set is closed: downstream consumers can match on it exhaustively.
    """

    # === Literals ===
    NUMBER = auto()         # 123
    STR = auto()            # "text"
    IDENTIFIER = auto()     # foo_bar1

    # === Single Character Tokens ===
    LEFT_PAREN = auto()     # (
    RIGHT_PAREN = auto()    # )
    LEFT_BRACE = auto()     # {
    RIGHT_BRACE = auto()    # }
    COMMA = auto()          # ,
    DOT = auto()            # .
    SEMICOLON = auto()      # ;
    PLUS = auto()           # +
    MINUS = auto()          # -
    SLASH = auto()          # /
    STAR = auto()           # *

    # === One or Two Character Tokens ===
    GREATER = auto()        # >
    GREATER_EQUAL = auto()  # >=
    LESS = auto()           # <
    LESS_EQUAL = auto()     # <=
    EQUAL = auto()          # =
    EQUAL_EQUAL = auto()    # ==
    NEG = auto()            # !
    NEG_EQUAL = auto()      # !=

    # === Reserved ===
    KEYWORD = auto()        # identifier found in the keyword table
    EOF = auto()            # end of input

    @property
    def display_name(self) -> str:
        """CamelCase name, e.g. ``GreaterEqual`` for GREATER_EQUAL."""
        if self is TokenType.STR:
            return "Str"
        if self is TokenType.SEMICOLON:
            return "SemiColon"
        return "".join(part.capitalize() for part in self.name.split("_"))


# =============================================================================
# Fixed Text Tables
# =============================================================================

# Characters that always form a token on their own
SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    ";": TokenType.SEMICOLON,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
}

# Operators that become a two-character token when followed by '='
OPERATOR_PAIRS: dict[str, tuple[TokenType, TokenType]] = {
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
    "!": (TokenType.NEG, TokenType.NEG_EQUAL),
}

# Source text of every kind whose text is fixed
FIXED_TEXT: dict[TokenType, str] = {
    **{kind: char for char, kind in SINGLE_CHAR_TOKENS.items()},
    **{single: char for char, (single, _) in OPERATOR_PAIRS.items()},
    **{double: char + "=" for char, (_, double) in OPERATOR_PAIRS.items()},
    TokenType.SLASH: "/",
    TokenType.EOF: "",
}

LITERAL_TYPES = frozenset({
    TokenType.NUMBER,
    TokenType.STR,
    TokenType.IDENTIFIER,
    TokenType.KEYWORD,
})


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified token.

    Attributes:
        type: The TokenType classification
        literal: Text payload for numbers, strings, identifiers and
            keywords; None for punctuation, operators and EOF
        line: Line of the token's first character (0-based)
        column: Running character count at the token's first character
        filename: Name of the source, for diagnostics
    """
    type: TokenType
    literal: Optional[str]
    line: int
    column: int
    filename: str = "<input>"

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.literal is not None:
            return f"Token({self.type.name}, {self.literal!r}, {self.line}:{self.column})"
        return f"Token({self.type.name}, {self.line}:{self.column})"

    def __str__(self) -> str:
        if self.literal is not None:
            return f"tok {self.type.display_name} : {self.literal}"
        return f"tok {self.type.display_name}"

    @property
    def lexeme(self) -> str:
        """The token's source text (string literals exclude the quotes)."""
        if self.literal is not None:
            return self.literal
        return FIXED_TEXT[self.type]

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line, self.column)

    def is_literal(self) -> bool:
        """Return True if this token carries a text payload."""
        return self.type in LITERAL_TYPES

    def is_operator(self) -> bool:
        """Return True if this token is an arithmetic or relational operator."""
        return self.type in (
            TokenType.PLUS,
            TokenType.MINUS,
            TokenType.SLASH,
            TokenType.STAR,
            TokenType.GREATER,
            TokenType.GREATER_EQUAL,
            TokenType.LESS,
            TokenType.LESS_EQUAL,
            TokenType.EQUAL,
            TokenType.EQUAL_EQUAL,
            TokenType.NEG,
            TokenType.NEG_EQUAL,
        )
