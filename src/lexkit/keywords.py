"""
Keyword classification.

The scanner emits every word as an IDENTIFIER; words listed in a keyword
table are then re-tagged as KEYWORD. The default table is empty, so a
language built on lexkit supplies its own through ScannerOptions.
"""

from typing import AbstractSet, Iterable

from lexkit.tokens import Token, TokenType


# Default keyword table. Empty until a language defines its reserved words.
KEYWORDS: frozenset[str] = frozenset()


def is_keyword(name: str, keywords: AbstractSet[str] = KEYWORDS) -> bool:
    """Return True if name is a reserved word in the given table."""
    return name in keywords


def classify_keywords(
    tokens: Iterable[Token],
    keywords: AbstractSet[str] = KEYWORDS,
) -> list[Token]:
    """
    Re-tag identifiers found in the keyword table.

    Returns a new list; each IDENTIFIER token whose literal is in
    ``keywords`` is replaced by a KEYWORD token with the same literal
    and position. All other tokens are passed through unchanged.
    """
    result = []
    for token in tokens:
        if token.type is TokenType.IDENTIFIER and is_keyword(token.literal, keywords):
            token = Token(
                type=TokenType.KEYWORD,
                literal=token.literal,
                line=token.line,
                column=token.column,
                filename=token.filename,
            )
        result.append(token)
    return result
