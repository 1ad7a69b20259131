"""
Summary: Single-pass tokenizer for full-width bracketed artist credit strings.
Why: Separate structural delimiters from escaped literal occurrences in names.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Final

from artist_credits.features.credits.domain.tokens import Token, TokenKind, TokenStream

ESCAPE: Final[str] = "\\"
LEFT_BRACKET: Final[str] = "（"
RIGHT_BRACKET: Final[str] = "）"
COMMA: Final[str] = "、"

SPECIAL_CHARACTERS: Final[frozenset[str]] = frozenset({ESCAPE, LEFT_BRACKET, RIGHT_BRACKET, COMMA})

_STRUCTURAL_KINDS: Final[dict[str, TokenKind]] = {
    LEFT_BRACKET: TokenKind.LEFT_BRACKET,
    RIGHT_BRACKET: TokenKind.RIGHT_BRACKET,
    COMMA: TokenKind.COMMA,
}


class _LexerState(Enum):
    NORMAL = auto()
    ESCAPE_NEXT = auto()


def tokenize(text: str) -> TokenStream:
    """Split a credit string into name and delimiter tokens.

    Special characters:
        - ``\\`` escapes the following character.
        - ``、、`` is read as an escaped ``、`` (one literal comma).
        - ``（`` / ``）`` open and close a nested group.
        - A lone ``、`` separates siblings.

    A name token is emitted whenever the span since the previous delimiter is
    non-empty, escape markers included. Names without escapes keep the exact
    input slice; names with escapes are rebuilt and flagged as owned.

    Args:
        text: Raw credit string.

    Returns:
        TokenStream: Tokens in input order. Tokenizing never fails; unmatched
        brackets are reported later by the tree builder.
    """
    tokens: list[Token] = []
    state = _LexerState.NORMAL
    name_start = 0
    # Rebuilt name text, used once the current name needs an escape.
    rebuilt: list[str] = []
    owned = False

    for index, char in enumerate(text):
        if state is _LexerState.ESCAPE_NEXT:
            rebuilt.append(char)
            state = _LexerState.NORMAL
            continue

        if char == ESCAPE or (char == COMMA and text.startswith(COMMA, index + 1)):
            if not owned:
                rebuilt.append(text[name_start:index])
                owned = True
            state = _LexerState.ESCAPE_NEXT
            continue

        kind = _STRUCTURAL_KINDS.get(char)
        if kind is None:
            if owned:
                rebuilt.append(char)
            continue

        if index > name_start:
            tokens.append(_name_token(text, name_start, index, rebuilt, owned))
        rebuilt = []
        owned = False
        tokens.append(Token(kind=kind, text=char, start=index, end=index + 1))
        name_start = index + 1

    if len(text) > name_start:
        tokens.append(_name_token(text, name_start, len(text), rebuilt, owned))

    return TokenStream(tokens, end_offset=len(text))


def _name_token(text: str, start: int, end: int, rebuilt: list[str], owned: bool) -> Token:
    if not owned:
        return Token(kind=TokenKind.NAME, text=text[start:end], start=start, end=end)
    return Token(kind=TokenKind.NAME, text="".join(rebuilt), start=start, end=end, owned=True)


def escape_artist_name(name: str) -> str:
    """Escape special characters so ``name`` tokenizes as a single name.

    The empty name is written as a lone backslash, which is how the tokenizer
    produces one. It only reads back as itself at the end of a credit string.

    Args:
        name: Literal artist name.

    Returns:
        str: Name with each special character prefixed by a backslash.
    """
    if not name:
        return ESCAPE
    if not any(char in SPECIAL_CHARACTERS for char in name):
        return name
    return "".join(ESCAPE + char if char in SPECIAL_CHARACTERS else char for char in name)


__all__ = [
    "COMMA",
    "ESCAPE",
    "LEFT_BRACKET",
    "RIGHT_BRACKET",
    "SPECIAL_CHARACTERS",
    "escape_artist_name",
    "tokenize",
]
