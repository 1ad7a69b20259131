"""
Summary: Structural parse errors raised while building the artist tree.
Why: Report malformed credit strings with a typed kind and an input position.
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

from rich.cells import cell_len


class ParseErrorKind(Enum):
    """Kinds of structural mismatch detected by the tree builder."""

    INSUFFICIENT_TOKENS = "insufficient_tokens"
    EXPECTED_ARTIST_NAME = "expected_artist_name"
    EXPECTED_RIGHT_BRACKET = "expected_right_bracket"


class ArtistCreditsError(Exception):
    """Base exception for artist credit processing."""


class ArtistListParseError(ArtistCreditsError):
    """Raised when a token stream does not form a valid artist list.

    Attributes:
        kind: Error category.
        offset: Input offset where the mismatch was detected.
        token_index: Index of the offending token, or the token count when
            the stream ended early.
        source: Original input, attached by the parse facade for rendering.
    """

    kind: ClassVar[ParseErrorKind]
    message: ClassVar[str]

    offset: int
    token_index: int
    source: str | None

    def __init__(self, *, offset: int, token_index: int, source: str | None = None) -> None:
        self.offset = offset
        self.token_index = token_index
        self.source = source
        super().__init__(self.message)

    def with_source(self, source: str) -> ArtistListParseError:
        """Attach the parsed input so the message can point at the offset."""

        self.source = source
        return self

    def __str__(self) -> str:
        if self.source is None:
            return f"{self.message} (offset {self.offset}, token {self.token_index})"
        return (
            f"{self.message} at offset {self.offset}:\n"
            f"    {self.source}\n"
            f"    {' ' * cell_len(self.source[: self.offset])}^"
        )


class InsufficientTokensError(ArtistListParseError):
    """The token stream ended where an artist name was required."""

    kind = ParseErrorKind.INSUFFICIENT_TOKENS
    message = "Insufficient tokens"


class ExpectedArtistNameError(ArtistListParseError):
    """A bracket or comma appeared where an artist name was required."""

    kind = ParseErrorKind.EXPECTED_ARTIST_NAME
    message = "Expected artist name"


class ExpectedRightBracketError(ArtistListParseError):
    """A nested group was not closed by a right bracket."""

    kind = ParseErrorKind.EXPECTED_RIGHT_BRACKET
    message = "Expected right bracket"


__all__ = [
    "ArtistCreditsError",
    "ArtistListParseError",
    "ExpectedArtistNameError",
    "ExpectedRightBracketError",
    "InsufficientTokensError",
    "ParseErrorKind",
]
