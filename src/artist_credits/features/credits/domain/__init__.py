# Path: `src/artist_credits/features/credits/domain/__init__.py`
# Summary: Export token, tree and error types of the credits feature.
# Why: Keep domain imports short for use cases and tests.

from .artists import Artist, ArtistList
from .errors import (
    ArtistCreditsError,
    ArtistListParseError,
    ExpectedArtistNameError,
    ExpectedRightBracketError,
    InsufficientTokensError,
    ParseErrorKind,
)
from .tokens import Token, TokenKind, TokenStream

__all__ = [
    "Artist",
    "ArtistCreditsError",
    "ArtistList",
    "ArtistListParseError",
    "ExpectedArtistNameError",
    "ExpectedRightBracketError",
    "InsufficientTokensError",
    "ParseErrorKind",
    "Token",
    "TokenKind",
    "TokenStream",
]
