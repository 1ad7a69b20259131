# Path: `src/artist_credits/features/credits/__init__.py`
# Summary: Export the credits feature domain and use case symbols.
# Why: Provide a stable import surface for the package root and the CLI.

from .domain import (
    Artist,
    ArtistCreditsError,
    ArtistList,
    ArtistListParseError,
    ExpectedArtistNameError,
    ExpectedRightBracketError,
    InsufficientTokensError,
    ParseErrorKind,
    Token,
    TokenKind,
    TokenStream,
)
from .usecases import (
    artist_list_to_dict,
    build_artist_list,
    escape_artist_name,
    format_artist_list,
    parse_artist_list,
    tokenize,
)

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
    "artist_list_to_dict",
    "build_artist_list",
    "escape_artist_name",
    "format_artist_list",
    "parse_artist_list",
    "tokenize",
]
