"""Parse nested full-width artist credit strings into artist trees.

``"Group（Member（RealName））、Guest"`` becomes a two-element top-level list
whose first artist carries a nested group.
"""

from artist_credits.features.credits import (
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
    artist_list_to_dict,
    build_artist_list,
    escape_artist_name,
    format_artist_list,
    parse_artist_list,
    tokenize,
)

__version__ = "0.1.0"

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
