"""
Summary: Parse a credit string into an artist tree in one call.
Why: Combine tokenizing and tree building behind a single entry point.
"""

from __future__ import annotations

import logging

from artist_credits.features.credits.domain.artists import ArtistList
from artist_credits.features.credits.domain.errors import ArtistListParseError
from artist_credits.features.credits.usecases.tokenizer import tokenize
from artist_credits.features.credits.usecases.tree_builder import build_artist_list
from artist_credits.platform.logging import logger


def parse_artist_list(text: str, *, warn_on_trailing_tokens: bool = True) -> ArtistList:
    """Parse ``text`` into an artist tree.

    Args:
        text: Raw credit string, e.g. ``"Group（Member（RealName））、Guest"``.
        warn_on_trailing_tokens: Log tokens left after the top-level list at
            WARNING instead of DEBUG.

    Returns:
        ArtistList: Parsed tree. No partial tree is returned on failure.

    Raises:
        ArtistListParseError: The credit string is structurally malformed.
            The error carries ``text`` as its ``source``.
    """
    tokens = tokenize(text)
    token_count = len(tokens)

    try:
        artists = build_artist_list(tokens)
    except ArtistListParseError as e:
        logger.debug(
            "Failed to parse artist credits: %s",
            e.message,
            extra={
                "credit_event": "credits.parse.error",
                "error_message": e.message,
                "offset": e.offset,
            },
        )
        raise e.with_source(text)

    trailing = list(tokens)
    if trailing:
        logger.log(
            logging.WARNING if warn_on_trailing_tokens else logging.DEBUG,
            "Ignoring %d trailing token(s) after artist list: %s",
            len(trailing),
            "".join(token.text for token in trailing),
            extra={
                "credit_event": "credits.parse.trailing",
                "trailing_count": len(trailing),
                "offset": trailing[0].start,
            },
        )

    logger.debug(
        "Parsed %d artist(s) from %d token(s)",
        len(artists),
        token_count,
        extra={
            "credit_event": "credits.parse.success",
            "artist_count": len(artists),
            "token_count": token_count,
        },
    )
    return artists


__all__ = ["parse_artist_list"]
