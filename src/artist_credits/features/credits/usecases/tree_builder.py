"""
Summary: Build the artist tree from a token stream.
Why: Apply the credit grammar with one-token push-back and typed errors.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from artist_credits.features.credits.domain.artists import Artist, ArtistList
from artist_credits.features.credits.domain.errors import (
    ExpectedArtistNameError,
    ExpectedRightBracketError,
    InsufficientTokensError,
)
from artist_credits.features.credits.domain.tokens import Token, TokenStream


@dataclass(slots=True)
class _OpenGroup:
    """An artist whose bracketed group is still being read."""

    name: str
    siblings: list[Artist]
    members: list[Artist] = field(default_factory=list)


def build_artist_list(tokens: TokenStream) -> ArtistList:
    """Consume ``tokens`` and return the top-level artist list.

    Grammar::

        ArtistList := ArtistName ( '（' ArtistList '）' )? ( '、' ArtistList )?

    A nested group is read before any comma continuation, so ``A（B）、C``
    yields ``A`` with child ``B`` followed by sibling ``C``. A name or right
    bracket that follows a name ends the current group and is pushed back
    for the enclosing level. Tokens left after the top-level group are not
    consumed and stay in ``tokens``.

    Open groups are tracked on an explicit stack, so deep nesting and long
    sibling chains do not consume interpreter recursion.

    Args:
        tokens: Stream produced by the tokenizer. It is drained in place.

    Returns:
        ArtistList: Parsed tree.

    Raises:
        InsufficientTokensError: The stream ended where a name was required.
        ExpectedArtistNameError: A delimiter appeared where a name was required.
        ExpectedRightBracketError: A nested group was not closed.
    """
    top_level: list[Artist] = []
    current = top_level
    open_groups: list[_OpenGroup] = []

    while True:
        name = _expect_name(tokens)
        pending = tokens.pop()

        if pending is not None and pending.is_left_bracket:
            group = _OpenGroup(name=name.text, siblings=current)
            open_groups.append(group)
            current = group.members
            continue

        current.append(Artist(name=name.text))

        # Close finished groups until a comma continues one of them.
        while pending is None or not pending.is_comma:
            if pending is not None:
                tokens.push_back(pending)
            if not open_groups:
                return ArtistList(tuple(top_level))

            group = open_groups.pop()
            _expect_right_bracket(tokens)
            group.siblings.append(
                Artist(name=group.name, children=ArtistList(tuple(group.members)))
            )
            current = group.siblings
            pending = tokens.pop()


def _expect_name(tokens: TokenStream) -> Token:
    token = tokens.pop()
    if token is None:
        raise InsufficientTokensError(offset=tokens.end_offset, token_index=tokens.position)
    if not token.is_name:
        raise ExpectedArtistNameError(offset=token.start, token_index=tokens.position - 1)
    return token


def _expect_right_bracket(tokens: TokenStream) -> None:
    token = tokens.pop()
    if token is None:
        raise ExpectedRightBracketError(offset=tokens.end_offset, token_index=tokens.position)
    if not token.is_right_bracket:
        raise ExpectedRightBracketError(offset=token.start, token_index=tokens.position - 1)


__all__ = ["build_artist_list"]
