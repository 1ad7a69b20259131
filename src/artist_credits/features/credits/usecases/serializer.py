"""
Summary: Render artist trees back to credit strings or plain data.
Why: Give CLI output and round-trip checks a canonical text and JSON form.
"""

from __future__ import annotations

from typing import Any

from artist_credits.features.credits.domain.artists import Artist, ArtistList
from artist_credits.features.credits.usecases.tokenizer import (
    COMMA,
    LEFT_BRACKET,
    RIGHT_BRACKET,
    escape_artist_name,
)


def format_artist_list(artists: ArtistList) -> str:
    """Render ``artists`` as a credit string that parses back to an equal tree.

    Nested groups are walked with an explicit stack, so output depth is not
    bounded by interpreter recursion.
    """

    parts: list[str] = []
    # Delimiters and artists still to write, in reverse order.
    pending: list[Artist | str] = _with_commas(artists)[::-1]

    while pending:
        item = pending.pop()
        if isinstance(item, str):
            parts.append(item)
            continue

        parts.append(escape_artist_name(item.name))
        if item.children is not None:
            pending.append(RIGHT_BRACKET)
            pending.extend(reversed(_with_commas(item.children)))
            pending.append(LEFT_BRACKET)

    return "".join(parts)


def _with_commas(artists: ArtistList) -> list[Artist | str]:
    items: list[Artist | str] = []
    for index, artist in enumerate(artists):
        if index:
            items.append(COMMA)
        items.append(artist)
    return items


def artist_list_to_dict(artists: ArtistList) -> dict[str, Any]:
    """Convert ``artists`` to nested dicts suitable for JSON output.

    Artists without a bracketed group report ``children`` as ``None``.
    """

    root: list[dict[str, Any]] = []
    stack: list[tuple[ArtistList, list[dict[str, Any]]]] = [(artists, root)]

    while stack:
        group, target = stack.pop()
        for artist in group:
            node: dict[str, Any] = {"name": artist.name, "children": None}
            if artist.children is not None:
                children: list[dict[str, Any]] = []
                node["children"] = children
                stack.append((artist.children, children))
            target.append(node)

    return {"artists": root}


__all__ = ["artist_list_to_dict", "format_artist_list"]
