"""
Summary: Immutable artist tree produced by parsing a credit string.
Why: Give callers ordered sibling groups with optional nested sub-credits.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import final, overload


@final
@dataclass(frozen=True, slots=True)
class Artist:
    """A single credited artist.

    Attributes:
        name: Display name with escapes resolved.
        children: Nested group that followed the name in brackets, if any.
    """

    name: str
    children: ArtistList | None = None

    @property
    def has_children(self) -> bool:
        """Return whether the artist was followed by a bracketed group."""

        return self.children is not None


@final
@dataclass(frozen=True, slots=True)
class ArtistList:
    """Ordered sibling group at one nesting level.

    The first entry is the primary credit; later entries come from comma
    continuation at the same level.
    """

    artists: tuple[Artist, ...] = field(default_factory=tuple)

    @property
    def primary(self) -> Artist | None:
        """Return the first artist of the group."""

        return self.artists[0] if self.artists else None

    def names(self) -> list[str]:
        """Return the names of the artists at this level."""

        return [artist.name for artist in self.artists]

    def __len__(self) -> int:
        return len(self.artists)

    def __iter__(self) -> Iterator[Artist]:
        return iter(self.artists)

    @overload
    def __getitem__(self, index: int) -> Artist: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Artist, ...]: ...

    def __getitem__(self, index: int | slice) -> Artist | tuple[Artist, ...]:
        return self.artists[index]


__all__ = ["Artist", "ArtistList"]
